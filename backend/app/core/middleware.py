"""
HTTP middleware - rate limiting, request body cap, request logging
"""
import time
from collections import defaultdict, deque

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from backend.app.core.config import RATE_LIMIT_MESSAGE, settings
from backend.app.core.logging_config import get_logger

logger = get_logger("core.middleware")


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Sliding-window request counter per client IP, in memory.
    Only paths under `path_prefix` are counted.
    """

    def __init__(
        self,
        app,
        requests: int | None = None,
        window_seconds: int | None = None,
        enabled: bool | None = None,
        path_prefix: str = "/api",
    ):
        super().__init__(app)
        self.requests = requests or settings.rate_limit_requests
        self.window_seconds = window_seconds or settings.rate_limit_window_seconds
        self.enabled = settings.rate_limit_enabled if enabled is None else enabled
        self.path_prefix = path_prefix
        self.request_log: dict[str, deque] = defaultdict(deque)
        self._last_sweep = 0.0

    def _client_id(self, request: Request) -> str:
        if request.client:
            return request.client.host
        return "unknown"

    def _sweep(self, cutoff: float) -> None:
        """Forget clients whose newest hit has left the window."""
        stale = [cid for cid, hits in self.request_log.items() if not hits or hits[-1] <= cutoff]
        for cid in stale:
            del self.request_log[cid]

    def _allow(self, client_id: str, now: float) -> tuple[bool, int]:
        """Record the hit if allowed. Returns (allowed, retry_after_seconds)."""
        cutoff = now - self.window_seconds
        if now - self._last_sweep >= self.window_seconds:
            self._sweep(cutoff)
            self._last_sweep = now
        hits = self.request_log[client_id]
        while hits and hits[0] <= cutoff:
            hits.popleft()
        if len(hits) >= self.requests:
            retry_after = int(self.window_seconds - (now - hits[0])) + 1
            return False, retry_after
        hits.append(now)
        return True, 0

    async def dispatch(self, request: Request, call_next):
        if not self.enabled or not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        client_id = self._client_id(request)
        allowed, retry_after = self._allow(client_id, time.monotonic())
        if not allowed:
            logger.warning("Rate limit exceeded client=%s path=%s", client_id, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"success": False, "message": RATE_LIMIT_MESSAGE},
                headers={"Retry-After": str(retry_after)},
            )
        return await call_next(request)


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared Content-Length exceeds max_bytes."""

    def __init__(self, app, max_bytes: int | None = None):
        super().__init__(app)
        self.max_bytes = max_bytes or settings.max_body_bytes

    async def dispatch(self, request: Request, call_next):
        declared = request.headers.get("content-length")
        if declared is not None:
            try:
                too_large = int(declared) > self.max_bytes
            except ValueError:
                return JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content={"success": False, "message": "Invalid Content-Length header"},
                )
            if too_large:
                logger.warning("Payload too large path=%s bytes=%s", request.url.path, declared)
                return JSONResponse(
                    status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                    content={"success": False, "message": "Payload too large"},
                )
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One access-log line per request."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %s %.1fms client=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request.client.host if request.client else "-",
        )
        return response
