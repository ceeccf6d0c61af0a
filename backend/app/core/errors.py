"""
Application exceptions and the global error translator.

Every failure leaves the API as {success: false, message, errors?}.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from jose import ExpiredSignatureError, JWTError
from sqlalchemy.exc import IntegrityError, StatementError
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.app.core.config import NOT_FOUND_ROUTE_MESSAGE, settings
from backend.app.core.logging_config import get_logger

logger = get_logger("core.errors")

DUPLICATE_MESSAGE = "Duplicate field value entered"


class PortfolioError(Exception):
    """Base exception carrying the HTTP status it maps to."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, errors: list | None = None):
        self.message = message
        self.errors = errors
        super().__init__(message)


class BadRequestError(PortfolioError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(PortfolioError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(PortfolioError):
    """A write violated a uniqueness rule (duplicate email, skill name, singleton)."""
    status_code = status.HTTP_409_CONFLICT


class AuthError(PortfolioError):
    def __init__(self, message: str, status_code: int = status.HTTP_401_UNAUTHORIZED):
        super().__init__(message)
        self.status_code = status_code


def is_unique_violation(exc: IntegrityError) -> bool:
    text = str(exc.orig).lower() if exc.orig is not None else str(exc).lower()
    return "unique" in text or "duplicate" in text


def _error_body(message: str, errors=None, **extra) -> dict:
    body = {"success": False, "message": message}
    if errors is not None:
        body["errors"] = errors
    body.update(extra)
    return body


def format_validation_errors(errors) -> list[dict]:
    """Pydantic error list -> [{field, message}]"""
    formatted = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        formatted.append({
            "field": ".".join(loc) or "body",
            "message": err.get("msg", "Invalid value"),
        })
    return formatted


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = format_validation_errors(exc.errors())
    logger.info("Validation failed path=%s errors=%s", request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Validation errors", errors),
    )


async def portfolio_exception_handler(request: Request, exc: PortfolioError):
    if exc.status_code >= 500:
        logger.error("Request failed path=%s error=%s", request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, exc.errors))


async def integrity_exception_handler(request: Request, exc: IntegrityError):
    """Storage-level backstop for constraint violations that slipped past the validators."""
    detail = str(exc.orig) if exc.orig is not None else str(exc)
    if is_unique_violation(exc):
        logger.warning("Unique constraint violation path=%s detail=%s", request.url.path, detail)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=_error_body(DUPLICATE_MESSAGE, [detail]),
        )
    logger.warning("Integrity error path=%s detail=%s", request.url.path, detail)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Validation Error", [detail]),
    )


async def statement_exception_handler(request: Request, exc: StatementError):
    # Enum columns reject out-of-vocabulary strings with LookupError
    if isinstance(exc.orig, LookupError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("Validation Error", [str(exc.orig)]),
        )
    return await generic_exception_handler(request, exc)


async def jwt_exception_handler(request: Request, exc: JWTError):
    message = "Token expired" if isinstance(exc, ExpiredSignatureError) else "Invalid token"
    logger.warning("Token rejected path=%s reason=%s", request.url.path, message)
    return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content=_error_body(message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    unmatched = (
        exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found"
    ) or exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    if unmatched:
        # No route matched the path and method
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=_error_body(NOT_FOUND_ROUTE_MESSAGE, path=request.url.path),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error path=%s", request.url.path)
    message = "Server Error" if settings.is_production else (str(exc) or "Server Error")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(message),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PortfolioError, portfolio_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_exception_handler)
    app.add_exception_handler(StatementError, statement_exception_handler)
    app.add_exception_handler(JWTError, jwt_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
