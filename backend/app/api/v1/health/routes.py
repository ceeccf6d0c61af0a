"""
Health check - store connectivity, uptime, memory
"""
import os
import resource
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.core.config import settings
from backend.app.core.dependencies import get_db
from backend.app.core.logging_config import get_logger

logger = get_logger("api.health")
router = APIRouter(prefix="/health", tags=["health"])

_STARTED_AT = time.monotonic()


def _memory_usage() -> dict:
    """Peak resident memory of this process and total physical memory, in MB."""
    # ru_maxrss is kilobytes on Linux
    used_mb = round(resource.getrusage(resource.RUSAGE_SELF).ru_maxrss / 1024)
    try:
        total_mb = round(os.sysconf("SC_PAGE_SIZE") * os.sysconf("SC_PHYS_PAGES") / 1024 / 1024)
    except (ValueError, OSError):
        total_mb = 0
    return {"used": f"{used_mb} MB", "total": f"{total_mb} MB"}


@router.get("")
def health_check(db: Session = Depends(get_db)):
    """API and database status. 503 when the store is unreachable."""
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Health check failed - database unreachable: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "success": False,
                "message": "Service Unavailable",
                "timestamp": timestamp,
                "database": {"status": "disconnected"},
                "error": str(exc),
            },
        )

    return {
        "success": True,
        "message": "API is healthy",
        "timestamp": timestamp,
        "uptime": round(time.monotonic() - _STARTED_AT, 3),
        "environment": settings.environment,
        "version": settings.app_version,
        "database": {
            "status": "connected",
            "dialect": db.get_bind().dialect.name,
        },
        "memory": _memory_usage(),
    }
