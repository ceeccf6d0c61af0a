"""
FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from sqlalchemy.exc import SQLAlchemyError

from backend.app.api.v1.health import routes as health
from backend.app.api.v1.profile import routes as profile
from backend.app.api.v1.projects import routes as projects
from backend.app.api.v1.search import routes as search
from backend.app.api.v1.skills import routes as skills
from backend.app.core.config import settings
from backend.app.core.errors import register_exception_handlers
from backend.app.core.logging_config import get_logger, setup_logging
from backend.app.core.middleware import (
    BodySizeLimitMiddleware,
    RateLimitMiddleware,
    RequestLoggingMiddleware,
)
from backend.app.db.base import Base
from backend.app.db.session import engine

# Import models so they register with Base.metadata
import backend.app.models  # noqa: F401

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.error("Database initialisation failed: %s", e)
        raise
    logger.info(
        "%s %s started (environment=%s, port=%s)",
        settings.app_name, settings.app_version, settings.environment, settings.port,
    )
    yield
    logger.info("Shutting down")
    engine.dispose()


# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Personal portfolio API: profile, skills, projects, search",
    version=settings.app_version,
    lifespan=lifespan,
)

# Middleware runs outermost-last: the last added wraps everything else
if settings.environment != "test":
    app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(RateLimitMiddleware)
app.add_middleware(BodySizeLimitMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
for module in (health, profile, skills, projects, search):
    app.include_router(module.router, prefix="/api")


@app.get("/")
def read_root():
    """Root endpoint"""
    return {"success": True, "message": settings.app_name, "version": settings.app_version}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("backend.main:app", host="0.0.0.0", port=settings.port)
