"""
Dependency injection utilities
"""
from dataclasses import dataclass

from fastapi import Depends, Header, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from backend.app.core.config import settings
from backend.app.core.errors import AuthError
from backend.app.core.logging_config import get_logger
from backend.app.core.security import decode_access_token
from backend.app.db.session import SessionLocal

logger = get_logger("core.dependencies")

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Tenant:
    """The single owner whose profile scopes every owned-entity query."""
    profile_id: int


@dataclass(frozen=True)
class Identity:
    id: int
    claims: dict


def get_db() -> Session:
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_tenant() -> Tenant:
    return Tenant(profile_id=settings.owner_profile_id)


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    tenant: Tenant = Depends(get_tenant),
) -> Identity:
    """
    Bearer-token check. Outside production a missing token yields the default
    identity (the tenant's owner); in production it is required.
    """
    if not credentials:
        if settings.is_production:
            raise AuthError("Access token required", status.HTTP_401_UNAUTHORIZED)
        return Identity(id=tenant.profile_id, claims={})
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError as exc:
        logger.warning("Invalid token attempt: %s", exc)
        raise AuthError("Invalid or expired token", status.HTTP_403_FORBIDDEN)
    subject = payload.get("sub")
    try:
        identity_id = int(subject) if subject is not None else tenant.profile_id
    except (TypeError, ValueError):
        raise AuthError("Invalid or expired token", status.HTTP_403_FORBIDDEN)
    return Identity(id=identity_id, claims=payload)


def verify_api_key(x_api_key: str | None = Header(default=None)) -> None:
    """Shared-secret X-API-Key check; only mandatory in production."""
    if not x_api_key:
        if settings.is_production:
            raise AuthError("API key required", status.HTTP_401_UNAUTHORIZED)
        return
    if x_api_key != settings.api_key:
        logger.warning("Invalid API key attempt")
        raise AuthError("Invalid API key", status.HTTP_403_FORBIDDEN)


# Applied to every route that writes
write_guards = [Depends(verify_api_key), Depends(get_current_identity)]
