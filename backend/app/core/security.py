"""
Token signing and verification (HS256 JWT via python-jose)
"""
from datetime import datetime, timedelta, timezone

from jose import jwt

from backend.app.core.config import settings


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Sign a JWT carrying `data` plus an exp claim."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict:
    """Return the token claims. Raises jose.JWTError (ExpiredSignatureError on expiry)."""
    return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
