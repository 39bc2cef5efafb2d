"""JWT authentication and security dependencies."""

import os
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt

from api.dependencies import get_user_repo
from domain.model.identity import AuthenticatedIdentity
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

# JWT Configuration
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
if not JWT_SECRET_KEY:
    raise ValueError(
        "JWT_SECRET_KEY environment variable is required. "
        "Generate a secure key with: openssl rand -hex 32"
    )
JWT_ALGORITHM = "HS256"
JWT_EXPIRATION_DAYS = int(os.getenv("JWT_EXPIRATION_DAYS", "7"))

security = HTTPBearer(auto_error=False)


def create_access_token(username: str) -> str:
    """Create JWT access token whose subject is the username."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": username,
        "exp": now + timedelta(days=JWT_EXPIRATION_DAYS),
        "iat": now,
    }
    return jwt.encode(payload, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def verify_token(token: str) -> Optional[str]:
    """Verify JWT token and extract the username."""
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
        username: str = payload.get("sub")
        if username is None:
            return None
        return username
    except JWTError as e:
        logger.debug(f"JWT verification failed: {e}")
        return None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    user_repo: UserRepository = Depends(get_user_repo),
) -> Optional[AuthenticatedIdentity]:
    """Resolve the caller's identity (optional). Returns None if no usable token."""
    if not credentials:
        return None

    username = verify_token(credentials.credentials)
    if not username or not user_repo.get_by_username(username):
        return None

    return AuthenticatedIdentity(username=username)


def get_current_identity_required(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    user_repo: UserRepository = Depends(get_user_repo),
) -> AuthenticatedIdentity:
    """Resolve the caller's identity (required). Raises 401 if not authenticated."""
    if not credentials:
        raise _unauthorized("Not authenticated")

    username = verify_token(credentials.credentials)
    if not username:
        raise _unauthorized("Invalid authentication credentials")

    if not user_repo.get_by_username(username):
        raise _unauthorized("User not found")

    return AuthenticatedIdentity(username=username)
