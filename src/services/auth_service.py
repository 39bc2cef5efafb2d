"""Auth service — sign-up and log-in flows.

Pure business logic with no HTTP dependencies; token issuing lives in
api.security. Both flows stamp last_login_at on success.
"""

import logging

from domain.model.errors import AuthenticationError
from domain.model.user import User
from port.user_repository import UserRepository
from services import user_service

logger = logging.getLogger(__name__)


def sign_up(
    repo: UserRepository,
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    phone: str,
) -> User:
    """Register a user and log them in.

    Raises:
        DuplicateError: username already registered
        ValidationError: registration input rejected
    """
    user = user_service.register(
        repo,
        username=username,
        password=password,
        first_name=first_name,
        last_name=last_name,
        phone=phone,
    )
    user.last_login_at = user_service.touch_login(repo, user.username)
    return user


def log_in(repo: UserRepository, username: str, password: str) -> User:
    """Authenticate a user by username and password.

    Doesn't reveal whether the username exists.

    Raises:
        AuthenticationError: invalid credentials (deliberately vague)
    """
    if not user_service.authenticate(repo, username, password):
        logger.info("Login rejected", extra={"username": username})
        raise AuthenticationError("Invalid username/password")

    user_service.touch_login(repo, username)
    logger.info("User logged in", extra={"username": username})
    return user_service.get_user(repo, username)
