"""Authentication routes (register, login)."""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_user_repo
from api.errors import to_http_exception
from api.models import LoginRequest, RegisterRequest, TokenResponse
from api.security import create_access_token
from domain.model.errors import DomainError
from port.user_repository import UserRepository
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, repo: UserRepository = Depends(get_user_repo)):
    """Register a new user, log them in, and return a token.

    Raises:
        HTTPException: 409 if the username exists, 400 if validation fails
    """
    try:
        user = auth_service.sign_up(
            repo,
            username=request.username,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
            phone=request.phone,
        )
    except DomainError as e:
        raise to_http_exception(e)

    return TokenResponse(token=create_access_token(user.username))


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, repo: UserRepository = Depends(get_user_repo)):
    """Log in and return a token. 401 on bad credentials, without saying which part was wrong."""
    try:
        user = auth_service.log_in(repo, request.username, request.password)
    except DomainError as e:
        raise to_http_exception(e)

    return TokenResponse(token=create_access_token(user.username))
