"""User directory routes.

Endpoints:
- GET /users: list users
- GET /users/{username}: user detail
- GET /users/{username}/to: inbox of a user
- GET /users/{username}/from: outbox of a user

Whether these need a token depends on the configured ListingPolicy.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_listing_policy, get_message_repo, get_user_repo
from api.errors import to_http_exception
from api.models import (
    InboxResponse,
    OutboxResponse,
    UserDetailResponse,
    UserEnvelope,
    UserListResponse,
    UserSummaryResponse,
)
from api.security import get_current_identity
from domain.model.errors import DomainError
from domain.model.identity import AuthenticatedIdentity
from port.message_repository import MessageRepository
from port.user_repository import UserRepository
from services import user_service
from services.access_guard import ListingPolicy, ensure_can_browse_users, ensure_can_list_mailbox

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse)
async def list_users(
    identity: Optional[AuthenticatedIdentity] = Depends(get_current_identity),
    policy: ListingPolicy = Depends(get_listing_policy),
    repo: UserRepository = Depends(get_user_repo),
):
    try:
        ensure_can_browse_users(identity, policy)
        summaries = user_service.list_users(repo)
    except DomainError as e:
        raise to_http_exception(e)

    return UserListResponse(users=[UserSummaryResponse.from_domain(s) for s in summaries])


@router.get("/{username}", response_model=UserEnvelope)
async def get_user(
    username: str,
    identity: Optional[AuthenticatedIdentity] = Depends(get_current_identity),
    policy: ListingPolicy = Depends(get_listing_policy),
    repo: UserRepository = Depends(get_user_repo),
):
    try:
        ensure_can_browse_users(identity, policy)
        user = user_service.get_user(repo, username)
    except DomainError as e:
        raise to_http_exception(e)

    return UserEnvelope(user=UserDetailResponse.from_user(user))


@router.get("/{username}/to", response_model=InboxResponse)
async def get_messages_to(
    username: str,
    identity: Optional[AuthenticatedIdentity] = Depends(get_current_identity),
    policy: ListingPolicy = Depends(get_listing_policy),
    users: UserRepository = Depends(get_user_repo),
    messages: MessageRepository = Depends(get_message_repo),
):
    """Messages addressed to username, each with the sender's card."""
    try:
        ensure_can_list_mailbox(identity, username, policy)
        entries = user_service.messages_to(users, messages, username)
    except DomainError as e:
        raise to_http_exception(e)

    return InboxResponse.from_entries(entries)


@router.get("/{username}/from", response_model=OutboxResponse)
async def get_messages_from(
    username: str,
    identity: Optional[AuthenticatedIdentity] = Depends(get_current_identity),
    policy: ListingPolicy = Depends(get_listing_policy),
    users: UserRepository = Depends(get_user_repo),
    messages: MessageRepository = Depends(get_message_repo),
):
    """Messages sent by username, each with the recipient's card."""
    try:
        ensure_can_list_mailbox(identity, username, policy)
        entries = user_service.messages_from(users, messages, username)
    except DomainError as e:
        raise to_http_exception(e)

    return OutboxResponse.from_entries(entries)
