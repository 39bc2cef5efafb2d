"""Message routes.

Endpoints:
- GET /messages/{id}: message detail, for its sender or recipient
- POST /messages: send a message as the logged-in user
- POST /messages/{id}/read: mark read, recipient only
"""

import logging

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import get_message_repo, get_user_repo
from api.errors import to_http_exception
from api.models import (
    MessageDetailEnvelope,
    MessageDetailResponse,
    MessageEnvelope,
    MessageResponse,
    ReadReceiptEnvelope,
    ReadReceiptResponse,
    SendMessageRequest,
)
from api.security import get_current_identity_required
from domain.model.errors import DomainError
from domain.model.identity import AuthenticatedIdentity
from port.message_repository import MessageRepository
from port.user_repository import UserRepository
from services import message_service

logger = logging.getLogger(__name__)

# Message ids are positive BSON int64 values
MAX_MESSAGE_ID = 2**63 - 1

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("/{message_id}", response_model=MessageDetailEnvelope)
async def get_message(
    message_id: int = Path(..., ge=1, le=MAX_MESSAGE_ID),
    identity: AuthenticatedIdentity = Depends(get_current_identity_required),
    users: UserRepository = Depends(get_user_repo),
    messages: MessageRepository = Depends(get_message_repo),
):
    try:
        detail = message_service.get_message_detail(identity, users, messages, message_id)
    except DomainError as e:
        raise to_http_exception(e)

    return MessageDetailEnvelope(message=MessageDetailResponse.from_domain(detail))


@router.post("", response_model=MessageEnvelope, status_code=status.HTTP_201_CREATED)
async def send_message(
    request: SendMessageRequest,
    identity: AuthenticatedIdentity = Depends(get_current_identity_required),
    users: UserRepository = Depends(get_user_repo),
    messages: MessageRepository = Depends(get_message_repo),
):
    try:
        message = message_service.send_message(
            identity, users, messages,
            to_username=request.to_username,
            body=request.body,
        )
    except DomainError as e:
        raise to_http_exception(e)

    return MessageEnvelope(message=MessageResponse.from_domain(message))


@router.post("/{message_id}/read", response_model=ReadReceiptEnvelope)
async def mark_message_read(
    message_id: int = Path(..., ge=1, le=MAX_MESSAGE_ID),
    identity: AuthenticatedIdentity = Depends(get_current_identity_required),
    messages: MessageRepository = Depends(get_message_repo),
):
    try:
        message = message_service.mark_as_read(identity, messages, message_id)
    except DomainError as e:
        raise to_http_exception(e)

    return ReadReceiptEnvelope(message=ReadReceiptResponse(id=message.id, read_at=message.read_at))
