"""Message ledger — sending, reading and read receipts.

Every operation that acts on behalf of a caller takes the
AuthenticatedIdentity explicitly; the sender of a new message is always
that identity.
"""

import logging

from domain.model.errors import InternalError, NotFoundError, ValidationError
from domain.model.identity import AuthenticatedIdentity
from domain.model.message import Message, MessageDetail
from port.message_repository import MessageRepository
from port.user_repository import UserRepository
from services.access_guard import ensure_can_mark_read, ensure_can_view

logger = logging.getLogger(__name__)

MAX_BODY_LENGTH = 10_000


def send_message(
    identity: AuthenticatedIdentity,
    users: UserRepository,
    messages: MessageRepository,
    to_username: str,
    body: str,
) -> Message:
    """Send body from the caller to to_username.

    Raises:
        ValidationError: blank or oversized body, or unknown sender/recipient
    """
    if not body or not body.strip():
        raise ValidationError("Message body must not be empty")
    if len(body) > MAX_BODY_LENGTH:
        raise ValidationError(f"Message body must be at most {MAX_BODY_LENGTH} characters")

    known = users.get_many([identity.username, to_username])
    if to_username not in known:
        raise ValidationError(f"Unknown recipient: {to_username}")
    if identity.username not in known:
        raise ValidationError(f"Unknown sender: {identity.username}")

    message = messages.create(
        from_username=identity.username,
        to_username=to_username,
        body=body,
    )
    logger.info("Message sent", extra={
        "messageId": message.id,
        "fromUsername": message.from_username,
        "toUsername": message.to_username,
    })
    return message


def get_message(messages: MessageRepository, message_id: int) -> Message:
    message = messages.get_by_id(message_id)
    if not message:
        raise NotFoundError(f"No message found with id: {message_id}")
    return message


def get_message_detail(
    identity: AuthenticatedIdentity,
    users: UserRepository,
    messages: MessageRepository,
    message_id: int,
) -> MessageDetail:
    """Load a message the caller took part in, joined with both users."""
    message = get_message(messages, message_id)
    ensure_can_view(identity, message)

    participants = users.get_many([message.from_username, message.to_username])
    try:
        from_user = participants[message.from_username]
        to_user = participants[message.to_username]
    except KeyError:
        logger.error("Message references unknown user", extra={"messageId": message.id})
        raise InternalError("Message references unknown user")

    return MessageDetail(
        id=message.id,
        body=message.body,
        sent_at=message.sent_at,
        read_at=message.read_at,
        from_user=from_user.summary,
        to_user=to_user.summary,
    )


def mark_as_read(
    identity: AuthenticatedIdentity,
    messages: MessageRepository,
    message_id: int,
) -> Message:
    """Mark a message read on behalf of its recipient.

    Marking an already-read message again leaves read_at untouched.

    Raises:
        NotFoundError: no such message
        PermissionDeniedError: caller is not the recipient
    """
    message = get_message(messages, message_id)
    ensure_can_mark_read(identity, message)

    if message.is_read:
        return message

    updated = messages.mark_read(message_id)
    if updated is None:
        raise NotFoundError(f"No message found with id: {message_id}")

    logger.info("Message read", extra={"messageId": message_id, "username": identity.username})
    return updated
