"""Access guard — who may see or change which messages and mailboxes.

Message rules are fixed. Listing rules depend on ListingPolicy:
OPEN keeps user lists and mailboxes public; RESTRICTED limits a mailbox
to its owner and user lookups to authenticated callers.
"""

import logging
import os
from enum import Enum

from domain.model.errors import AuthenticationError, PermissionDeniedError
from domain.model.identity import AuthenticatedIdentity
from domain.model.message import Message

logger = logging.getLogger(__name__)


class ListingPolicy(str, Enum):
    OPEN = 'open'
    RESTRICTED = 'restricted'


def load_listing_policy() -> ListingPolicy:
    """Read MESSAGELY_LISTING_POLICY, defaulting to OPEN."""
    raw = os.getenv("MESSAGELY_LISTING_POLICY", ListingPolicy.OPEN.value).strip().lower()
    try:
        return ListingPolicy(raw)
    except ValueError:
        raise ValueError(
            f"MESSAGELY_LISTING_POLICY must be one of "
            f"{[p.value for p in ListingPolicy]}, got {raw!r}"
        ) from None


def ensure_can_view(identity: AuthenticatedIdentity, message: Message) -> None:
    """Only the sender or the recipient may see a message."""
    if not message.involves(identity.username):
        logger.warning("Message view denied", extra={"messageId": message.id, "username": identity.username})
        raise PermissionDeniedError("Not authorized to view this message")


def ensure_can_mark_read(identity: AuthenticatedIdentity, message: Message) -> None:
    """Only the recipient may mark a message read, not even the sender."""
    if not identity.matches(message.to_username):
        logger.warning("Mark-read denied", extra={"messageId": message.id, "username": identity.username})
        raise PermissionDeniedError("Only the recipient can mark this message as read")


def ensure_can_browse_users(identity: AuthenticatedIdentity | None, policy: ListingPolicy) -> None:
    if policy is ListingPolicy.RESTRICTED and identity is None:
        raise AuthenticationError("Not authenticated")


def ensure_can_list_mailbox(
    identity: AuthenticatedIdentity | None,
    username: str,
    policy: ListingPolicy,
) -> None:
    """Gate inbox/outbox listings for username according to policy."""
    if policy is ListingPolicy.OPEN:
        return
    if identity is None:
        raise AuthenticationError("Not authenticated")
    if not identity.matches(username):
        logger.warning("Mailbox listing denied", extra={"owner": username, "username": identity.username})
        raise PermissionDeniedError("Not authorized to view this mailbox")
