"""User directory — registration, credential checks and user lookups.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging
import re
from datetime import datetime

from domain.model.errors import DuplicateError, InternalError, NotFoundError, ValidationError
from domain.model.message import MailboxEntry, Message
from domain.model.user import User, UserSummary
from port.message_repository import MessageRepository
from port.user_repository import UserRepository
from services.credential_store import MAX_PASSWORD_BYTES, hash_password, password_too_long, verify_password

logger = logging.getLogger(__name__)

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]{1,64}$")


def _validate_password(password: str) -> None:
    if len(password) < 8:
        raise ValidationError("Password must be at least 8 characters")
    if password_too_long(password):
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    if not re.search(r"[A-Z]", password):
        raise ValidationError("Password must contain at least one uppercase letter")
    if not re.search(r"[a-z]", password):
        raise ValidationError("Password must contain at least one lowercase letter")
    if not re.search(r"[0-9]", password):
        raise ValidationError("Password must contain at least one number")


def _validate_registration(username: str, password: str, first_name: str, last_name: str, phone: str) -> None:
    if not USERNAME_PATTERN.match(username or ""):
        raise ValidationError("Username may only contain letters, digits, '_', '.' and '-' (max 64)")
    for field, value in (("first_name", first_name), ("last_name", last_name), ("phone", phone)):
        if not value or not value.strip():
            raise ValidationError(f"{field} must not be blank")
    _validate_password(password)


def register(
    repo: UserRepository,
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    phone: str,
) -> User:
    """Register a new user.

    Raises:
        DuplicateError: username already registered
        ValidationError: malformed username, blank profile field or weak password
    """
    _validate_registration(username, password, first_name, last_name, phone)

    if repo.get_by_username(username):
        raise DuplicateError("Username already taken")

    user = repo.create(
        username=username,
        password_hash=hash_password(password),
        first_name=first_name.strip(),
        last_name=last_name.strip(),
        phone=phone.strip(),
    )
    logger.info("User registered", extra={"username": username})
    return user


def authenticate(repo: UserRepository, username: str, password: str) -> bool:
    """Return True iff username exists and password matches.

    Unknown usernames and wrong passwords both give False.
    """
    user = repo.get_by_username(username)
    if not user or not user.password_hash:
        return False
    return verify_password(password, user.password_hash)


def touch_login(repo: UserRepository, username: str) -> datetime:
    """Record a successful login. Raises NotFoundError for unknown users."""
    stamped = repo.update_last_login(username)
    if stamped is None:
        raise NotFoundError(f"No user found with username: {username}")
    return stamped


def list_users(repo: UserRepository) -> list[UserSummary]:
    return [user.summary for user in repo.list_all()]


def get_user(repo: UserRepository, username: str) -> User:
    user = repo.get_by_username(username)
    if not user:
        raise NotFoundError(f"No user found with username: {username}")
    return user


def messages_from(users: UserRepository, messages: MessageRepository, username: str) -> list[MailboxEntry]:
    """Outbox of username, each entry carrying the recipient's summary."""
    get_user(users, username)
    sent = messages.find_from(username)
    return _with_counterparts(users, sent, lambda m: m.to_username)


def messages_to(users: UserRepository, messages: MessageRepository, username: str) -> list[MailboxEntry]:
    """Inbox of username, each entry carrying the sender's summary."""
    get_user(users, username)
    received = messages.find_to(username)
    return _with_counterparts(users, received, lambda m: m.from_username)


def _with_counterparts(users: UserRepository, messages: list[Message], counterpart_of) -> list[MailboxEntry]:
    counterparts = users.get_many(sorted({counterpart_of(m) for m in messages}))

    entries = []
    for message in messages:
        counterpart = counterparts.get(counterpart_of(message))
        if counterpart is None:
            # Users are never deleted, so this means the store is inconsistent
            logger.error("Message references unknown user", extra={"messageId": message.id})
            raise InternalError("Message references unknown user")
        entries.append(MailboxEntry(
            id=message.id,
            body=message.body,
            sent_at=message.sent_at,
            read_at=message.read_at,
            counterpart=counterpart.summary,
        ))
    return entries
