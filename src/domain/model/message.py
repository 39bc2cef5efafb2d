# domain/model/message.py

from dataclasses import dataclass
from datetime import datetime

from domain.model.user import UserSummary


@dataclass
class Message:
    """A direct message between two users.

    read_at stays None until the recipient marks the message read, and is
    never changed afterwards.
    """
    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime
    read_at: datetime | None = None

    @property
    def is_read(self) -> bool:
        return self.read_at is not None

    def involves(self, username: str) -> bool:
        """True if username is the sender or the recipient."""
        return username in (self.from_username, self.to_username)


@dataclass(frozen=True)
class MailboxEntry:
    """Message as seen in a user's inbox or outbox.

    counterpart is the sender for inbox entries and the recipient for
    outbox entries.
    """
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    counterpart: UserSummary


@dataclass(frozen=True)
class MessageDetail:
    """Message joined with both participants."""
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: UserSummary
    to_user: UserSummary
