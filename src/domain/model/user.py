from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserSummary:
    """Public card of a user, embedded in message listings."""
    username: str
    first_name: str
    last_name: str
    phone: str


@dataclass
class User:
    """Domain model representing a registered user."""
    username: str
    first_name: str
    last_name: str
    phone: str
    join_at: datetime
    last_login_at: datetime | None = None
    password_hash: str | None = None

    @property
    def summary(self) -> UserSummary:
        return UserSummary(
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
        )
