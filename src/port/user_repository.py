from typing import Protocol
from datetime import datetime

from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Implementations raise DuplicateError when the username is taken and
    InternalError when the underlying store fails.
    """
    def create(
        self,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        phone: str,
    ) -> User:
        """Create a new user with join_at set to now."""
        ...

    def get_by_username(self, username: str) -> User | None:
        """Find a user by username. Return User or None if not found."""
        ...

    def get_many(self, usernames: list[str]) -> dict[str, User]:
        """Find several users at once, keyed by username. Missing ones are omitted."""
        ...

    def list_all(self) -> list[User]:
        """Return every user."""
        ...

    def update_last_login(self, username: str) -> datetime | None:
        """Set last_login_at to now. Return the new timestamp, or None if the user does not exist."""
        ...
