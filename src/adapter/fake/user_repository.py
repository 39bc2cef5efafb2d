"""In-memory implementation of UserRepository for testing."""

from datetime import datetime, timezone

from domain.model.errors import DuplicateError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(
        self,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        phone: str,
    ) -> User:
        if username in self.store:
            raise DuplicateError("Username already taken")

        user = User(
            username=username,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            join_at=datetime.now(timezone.utc),
            password_hash=password_hash,
        )
        self.store[username] = user
        return user

    def update_last_login(self, username: str) -> datetime | None:
        user = self.store.get(username)
        if not user:
            return None

        user.last_login_at = datetime.now(timezone.utc)
        return user.last_login_at

    # ── read operations ──────────────────────────────────────

    def get_by_username(self, username: str) -> User | None:
        return self.store.get(username)

    def get_many(self, usernames: list[str]) -> dict[str, User]:
        return {name: self.store[name] for name in usernames if name in self.store}

    def list_all(self) -> list[User]:
        return list(self.store.values())
