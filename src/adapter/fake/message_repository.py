"""In-memory implementation of MessageRepository for testing."""

import itertools
from datetime import datetime, timezone

from domain.model.message import Message


class FakeMessageRepository:
    def __init__(self):
        self.store: dict[int, Message] = {}
        self._ids = itertools.count(1)

    # ── write operations ─────────────────────────────────────

    def create(self, from_username: str, to_username: str, body: str) -> Message:
        message = Message(
            id=next(self._ids),
            from_username=from_username,
            to_username=to_username,
            body=body,
            sent_at=datetime.now(timezone.utc),
        )
        self.store[message.id] = message
        return message

    def mark_read(self, message_id: int) -> Message | None:
        message = self.store.get(message_id)
        if not message:
            return None

        if message.read_at is None:
            message.read_at = datetime.now(timezone.utc)
        return message

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, message_id: int) -> Message | None:
        return self.store.get(message_id)

    def find_from(self, username: str) -> list[Message]:
        return [m for m in self.store.values() if m.from_username == username]

    def find_to(self, username: str) -> list[Message]:
        return [m for m in self.store.values() if m.to_username == username]
