"""Port definition for MessageRepository."""

from typing import Protocol

from domain.model.message import Message


class MessageRepository(Protocol):
    def create(self, from_username: str, to_username: str, body: str) -> Message:
        """Insert a message with the next id, sent_at = now and read_at = None."""
        ...

    def get_by_id(self, message_id: int) -> Message | None: ...

    def find_from(self, username: str) -> list[Message]: ...

    def find_to(self, username: str) -> list[Message]: ...

    def mark_read(self, message_id: int) -> Message | None:
        """Set read_at to now unless already set.

        Returns the stored message (with its original read_at if it was
        already read), or None if no such message exists.
        """
        ...
