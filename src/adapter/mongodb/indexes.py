"""MongoDB index setup, run once at app startup.

Users need no secondary index: every lookup is by `_id` (the username).
"""

from logging import getLogger

logger = getLogger(__name__)


def ensure_all_indexes(db) -> bool:
    """Create the mailbox indexes on messages. Returns False if any failed."""
    from adapter.mongodb.message_repository import MongoMessageRepository

    return MongoMessageRepository(db).ensure_indexes()
