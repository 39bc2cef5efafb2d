"""MongoDB implementation of MessageRepository."""

from datetime import datetime, timezone
from logging import getLogger

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb import COUNTERS_COLLECTION_NAME, MESSAGES_COLLECTION_NAME
from domain.model.errors import InternalError
from domain.model.message import Message

logger = getLogger(__name__)

MESSAGE_SEQUENCE = 'messages'


class MongoMessageRepository:
    def __init__(self, db: Database):
        self.collection = db[MESSAGES_COLLECTION_NAME]
        self.counters = db[COUNTERS_COLLECTION_NAME]

    # ── indexes ──────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for messages collection."""
        try:
            self.collection.create_index([('from_username', 1), ('sent_at', -1)], name='idx_messages_from')
            self.collection.create_index([('to_username', 1), ('sent_at', -1)], name='idx_messages_to')
            return True
        except PyMongoError as e:
            logger.error("Failed to create messages indexes", extra={"error": str(e)})
            return False

    # ── helpers ──────────────────────────────────────────────

    def _to_domain(self, doc: dict) -> Message:
        return Message(
            id=doc['_id'],
            from_username=doc['from_username'],
            to_username=doc['to_username'],
            body=doc['body'],
            sent_at=doc['sent_at'],
            read_at=doc.get('read_at'),
        )

    def _next_id(self) -> int:
        """Atomically allocate the next message id from the counters collection."""
        counter = self.counters.find_one_and_update(
            {'_id': MESSAGE_SEQUENCE},
            {'$inc': {'seq': 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter['seq']

    # ── write operations ─────────────────────────────────────

    def create(self, from_username: str, to_username: str, body: str) -> Message:
        try:
            doc = {
                '_id': self._next_id(),
                'from_username': from_username,
                'to_username': to_username,
                'body': body,
                'sent_at': datetime.now(timezone.utc),
                'read_at': None,
            }
            self.collection.insert_one(doc)
        except PyMongoError as e:
            logger.error("Failed to create message", extra={
                "fromUsername": from_username, "toUsername": to_username, "error": str(e),
            })
            raise InternalError("Failed to save message") from e

        return self._to_domain(doc)

    def mark_read(self, message_id: int) -> Message | None:
        """Stamp read_at only while it is still null, so the first read wins."""
        try:
            doc = self.collection.find_one_and_update(
                {'_id': message_id, 'read_at': None},
                {'$set': {'read_at': datetime.now(timezone.utc)}},
                return_document=ReturnDocument.AFTER,
            )
            if doc is None:
                # Either already read or missing
                doc = self.collection.find_one({'_id': message_id})
        except PyMongoError as e:
            logger.error("Failed to mark message read", extra={"messageId": message_id, "error": str(e)})
            raise InternalError("Failed to update message") from e

        return self._to_domain(doc) if doc else None

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, message_id: int) -> Message | None:
        try:
            doc = self.collection.find_one({'_id': message_id})
        except PyMongoError as e:
            logger.error("Failed to get message", extra={"messageId": message_id, "error": str(e)})
            raise InternalError("Failed to load message") from e
        return self._to_domain(doc) if doc else None

    def find_from(self, username: str) -> list[Message]:
        return self._find({'from_username': username})

    def find_to(self, username: str) -> list[Message]:
        return self._find({'to_username': username})

    def _find(self, query: dict) -> list[Message]:
        try:
            return [self._to_domain(doc) for doc in self.collection.find(query).sort('sent_at', 1)]
        except PyMongoError as e:
            logger.error("Failed to list messages", extra={"query": query, "error": str(e)})
            raise InternalError("Failed to list messages") from e
