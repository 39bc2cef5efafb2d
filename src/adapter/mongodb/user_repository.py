"""MongoDB implementation of UserRepository.

Users are keyed by username (`_id`), so the primary key enforces uniqueness.
"""

from datetime import datetime, timezone
from logging import getLogger
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb import USERS_COLLECTION_NAME
from domain.model.errors import DuplicateError, InternalError
from domain.model.user import User

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            username=doc['_id'],
            first_name=doc['first_name'],
            last_name=doc['last_name'],
            phone=doc['phone'],
            join_at=doc['join_at'],
            last_login_at=doc.get('last_login_at'),
            password_hash=doc.get('password_hash'),
        )

    def create(
        self,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        phone: str,
    ) -> User:
        """Insert a new user document. Raises DuplicateError if the username is taken."""
        user_doc = {
            '_id': username,
            'password_hash': password_hash,
            'first_name': first_name,
            'last_name': last_name,
            'phone': phone,
            'join_at': datetime.now(timezone.utc),
            'last_login_at': None,
        }
        try:
            self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.warning("User creation failed: username already exists", extra={"username": username})
            raise DuplicateError("Username already taken")
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"username": username, "error": str(e)})
            raise InternalError("Failed to create user") from e

        logger.info("User created", extra={"username": username})
        return self._to_domain(user_doc)

    def get_by_username(self, username: str) -> User | None:
        try:
            doc = self.collection.find_one({'_id': username})
        except PyMongoError as e:
            logger.error("Failed to get user", extra={"username": username, "error": str(e)})
            raise InternalError("Failed to load user") from e
        return self._to_domain(doc) if doc else None

    def get_many(self, usernames: list[str]) -> dict[str, User]:
        if not usernames:
            return {}
        try:
            docs = self.collection.find({'_id': {'$in': list(set(usernames))}})
            return {doc['_id']: self._to_domain(doc) for doc in docs}
        except PyMongoError as e:
            logger.error("Failed to get users", extra={"count": len(usernames), "error": str(e)})
            raise InternalError("Failed to load users") from e

    def list_all(self) -> list[User]:
        try:
            return [self._to_domain(doc) for doc in self.collection.find({})]
        except PyMongoError as e:
            logger.error("Failed to list users", extra={"error": str(e)})
            raise InternalError("Failed to list users") from e

    def update_last_login(self, username: str) -> datetime | None:
        """Set last_login_at to now. Return the timestamp, or None if no such user."""
        now = datetime.now(timezone.utc)
        try:
            result = self.collection.update_one(
                {'_id': username},
                {'$set': {'last_login_at': now}}
            )
        except PyMongoError as e:
            logger.error("Failed to update last_login_at", extra={"username": username, "error": str(e)})
            raise InternalError("Failed to update login timestamp") from e

        if result.matched_count == 0:
            return None
        logger.debug("Updated last_login_at", extra={"username": username})
        return now
