from fastapi import HTTPException

from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.message_repository import MongoMessageRepository
from adapter.mongodb.user_repository import MongoUserRepository
from port.message_repository import MessageRepository
from port.user_repository import UserRepository
from services.access_guard import ListingPolicy, load_listing_policy


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[DATABASE_NAME]


def get_user_repo() -> UserRepository:
    return MongoUserRepository(_get_db())


def get_message_repo() -> MessageRepository:
    return MongoMessageRepository(_get_db())


def get_listing_policy() -> ListingPolicy:
    return load_listing_policy()
