from adapter.mongodb.connection import (
    DATABASE_NAME,
    USERS_COLLECTION_NAME,
    MESSAGES_COLLECTION_NAME,
    COUNTERS_COLLECTION_NAME,
)
