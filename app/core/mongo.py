import logging

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from app.core.config import Settings

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
RESET_TOKENS_COLLECTION = "reset_tokens"


def create_client(settings: Settings) -> MongoClient:
    if not settings.mongo_uri:
        raise RuntimeError("MONGO_URI is not set")
    return MongoClient(settings.mongo_uri)


def get_database(client: MongoClient, settings: Settings) -> Database:
    return client[settings.mongo_db]


def ensure_indexes(db: Database) -> None:
    """Create the indexes the credential and reset-token stores rely on.

    ``users.email`` is unique so duplicate registrations are rejected by the
    store itself; ``reset_tokens.userId`` is unique so a user can never hold
    more than one reset token document.
    """
    db[USERS_COLLECTION].create_index([("email", ASCENDING)], unique=True, name="email_unique")
    db[RESET_TOKENS_COLLECTION].create_index(
        [("userId", ASCENDING)], unique=True, name="user_id_unique"
    )
    logger.info("MongoDB indexes ensured on database %s", db.name)
