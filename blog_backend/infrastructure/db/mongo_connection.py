# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields, PostFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
POSTS_COLLECTION = "posts"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def to_object_id(value: str) -> Optional[ObjectId]:
    """Parse a string ID; malformed IDs give None so lookups treat them as unknown"""
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]


def get_post_collection() -> AsyncIOMotorCollection:
    """
    Get posts collection from MongoDB
    
    Returns:
        MongoDB collection for posts
    """
    return get_database()[POSTS_COLLECTION]


async def ensure_indexes(database: Optional[AsyncIOMotorDatabase] = None) -> bool:
    """
    Create the indexes the repositories rely on.

    Returns:
        True if all indexes exist afterwards, False if creation failed
    """
    database = database if database is not None else get_database()
    try:
        await database[USERS_COLLECTION].create_index(
            [(UserFields.EMAIL, ASCENDING)], unique=True, name="email_unique"
        )
        await database[POSTS_COLLECTION].create_index(
            [(PostFields.CREATED_AT, DESCENDING)], name="created_at_desc"
        )
        return True
    except PyMongoError as e:
        logger.warning("Failed to create MongoDB indexes: %s", e)
        return False


def close_connection() -> None:
    """Close the global client, if one was opened"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None
