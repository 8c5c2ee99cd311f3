"""
MongoDB connection management.

This module provides:
- A shared Motor client, created lazily on first use
- Database/collection accessors
- Health check utilities
"""

import logging
from typing import Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import PyMongoError

from presales_hub.config import get_settings
from presales_hub.database.exceptions import DatabaseConfigError

logger = logging.getLogger(__name__)

# Global MongoDB client instance
_client: Optional[AsyncIOMotorClient] = None


def get_client() -> AsyncIOMotorClient:
    """
    Get the MongoDB client, creating it on first use.
    """
    global _client
    if _client is None:
        settings = get_settings()
        if not settings.mongo_uri:
            raise DatabaseConfigError(
                "Missing MONGO_URI. Ensure it is set in your environment or .env file."
            )
        _client = AsyncIOMotorClient(settings.mongo_uri)
        logger.info(f"Created MongoDB client for {_sanitize_mongodb_url(settings.mongo_uri)}")
    return _client


def get_database() -> AsyncIOMotorDatabase:
    """
    Get the configured database.
    """
    return get_client()[get_settings().mongo_db_name]


def get_collection(name: str) -> AsyncIOMotorCollection:
    return get_database()[name]


async def close_db() -> None:
    """
    Close MongoDB connection.
    """
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("Closed MongoDB client")


async def check_db_connection() -> bool:
    """
    Check if MongoDB connection is healthy.
    """
    try:
        client = get_client()
    except DatabaseConfigError as e:
        logger.warning(f"MongoDB not configured: {e}")
        return False

    try:
        await client.admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning(f"MongoDB ping failed: {e}")
        return False


def get_db_info() -> dict:
    """
    Get database connection information and status.
    """
    settings = get_settings()

    return {
        "status": "connected" if _client is not None else "disconnected",
        "url": _sanitize_mongodb_url(settings.mongo_uri),
        "database": settings.mongo_db_name,
        "environment": settings.environment,
    }


def _sanitize_mongodb_url(url: str) -> str:
    """
    Hide password in MongoDB URL for safe logging.
    """
    if "@" not in url or "://" not in url:
        return url

    protocol, rest = url.split("://", 1)
    credentials, host = rest.rsplit("@", 1)
    if ":" in credentials:
        username = credentials.split(":", 1)[0]
        return f"{protocol}://{username}:***@{host}"
    return url
