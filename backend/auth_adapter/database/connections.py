"""
MongoDB connection helpers.

Clients are created on request and handed to the adapter; nothing is cached
at module level.
"""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from auth_adapter.config import Settings, get_settings


def create_mongo_client(settings: Optional[Settings] = None) -> AsyncIOMotorClient:
    """Create a MongoDB client from settings. Dates are read back as UTC-aware."""
    settings = settings or get_settings()
    return AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)


def get_database(
    client: AsyncIOMotorClient,
    settings: Optional[Settings] = None,
) -> AsyncIOMotorDatabase:
    """Get the auth database from a client."""
    settings = settings or get_settings()
    return client[settings.mongo_db_name]
