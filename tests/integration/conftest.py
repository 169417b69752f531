"""
Integration test fixtures.

These tests require a running MongoDB server.
Mark with @pytest.mark.integration to skip in normal test runs.
"""
import os

import pytest
import pytest_asyncio
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import ServerSelectionTimeoutError


@pytest.fixture
def live_mongo_uri():
    """MongoDB URI for live tests."""
    return os.getenv("MONGO_URI", "mongodb://localhost:27017")


@pytest_asyncio.fixture
async def live_mongo_client(live_mongo_uri):
    """Real motor client; skips the test if MongoDB is unreachable."""
    client = AsyncIOMotorClient(live_mongo_uri, tz_aware=True, serverSelectionTimeoutMS=2000)
    try:
        await client.admin.command("ping")
    except ServerSelectionTimeoutError:
        client.close()
        pytest.skip(f"No MongoDB reachable at {live_mongo_uri}")
    yield client
    client.close()


@pytest_asyncio.fixture
async def live_auth_db(live_mongo_client):
    """Throwaway database with the adapter's indexes, dropped afterwards."""
    from auth_adapter.database.registry import create_indexes

    name = f"auth_adapter_it_{ObjectId()}"
    db = live_mongo_client[name]
    await create_indexes(db)
    yield db
    await live_mongo_client.drop_database(name)
