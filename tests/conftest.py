"""
Global test fixtures for the MongoDB auth adapter.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Mock HTTP transport for avatar fetches (httpx.MockTransport)
- Mock GridFS bucket
- Test user/session/token factories
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio
from bson import ObjectId

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth_db database with the adapter's indexes."""
    from auth_adapter.database.registry import create_indexes

    db = mock_async_mongo_client["auth_db"]
    await create_indexes(db)
    yield db


# =============================================================================
# Avatar Fixtures
# =============================================================================

AVATAR_URL = "https://cdn.example.com/avatars/alice.png"
AVATAR_BYTES = b"\x89PNG\r\n\x1a\nfake-image-bytes"


def _avatar_handler(request: httpx.Request) -> httpx.Response:
    """Serve a PNG for AVATAR_URL, 404 for anything else under the CDN."""
    if str(request.url) == AVATAR_URL:
        return httpx.Response(200, content=AVATAR_BYTES, headers={"content-type": "image/png"})
    if request.url.host == "cdn.example.com":
        return httpx.Response(404, content=b"not found")
    raise httpx.ConnectError("Name or service not known", request=request)


@pytest_asyncio.fixture
async def avatar_http_client():
    """HTTP client whose transport never touches the network."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(_avatar_handler))
    yield client
    await client.aclose()


@pytest.fixture
def mock_avatar_bucket():
    """
    Create a mocked GridFS bucket.

    upload_from_stream returns a fresh ObjectId and records what was written;
    open_download_stream serves those uploads back.
    """
    from gridfs.errors import NoFile

    stored: dict = {}
    bucket = MagicMock()

    async def upload_from_stream(filename, source, metadata=None):
        file_id = ObjectId()
        stored[file_id] = {"filename": filename, "data": source, "metadata": metadata}
        return file_id

    async def open_download_stream(file_id):
        if file_id not in stored:
            raise NoFile(f"no file in gridfs collection with _id {file_id!r}")
        entry = stored[file_id]
        grid_out = MagicMock()
        grid_out.filename = entry["filename"]
        grid_out.metadata = entry["metadata"]
        grid_out.read = AsyncMock(return_value=entry["data"])
        return grid_out

    bucket.upload_from_stream = AsyncMock(side_effect=upload_from_stream)
    bucket.open_download_stream = AsyncMock(side_effect=open_download_stream)
    bucket.stored = stored
    return bucket


# =============================================================================
# Adapter Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def adapter(mock_auth_db, avatar_http_client, mock_avatar_bucket):
    """Adapter with default options (no avatar mirroring, no roles)."""
    from auth_adapter.adapter import MongoDBAdapter
    from auth_adapter.services.avatar_service import AvatarService

    avatars = AvatarService(
        mock_auth_db,
        http_client=avatar_http_client,
        bucket=mock_avatar_bucket,
    )
    yield MongoDBAdapter(mock_auth_db, avatar_service=avatars)


@pytest_asyncio.fixture
async def avatar_adapter(mock_auth_db, avatar_http_client, mock_avatar_bucket):
    """Adapter with storeImage and roleBased enabled."""
    from auth_adapter.adapter import MongoDBAdapter
    from auth_adapter.services.avatar_service import AvatarService

    avatars = AvatarService(
        mock_auth_db,
        http_client=avatar_http_client,
        bucket=mock_avatar_bucket,
    )
    yield MongoDBAdapter(
        mock_auth_db,
        {"storeImage": True, "roleBased": True},
        avatar_service=avatars,
    )


# =============================================================================
# Data Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """User attributes as the framework passes them on sign-up."""
    return {
        "name": "Alice",
        "email": "alice@example.com",
        "emailVerified": None,
        "image": AVATAR_URL,
    }


@pytest.fixture
def session_expiry() -> datetime:
    """A UTC expiry without sub-millisecond precision, as BSON stores it."""
    return datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def token_expiry() -> datetime:
    return datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc) + timedelta(hours=1)


@pytest.fixture
def github_account() -> dict:
    """Account link fields, minus userId."""
    return {
        "type": "oauth",
        "provider": "github",
        "providerAccountId": "gh-12345",
        "access_token": "gho_xxx",
        "token_type": "bearer",
        "scope": "read:user,user:email",
    }


@pytest.fixture
def avatar_url() -> str:
    """URL the mock transport serves a PNG for."""
    return AVATAR_URL


@pytest.fixture
def avatar_bytes() -> bytes:
    return AVATAR_BYTES
