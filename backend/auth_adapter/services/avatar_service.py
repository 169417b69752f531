"""
Avatar mirroring into the GridFS avatars bucket.
"""
import logging
import secrets
import time
from typing import NamedTuple, Optional

import httpx
from bson import ObjectId
from gridfs.errors import NoFile
from motor.motor_asyncio import AsyncIOMotorDatabase, AsyncIOMotorGridFSBucket
from pymongo.errors import PyMongoError

from auth_adapter.core.exceptions import (
    AvatarFetchError,
    AvatarIngestError,
    AvatarWriteError,
)
from auth_adapter.database.databases import auth_db
from auth_adapter.models.avatar import Avatar

logger = logging.getLogger("auth_adapter.avatars")


class AvatarIngestResult(NamedTuple):
    """Outcome of a best-effort ingestion: exactly one field is set."""
    reference: Optional[ObjectId]
    error: Optional[AvatarIngestError]


def generate_avatar_filename() -> str:
    """Unique bucket file name: epoch millis plus a random suffix."""
    return f"{int(time.time() * 1000)}-{secrets.token_hex(8)}"


class AvatarService:
    """
    Fetches remote images and stores them in the avatars bucket.
    """

    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        bucket_name: str = auth_db.AVATAR_BUCKET,
        http_client: Optional[httpx.AsyncClient] = None,
        bucket: Optional[AsyncIOMotorGridFSBucket] = None,
        timeout: float = 30.0,
    ):
        """
        Initialize with the auth database.

        Args:
            db: Auth database the bucket lives in
            bucket_name: GridFS bucket name
            http_client: Client used for fetching; created lazily if omitted
            bucket: Pre-built bucket, mainly for tests
            timeout: Fetch timeout in seconds for the lazily created client
        """
        self.db = db
        self.bucket_name = bucket_name
        self.timeout = timeout
        self._bucket = bucket
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def bucket(self) -> AsyncIOMotorGridFSBucket:
        """GridFS bucket, created on first use."""
        if self._bucket is None:
            self._bucket = AsyncIOMotorGridFSBucket(self.db, bucket_name=self.bucket_name)
        return self._bucket

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def ingest(self, url: str) -> ObjectId:
        """
        Fetch an image and write it to the bucket.

        Args:
            url: Remote image URL

        Returns:
            GridFS file id of the stored image

        Raises:
            AvatarFetchError: On a malformed URL, network errors or a non-2xx response
            AvatarWriteError: If GridFS rejects the upload
        """
        client = await self._get_client()
        try:
            response = await client.get(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise AvatarFetchError(url, f"Failed to fetch avatar: {e}") from e

        metadata = {"source": url}
        content_type = response.headers.get("content-type")
        if content_type:
            metadata["contentType"] = content_type

        filename = generate_avatar_filename()
        try:
            file_id = await self.bucket.upload_from_stream(
                filename,
                response.content,
                metadata=metadata,
            )
        except PyMongoError as e:
            raise AvatarWriteError(url, f"Failed to store avatar: {e}") from e

        logger.debug(f"Stored avatar {filename} ({len(response.content)} bytes) from {url}")
        return file_id

    async def try_ingest(self, url: str) -> AvatarIngestResult:
        """
        Ingest without raising.

        Failures are logged at WARNING and returned in the result instead,
        so a caller can carry on without an avatar.
        """
        try:
            return AvatarIngestResult(reference=await self.ingest(url), error=None)
        except AvatarIngestError as e:
            logger.warning(f"Avatar mirroring skipped: {e}")
            return AvatarIngestResult(reference=None, error=e)

    async def download(self, file_id: ObjectId) -> Optional[Avatar]:
        """
        Read a stored avatar back.

        Returns:
            Avatar or None if no such file exists
        """
        try:
            grid_out = await self.bucket.open_download_stream(file_id)
        except NoFile:
            return None

        data = await grid_out.read()
        metadata = grid_out.metadata or {}
        return Avatar(
            file_id=str(file_id),
            filename=grid_out.filename,
            content_type=metadata.get("contentType"),
            data=data,
        )
