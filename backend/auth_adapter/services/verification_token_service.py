"""
Single-use verification tokens.
"""
import logging
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from auth_adapter.database.databases import auth_db

logger = logging.getLogger("auth_adapter.tokens")


class VerificationTokenService:
    """Service for verification token documents."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with auth database."""
        self.db = db
        self.tokens_collection = db[auth_db.Collections.VERIFICATION_TOKENS]

    async def create(self, token_doc: dict[str, Any]) -> None:
        """Insert a verification token."""
        await self.tokens_collection.insert_one(token_doc)

    async def consume(self, identifier: str, token: str) -> Optional[dict[str, Any]]:
        """
        Atomically find and delete a token.

        Of two concurrent callers at most one receives the document; the
        other gets None.

        Returns:
            The token document as it was before deletion, or None
        """
        doc = await self.tokens_collection.find_one_and_delete(
            {"identifier": identifier, "token": token}
        )
        if doc:
            logger.debug(f"Consumed verification token for {identifier}")
        return doc
