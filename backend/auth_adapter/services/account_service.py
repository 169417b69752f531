"""
Linked provider accounts.
"""
import logging
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from auth_adapter.database.databases import auth_db
from auth_adapter.services.user_service import UserService

logger = logging.getLogger("auth_adapter.accounts")


class AccountService:
    """Service for (provider, providerAccountId) -> user links."""

    def __init__(self, db: AsyncIOMotorDatabase, users: UserService):
        """Initialize with auth database and the user service used for joins."""
        self.db = db
        self.accounts_collection = db[auth_db.Collections.ACCOUNTS]
        self.users = users

    async def link(self, account_doc: dict[str, Any]) -> None:
        """
        Insert an account link.

        The document must already carry userId as an ObjectId. Duplicate
        links are not checked here.
        """
        await self.accounts_collection.insert_one(account_doc)
        logger.info(
            f"Linked {account_doc['provider']} account {account_doc['providerAccountId']} "
            f"to user {account_doc['userId']}"
        )

    async def unlink(self, provider: str, provider_account_id: str) -> None:
        """Remove an account link. No error if it does not exist."""
        await self.accounts_collection.delete_one(
            {"provider": provider, "providerAccountId": provider_account_id}
        )

    async def find(self, provider: str, provider_account_id: str) -> Optional[dict[str, Any]]:
        """Get an account document by its natural key, or None."""
        return await self.accounts_collection.find_one(
            {"provider": provider, "providerAccountId": provider_account_id}
        )

    async def get_owner(
        self, provider: str, provider_account_id: str
    ) -> Optional[dict[str, Any]]:
        """
        Resolve the user that owns an account.

        Returns:
            User document, or None if either the account or its user is missing
        """
        account = await self.find(provider, provider_account_id)
        if not account:
            return None
        return await self.users.get_by_id(account["userId"])
