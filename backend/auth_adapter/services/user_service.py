"""
User persistence: create, look up, patch and delete user documents.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from auth_adapter.config import AdapterOptions
from auth_adapter.core.dates import to_bson_datetime
from auth_adapter.core.exceptions import UserNotFoundError
from auth_adapter.database.databases import auth_db
from auth_adapter.schemas.user import UserCreate
from auth_adapter.services.avatar_service import AvatarService

logger = logging.getLogger("auth_adapter.users")


class UserService:
    """Service for user documents. Works with ObjectIds only."""

    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        options: AdapterOptions,
        avatars: Optional[AvatarService] = None,
    ):
        """Initialize with auth database, resolved options and avatar store."""
        self.db = db
        self.users_collection = db[auth_db.Collections.USERS]
        self.options = options
        self.avatars = avatars

    async def create(self, user: UserCreate) -> dict[str, Any]:
        """
        Insert a new user.

        Avatar mirroring (store_image) never fails the create: on any
        ingestion error the user is stored without avatarFileId.

        Args:
            user: Attributes supplied by the framework

        Returns:
            The inserted document, including its new _id
        """
        user_doc = user.model_dump(by_alias=True, exclude_none=True)
        if "emailVerified" in user_doc:
            user_doc["emailVerified"] = to_bson_datetime(user_doc["emailVerified"])
        user_doc["dateJoined"] = to_bson_datetime(datetime.now(timezone.utc))

        if self.options.store_image and user.image and self.avatars is not None:
            avatar = await self.avatars.try_ingest(user.image)
            if avatar.reference is not None:
                user_doc["avatarFileId"] = avatar.reference

        if self.options.role_based:
            user_doc["roles"] = list(self.options.default_roles)

        result = await self.users_collection.insert_one(user_doc)
        user_doc["_id"] = result.inserted_id

        logger.info(f"Created user {result.inserted_id}")
        return user_doc

    async def get_by_id(self, user_id: ObjectId) -> Optional[dict[str, Any]]:
        """Get a user document by id, or None."""
        return await self.users_collection.find_one({"_id": user_id})

    async def get_by_email(self, email: str) -> Optional[dict[str, Any]]:
        """Get a user document by email, or None."""
        return await self.users_collection.find_one({"email": email})

    async def update(self, user_id: ObjectId, patch: dict[str, Any]) -> dict[str, Any]:
        """
        Apply a partial update and return the resulting document.

        Args:
            user_id: User to patch
            patch: Document fields to set; fields not present are untouched

        Returns:
            The user document as read back after the patch

        Raises:
            UserNotFoundError: If the user no longer exists after the patch
        """
        if patch.get("emailVerified") is not None:
            patch = {**patch, "emailVerified": to_bson_datetime(patch["emailVerified"])}

        if patch:
            await self.users_collection.update_one({"_id": user_id}, {"$set": patch})

        updated = await self.users_collection.find_one({"_id": user_id})
        if not updated:
            raise UserNotFoundError(str(user_id))
        return updated

    async def delete(self, user_id: ObjectId) -> None:
        """Delete a user. No error if it is already gone."""
        result = await self.users_collection.delete_one({"_id": user_id})
        if result.deleted_count:
            logger.info(f"Deleted user {user_id}")
