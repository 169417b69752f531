"""
Database sessions keyed by session token.
"""
from datetime import datetime
from typing import Any, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from auth_adapter.database.databases import auth_db
from auth_adapter.services.user_service import UserService


class SessionService:
    """Service for session documents."""

    def __init__(self, db: AsyncIOMotorDatabase, users: UserService):
        """Initialize with auth database and the user service used for joins."""
        self.db = db
        self.sessions_collection = db[auth_db.Collections.SESSIONS]
        self.users = users

    async def create(self, session_doc: dict[str, Any]) -> None:
        """
        Insert a session.

        Raises:
            DuplicateKeyError: If the session token is already in use
        """
        await self.sessions_collection.insert_one(session_doc)

    async def get(self, session_token: str) -> Optional[dict[str, Any]]:
        """Get a session document by token, or None."""
        return await self.sessions_collection.find_one({"sessionToken": session_token})

    async def get_with_owner(
        self, session_token: str
    ) -> Optional[tuple[dict[str, Any], dict[str, Any]]]:
        """
        Get a session together with its user.

        An orphaned session (user deleted) is reported as not found.

        Returns:
            (session document, user document) or None
        """
        session = await self.get(session_token)
        if not session:
            return None
        user = await self.users.get_by_id(session["userId"])
        if not user:
            return None
        return session, user

    async def update(
        self,
        session_token: str,
        expires: Optional[datetime] = None,
        user_id: Optional[ObjectId] = None,
    ) -> Optional[dict[str, Any]]:
        """
        Patch expiry and/or owner of a session.

        Returns:
            Updated session document, or None if no such session exists
        """
        updates: dict[str, Any] = {}
        if expires is not None:
            updates["expires"] = expires
        if user_id is not None:
            updates["userId"] = user_id

        if updates:
            await self.sessions_collection.update_one(
                {"sessionToken": session_token},
                {"$set": updates},
            )
        return await self.get(session_token)

    async def delete(self, session_token: str) -> None:
        """Delete a session. No error if it is already gone."""
        await self.sessions_collection.delete_one({"sessionToken": session_token})
