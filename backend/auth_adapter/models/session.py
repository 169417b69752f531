"""
Session model for the sessions collection.
"""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from auth_adapter.core.dates import to_bson_datetime
from auth_adapter.core.ids import to_str_id
from auth_adapter.models.user import User


class Session(BaseModel):
    """Database session keyed by its opaque token."""
    session_token: str = Field(..., alias="sessionToken", description="Unique session token")
    user_id: str = Field(..., alias="userId", description="Owning user id")
    expires: datetime = Field(..., description="Session expiry")

    class Config:
        populate_by_name = True

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Session":
        return cls(
            session_token=doc["sessionToken"],
            user_id=to_str_id(doc["userId"]),
            expires=to_bson_datetime(doc["expires"]),
        )


class SessionAndUser(BaseModel):
    """Result of a session lookup joined with its owning user."""
    session: Session
    user: User
