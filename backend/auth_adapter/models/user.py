"""
User model for the users collection.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from auth_adapter.core.dates import to_bson_datetime
from auth_adapter.core.ids import to_str_id


class UserRole(str, Enum):
    """Role names assigned when role-based mode is enabled."""
    USER = "user"


class User(BaseModel):
    """
    User as returned to the authentication framework.

    Attribute aliases are the document field names in MongoDB and the
    framework's wire names.
    """
    id: str = Field(..., description="MongoDB ObjectId as string")
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Email address")
    email_verified: Optional[datetime] = Field(
        None,
        alias="emailVerified",
        description="When the email address was verified",
    )
    image: Optional[str] = Field(None, description="Remote avatar URL")
    avatar_file_id: Optional[str] = Field(
        None,
        alias="avatarFileId",
        description="GridFS file id of the mirrored avatar (store_image only)",
    )
    roles: Optional[list[str]] = Field(
        None,
        description="Assigned roles (role_based only)",
    )
    date_joined: Optional[datetime] = Field(
        None,
        alias="dateJoined",
        description="Account creation timestamp",
    )

    class Config:
        populate_by_name = True

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "User":
        """Build a User from a users document, stringifying ObjectIds."""
        return cls(
            id=to_str_id(doc["_id"]),
            name=doc.get("name"),
            email=doc.get("email"),
            email_verified=to_bson_datetime(doc.get("emailVerified")),
            image=doc.get("image"),
            avatar_file_id=to_str_id(doc.get("avatarFileId")),
            roles=doc.get("roles"),
            date_joined=to_bson_datetime(doc.get("dateJoined")),
        )
