"""
User create/update schemas.
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """User attributes supplied by the framework on sign-up."""
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Email address")
    email_verified: Optional[datetime] = Field(
        None,
        alias="emailVerified",
        description="When the email address was verified",
    )
    image: Optional[str] = Field(None, description="Remote avatar URL")

    class Config:
        populate_by_name = True


class UserUpdate(BaseModel):
    """
    Partial user update.

    Only fields explicitly supplied are written; a field supplied as None
    is written as null.
    """
    id: str = Field(..., description="User id")
    name: Optional[str] = None
    email: Optional[str] = None
    email_verified: Optional[datetime] = Field(None, alias="emailVerified")
    image: Optional[str] = None

    class Config:
        populate_by_name = True

    def patch(self) -> dict[str, Any]:
        """Supplied fields keyed by document field name, without the id."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude={"id"})
