"""
Session update schema.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SessionUpdate(BaseModel):
    """Partial session update keyed by session token."""
    session_token: str = Field(..., alias="sessionToken", description="Session to update")
    expires: Optional[datetime] = Field(None, description="New expiry")
    user_id: Optional[str] = Field(None, alias="userId", description="New owner")

    class Config:
        populate_by_name = True
