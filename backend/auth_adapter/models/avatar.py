"""
Avatar file read back from the avatars bucket.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Avatar(BaseModel):
    """Mirrored avatar image."""
    file_id: str = Field(..., description="GridFS file id")
    filename: str = Field(..., description="Generated unique file name")
    content_type: Optional[str] = Field(None, description="Content-Type of the source response")
    data: bytes = Field(..., description="Image bytes")
