"""
Verification token model for the verificationTokens collection.
"""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from auth_adapter.core.dates import to_bson_datetime


class VerificationToken(BaseModel):
    """Single-use token, keyed by (identifier, token)."""
    identifier: str = Field(..., description="Who the token was issued to, usually an email")
    token: str = Field(..., description="Token value")
    expires: datetime = Field(..., description="Token expiry")

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "VerificationToken":
        return cls(
            identifier=doc["identifier"],
            token=doc["token"],
            expires=to_bson_datetime(doc["expires"]),
        )
