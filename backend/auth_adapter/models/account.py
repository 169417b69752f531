"""
Linked provider account model for the accounts collection.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Account(BaseModel):
    """
    Link between a provider identity and a user.

    Provider-specific fields not declared here are kept as extras and
    stored verbatim.
    """
    user_id: str = Field(..., alias="userId", description="Owning user id")
    type: str = Field(..., description="Account type (oauth, oidc, email, ...)")
    provider: str = Field(..., description="Provider id")
    provider_account_id: str = Field(
        ...,
        alias="providerAccountId",
        description="Account id at the provider",
    )
    # OAuth token fields use the provider's own snake_case names
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_at: Optional[int] = None
    token_type: Optional[str] = None
    scope: Optional[str] = None
    id_token: Optional[str] = None
    session_state: Optional[str] = None

    class Config:
        populate_by_name = True
        extra = "allow"
