"""
Pydantic models returned across the adapter boundary.
"""
from auth_adapter.models.user import User, UserRole
from auth_adapter.models.account import Account
from auth_adapter.models.session import Session, SessionAndUser
from auth_adapter.models.verification_token import VerificationToken
from auth_adapter.models.avatar import Avatar

__all__ = [
    "User",
    "UserRole",
    "Account",
    "Session",
    "SessionAndUser",
    "VerificationToken",
    "Avatar",
]
