"""
Input schemas for adapter operations that take partial or id-less data.
"""
from auth_adapter.schemas.user import UserCreate, UserUpdate
from auth_adapter.schemas.session import SessionUpdate

__all__ = [
    "UserCreate",
    "UserUpdate",
    "SessionUpdate",
]
