"""
MongoDB persistence adapter for an authentication framework.

Stores users, linked provider accounts, sessions and single-use
verification tokens, and optionally mirrors user avatars into GridFS.
"""
from auth_adapter.adapter import MongoDBAdapter, create_adapter
from auth_adapter.config import AdapterOptions, Settings, configure_logging, get_settings
from auth_adapter.core.exceptions import (
    AdapterError,
    AvatarFetchError,
    AvatarIngestError,
    AvatarWriteError,
    InvalidIdError,
    UserNotFoundError,
)
from auth_adapter.models import (
    Account,
    Avatar,
    Session,
    SessionAndUser,
    User,
    UserRole,
    VerificationToken,
)

__all__ = [
    "MongoDBAdapter",
    "create_adapter",
    "AdapterOptions",
    "Settings",
    "configure_logging",
    "get_settings",
    "AdapterError",
    "AvatarFetchError",
    "AvatarIngestError",
    "AvatarWriteError",
    "InvalidIdError",
    "UserNotFoundError",
    "Account",
    "Avatar",
    "Session",
    "SessionAndUser",
    "User",
    "UserRole",
    "VerificationToken",
]
