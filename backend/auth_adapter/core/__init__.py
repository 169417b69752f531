"""
Core utilities: id and datetime translation, adapter exceptions.
"""
from auth_adapter.core.exceptions import (
    AdapterError,
    AvatarFetchError,
    AvatarIngestError,
    AvatarWriteError,
    InvalidIdError,
    UserNotFoundError,
)
from auth_adapter.core.dates import to_bson_datetime
from auth_adapter.core.ids import parse_object_id, to_object_id, to_str_id

__all__ = [
    "AdapterError",
    "AvatarFetchError",
    "AvatarIngestError",
    "AvatarWriteError",
    "InvalidIdError",
    "UserNotFoundError",
    "parse_object_id",
    "to_object_id",
    "to_str_id",
    "to_bson_datetime",
]
