"""
Translation between the framework's string ids and MongoDB ObjectIds.
"""
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId

from auth_adapter.core.exceptions import InvalidIdError


def to_object_id(value: Any) -> ObjectId:
    """
    Convert a string id into an ObjectId.

    Raises:
        InvalidIdError: If value is not a 24-character hex string or ObjectId
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str):
        raise InvalidIdError(value)
    try:
        return ObjectId(value)
    except InvalidId:
        raise InvalidIdError(value) from None


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Like to_object_id, but returns None for malformed ids."""
    try:
        return to_object_id(value)
    except InvalidIdError:
        return None


def to_str_id(value: Optional[ObjectId]) -> Optional[str]:
    """Convert an ObjectId back into its 24-character hex string."""
    if value is None:
        return None
    return str(value)
