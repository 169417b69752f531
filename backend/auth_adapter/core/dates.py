"""
Datetime normalisation for values stored as BSON dates.

BSON dates are UTC with millisecond precision. Values are brought into that
form before they are written and again when documents are read, so what the
adapter returns from a write equals what a later read returns.
"""
from datetime import datetime, timezone
from typing import Optional


def to_bson_datetime(value: Optional[datetime]) -> Optional[datetime]:
    """
    Convert a datetime to timezone-aware UTC truncated to milliseconds.

    Naive datetimes are taken to be UTC already, as pymongo does.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)
