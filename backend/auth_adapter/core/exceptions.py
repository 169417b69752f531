"""
Exceptions raised by the adapter.

Lookup misses are never exceptions: every "get" returns None instead.
"""


class AdapterError(Exception):
    """Base class for adapter errors."""


class InvalidIdError(AdapterError, ValueError):
    """A string id could not be converted to a MongoDB ObjectId."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid id: {value!r}")


class UserNotFoundError(AdapterError):
    """
    The user disappeared between a write and the follow-up read.

    Raised by update_user, where the framework expects the post-update state.
    """

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class AvatarIngestError(AdapterError):
    """Avatar mirroring failed. Never propagated out of user creation."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"{message} ({url})")


class AvatarFetchError(AvatarIngestError):
    """The avatar URL could not be fetched."""


class AvatarWriteError(AvatarIngestError):
    """The fetched avatar could not be written to the blob store."""
