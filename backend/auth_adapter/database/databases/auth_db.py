"""
Auth database configuration.
Stores users, linked accounts, sessions, verification tokens and avatars.
"""

DB_NAME = "auth_db"


class Collections:
    """Collection names in auth_db."""
    USERS = "users"
    ACCOUNTS = "accounts"
    SESSIONS = "sessions"
    VERIFICATION_TOKENS = "verificationTokens"


# GridFS bucket holding mirrored avatar images
AVATAR_BUCKET = "avatars"
