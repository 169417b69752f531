"""
Index management for the auth database.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

from auth_adapter.database.databases import auth_db


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the indexes the adapter relies on. Safe to call repeatedly."""
    users = db[auth_db.Collections.USERS]
    # Only string emails are indexed; missing and null emails never collide
    await users.create_index(
        "email",
        unique=True,
        partialFilterExpression={"email": {"$type": "string"}},
    )

    accounts = db[auth_db.Collections.ACCOUNTS]
    await accounts.create_index([("provider", 1), ("providerAccountId", 1)])
    await accounts.create_index("userId")

    # sessionToken uniqueness is enforced by the store, not the adapter
    sessions = db[auth_db.Collections.SESSIONS]
    await sessions.create_index("sessionToken", unique=True)
    await sessions.create_index("userId")

    tokens = db[auth_db.Collections.VERIFICATION_TOKENS]
    await tokens.create_index([("identifier", 1), ("token", 1)], unique=True)
