"""
MongoDB adapter for the authentication framework.

The framework calls one coroutine per lifecycle event. Ids cross this
boundary as strings; everything below it works with ObjectIds.
"""
import logging
from typing import Any, Mapping, Optional, TypeVar, Union

import httpx
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pydantic import BaseModel

from auth_adapter.config import AdapterOptions, Settings, get_settings
from auth_adapter.core.dates import to_bson_datetime
from auth_adapter.core.exceptions import UserNotFoundError
from auth_adapter.core.ids import parse_object_id, to_object_id
from auth_adapter.database.connections import create_mongo_client, get_database
from auth_adapter.database.databases import auth_db
from auth_adapter.database.registry import create_indexes
from auth_adapter.models import (
    Account,
    Avatar,
    Session,
    SessionAndUser,
    User,
    VerificationToken,
)
from auth_adapter.schemas import SessionUpdate, UserCreate, UserUpdate
from auth_adapter.services import (
    AccountService,
    AvatarService,
    SessionService,
    UserService,
    VerificationTokenService,
)

logger = logging.getLogger("auth_adapter.adapter")

ModelT = TypeVar("ModelT", bound=BaseModel)
ModelInput = Union[BaseModel, Mapping[str, Any]]


def _coerce(model_cls: type[ModelT], value: ModelInput) -> ModelT:
    """Accept a model instance or a plain mapping with camelCase or snake_case keys."""
    if isinstance(value, model_cls):
        return value
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, exclude_unset=True)
    return model_cls.model_validate(value)


class MongoDBAdapter:
    """
    Persistence backend for users, accounts, sessions and verification tokens.

    Usage:
        adapter = MongoDBAdapter(client["auth_db"], {"storeImage": True})
        user = await adapter.create_user({"email": "a@example.com"})
    """

    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        options: Optional[Union[AdapterOptions, Mapping[str, Any]]] = None,
        *,
        avatar_service: Optional[AvatarService] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        avatar_bucket_name: str = auth_db.AVATAR_BUCKET,
        avatar_fetch_timeout: float = 30.0,
    ):
        """
        Build the adapter and its services around one database handle.

        Args:
            db: Auth database
            options: AdapterOptions or a mapping of recognised option names
            avatar_service: Pre-built avatar store (overrides the next three)
            http_client: HTTP client for avatar fetches
            avatar_bucket_name: GridFS bucket for mirrored avatars
            avatar_fetch_timeout: Fetch timeout when no http_client is given
        """
        if options is None:
            options = AdapterOptions()
        elif not isinstance(options, AdapterOptions):
            options = AdapterOptions.model_validate(options)

        self.db = db
        self.options = options
        self.avatars = avatar_service or AvatarService(
            db,
            bucket_name=avatar_bucket_name,
            http_client=http_client,
            timeout=avatar_fetch_timeout,
        )
        self.users = UserService(db, options, self.avatars)
        self.accounts = AccountService(db, self.users)
        self.sessions = SessionService(db, self.users)
        self.verification_tokens = VerificationTokenService(db)

    @classmethod
    def from_client(
        cls,
        client: AsyncIOMotorClient,
        options: Optional[Union[AdapterOptions, Mapping[str, Any]]] = None,
        db_name: str = auth_db.DB_NAME,
        **kwargs: Any,
    ) -> "MongoDBAdapter":
        """Build the adapter on a database of an existing client."""
        return cls(client[db_name], options, **kwargs)

    async def ensure_indexes(self) -> None:
        """Create the indexes the adapter relies on (unique session tokens, ...)."""
        await create_indexes(self.db)

    async def close(self) -> None:
        """Release the avatar HTTP client. The MongoDB client belongs to the caller."""
        await self.avatars.close()

    # ==================== Users ====================

    async def create_user(self, user: ModelInput) -> User:
        """Create a user; mirrors the avatar and assigns roles per options."""
        data = _coerce(UserCreate, user)
        doc = await self.users.create(data)
        return User.from_document(doc)

    async def get_user(self, user_id: str) -> Optional[User]:
        oid = parse_object_id(user_id)
        if oid is None:
            logger.debug(f"get_user called with malformed id {user_id!r}")
            return None
        doc = await self.users.get_by_id(oid)
        return User.from_document(doc) if doc else None

    async def get_user_by_email(self, email: str) -> Optional[User]:
        doc = await self.users.get_by_email(email)
        return User.from_document(doc) if doc else None

    async def get_user_by_account(
        self, provider: str, provider_account_id: str
    ) -> Optional[User]:
        """User linked to a provider account, or None if unlinked or orphaned."""
        doc = await self.accounts.get_owner(provider, provider_account_id)
        return User.from_document(doc) if doc else None

    async def update_user(self, user: ModelInput) -> User:
        """
        Patch the supplied fields of a user.

        Raises:
            UserNotFoundError: If the user does not exist (or vanished mid-update)
        """
        data = _coerce(UserUpdate, user)
        oid = parse_object_id(data.id)
        if oid is None:
            raise UserNotFoundError(data.id)
        doc = await self.users.update(oid, data.patch())
        return User.from_document(doc)

    async def delete_user(self, user_id: str) -> None:
        oid = parse_object_id(user_id)
        if oid is not None:
            await self.users.delete(oid)

    async def get_user_avatar(self, user_id: str) -> Optional[Avatar]:
        """Mirrored avatar of a user, or None if the user has none."""
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        doc = await self.users.get_by_id(oid)
        if not doc or not doc.get("avatarFileId"):
            return None
        return await self.avatars.download(doc["avatarFileId"])

    # ==================== Accounts ====================

    async def link_account(self, account: ModelInput) -> None:
        """
        Link a provider account to a user.

        Raises:
            InvalidIdError: If userId is not a valid id
        """
        data = _coerce(Account, account)
        doc = data.model_dump(by_alias=True, exclude_none=True)
        doc["userId"] = to_object_id(data.user_id)
        await self.accounts.link(doc)

    async def unlink_account(self, provider: str, provider_account_id: str) -> None:
        await self.accounts.unlink(provider, provider_account_id)

    # ==================== Sessions ====================

    async def create_session(self, session: ModelInput) -> Session:
        """
        Store a session and return it.

        The returned session carries expires as stored (UTC, millisecond
        precision); otherwise it is the input unchanged.

        Raises:
            InvalidIdError: If userId is not a valid id
            DuplicateKeyError: If the session token already exists
        """
        data = _coerce(Session, session)
        expires = to_bson_datetime(data.expires)
        await self.sessions.create({
            "sessionToken": data.session_token,
            "userId": to_object_id(data.user_id),
            "expires": expires,
        })
        if expires != data.expires:
            data = data.model_copy(update={"expires": expires})
        return data

    async def get_session_and_user(self, session_token: str) -> Optional[SessionAndUser]:
        """Session with its user; None if either is missing."""
        found = await self.sessions.get_with_owner(session_token)
        if found is None:
            return None
        session_doc, user_doc = found
        return SessionAndUser(
            session=Session.from_document(session_doc),
            user=User.from_document(user_doc),
        )

    async def update_session(self, session: ModelInput) -> Optional[Session]:
        """
        Patch expires and/or userId of a session.

        Raises:
            InvalidIdError: If a new userId is supplied and is not a valid id
        """
        data = _coerce(SessionUpdate, session)
        user_id = to_object_id(data.user_id) if data.user_id is not None else None
        doc = await self.sessions.update(
            data.session_token,
            expires=to_bson_datetime(data.expires),
            user_id=user_id,
        )
        return Session.from_document(doc) if doc else None

    async def delete_session(self, session_token: str) -> None:
        await self.sessions.delete(session_token)

    # ==================== Verification tokens ====================

    async def create_verification_token(self, token: ModelInput) -> VerificationToken:
        data = _coerce(VerificationToken, token)
        expires = to_bson_datetime(data.expires)
        await self.verification_tokens.create({**data.model_dump(), "expires": expires})
        if expires != data.expires:
            data = data.model_copy(update={"expires": expires})
        return data

    async def use_verification_token(
        self, identifier: str, token: str
    ) -> Optional[VerificationToken]:
        """Consume a token. Returns it the first time, None afterwards."""
        doc = await self.verification_tokens.consume(identifier, token)
        return VerificationToken.from_document(doc) if doc else None


def create_adapter(
    settings: Optional[Settings] = None,
    options: Optional[Union[AdapterOptions, Mapping[str, Any]]] = None,
) -> MongoDBAdapter:
    """
    Build an adapter with its own MongoDB client from settings.

    Options default to the settings' feature flags.
    """
    settings = settings or get_settings()
    client = create_mongo_client(settings)
    return MongoDBAdapter(
        get_database(client, settings),
        options if options is not None else AdapterOptions.from_settings(settings),
        avatar_bucket_name=settings.avatar_bucket_name,
        avatar_fetch_timeout=settings.avatar_fetch_timeout_seconds,
    )
