"""
Tests for database connections and index creation.

These tests cover:
- MongoDB client creation from settings
- Index creation on every collection
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch


class TestMongoDBConnection:
    """Tests for MongoDB client helpers."""

    def test_create_mongo_client_uses_settings_uri(self):
        """create_mongo_client should connect to the configured URI."""
        from auth_adapter.config import Settings
        from auth_adapter.database.connections import create_mongo_client

        settings = Settings(mongo_uri="mongodb://test:27017")
        with patch("auth_adapter.database.connections.AsyncIOMotorClient") as mock_client:
            mock_instance = MagicMock()
            mock_client.return_value = mock_instance

            client = create_mongo_client(settings)

            mock_client.assert_called_once_with("mongodb://test:27017", tz_aware=True)
            assert client is mock_instance

    def test_get_database_uses_settings_name(self):
        """get_database should select the configured database."""
        from auth_adapter.config import Settings
        from auth_adapter.database.connections import get_database

        client = MagicMock()
        get_database(client, Settings(mongo_db_name="custom_auth"))

        client.__getitem__.assert_called_once_with("custom_auth")


class TestIndexCreation:
    """Tests for index creation on collections."""

    @pytest.mark.asyncio
    async def test_session_token_index_is_unique(self, mock_auth_db):
        """sessions.sessionToken must be unique."""
        indexes = await mock_auth_db.sessions.index_information()

        token_indexes = [
            idx for idx in indexes.values() if idx["key"] == [("sessionToken", 1)]
        ]
        assert token_indexes
        assert token_indexes[0].get("unique") is True

    @pytest.mark.asyncio
    async def test_verification_token_index_is_unique(self, mock_auth_db):
        """(identifier, token) must be unique."""
        indexes = await mock_auth_db.verificationTokens.index_information()

        compound = [
            idx for idx in indexes.values()
            if idx["key"] == [("identifier", 1), ("token", 1)]
        ]
        assert compound
        assert compound[0].get("unique") is True

    @pytest.mark.asyncio
    async def test_account_and_user_indexes_exist(self, mock_auth_db):
        """accounts and users should have their lookup indexes."""
        account_indexes = await mock_auth_db.accounts.index_information()
        user_indexes = await mock_auth_db.users.index_information()

        assert any("providerAccountId" in str(idx) for idx in account_indexes.values())
        assert any("userId" in str(idx) for idx in account_indexes.values())
        assert any("email" in str(idx) for idx in user_indexes.values())

    @pytest.mark.asyncio
    async def test_email_index_only_covers_string_emails(self):
        """users.email is unique over string emails only, so missing and null never collide."""
        from auth_adapter.database.registry import create_indexes

        collection = MagicMock()
        collection.create_index = AsyncMock()
        db = MagicMock()
        db.__getitem__.return_value = collection

        await create_indexes(db)

        collection.create_index.assert_any_call(
            "email",
            unique=True,
            partialFilterExpression={"email": {"$type": "string"}},
        )

    @pytest.mark.asyncio
    async def test_create_indexes_is_repeatable(self, mock_auth_db):
        """Running index creation again should not fail."""
        from auth_adapter.database.registry import create_indexes

        await create_indexes(mock_auth_db)

    @pytest.mark.asyncio
    async def test_adapter_ensure_indexes(self, adapter, mock_auth_db):
        """MongoDBAdapter.ensure_indexes delegates to create_indexes."""
        with patch("auth_adapter.adapter.create_indexes") as mock_create:
            async def _noop(db):
                return None
            mock_create.side_effect = _noop

            await adapter.ensure_indexes()

            mock_create.assert_called_once_with(mock_auth_db)
