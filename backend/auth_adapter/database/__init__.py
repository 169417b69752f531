"""
Database module - MongoDB connections, layout and indexes.
"""
from auth_adapter.database.connections import create_mongo_client, get_database
from auth_adapter.database.databases import auth_db
from auth_adapter.database.registry import create_indexes

__all__ = [
    "create_mongo_client",
    "get_database",
    "create_indexes",
    "auth_db",
]
