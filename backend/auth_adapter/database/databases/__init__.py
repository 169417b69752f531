"""
Database definitions and collection constants.
"""
from auth_adapter.database.databases import auth_db

__all__ = ["auth_db"]
