"""
Database module - MongoDB connection, database definitions and record store.
"""
from sysinfo.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from sysinfo.database.databases import auth_db, system_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "auth_db",
    "system_db",
]
