"""
Database definitions and collection constants.
"""
from sysinfo.database.databases import auth_db, system_db

__all__ = ["auth_db", "system_db"]
