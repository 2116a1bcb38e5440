"""
Index management.
Ensures the collections used here are indexed on startup.
"""
from motor.motor_asyncio import AsyncIOMotorClient

from sysinfo.database.databases import auth_db, system_db
from sysinfo.database.datastore import SINGLETON_FIELD


async def create_indexes(client: AsyncIOMotorClient) -> None:
    """Create necessary indexes for all databases."""

    # System DB indexes
    system = client[system_db.DB_NAME]
    # At most one system info document may carry the singleton marker;
    # a second concurrent insert fails with a duplicate key error.
    await system[system_db.Collections.SYSTEM_INFO].create_index(
        SINGLETON_FIELD, unique=True
    )
    await system[system_db.Collections.DEX_CONNECTORS].create_index("name")

    # Auth DB indexes
    auth_users = client[auth_db.DB_NAME][auth_db.Collections.USERS]
    await auth_users.create_index("email")
