"""
Identity provisioner for federated (dex) login.

Keeps the dex server configuration in system_db.dex_config and discovers
the connectors registered in system_db.dex_connectors.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from sysinfo.core.exceptions import ProvisionerFailure
from sysinfo.database.databases import system_db
from sysinfo.models.dex import DexConfig, DexConnector

logger = logging.getLogger(__name__)

DEX_CONFIG_ID = "dex"


class IdentityProvisioner:
    """Service for the dex federated login configuration."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with system database."""
        self.db = db
        self.config_collection = db[system_db.Collections.DEX_CONFIG]
        self.connectors_collection = db[system_db.Collections.DEX_CONNECTORS]

    async def get_connectors(self) -> list[DexConnector]:
        """
        Discover the configured dex connectors.

        Returns:
            Connectors ordered by name, possibly empty

        Raises:
            ProvisionerFailure: If the connectors cannot be read
        """
        try:
            cursor = self.connectors_collection.find({}).sort("name", 1)
            docs = await cursor.to_list(length=None)
            return [
                DexConnector(**{k: v for k, v in doc.items() if k != "_id"})
                for doc in docs
            ]
        except (PyMongoError, ValidationError) as e:
            raise ProvisionerFailure(f"Failed to load dex connectors: {e}") from e

    async def get_config(self) -> Optional[DexConfig]:
        """Return the stored dex config, or None if none was provisioned."""
        try:
            doc = await self.config_collection.find_one({"_id": DEX_CONFIG_ID})
        except PyMongoError as e:
            raise ProvisionerFailure(f"Failed to load dex config: {e}") from e
        if doc is None:
            return None
        doc.pop("_id")
        return DexConfig(**doc)

    async def establish_default_config(self, address: str) -> DexConfig:
        """
        Create the initial dex config unless one already exists.

        Args:
            address: Public address the platform is served from

        Returns:
            The effective dex config (existing or newly created)

        Raises:
            ProvisionerFailure: If the config cannot be read or written
        """
        default = DexConfig.default(address)
        try:
            await self.config_collection.update_one(
                {"_id": DEX_CONFIG_ID},
                {"$setOnInsert": default.model_dump()},
                upsert=True,
            )
        except PyMongoError as e:
            raise ProvisionerFailure(f"Failed to initialize dex config: {e}") from e

        config = await self.get_config()
        if config is None:
            raise ProvisionerFailure("Dex config missing after initialization")
        return config

    async def apply_federated_config(
        self,
        address: str,
        connectors: list[DexConnector],
    ) -> DexConfig:
        """
        Point dex at ``address`` and replace its connectors.

        Reapplying the same address and connectors leaves the config
        unchanged. An empty address keeps the current issuer.

        Raises:
            ProvisionerFailure: If the config cannot be read or written
        """
        config = await self.get_config()
        if config is None:
            config = await self.establish_default_config(address)

        if address:
            config.issuer = f"{address}/dex"
            if config.static_clients:
                config.static_clients[0].redirect_uris = [f"{address}/callback"]
        config.connectors = list(connectors)

        try:
            await self.config_collection.replace_one(
                {"_id": DEX_CONFIG_ID},
                config.model_dump(),
                upsert=True,
            )
        except PyMongoError as e:
            raise ProvisionerFailure(f"Failed to update dex config: {e}") from e

        logger.info(
            f"Applied dex config: issuer={config.issuer} connectors={len(config.connectors)}"
        )
        return config
