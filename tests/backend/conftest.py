"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with the record store, the
identity provisioner and the system info service wired to the mock
MongoDB.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Store and Service Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def datastore(mock_async_mongo_client, mock_system_db):
    """Record store over the mock MongoDB, with indexes created."""
    from sysinfo.database.datastore import DataStore

    return DataStore(mock_async_mongo_client)


@pytest.fixture
def provisioner(mock_system_db):
    """Identity provisioner over the mock system_db."""
    from sysinfo.services.identity_provisioner import IdentityProvisioner

    return IdentityProvisioner(mock_system_db)


@pytest.fixture
def signing_keys():
    """Empty signing key provider."""
    from sysinfo.core.security import SigningKeyProvider

    return SigningKeyProvider()


@pytest.fixture
def system_info_service(datastore, provisioner, signing_keys):
    """System info service wired to the mock database."""
    from sysinfo.services.system_info_service import SystemInfoService

    return SystemInfoService(
        store=datastore,
        provisioner=provisioner,
        signing_keys=signing_keys,
    )


@pytest.fixture
def mock_provisioner():
    """
    Create a fully mocked IdentityProvisioner.

    All methods are AsyncMock, allowing you to configure return values:

        mock_provisioner.get_connectors.return_value = [...]
    """
    service = MagicMock()
    service.get_connectors = AsyncMock(return_value=[])
    service.get_config = AsyncMock(return_value=None)
    service.establish_default_config = AsyncMock()
    service.apply_federated_config = AsyncMock()
    return service


@pytest.fixture
def service_with_mock_provisioner(datastore, mock_provisioner, signing_keys):
    """System info service whose provisioner calls are recorded."""
    from sysinfo.services.system_info_service import SystemInfoService

    return SystemInfoService(
        store=datastore,
        provisioner=mock_provisioner,
        signing_keys=signing_keys,
    )


# =============================================================================
# Seed Data Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def seeded_admin(mock_auth_db, admin_user_doc):
    """Insert the administrator account."""
    await mock_auth_db.users.insert_one(admin_user_doc)
    return admin_user_doc


@pytest_asyncio.fixture
async def seeded_connectors(mock_system_db, connector_docs):
    """Insert the dex connectors."""
    await mock_system_db.dex_connectors.insert_many([dict(d) for d in connector_docs])
    return connector_docs


@pytest_asyncio.fixture
async def seeded_legacy_info(mock_system_db, legacy_system_info_doc):
    """Insert a system info document without a login type."""
    await mock_system_db.system_info.insert_one(dict(legacy_system_info_doc))
    return legacy_system_info_doc
