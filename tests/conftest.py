"""
Global test fixtures for the System Info backend.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Admin user and connector documents
- Pre-existing system info documents
- FastAPI test clients running the real lifespan against the mock DB
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_system_db(mock_async_mongo_client):
    """Provide mock system_db database with the real indexes."""
    from sysinfo.database.registry import create_indexes

    await create_indexes(mock_async_mongo_client)
    yield mock_async_mongo_client["system_db"]


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth_db database."""
    yield mock_async_mongo_client["auth_db"]


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def admin_user_doc() -> dict:
    """The administrator account as stored in auth_db.users."""
    return {
        "_id": "admin",
        "email": "admin@example.com",
        "alias": "Administrator",
        "disabled": False,
        "create_time": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }


@pytest.fixture
def connector_docs() -> list[dict]:
    """Two dex connectors as stored in system_db.dex_connectors."""
    return [
        {
            "_id": "ldap",
            "type": "ldap",
            "id": "ldap",
            "name": "LDAP",
            "config": {"host": "ldap.example.com:636"},
        },
        {
            "_id": "github",
            "type": "github",
            "id": "github",
            "name": "GitHub",
            "config": {"clientID": "abc", "clientSecret": "def"},
        },
    ]


@pytest.fixture
def legacy_system_info_doc() -> dict:
    """A system info document written before login types existed."""
    return {
        "_id": "legacyinstall0001",
        "enable_collection": True,
        "create_time": datetime(2023, 6, 1, 12, 0, 0, tzinfo=timezone.utc),
        "update_time": None,
        "statistic_info": {
            "app_count": 12,
            "cluster_count": 3,
            "enabled_addon": ["fluxcd", "velaux"],
            "top_k_comp_def": ["webservice", "worker"],
            "top_k_trait_def": ["scaler"],
            "top_k_workflow_step_def": ["deploy"],
            "top_k_policy_def": ["topology", "override"],
            "update_time": datetime(2023, 6, 2, 0, 0, 0, tzinfo=timezone.utc),
        },
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    Create FastAPI app for testing.

    Note: This imports the actual app and should be used with mocked
    database connections.
    """
    from sysinfo.main import app
    return app


@pytest.fixture
def client(app, mock_async_mongo_client) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    The lifespan runs against the mock MongoDB, so the system info
    bootstrap happens for real.
    """
    async def get_mongo():
        return mock_async_mongo_client

    async def close():
        return None

    with patch("sysinfo.main.get_mongo_client", new=get_mongo), \
         patch("sysinfo.main.close_connections", new=close):
        with TestClient(app) as c:
            yield c
