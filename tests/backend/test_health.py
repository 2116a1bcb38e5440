"""
Tests for health check endpoints and the startup bootstrap.

These tests verify:
- Basic health endpoint returns 200
- Readiness check reports database and signing key status
- Startup publishes the signing key and fails hard when bootstrap fails
"""

import pytest
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from sysinfo.core.exceptions import ProvisionerFailure
from sysinfo.core.security import SigningKeyProvider
from sysinfo.dependencies.system_info import get_signing_keys


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""

    def test_health_endpoint_returns_200_when_api_running(self, client):
        """Basic health check should return 200 if API is up."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"


class TestReadinessEndpoint:
    """Tests for GET /health/ready endpoint."""

    def test_readiness_returns_healthy_after_bootstrap(self, client):
        """Readiness should be healthy with MongoDB up and the key published."""
        with patch("sysinfo.routers.health.get_mongo_client") as mock_mongo:
            mock_mongo_client = AsyncMock()
            mock_mongo_client.admin.command = AsyncMock(return_value={"ok": 1})
            mock_mongo.return_value = mock_mongo_client

            response = client.get("/health/ready")

            assert response.status_code == 200
            data = response.json()
            assert data["status"] == "healthy"
            assert data["checks"]["mongodb"] == "healthy"
            assert data["checks"]["signing_key"] == "healthy"

    def test_readiness_reports_mongodb_unhealthy_when_connection_fails(self, client):
        """Readiness should report MongoDB unhealthy when it fails."""
        with patch("sysinfo.routers.health.get_mongo_client") as mock_mongo:
            mock_mongo.side_effect = Exception("Connection refused")

            response = client.get("/health/ready")

            assert response.status_code == 200
            data = response.json()
            assert data["status"] == "degraded"
            assert "unhealthy" in data["checks"]["mongodb"]

    def test_readiness_reports_missing_signing_key(self, app, client):
        """Readiness should be degraded until the signing key is published."""
        app.dependency_overrides[get_signing_keys] = lambda: SigningKeyProvider()
        try:
            with patch("sysinfo.routers.health.get_mongo_client") as mock_mongo:
                mock_mongo_client = AsyncMock()
                mock_mongo_client.admin.command = AsyncMock(return_value={"ok": 1})
                mock_mongo.return_value = mock_mongo_client

                response = client.get("/health/ready")
        finally:
            app.dependency_overrides.clear()

        data = response.json()
        assert data["status"] == "degraded"
        assert "unhealthy" in data["checks"]["signing_key"]

    def test_readiness_response_includes_all_check_keys(self, client):
        """Readiness response should include all dependency checks."""
        with patch("sysinfo.routers.health.get_mongo_client") as mock_mongo:
            mock_mongo.side_effect = Exception("test")

            response = client.get("/health/ready")

            data = response.json()
            assert "checks" in data
            assert "api" in data["checks"]
            assert "mongodb" in data["checks"]
            assert "signing_key" in data["checks"]


class TestStartup:
    """Tests for the lifespan bootstrap."""

    def test_startup_publishes_install_id(self, app, client):
        """Startup should create the record and publish its install id."""
        service = app.state.system_info_service

        key = app.state.signing_keys.get()
        assert len(key) == 25
        assert service.signing_keys is app.state.signing_keys

    def test_root_endpoint(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "System Info API"

    def test_bootstrap_failure_aborts_startup(self, app, mock_async_mongo_client):
        """A failing bootstrap should prevent the app from starting."""
        async def get_mongo():
            return mock_async_mongo_client

        with patch("sysinfo.main.get_mongo_client", new=get_mongo), \
             patch(
                 "sysinfo.main.SystemInfoService.init",
                 new=AsyncMock(side_effect=ProvisionerFailure("dex rejected")),
             ):
            with pytest.raises(ProvisionerFailure):
                with TestClient(app):
                    pass
