"""
System Info Backend - FastAPI Application

Control-plane service holding the platform-wide system info record:
install identity, telemetry opt-in, login mode and usage statistics.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sysinfo.config import get_settings
from sysinfo.core.security import SigningKeyProvider
from sysinfo.database.connections import get_mongo_client, close_connections
from sysinfo.database.databases import system_db
from sysinfo.database.datastore import DataStore
from sysinfo.database.registry import create_indexes
from sysinfo.routers import health
from sysinfo.services.identity_provisioner import IdentityProvisioner
from sysinfo.services.system_info_service import SystemInfoService

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("sysinfo")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Initialize database connection
    - Create indexes
    - Bootstrap the system info record and publish the signing key

    Shutdown:
    - Close the database connection
    """
    logger.info("Starting up System Info Backend...")

    client = await get_mongo_client()
    await create_indexes(client)
    logger.info("Database indexes created")

    service = SystemInfoService(
        store=DataStore(client),
        provisioner=IdentityProvisioner(client[system_db.DB_NAME]),
        signing_keys=app.state.signing_keys,
    )
    # Failure here aborts startup: nothing may be served without a signing key
    await service.init()
    app.state.system_info_service = service

    yield

    # Shutdown
    logger.info("Shutting down System Info Backend...")
    await close_connections()
    logger.info("Database connection closed")


# Create FastAPI application
app = FastAPI(
    title="System Info API",
    description="""
## Platform System Info

Holds the single system info record of a platform deployment.

### Features
- **Install identity**: random id generated on first start, used as token signing key
- **Telemetry**: opt-in flag for usage collection
- **Login mode**: local accounts or federated login through dex
- **Statistics**: pre-aggregated usage snapshot
    """,
    version="0.1.0",
    lifespan=lifespan,
)
app.state.signing_keys = SigningKeyProvider()

# Include routers
app.include_router(health.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "System Info API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
