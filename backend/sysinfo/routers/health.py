"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, Depends, status

from sysinfo.core.security import SigningKeyProvider
from sysinfo.database.connections import get_mongo_client
from sysinfo.dependencies.system_info import get_signing_keys

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check(
    signing_keys: SigningKeyProvider = Depends(get_signing_keys),
):
    """
    Readiness check that verifies the database connection and bootstrap.
    Returns 200 with status "degraded" if MongoDB is unreachable or the
    signing key has not been published.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
        "signing_key": "unknown",
    }

    # Check MongoDB
    try:
        client = await get_mongo_client()
        await client.admin.command("ping")
        checks["mongodb"] = "healthy"
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {str(e)}"

    # Check bootstrap
    checks["signing_key"] = "healthy" if signing_keys.is_set else "unhealthy: not initialized"

    # Overall status
    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
