"""
Dependencies exposing the bootstrapped system info state to routes.
"""
from fastapi import Request

from sysinfo.core.security import SigningKeyProvider
from sysinfo.services.system_info_service import SystemInfoService


def get_signing_keys(request: Request) -> SigningKeyProvider:
    """Signing key provider published by the startup bootstrap."""
    return request.app.state.signing_keys


def get_system_info_service(request: Request) -> SystemInfoService:
    """System info service created at startup."""
    return request.app.state.system_info_service
