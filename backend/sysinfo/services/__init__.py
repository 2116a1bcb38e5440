"""
Service layer for business logic.
"""
from sysinfo.services.identity_provisioner import IdentityProvisioner
from sysinfo.services.system_info_service import SystemInfoService

__all__ = [
    "IdentityProvisioner",
    "SystemInfoService",
]
