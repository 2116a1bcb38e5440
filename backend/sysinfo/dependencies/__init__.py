"""
Dependencies for dependency injection in routes.
"""
from sysinfo.dependencies.system_info import get_signing_keys, get_system_info_service

__all__ = [
    "get_signing_keys",
    "get_system_info_service",
]
