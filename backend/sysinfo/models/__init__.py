"""
Pydantic models for database documents and data structures.
"""
from sysinfo.models.base import Record
from sysinfo.models.user import User, DEFAULT_ADMIN_USER_NAME
from sysinfo.models.system_info import SystemInfo, StatisticInfo, LoginType
from sysinfo.models.dex import DexConfig, DexConnector, DexStaticClient

__all__ = [
    "Record",
    "User",
    "DEFAULT_ADMIN_USER_NAME",
    "SystemInfo",
    "StatisticInfo",
    "LoginType",
    "DexConfig",
    "DexConnector",
    "DexStaticClient",
]
