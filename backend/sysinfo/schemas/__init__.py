"""
Request and response schemas for the system info service.
"""
from sysinfo.schemas.system_info import (
    SystemInfoRequest,
    SystemInfoResponse,
    SystemInfo,
    SystemVersion,
    StatisticInfo,
)

__all__ = [
    "SystemInfoRequest",
    "SystemInfoResponse",
    "SystemInfo",
    "SystemVersion",
    "StatisticInfo",
]
