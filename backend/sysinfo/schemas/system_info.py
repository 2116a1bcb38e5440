"""
System info request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from sysinfo.models.system_info import LoginType


class SystemInfoRequest(BaseModel):
    """Update request for the system info record."""
    enable_collection: bool = Field(..., description="Telemetry opt-in")
    login_type: LoginType = Field(..., description="Requested login mode")
    vela_address: str = Field(
        default="",
        description="Public address of the platform, used for dex login",
    )


class SystemInfo(BaseModel):
    """Public fields of the system info record."""
    platform_id: str = Field(..., description="Install id")
    enable_collection: bool = Field(..., description="Telemetry opt-in")
    login_type: LoginType = Field(..., description="Login mode")
    install_time: datetime = Field(..., description="When the platform was installed")


class SystemVersion(BaseModel):
    """Build identifiers of the running server."""
    vela_version: str = Field(..., description="Release version")
    git_version: str = Field(..., description="Git revision")


class StatisticInfo(BaseModel):
    """Usage statistics as last aggregated."""
    app_count: int = Field(default=0, description="Number of applications")
    cluster_count: int = Field(default=0, description="Number of clusters")
    enable_addon_list: list[str] = Field(default_factory=list)
    component_definition_top_list: list[str] = Field(default_factory=list)
    trait_definition_top_list: list[str] = Field(default_factory=list)
    workflow_definition_top_list: list[str] = Field(default_factory=list)
    policy_definition_top_list: list[str] = Field(default_factory=list)
    update_time: Optional[datetime] = Field(None, description="Aggregation time")


class SystemInfoResponse(BaseModel):
    """System info view returned to the HTTP layer."""
    system_info: SystemInfo
    system_version: SystemVersion
    statistic_info: StatisticInfo = Field(default_factory=StatisticInfo)
