"""
System info model for the platform-wide singleton record.
"""
from enum import Enum
from typing import ClassVar, Optional

from pydantic import BaseModel, Field, field_validator

from sysinfo.database.databases import system_db
from sysinfo.models.base import Record, UTCDateTime


class LoginType(str, Enum):
    """Authentication mode of the platform."""
    LOCAL = "local"
    DEX = "dex"


class StatisticInfo(BaseModel):
    """
    Usage snapshot produced by the external aggregation job.

    Never computed here; carried through updates unchanged.
    """
    app_count: int = Field(default=0, description="Number of applications")
    cluster_count: int = Field(default=0, description="Number of clusters")
    enabled_addon: list[str] = Field(
        default_factory=list,
        description="Names of enabled addons",
    )
    top_k_comp_def: list[str] = Field(
        default_factory=list,
        description="Most used component definitions, most used first",
    )
    top_k_trait_def: list[str] = Field(
        default_factory=list,
        description="Most used trait definitions, most used first",
    )
    top_k_workflow_step_def: list[str] = Field(
        default_factory=list,
        description="Most used workflow step definitions, most used first",
    )
    top_k_policy_def: list[str] = Field(
        default_factory=list,
        description="Most used policy definitions, most used first",
    )
    update_time: Optional[UTCDateTime] = Field(
        None,
        description="When the aggregation job last refreshed the snapshot",
    )


class SystemInfo(Record):
    """
    System info document in system_db.system_info.

    Exactly one exists per deployment. ``install_id`` and ``create_time``
    are written once at creation and never change.
    """
    db_name: ClassVar[str] = system_db.DB_NAME
    collection_name: ClassVar[str] = system_db.Collections.SYSTEM_INFO
    primary_key: ClassVar[str] = "install_id"
    singleton: ClassVar[bool] = True

    install_id: str = Field(..., description="Random identifier of this install")
    enable_collection: bool = Field(
        default=True,
        description="Telemetry opt-in",
    )
    # Records written before login types existed have no value or ""
    login_type: Optional[LoginType] = Field(
        None,
        description="Authentication mode",
    )
    create_time: UTCDateTime = Field(..., description="Install time")
    update_time: Optional[UTCDateTime] = Field(
        None,
        description="Last update of the mutable fields",
    )
    statistic_info: StatisticInfo = Field(default_factory=StatisticInfo)

    @field_validator("login_type", mode="before")
    @classmethod
    def empty_login_type_is_unset(cls, value):
        return value or None
