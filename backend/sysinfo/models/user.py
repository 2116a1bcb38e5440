"""
User model for authentication database.
"""
from typing import ClassVar, Optional

from pydantic import Field

from sysinfo.database.databases import auth_db
from sysinfo.models.base import Record, UTCDateTime, utc_now

# Name of the administrator account created at install time
DEFAULT_ADMIN_USER_NAME = "admin"


class User(Record):
    """
    User document model for MongoDB auth_db.users collection.
    """
    db_name: ClassVar[str] = auth_db.DB_NAME
    collection_name: ClassVar[str] = auth_db.Collections.USERS
    primary_key: ClassVar[str] = "name"

    name: str = Field(..., description="Unique user name")
    email: str = Field(default="", description="Email address, may be unset")
    alias: str = Field(default="", description="Display name")
    disabled: bool = Field(default=False, description="Account disabled")
    create_time: UTCDateTime = Field(
        default_factory=utc_now,
        description="Account creation timestamp"
    )
    last_login_time: Optional[UTCDateTime] = Field(
        None,
        description="Last successful login"
    )
