"""
Core module - Error kinds, signing key state and token utilities.
"""
from sysinfo.core.exceptions import (
    SystemInfoError,
    StoreUnavailable,
    StoreConflict,
    RecordNotFound,
    EmptyAdminEmail,
    NoConnector,
    ProvisionerFailure,
    SigningKeyNotSet,
)
from sysinfo.core.security import (
    SigningKeyProvider,
    create_access_token,
    decode_token,
)

__all__ = [
    "SystemInfoError",
    "StoreUnavailable",
    "StoreConflict",
    "RecordNotFound",
    "EmptyAdminEmail",
    "NoConnector",
    "ProvisionerFailure",
    "SigningKeyNotSet",
    "SigningKeyProvider",
    "create_access_token",
    "decode_token",
]
