"""
Core Exceptions

Error kinds raised by the record store, the identity provisioner and the
system info service. Each carries a ``status_code`` hint so the HTTP layer
can translate it without knowing the service internals.
"""


class SystemInfoError(Exception):
    """Base class for all system info errors."""

    status_code: int = 500

    def __init__(self, message: str = "System info error"):
        self.message = message
        super().__init__(self.message)


class StoreUnavailable(SystemInfoError):
    """
    Raised when the record store cannot be reached or a driver call fails.

    Transient: surfaced unchanged, never retried internally.
    """

    status_code = 503

    def __init__(self, message: str = "Record store unavailable"):
        super().__init__(message)


class StoreConflict(SystemInfoError):
    """
    Raised when a write collides with an existing record.

    The usual cause is two concurrent first accesses both trying to create
    the system info singleton. Callers may retry the whole operation.
    """

    status_code = 409

    def __init__(self, message: str = "Record already exists"):
        super().__init__(message)


class RecordNotFound(SystemInfoError):
    """Raised when a keyed lookup finds no record."""

    status_code = 404

    def __init__(self, message: str = "Record not found"):
        super().__init__(message)


class EmptyAdminEmail(SystemInfoError):
    """Raised when switching to federated login while the admin has no email."""

    status_code = 400

    def __init__(
        self,
        message: str = "The email of the administrator must be set before switching to dex login",
    ):
        super().__init__(message)


class NoConnector(SystemInfoError):
    """Raised when switching to federated login with no connector configured."""

    status_code = 400

    def __init__(
        self,
        message: str = "At least one dex connector must be configured before switching to dex login",
    ):
        super().__init__(message)


class ProvisionerFailure(SystemInfoError):
    """Raised when the identity provisioner rejects or fails to apply a config."""

    status_code = 502

    def __init__(self, message: str = "Failed to apply the dex configuration"):
        super().__init__(message)


class SigningKeyNotSet(SystemInfoError):
    """Raised when a token is signed or verified before bootstrap published the key."""

    status_code = 503

    def __init__(self, message: str = "Signing key has not been initialized"):
        super().__init__(message)
