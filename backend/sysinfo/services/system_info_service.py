"""
System info service.

Owns the platform-wide system info singleton: get-or-create on first
access, the read view, guarded updates of the login mode and the startup
bootstrap that publishes the install id as token signing key.
"""
import logging
import secrets
import string

from sysinfo import version
from sysinfo.config import get_settings
from sysinfo.core.exceptions import EmptyAdminEmail, NoConnector
from sysinfo.core.security import SigningKeyProvider
from sysinfo.database.datastore import DataStore
from sysinfo.models.base import utc_now
from sysinfo.models.system_info import LoginType, SystemInfo
from sysinfo.models.user import DEFAULT_ADMIN_USER_NAME, User
from sysinfo.schemas.system_info import (
    StatisticInfo as StatisticInfoView,
    SystemInfo as SystemInfoView,
    SystemInfoRequest,
    SystemInfoResponse,
    SystemVersion,
)
from sysinfo.services.identity_provisioner import IdentityProvisioner

logger = logging.getLogger(__name__)

INSTALL_ID_ALPHABET = string.ascii_lowercase + string.digits
# 25 characters of a 36 letter alphabet carry just over 128 bits
MIN_INSTALL_ID_LENGTH = 25


def generate_install_id(length: int = MIN_INSTALL_ID_LENGTH) -> str:
    """Random lowercase alphanumeric install id."""
    length = max(length, MIN_INSTALL_ID_LENGTH)
    return "".join(secrets.choice(INSTALL_ID_ALPHABET) for _ in range(length))


def system_version() -> SystemVersion:
    return SystemVersion(
        vela_version=version.VELA_VERSION,
        git_version=version.GIT_REVISION,
    )


def to_view(info: SystemInfo) -> SystemInfoView:
    return SystemInfoView(
        platform_id=info.install_id,
        enable_collection=info.enable_collection,
        login_type=info.login_type or LoginType.LOCAL,
        install_time=info.create_time,
    )


class SystemInfoService:
    """Service for the system info singleton."""

    def __init__(
        self,
        store: DataStore,
        provisioner: IdentityProvisioner,
        signing_keys: SigningKeyProvider,
    ):
        """Initialize with the record store and its collaborators."""
        self.store = store
        self.provisioner = provisioner
        self.signing_keys = signing_keys
        self.settings = get_settings()

    async def get(self) -> SystemInfo:
        """
        Get the system info record, creating it on first access.

        A record stored without a login type is returned as local login;
        the stored document is left as is.

        Returns:
            The system info record

        Raises:
            StoreUnavailable: If the store cannot be read or written
            StoreConflict: If another caller created the record concurrently
        """
        entities = await self.store.list(SystemInfo)
        if entities:
            info = entities[0]
            if not info.login_type:
                info.login_type = LoginType.LOCAL
            return info

        info = SystemInfo(
            install_id=generate_install_id(self.settings.install_id_length),
            enable_collection=True,
            login_type=LoginType.LOCAL,
            create_time=utc_now(),
        )
        await self.store.add(info)
        logger.info(f"Created system info record {info.install_id}")
        return info

    async def get_system_info(self) -> SystemInfoResponse:
        """
        Get the system info view with build version and usage statistics.

        Raises:
            StoreUnavailable: If the store cannot be read or written
            StoreConflict: If another caller created the record concurrently
        """
        info = await self.get()
        stats = info.statistic_info
        return SystemInfoResponse(
            system_info=to_view(info),
            system_version=system_version(),
            statistic_info=StatisticInfoView(
                app_count=stats.app_count,
                cluster_count=stats.cluster_count,
                enable_addon_list=list(stats.enabled_addon),
                component_definition_top_list=list(stats.top_k_comp_def),
                trait_definition_top_list=list(stats.top_k_trait_def),
                workflow_definition_top_list=list(stats.top_k_workflow_step_def),
                policy_definition_top_list=list(stats.top_k_policy_def),
                update_time=stats.update_time,
            ),
        )

    async def update_system_info(self, request: SystemInfoRequest) -> SystemInfoResponse:
        """
        Update the telemetry flag and login mode.

        Switching to dex login requires the admin account to have an email
        and at least one connector; the dex config is applied before the
        record is written. Switching back to local login leaves the dex
        config in place.

        Args:
            request: Requested telemetry flag, login type and public address

        Returns:
            SystemInfoResponse whose install time is the original create time

        Raises:
            RecordNotFound: If the admin account does not exist
            EmptyAdminEmail: If the admin account has no email
            NoConnector: If no dex connector is configured
            ProvisionerFailure: If the dex config cannot be applied
            StoreUnavailable: If the store cannot be read or written
        """
        info = await self.get()
        modified = SystemInfo(
            install_id=info.install_id,
            enable_collection=request.enable_collection,
            login_type=request.login_type,
            create_time=info.create_time,
            update_time=utc_now(),
            statistic_info=info.statistic_info,
        )

        if request.login_type == LoginType.DEX:
            admin = await self.store.get(User(name=DEFAULT_ADMIN_USER_NAME))
            if not admin.email:
                raise EmptyAdminEmail()
            connectors = await self.provisioner.get_connectors()
            if not connectors:
                raise NoConnector()
            await self.provisioner.apply_federated_config(request.vela_address, connectors)

        await self.store.put(modified)
        if request.login_type != info.login_type:
            logger.info(
                f"Login type changed from {LoginType(info.login_type).value} "
                f"to {request.login_type.value}"
            )

        return SystemInfoResponse(
            system_info=SystemInfoView(
                platform_id=modified.install_id,
                enable_collection=modified.enable_collection,
                login_type=modified.login_type,
                install_time=info.create_time,
            ),
            system_version=system_version(),
        )

    async def init(self) -> None:
        """
        Bootstrap at startup.

        Ensures the record exists, publishes its install id as the token
        signing key and provisions the default dex config.

        Raises:
            Any store or provisioner error; startup must not continue.
        """
        info = await self.get()
        self.signing_keys.set(info.install_id)
        await self.provisioner.establish_default_config(self.settings.default_dex_address)
        logger.info("System info initialized")
