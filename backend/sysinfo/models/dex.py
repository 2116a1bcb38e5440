"""
Dex federated login models.
"""
from typing import Any

from pydantic import BaseModel, Field

# Dex config values for the UI client
DEX_CLIENT_ID = "velaux"
DEX_CLIENT_NAME = "Vela UX"
DEX_CLIENT_SECRET = "velaux-secret"
DEX_WEB_HTTP = "0.0.0.0:5556"
DEX_STORAGE_TYPE = "memory"


class DexConnector(BaseModel):
    """An external identity provider endpoint (github, ldap, oidc, ...)."""
    type: str = Field(..., description="Connector type, e.g. github or ldap")
    id: str = Field(..., description="Connector id")
    name: str = Field(..., description="Display name")
    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Provider specific configuration",
    )


class DexStaticClient(BaseModel):
    """OAuth client registered with dex."""
    id: str
    name: str
    secret: str
    redirect_uris: list[str] = Field(default_factory=list)


class DexWeb(BaseModel):
    http: str = DEX_WEB_HTTP


class DexStorage(BaseModel):
    type: str = DEX_STORAGE_TYPE


class DexConfig(BaseModel):
    """Dex server configuration as provisioned for the platform."""
    issuer: str
    web: DexWeb = Field(default_factory=DexWeb)
    storage: DexStorage = Field(default_factory=DexStorage)
    static_clients: list[DexStaticClient] = Field(default_factory=list)
    connectors: list[DexConnector] = Field(default_factory=list)
    enable_password_db: bool = True

    @classmethod
    def default(cls, address: str) -> "DexConfig":
        """Initial configuration for a platform reachable at ``address``."""
        return cls(
            issuer=f"{address}/dex",
            static_clients=[
                DexStaticClient(
                    id=DEX_CLIENT_ID,
                    name=DEX_CLIENT_NAME,
                    secret=DEX_CLIENT_SECRET,
                    redirect_uris=[f"{address}/callback"],
                )
            ],
        )
