"""
System database configuration.
Platform-wide singleton records and federated login configuration.
"""

DB_NAME = "system_db"


class Collections:
    """Collection names in system_db."""
    SYSTEM_INFO = "system_info"
    DEX_CONFIG = "dex_config"
    DEX_CONNECTORS = "dex_connectors"
