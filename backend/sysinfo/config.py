"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"

    # JWT Configuration (signing key is the install id, published at bootstrap)
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 30

    # System info
    install_id_length: int = 25

    # Federated login (Dex)
    default_dex_address: str = "http://velaux.com"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
