"""
Configuration management for relay-payload
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Client mutation ids
    client_mutation_id_length: int = Field(default=32, ge=1)

    # Logging
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "RELAY_PAYLOAD_"
        case_sensitive = False


# Global settings instance
settings = Settings()
