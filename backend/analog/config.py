"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_server_selection_timeout_ms: int = 5000

    # Logging
    log_level: str = "INFO"

    # Run the bootstrap when the API starts
    bootstrap_on_startup: bool = True

    # Seed watch target inserted by the bootstrap
    seed_chain_endpoint: str = "ws://127.0.0.1:8545/"
    seed_contract_address: str = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
    seed_event_type: str = "ddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
