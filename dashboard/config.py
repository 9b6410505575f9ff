# dashboard/config.py

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = Field(default="Acme Invoice Dashboard")
    database_url: str = Field(default="sqlite:///db.sqlite")
    # echo=True if you want to see SQL printed in the terminal
    echo_sql: bool = Field(default=False)
    # Zone used to stamp the issue date of new invoices
    timezone: str = Field(default="UTC")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="DASHBOARD_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
