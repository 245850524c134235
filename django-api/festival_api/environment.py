"""
Deployment settings loaded from environment variables.

Environment Variables:
    DJANGO_SECRET_KEY: Secret key for signing (insecure development default)
    DJANGO_DEBUG: Enable debug mode (default: False)
    DJANGO_ALLOWED_HOSTS: Comma-separated host names (default: localhost,127.0.0.1,testserver)
    DATABASE_ENGINE: Django database backend (default: sqlite3)
    DATABASE_NAME: Database name, or file path for SQLite (default: db.sqlite3 in the project)
    DATABASE_USER, DATABASE_PASSWORD, DATABASE_HOST, DATABASE_PORT: Connection details
    EVENTS_LOG_LEVEL: Level of the events logger (default: INFO)
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentSettings(BaseSettings):
    """Typed view of the process environment."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    secret_key: str = Field(
        default="django-insecure-festival-events-dev-key",
        validation_alias="DJANGO_SECRET_KEY",
    )
    debug: bool = Field(default=False, validation_alias="DJANGO_DEBUG")
    allowed_hosts: str = Field(
        default="localhost,127.0.0.1,testserver",
        validation_alias="DJANGO_ALLOWED_HOSTS",
        description="Comma-separated host names served by this instance",
    )

    database_engine: str = Field(
        default="django.db.backends.sqlite3",
        validation_alias="DATABASE_ENGINE",
    )
    database_name: str = Field(
        default="",
        validation_alias="DATABASE_NAME",
        description="Empty means the project-local SQLite file",
    )
    database_user: str = Field(default="", validation_alias="DATABASE_USER")
    database_password: str = Field(default="", validation_alias="DATABASE_PASSWORD")
    database_host: str = Field(default="", validation_alias="DATABASE_HOST")
    database_port: str = Field(default="", validation_alias="DATABASE_PORT")

    events_log_level: str = Field(default="INFO", validation_alias="EVENTS_LOG_LEVEL")

    @field_validator("events_log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"EVENTS_LOG_LEVEL must be a logging level name, got {v!r}")
        return level

    @property
    def allowed_hosts_list(self) -> list[str]:
        """Allowed hosts as a list, blanks dropped."""
        return [host.strip() for host in self.allowed_hosts.split(",") if host.strip()]
