"""
Configuration settings for the Solr indexer.

Uses Pydantic Settings to load environment variables for the source database,
the Solr endpoint, logging, and timeouts. The seven service keys default to
empty strings so that commands like `info` work without a full environment;
they are validated when a job actually runs.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Solr
    index_endpoint: str = Field("", alias="INDEX_ENDPOINT")

    # Source database
    source_dsn: str = Field("", alias="SOURCE_DSN")
    source_user: str = Field("", alias="SOURCE_USER")
    source_password: str = Field("", alias="SOURCE_PASSWORD")
    source_tb: str = Field("", alias="SOURCE_TB")
    source_fields: str = Field("", alias="SOURCE_FIELDS")
    source_id_field: str = Field("", alias="SOURCE_ID_FIELD")

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")
    debug: bool = Field(False, alias="DEBUG")

    # Timeouts
    http_timeout_seconds: float = Field(30.0, alias="HTTP_TIMEOUT_SECONDS")
    db_connect_timeout_seconds: int = Field(10, alias="DB_CONNECT_TIMEOUT_SECONDS")
    db_statement_timeout_ms: int = Field(30_000, alias="DB_STATEMENT_TIMEOUT_MS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def service_config(self) -> Dict[str, str]:
        """
        Return the per-job service configuration mapping handed to the driver.
        """
        return {
            "index_endpoint": self.index_endpoint,
            "source_dsn": self.source_dsn,
            "source_user": self.source_user,
            "source_password": self.source_password,
            "source_tb": self.source_tb,
            "source_fields": self.source_fields,
            "source_id_field": self.source_id_field,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
