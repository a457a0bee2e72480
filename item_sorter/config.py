"""
Configuration settings for item-sorter.

Uses Pydantic Settings to load environment variables for the primary and
database resources, the Postgres connection, logging, and rendering output.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    db_host: str = Field("localhost", alias="DB_HOST")
    db_port: int = Field(5432, alias="DB_PORT")
    db_user: str = Field("postgres", alias="DB_USER")
    db_password: str = Field("postgres", alias="DB_PASSWORD")
    db_name: str = Field("item_sorter", alias="DB_NAME")
    db_documents_table: str = Field("item_documents", alias="DB_DOCUMENTS_TABLE")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Resources
    primary_resource: str = Field("data/data.json", alias="PRIMARY_RESOURCE")
    db_resource: str = Field("data.json", alias="DB_RESOURCE")
    http_timeout_seconds: float = Field(10.0, alias="HTTP_TIMEOUT_SECONDS")

    # Rendering
    output_format: Literal["console", "html"] = Field("console", alias="OUTPUT_FORMAT")
    html_output: str = Field("results/items.html", alias="HTML_OUTPUT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
