"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from chunkproc.core.exceptions import ConfigurationError


class DynamoDBConfig(BaseSettings):
    """DynamoDB state store configuration."""

    model_config = {"env_prefix": "CHUNKPROC_DYNAMO_"}

    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class S3Config(BaseSettings):
    """S3 object lister configuration."""

    model_config = {"env_prefix": "CHUNKPROC_S3_"}

    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override
    page_size: int = Field(default=1000, ge=1, le=1000)


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CHUNKPROC_", "populate_by_name": True}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Maximum number of items returned and recorded per invocation.
    chunk_size: int = Field(
        gt=0,
        validation_alias=AliasChoices("CHUNK_SIZE", "CHUNKPROC_CHUNK_SIZE", "chunk_size"),
    )

    dynamodb: DynamoDBConfig = DynamoDBConfig()
    s3: S3Config = S3Config()

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def load_settings(**overrides: Any) -> AppSettings:
    """Build AppSettings from the environment, failing fast on bad values."""
    try:
        return AppSettings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid CHUNK_SIZE or settings: {exc}") from exc
