"""
Vitrine settings.

Resolution order, first hit wins:
1. Process environment (including values loaded from .env.<ENV>)
2. config/<ENV>.yaml
3. config/default.yaml
4. Field defaults below
"""

import os
from pathlib import Path
from typing import Any, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[3]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
SAMESITE_POLICIES = ("lax", "strict", "none")


class Settings(BaseSettings):
    """
    Runtime configuration for the Vitrine API.

    DATABASE_URL and both token secrets have no default; they are meant to
    come from the environment, never from the YAML files.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Vitrine"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # API Server
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000, ge=1024, le=65535)
    API_RELOAD: bool = Field(default=False)

    # CORS Configuration
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Database (from environment - REQUIRED in production)
    DATABASE_URL: str = Field(..., description="Database connection URL")
    DATABASE_ECHO: bool = Field(default=False)

    # Session tokens (from environment - REQUIRED in production)
    ACCESS_TOKEN_SECRET: str = Field(..., description="Access token signing key")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=1440, ge=1)
    REFRESH_TOKEN_SECRET: str = Field(..., description="Refresh token signing key")
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(default=10, ge=1)
    JWT_ALGORITHM: str = Field(default="HS256")

    # Credentials
    PASSWORD_HASH_ROUNDS: int = Field(default=10, ge=4, le=31)

    # Cookies
    COOKIE_SECURE: bool = Field(default=True)
    COOKIE_SAMESITE: str = Field(default="lax")

    # Uploads
    UPLOAD_TEMP_DIR: str = Field(
        default="public/temp",
        description="Directory where multipart uploads are staged",
    )

    # Object storage (S3-compatible)
    S3_BUCKET_NAME: str = Field(default="vitrine-media")
    S3_REGION: str = Field(default="us-east-1")
    S3_ENDPOINT_URL: Optional[str] = Field(
        default=None,
        description="Custom endpoint (MinIO, LocalStack, R2)",
    )
    S3_ACCESS_KEY_ID: Optional[str] = Field(default=None)
    S3_SECRET_ACCESS_KEY: Optional[str] = Field(default=None)
    MEDIA_PUBLIC_BASE_URL: Optional[str] = Field(
        default=None,
        description="Public URL prefix for stored objects",
    )
    MEDIA_KEY_PREFIX: str = Field(default="media")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Observability - Metrics
    METRICS_ENABLED: bool = Field(
        default=True,
        description="Expose Prometheus metrics on /metrics",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any case, store upper-case."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid LOG_LEVEL {v!r}, expected one of {LOG_LEVELS}")
        return level

    @field_validator("COOKIE_SAMESITE")
    @classmethod
    def validate_cookie_samesite(cls, v: str) -> str:
        """Accept any case, store lower-case."""
        policy = v.lower()
        if policy not in SAMESITE_POLICIES:
            raise ValueError(
                f"Invalid COOKIE_SAMESITE {v!r}, expected one of {SAMESITE_POLICIES}"
            )
        return policy

    @model_validator(mode="after")
    def check_token_secrets(self) -> "Settings":
        """Access and refresh tokens must not share a signing key."""
        if self.ACCESS_TOKEN_SECRET == self.REFRESH_TOKEN_SECRET:
            raise ValueError("ACCESS_TOKEN_SECRET and REFRESH_TOKEN_SECRET must differ")
        return self

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"


def _read_yaml(path: Path) -> dict[str, Any]:
    """Mapping from a YAML file; missing or empty files give {}."""
    if not path.is_file():
        return {}
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(
    env: Optional[str] = None,
    config_dir: Optional[Path] = None,
) -> Settings:
    """
    Build Settings for an environment.

    `.env.<env>` is loaded into the process environment first (existing
    variables win). YAML values are then passed as init kwargs, except
    for keys the environment already defines.

    Args:
        env: Environment name, defaults to $ENV or "production"
        config_dir: Directory holding the YAML files

    Returns:
        Settings instance

    Raises:
        pydantic.ValidationError: If a required key is missing or invalid
    """
    environment = env or os.getenv("ENV", "production")
    config_dir = config_dir or PROJECT_ROOT / "config"

    env_file = PROJECT_ROOT / f".env.{environment}"
    if env_file.is_file():
        load_dotenv(env_file, override=False)

    values = _read_yaml(config_dir / "default.yaml")
    values.update(_read_yaml(config_dir / f"{environment}.yaml"))
    values = {key: value for key, value in values.items() if key not in os.environ}

    return Settings(**values)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Process-wide settings, loaded on first use."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Install explicit settings (app factory and tests)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads."""
    global _settings
    _settings = None
