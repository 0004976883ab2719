"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. WARDEN_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent
        if parent == Path("/app"):
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. WARDEN_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("WARDEN_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Security (MUST be set - app fails without it)
    jwt_secret_key: SecretStr  # Symmetric key for signing issued tokens

    # Application
    app_name: str = "Warden"

    # Database (POSTGRES_ prefix)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "warden"
    database_dsn: str | None = None  # Full URL, takes precedence over POSTGRES_*
    database_pool_size: int = 10
    database_pool_timeout_seconds: float = 5.0

    # API (API_ prefix)
    api_debug: bool = False  # Serves /docs and /openapi.json

    # Token lifetimes
    jwt_expire_minutes: int = 60
    renewal_token_expire_days: int = 14

    # Renewal token generation / acceptance
    renewal_token_max_attempts: int = 8
    renewal_token_enforce_expiry: bool = False

    # Upper bound for a single login/refresh call
    auth_timeout_seconds: float = 5.0

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @field_validator("jwt_secret_key")
    @classmethod
    def _validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            msg = "JWT_SECRET_KEY cannot be empty"
            raise ValueError(msg)
        return v

    @field_validator(
        "jwt_expire_minutes",
        "renewal_token_expire_days",
        "renewal_token_max_attempts",
    )
    @classmethod
    def _validate_positive(cls, v: int) -> int:
        if v <= 0:
            msg = "must be a positive integer"
            raise ValueError(msg)
        return v

    # Computed properties
    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Construct the database URL from components."""
        if self.database_dsn:
            return self.database_dsn
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    JWT_SECRET_KEY must be provided via environment variables or .env file.
    """
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
