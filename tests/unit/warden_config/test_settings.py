"""Unit tests for Settings loading and validation."""

import pytest
from pydantic import SecretStr, ValidationError

from warden_config.settings import Settings, clear_settings_cache, get_settings


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self):
        settings = Settings(jwt_secret_key=SecretStr("secret"))

        assert settings.jwt_expire_minutes == 60
        assert settings.renewal_token_expire_days == 14
        assert settings.renewal_token_max_attempts == 8
        assert settings.renewal_token_enforce_expiry is False
        assert settings.auth_timeout_seconds == 5.0

    def test_missing_secret_raises(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET_KEY", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_empty_secret_raises(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            Settings(jwt_secret_key=SecretStr(""))

    @pytest.mark.parametrize(
        "field",
        ["jwt_expire_minutes", "renewal_token_expire_days", "renewal_token_max_attempts"],
    )
    def test_non_positive_values_raise(self, field):
        with pytest.raises(ValidationError, match="positive"):
            Settings(jwt_secret_key=SecretStr("secret"), **{field: 0})

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "from-env")
        monkeypatch.setenv("JWT_EXPIRE_MINUTES", "15")
        monkeypatch.setenv("RENEWAL_TOKEN_ENFORCE_EXPIRY", "true")

        settings = Settings()

        assert settings.jwt_secret_key.get_secret_value() == "from-env"
        assert settings.jwt_expire_minutes == 15
        assert settings.renewal_token_enforce_expiry is True

    def test_database_url_from_components(self):
        settings = Settings(
            jwt_secret_key=SecretStr("secret"),
            postgres_host="db",
            postgres_port=5433,
            postgres_user="warden",
            postgres_password=SecretStr("pw"),
            postgres_db="tokens",
        )

        assert settings.database_url == "postgresql+asyncpg://warden:pw@db:5433/tokens"

    def test_database_dsn_takes_precedence(self):
        settings = Settings(
            jwt_secret_key=SecretStr("secret"),
            database_dsn="sqlite+aiosqlite:///:memory:",
        )

        assert settings.database_url == "sqlite+aiosqlite:///:memory:"

    def test_secret_is_not_rendered(self):
        settings = Settings(jwt_secret_key=SecretStr("super-secret"))

        assert "super-secret" not in repr(settings)


class TestGetSettings:
    def test_cached_until_cleared(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "first")
        clear_settings_cache()

        first = get_settings()
        monkeypatch.setenv("JWT_SECRET_KEY", "second")
        assert get_settings() is first

        clear_settings_cache()
        assert get_settings().jwt_secret_key.get_secret_value() == "second"
        clear_settings_cache()


class TestSettingsFields:
    def test_only_consumed_api_fields(self):
        """Host, port and debug belong to the ASGI server, not to Settings."""
        fields = Settings.model_fields

        assert "api_debug" in fields
        assert "api_host" not in fields
        assert "api_port" not in fields
        assert "debug" not in fields
