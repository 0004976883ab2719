"""Integration tests for the app factory running its real lifespan.

No dependency is overridden here: the schema, the engine and every
request session come from the settings passed to ``create_app``.
"""

import asyncio

from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy import select

from warden.presentation.api.app import create_app
from warden_auth.persistence.sqlalchemy import UserTokenModel
from warden_config.settings import Settings, clear_settings_cache


def _stored_renewal_tokens(engine) -> list[str]:
    async def _read():
        async with engine.connect() as conn:
            result = await conn.execute(select(UserTokenModel.renewal_token))
            return list(result.scalars())

    return asyncio.run(_read())


class TestAppLifespan:
    """Tests for startup, shutdown and the per-request session."""

    def test_database_comes_from_passed_settings(self, tmp_path, monkeypatch):
        """The environment's DSN and secret are never consulted."""
        env_db = tmp_path / "env.db"
        passed_db = tmp_path / "passed.db"
        monkeypatch.setenv("DATABASE_DSN", f"sqlite+aiosqlite:///{env_db}")
        monkeypatch.delenv("JWT_SECRET_KEY", raising=False)
        clear_settings_cache()

        settings = Settings(
            jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
            database_dsn=f"sqlite+aiosqlite:///{passed_db}",
            log_level="WARNING",
        )
        app = create_app(settings=settings)

        with TestClient(app) as client:
            response = client.get("/health")

        assert response.status_code == 200
        assert passed_db.exists()
        assert not env_db.exists()

    def test_login_and_refresh_are_committed(
        self,
        api_settings,
        test_db_engine,
        login_payload: dict,
        api_v1_prefix: str,
    ):
        """Writes made through the real session dependency are durable."""
        app = create_app(settings=api_settings)

        with TestClient(app) as client:
            login = client.post(f"{api_v1_prefix}/auth/login", json=login_payload)
            assert login.status_code == 200
            assert _stored_renewal_tokens(test_db_engine) == [
                login.json()["renewal_token"],
            ]

            refresh = client.post(
                f"{api_v1_prefix}/auth/refresh",
                json={"renewal_token": login.json()["renewal_token"]},
            )

        assert refresh.status_code == 200
        assert _stored_renewal_tokens(test_db_engine) == [
            refresh.json()["renewal_token"],
        ]

    def test_failed_login_writes_nothing(
        self,
        api_settings,
        test_db_engine,
        api_v1_prefix: str,
    ):
        app = create_app(settings=api_settings)

        with TestClient(app) as client:
            response = client.post(
                f"{api_v1_prefix}/auth/login",
                json={"login_id": "alice", "password": "wrong"},
            )

        assert response.status_code == 401
        assert _stored_renewal_tokens(test_db_engine) == []
