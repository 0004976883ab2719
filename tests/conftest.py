"""Root pytest configuration and shared fixtures.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (in-memory store, mocks)
    │   ├── warden/        # Application services
    │   ├── warden_auth/   # Auth building blocks
    │   └── warden_config/ # Settings
    └── integration/       # SQLAlchemy on in-memory SQLite, HTTP API
"""

from datetime import datetime, timedelta

import pytest

from warden_auth import JWTService, PasswordHashingService, UserData
from warden_auth.clock import utc_now
from warden_auth.persistence.memory import InMemoryUserTokenRepository
from warden_config import clear_settings_cache

TEST_SECRET_KEY = "test-secret-key-12345"
ALICE_LOGIN_ID = "alice"
ALICE_PASSWORD = "p@ss"


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


class SequenceRandomSource:
    """Returns scripted byte strings, then falls back to counting bytes."""

    def __init__(self, *values: bytes):
        self._values = list(values)
        self._counter = 0

    def token_bytes(self, n: int) -> bytes:
        if self._values:
            return self._values.pop(0)
        self._counter += 1
        return self._counter.to_bytes(n, "big")


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Make sure no cached settings leak between test sessions."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def clock() -> FrozenClock:
    """Clock frozen at the current second.

    Whole seconds keep datetime expiries equal to the JWT ``exp`` claim.
    """
    return FrozenClock(utc_now().replace(microsecond=0))


@pytest.fixture
def password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)  # Low rounds for fast tests


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=TEST_SECRET_KEY, expire_minutes=60)


@pytest.fixture
def alice(password_service) -> UserData:
    return UserData(
        id=1,
        login_id=ALICE_LOGIN_ID,
        name="Alice",
        email="alice@example.com",
        password_hash=password_service.hash(ALICE_PASSWORD),
    )


@pytest.fixture
def memory_repo(alice) -> InMemoryUserTokenRepository:
    return InMemoryUserTokenRepository(users=[alice])


@pytest.fixture
def make_random_source():
    """Factory for scripted random sources."""
    return SequenceRandomSource
