"""Unit tests for CredentialVerifier."""

from unittest.mock import AsyncMock

import pytest

from warden_auth.exceptions import (
    InvalidCredentialsError,
    NotRegisteredError,
    PasswordHashError,
    TokenStoreError,
)
from warden_auth.repositories import UserData
from warden_auth.services import CredentialVerifier


class TestCredentialVerifier:
    """Tests for login id / password verification."""

    @pytest.mark.asyncio
    async def test_valid_credentials_return_user_and_empty_record(
        self,
        memory_repo,
        password_service,
        alice,
    ):
        verifier = CredentialVerifier(memory_repo, password_service)

        found = await verifier.verify("alice", "p@ss")

        assert found.user == alice
        assert found.token.user_id == alice.id
        assert found.token.is_persisted is False

    @pytest.mark.asyncio
    async def test_unknown_login_id_raises_not_registered(
        self,
        memory_repo,
        password_service,
    ):
        verifier = CredentialVerifier(memory_repo, password_service)

        with pytest.raises(NotRegisteredError):
            await verifier.verify("bob", "p@ss")

    @pytest.mark.asyncio
    async def test_wrong_password_raises_invalid_credentials(
        self,
        memory_repo,
        password_service,
    ):
        verifier = CredentialVerifier(memory_repo, password_service)

        with pytest.raises(InvalidCredentialsError):
            await verifier.verify("alice", "wrong")

    @pytest.mark.asyncio
    async def test_never_writes(self, memory_repo, password_service):
        memory_repo.save = AsyncMock(wraps=memory_repo.save)
        verifier = CredentialVerifier(memory_repo, password_service)

        await verifier.verify("alice", "p@ss")
        with pytest.raises(InvalidCredentialsError):
            await verifier.verify("alice", "wrong")

        memory_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_malformed_stored_hash_raises(self, memory_repo, password_service):
        memory_repo.add_user(
            UserData(
                id=2,
                login_id="carol",
                name="Carol",
                email="carol@example.com",
                password_hash="plaintext",
            ),
        )
        verifier = CredentialVerifier(memory_repo, password_service)

        with pytest.raises(PasswordHashError):
            await verifier.verify("carol", "plaintext")

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, memory_repo, password_service):
        memory_repo.find_user_and_token_by_login_id = AsyncMock(
            side_effect=TokenStoreError("connection lost"),
        )
        verifier = CredentialVerifier(memory_repo, password_service)

        with pytest.raises(TokenStoreError):
            await verifier.verify("alice", "p@ss")
