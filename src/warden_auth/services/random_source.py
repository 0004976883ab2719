"""Cryptographically secure randomness for token material."""

import secrets
from typing import Protocol


class RandomSource(Protocol):
    def token_bytes(self, n: int) -> bytes: ...


class SystemRandomSource:
    """Randomness from the operating system CSPRNG."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)
