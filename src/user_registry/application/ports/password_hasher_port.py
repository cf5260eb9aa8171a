"""Port for salted password hashing."""

from __future__ import annotations

from typing import Protocol


class PasswordHasherPort(Protocol):
    """Salt generation and keyed hashing contract."""

    def generate_salt(self) -> str:
        """Return a fresh random salt."""

    def hash_password(self, *, salt: str, password: str) -> str:
        """Return the deterministic hash of password under salt."""
