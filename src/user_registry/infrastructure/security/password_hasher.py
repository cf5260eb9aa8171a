"""Bcrypt password hasher adapter."""

from __future__ import annotations

import base64
import hashlib
import hmac

import bcrypt

from user_registry.application.ports.password_hasher_port import PasswordHasherPort

DEFAULT_ROUNDS = 12


class BcryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using bcrypt salts."""

    def __init__(self, *, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def generate_salt(self) -> str:
        return bcrypt.gensalt(rounds=self._rounds).decode("utf-8")

    def hash_password(self, *, salt: str, password: str) -> str:
        encoded_salt = salt.encode("utf-8")
        return bcrypt.hashpw(_prehash(salt=encoded_salt, password=password), encoded_salt).decode(
            "utf-8"
        )


def _prehash(*, salt: bytes, password: str) -> bytes:
    """Digest the password to 44 bytes so bcrypt's 72-byte input limit never applies."""

    digest = hmac.new(salt, password.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest)
