"""Error taxonomy for registry and credential operations."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a registry input is malformed or missing."""


class DuplicateLoginError(ValueError):
    """Raised when a derived login is already registered."""

    def __init__(self, *, login: str, message: str | None = None) -> None:
        super().__init__(message or f"a user with this login already exists: {login}")
        self.login = login


class DeliveryFailedError(RuntimeError):
    """Raised when an access code cannot be delivered to its destination."""

    def __init__(self, *, destination: str, reason: str = "delivery failed") -> None:
        super().__init__(f"access code delivery to {destination} failed: {reason}")
        self.destination = destination
