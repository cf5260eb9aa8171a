"""Port for credential storage keyed by login."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from user_registry.domain.auth.credential import Credential


class CredentialRepositoryPort(Protocol):
    """Credential store contract."""

    def get_by_login(self, *, login: str) -> Credential | None:
        """Return credential by normalized login or None."""

    def contains(self, *, login: str) -> bool:
        """Return whether login is already registered."""

    def add(self, credential: Credential) -> None:
        """Insert credential under its login."""

    def list_credentials(self) -> list[Credential]:
        """Return all stored credentials."""

    def clear(self) -> None:
        """Drop every stored credential."""
