"""In-memory credential repository adapter."""

from __future__ import annotations

import logging

from user_registry.application.ports.credential_repository_port import CredentialRepositoryPort
from user_registry.domain.auth.credential import Credential
from user_registry.domain.auth.errors import DuplicateLoginError

logger = logging.getLogger(__name__)


class InMemoryCredentialRepository(CredentialRepositoryPort):
    """Volatile credential store keyed by login."""

    def __init__(self) -> None:
        self._credentials: dict[str, Credential] = {}

    def get_by_login(self, *, login: str) -> Credential | None:
        return self._credentials.get(login)

    def contains(self, *, login: str) -> bool:
        return login in self._credentials

    def add(self, credential: Credential) -> None:
        if credential.login in self._credentials:
            raise DuplicateLoginError(login=credential.login)
        self._credentials[credential.login] = credential

    def list_credentials(self) -> list[Credential]:
        return list(self._credentials.values())

    def clear(self) -> None:
        dropped = len(self._credentials)
        self._credentials.clear()
        logger.info("credential_store_cleared dropped=%s", dropped)
