"""Application service for the user registry state machine."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from user_registry.application.ports.access_code_sender_port import AccessCodeSenderPort
from user_registry.application.ports.credential_repository_port import CredentialRepositoryPort
from user_registry.application.ports.password_hasher_port import PasswordHasherPort
from user_registry.domain.auth.credential import Credential
from user_registry.domain.auth.credentials import (
    clean_phone_number,
    is_phone_number,
    normalize_login,
)
from user_registry.domain.auth.errors import DuplicateLoginError, InvalidInputError
from user_registry.domain.auth.import_records import parse_import_record

logger = logging.getLogger(__name__)

IMPORT_SOURCE = "csv"


class UserRegistryService:
    """Register, authenticate and recover users over one credential store."""

    def __init__(
        self,
        *,
        credentials: CredentialRepositoryPort,
        password_hasher: PasswordHasherPort,
        access_code_sender: AccessCodeSenderPort,
    ) -> None:
        self._credentials = credentials
        self._password_hasher = password_hasher
        self._access_code_sender = access_code_sender

    def register_user(self, full_name: str, email: str, password: str) -> Credential:
        """Register one user through the email channel."""

        credential = Credential.make(
            full_name,
            email=email,
            password=password,
            hasher=self._password_hasher,
            sender=self._access_code_sender,
        )
        self._insert(credential, message="a user with this email already exists")
        logger.info("user_registered login=%s channel=email", credential.login)
        return credential

    def register_user_by_phone(self, full_name: str, raw_phone: str) -> Credential:
        """Register one user by phone and deliver the initial access code."""

        if not is_phone_number(raw_phone):
            raise InvalidInputError(
                "enter a valid phone number starting with a + and containing 11 digits"
            )
        credential = Credential.make(
            full_name,
            phone=raw_phone,
            hasher=self._password_hasher,
            sender=self._access_code_sender,
        )
        self._require_unique(credential, message="a user with this phone already exists")
        if credential.access_code is not None:
            credential.send_access_code_to_user(credential.login, credential.access_code)
        self._credentials.add(credential)
        logger.info("user_registered login=%s channel=phone", credential.login)
        return credential

    def login_user(self, login: str, password: str) -> str | None:
        """Return user info for valid credentials, otherwise None."""

        credential = self._credentials.get_by_login(login=normalize_login(login))
        if credential is None:
            logger.info("login_failed reason=unknown_login")
            return None
        if not credential.check_password(password):
            logger.info("login_failed reason=invalid_password login=%s", credential.login)
            return None
        logger.info("login_succeeded login=%s", credential.login)
        return credential.user_info

    def request_access_code(self, login: str) -> None:
        """Issue a new access code that also becomes the user's password.

        Unknown logins are ignored silently. The rotation passes the previous
        access code (or empty) as the old value, matching the stored code.
        """

        credential = self._credentials.get_by_login(login=clean_phone_number(login.strip()))
        if credential is None:
            return
        code = credential.generate_access_code()
        credential.send_access_code_to_user(credential.login, code)
        credential.change_password(credential.access_code or "", code)
        credential.access_code = code
        logger.info("access_code_issued login=%s", credential.login)

    def import_users(self, records: Iterable[str]) -> list[Credential]:
        """Import pre-hashed users; records inserted before a failure stay inserted."""

        imported: list[Credential] = []
        for line in records:
            record = parse_import_record(line)
            credential = Credential.make(
                record.full_name,
                email=record.email,
                phone=record.phone,
                salt=record.salt,
                password_hash=record.password_hash,
                hasher=self._password_hasher,
                sender=self._access_code_sender,
                source=IMPORT_SOURCE,
            )
            self._insert(credential, message="a user with this login already exists")
            imported.append(credential)
        logger.info("users_imported count=%s", len(imported))
        return imported

    def import_users_from_file(self, path: Path) -> list[Credential]:
        """Import every non-blank line of a UTF-8 text file."""

        lines = path.read_text(encoding="utf-8").splitlines()
        return self.import_users(line for line in lines if line.strip())

    def clear_registry(self) -> None:
        """Drop every registered user. Intended for test harness resets."""

        self._credentials.clear()

    def _insert(self, credential: Credential, *, message: str) -> None:
        self._require_unique(credential, message=message)
        self._credentials.add(credential)

    def _require_unique(self, credential: Credential, *, message: str) -> None:
        if self._credentials.contains(login=credential.login):
            raise DuplicateLoginError(login=credential.login, message=message)
