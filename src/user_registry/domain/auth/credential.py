"""Credential model: identity normalization and salted-hash verification."""

from __future__ import annotations

import hmac
import secrets
from typing import TYPE_CHECKING

from user_registry.domain.auth.credentials import clean_phone_number, normalize_user_email
from user_registry.domain.auth.errors import DeliveryFailedError, InvalidInputError

if TYPE_CHECKING:
    from user_registry.application.ports.access_code_sender_port import AccessCodeSenderPort
    from user_registry.application.ports.password_hasher_port import PasswordHasherPort

ACCESS_CODE_LENGTH = 6
_MASK_VISIBLE = 4


class Credential:
    """Stored identity plus password-verification record."""

    def __init__(
        self,
        *,
        full_name: str,
        login: str,
        salt: str,
        password_hash: str,
        hasher: PasswordHasherPort,
        sender: AccessCodeSenderPort,
        email: str | None = None,
        phone: str | None = None,
        meta: dict[str, str] | None = None,
    ) -> None:
        self.full_name = full_name
        self.first_name, self.last_name = _split_full_name(full_name)
        self.login = login
        self.email = email
        self.phone = phone
        self.salt = salt
        self.password_hash = password_hash
        self.access_code: str | None = None
        self.meta = dict(meta or {})
        self._hasher = hasher
        self._sender = sender

    @classmethod
    def make(
        cls,
        full_name: str,
        *,
        hasher: PasswordHasherPort,
        sender: AccessCodeSenderPort,
        email: str | None = None,
        password: str | None = None,
        salt: str | None = None,
        password_hash: str | None = None,
        phone: str | None = None,
        source: str | None = None,
    ) -> Credential:
        """Build a credential through the email channel or the phone channel.

        Email wins when both channels are present. A supplied salt/hash pair is
        taken as-is; otherwise the email channel hashes `password` and the
        phone channel issues an initial access code that becomes the password.
        Delivering that code is left to the caller.
        """

        full_name = full_name.strip()
        if not full_name:
            raise InvalidInputError("full name cannot be blank")
        if (salt is None) != (password_hash is None):
            raise InvalidInputError("salt and password hash must be supplied together")

        normalized_email = normalize_user_email(email=email) if email and email.strip() else None
        normalized_phone = clean_phone_number(phone) if phone and phone.strip() else None
        login = normalized_email or normalized_phone
        if not login:
            raise InvalidInputError("email or phone must not be blank")

        meta = {"src": source} if source else {"auth": "password" if normalized_email else "sms"}

        if salt is not None and password_hash is not None:
            return cls(
                full_name=full_name,
                login=login,
                salt=salt,
                password_hash=password_hash,
                hasher=hasher,
                sender=sender,
                email=normalized_email,
                phone=normalized_phone,
                meta=meta,
            )

        if normalized_email is not None:
            if not password:
                raise InvalidInputError("password cannot be blank")
            new_salt = hasher.generate_salt()
            try:
                new_hash = hasher.hash_password(salt=new_salt, password=password)
            except ValueError as exc:
                raise InvalidInputError("password cannot be hashed") from exc
            return cls(
                full_name=full_name,
                login=login,
                salt=new_salt,
                password_hash=new_hash,
                hasher=hasher,
                sender=sender,
                email=normalized_email,
                phone=normalized_phone,
                meta=meta,
            )

        code = generate_access_code()
        new_salt = hasher.generate_salt()
        credential = cls(
            full_name=full_name,
            login=login,
            salt=new_salt,
            password_hash=hasher.hash_password(salt=new_salt, password=code),
            hasher=hasher,
            sender=sender,
            phone=normalized_phone,
            meta=meta,
        )
        credential.access_code = code
        return credential

    @property
    def initials(self) -> str:
        """Uppercase first letters of the first and last name."""

        return "".join(name[0].upper() for name in (self.first_name, self.last_name) if name)

    @property
    def user_info(self) -> str:
        """Human-readable summary with salt and hash masked."""

        return "\n".join(
            (
                f"firstName: {self.first_name}",
                f"lastName: {self.last_name}",
                f"login: {self.login}",
                f"fullName: {self.full_name}",
                f"initials: {self.initials}",
                f"email: {self.email}",
                f"phone: {self.phone}",
                f"meta: {self.meta}",
                f"password: {_mask(self.salt)}:{_mask(self.password_hash)}",
            )
        )

    def check_password(self, candidate: str) -> bool:
        """Recompute the salted hash of candidate and compare to the stored one."""

        try:
            computed = self._hasher.hash_password(salt=self.salt, password=candidate)
        except ValueError:
            return False
        return hmac.compare_digest(computed.encode("utf-8"), self.password_hash.encode("utf-8"))

    def generate_access_code(self) -> str:
        """Return a fresh access code; password state is left untouched."""

        return generate_access_code()

    def change_password(self, old_code: str, new_code: str) -> None:
        """Rotate the password to new_code under a fresh salt.

        `old_code` must equal the stored access code (empty when none).
        """

        if old_code != (self.access_code or ""):
            raise InvalidInputError("the entered code does not match the current access code")
        new_salt = self._hasher.generate_salt()
        new_hash = self._hasher.hash_password(salt=new_salt, password=new_code)
        self.salt, self.password_hash = new_salt, new_hash

    def send_access_code_to_user(self, destination: str, code: str) -> None:
        """Deliver code through the injected sender, raising `DeliveryFailedError` on failure."""

        try:
            self._sender.send_access_code(destination=destination, code=code)
        except DeliveryFailedError:
            raise
        except Exception as exc:
            raise DeliveryFailedError(destination=destination, reason=str(exc)) from exc

    def __repr__(self) -> str:
        return f"Credential(login={self.login!r}, full_name={self.full_name!r}, meta={self.meta!r})"


def generate_access_code() -> str:
    """Return a random fixed-length numeric access code."""

    return "".join(secrets.choice("0123456789") for _ in range(ACCESS_CODE_LENGTH))


def _split_full_name(full_name: str) -> tuple[str, str | None]:
    parts = full_name.split()
    if not parts:
        return "", None
    return parts[0], " ".join(parts[1:]) or None


def _mask(value: str) -> str:
    return f"{value[:_MASK_VISIBLE]}***"
