"""Parser for semicolon-delimited bulk import records."""

from __future__ import annotations

from dataclasses import dataclass

from user_registry.domain.auth.credentials import split_salted_password

_FIELD_COUNT = 4


@dataclass(frozen=True)
class ImportRecord:
    """One parsed `fullName;phone;salt:passwordHash;email` record."""

    full_name: str
    phone: str | None
    salt: str
    password_hash: str
    email: str | None


def parse_import_record(line: str) -> ImportRecord:
    """Parse one import line, treating missing trailing fields as blank."""

    fields = line.split(";")
    fields += [""] * (_FIELD_COUNT - len(fields))
    full_name, phone, salted_password, email = fields[:_FIELD_COUNT]
    salt, password_hash = split_salted_password(salted_password)
    return ImportRecord(
        full_name=full_name,
        phone=_blank_to_none(phone),
        salt=salt,
        password_hash=password_hash,
        email=_blank_to_none(email),
    )


def _blank_to_none(value: str) -> str | None:
    return value if value.strip() else None
