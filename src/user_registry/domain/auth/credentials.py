"""Shared normalization helpers for user credential inputs."""

from __future__ import annotations

import re

from user_registry.domain.auth.errors import InvalidInputError

_PHONE_PATTERN = re.compile(
    r"\+? ?\d? ??\(?\d{3}?\)?? ??-?\d{3}? ??-?\d{2}? ??-?\d{2}",
    re.ASCII,
)
_PHONE_NOISE = re.compile(r"[^\d+]", re.ASCII)


def normalize_user_email(*, email: str) -> str:
    """Normalize one user email and reject blank values."""

    normalized = email.strip().lower()
    if not normalized:
        raise InvalidInputError("email cannot be blank")
    return normalized


def is_phone_number(value: str) -> bool:
    """Return whether the whole value matches the lenient phone grammar."""

    return _PHONE_PATTERN.fullmatch(value) is not None


def clean_phone_number(value: str) -> str:
    """Strip everything except digits and plus signs."""

    return _PHONE_NOISE.sub("", value)


def normalize_login(login: str) -> str:
    """Normalize a login typed by a user into its registry key."""

    candidate = clean_phone_number(login) if is_phone_number(login) else login
    return candidate.strip().lower()


def split_salted_password(value: str) -> tuple[str, str]:
    """Split a `salt:hash` field into its two non-blank parts."""

    parts = [part for part in value.split(":") if part.strip()]
    if len(parts) != 2:
        raise InvalidInputError("password needs a salt")
    return parts[0], parts[1]
