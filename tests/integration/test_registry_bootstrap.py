from __future__ import annotations

import logging
from pathlib import Path

import pytest

from apps.registry.main import bootstrap_registry, build_registry_service
from user_registry.config.settings import Settings
from user_registry.infrastructure.security.password_hasher import BcryptPasswordHasher


class RecordingAccessCodeSender:
    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def send_access_code(self, *, destination: str, code: str) -> None:
        self.sent.append((destination, code))


def _settings(monkeypatch: pytest.MonkeyPatch, **env: str) -> Settings:
    monkeypatch.delenv("REGISTRY_IMPORT_FILE", raising=False)
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "4")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return Settings(_env_file=None)


def test_bcrypt_registry_full_lifecycle(monkeypatch: pytest.MonkeyPatch) -> None:
    sender = RecordingAccessCodeSender()
    service = build_registry_service(
        settings=_settings(monkeypatch),
        access_code_sender=sender,
    )

    credential = service.register_user("John Doe", "John.Doe@Example.org", "testPass")
    assert credential.password_hash.startswith("$2b$04$")
    assert service.login_user("john.doe@example.org", "testPass") is not None
    assert service.login_user("john.doe@example.org", "TestPass") is None

    phone_user = service.register_user_by_phone("Ann Lee", "+7 (912) 345-67-89")
    first_code = sender.sent[-1][1]
    assert phone_user.access_code == first_code
    assert service.login_user("+79123456789", first_code) is not None

    service.request_access_code(" +7 (912) 345-67-89 ")
    second_code = sender.sent[-1][1]
    assert service.login_user("+7 912 345 67 89", second_code) is not None

    service.clear_registry()
    assert service.login_user("john.doe@example.org", "testPass") is None


def test_bootstrap_registry_seeds_from_import_file(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    hasher = BcryptPasswordHasher(rounds=4)
    salt = hasher.generate_salt()
    password_hash = hasher.hash_password(salt=salt, password="imported-pass")
    import_file = tmp_path / "users.csv"
    # bcrypt salts contain no ':' so the pair survives the import field split.
    import_file.write_text(
        f"Joe Imported;;{salt}:{password_hash};joe@example.org\n",
        encoding="utf-8",
    )

    service = bootstrap_registry(
        settings=_settings(monkeypatch, REGISTRY_IMPORT_FILE=str(import_file)),
        access_code_sender=RecordingAccessCodeSender(),
    )

    assert service.login_user("JOE@example.org", "imported-pass") is not None
    assert service.login_user("joe@example.org", "other") is None


def test_build_registry_service_defaults_to_logging_sender(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    service = build_registry_service(settings=_settings(monkeypatch))

    with caplog.at_level(logging.INFO):
        credential = service.register_user_by_phone("Ann", "+79123456789")

    assert credential.access_code is not None
    assert "access_code_delivered destination=+79123456789" in caplog.text


def test_long_passwords_register_and_authenticate(monkeypatch: pytest.MonkeyPatch) -> None:
    service = build_registry_service(
        settings=_settings(monkeypatch),
        access_code_sender=RecordingAccessCodeSender(),
    )
    prefix = "a" * 72

    service.register_user("John", "john@example.org", "p" * 80)
    service.register_user("Ann", "ann@example.org", prefix + "RIGHT")

    assert service.login_user("john@example.org", "p" * 80) is not None
    assert service.login_user("john@example.org", "p" * 72) is None
    assert service.login_user("ann@example.org", prefix + "RIGHT") is not None
    assert service.login_user("ann@example.org", prefix + "WRONG") is None
