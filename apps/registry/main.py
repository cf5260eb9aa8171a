"""registry entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path

from user_registry.application.ports.access_code_sender_port import AccessCodeSenderPort
from user_registry.application.services.user_registry_service import UserRegistryService
from user_registry.config.settings import Settings, load_settings
from user_registry.infrastructure.logging import configure_logging
from user_registry.infrastructure.memory.credential_repository import (
    InMemoryCredentialRepository,
)
from user_registry.infrastructure.notifications.logging_sender import LoggingAccessCodeSender
from user_registry.infrastructure.security.password_hasher import BcryptPasswordHasher

logger = logging.getLogger(__name__)


def build_registry_service(
    *,
    settings: Settings,
    access_code_sender: AccessCodeSenderPort | None = None,
) -> UserRegistryService:
    """Wire a fresh volatile registry from runtime settings."""

    return UserRegistryService(
        credentials=InMemoryCredentialRepository(),
        password_hasher=BcryptPasswordHasher(rounds=settings.password_hash_rounds),
        access_code_sender=access_code_sender or LoggingAccessCodeSender(),
    )


def bootstrap_registry(
    *,
    settings: Settings | None = None,
    access_code_sender: AccessCodeSenderPort | None = None,
) -> UserRegistryService:
    """Configure logging, build the registry and seed it from the import file if set."""

    resolved_settings = settings or load_settings()
    configure_logging(level=resolved_settings.log_level)
    service = build_registry_service(
        settings=resolved_settings,
        access_code_sender=access_code_sender,
    )
    if resolved_settings.registry_import_file is not None:
        import_path = Path(resolved_settings.registry_import_file)
        imported = service.import_users_from_file(import_path)
        logger.info("registry_seeded path=%s count=%s", import_path, len(imported))
    return service


def main() -> None:
    """Build and seed the registry once, logging the outcome."""

    bootstrap_registry()
    logger.info("registry_ready")


if __name__ == "__main__":
    main()
