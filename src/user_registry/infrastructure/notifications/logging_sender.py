"""Access code sender adapter that only records deliveries in the log."""

from __future__ import annotations

import logging

from user_registry.application.ports.access_code_sender_port import AccessCodeSenderPort

logger = logging.getLogger(__name__)


class LoggingAccessCodeSender(AccessCodeSenderPort):
    """Sender used when no real notification channel is configured."""

    def send_access_code(self, *, destination: str, code: str) -> None:
        logger.info("access_code_delivered destination=%s code_length=%s", destination, len(code))
