"""Port for delivering one-time access codes."""

from __future__ import annotations

from typing import Protocol


class AccessCodeSenderPort(Protocol):
    """Access code delivery contract."""

    def send_access_code(self, *, destination: str, code: str) -> None:
        """Deliver code to destination or raise `DeliveryFailedError`."""
