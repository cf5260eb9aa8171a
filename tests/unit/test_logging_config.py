from __future__ import annotations

import logging

import pytest

from user_registry.infrastructure.logging import configure_logging, resolve_log_level


@pytest.mark.parametrize(
    ("configured", "expected"),
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("", logging.INFO),
        ("not-a-level", logging.INFO),
    ],
)
def test_resolve_log_level(configured: str, expected: int) -> None:
    assert resolve_log_level(configured) == expected


def test_configure_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        applied = configure_logging(level="warning")

        assert applied == logging.WARNING
        assert root.level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in previous_handlers:
            root.addHandler(handler)
        root.setLevel(previous_level)
