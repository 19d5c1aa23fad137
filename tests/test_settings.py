from __future__ import annotations

import logging

import pytest

from book_builder.config.settings import PRINT, SCREEN, get_profile
from book_builder.logging_config import configure_logging


def test_profiles_by_name(monkeypatch) -> None:
    monkeypatch.delenv("BOOK_BUILDER_PROFILE", raising=False)

    assert get_profile() is SCREEN
    assert get_profile("print") is PRINT
    assert PRINT.dpi == 300
    assert SCREEN.template_name == "My Book Template"


def test_profile_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("BOOK_BUILDER_PROFILE", "print")
    assert get_profile() is PRINT


def test_unknown_profile() -> None:
    with pytest.raises(ValueError):
        get_profile("poster")


def test_configure_logging_is_idempotent(monkeypatch) -> None:
    monkeypatch.setenv("BOOK_BUILDER_LOG_LEVEL", "info")

    logger = configure_logging()
    configure_logging()
    tagged = [h for h in logger.handlers if getattr(h, "_book_builder_handler", False)]

    assert logger.level == logging.INFO
    assert len(tagged) == 1

    assert configure_logging("DEBUG").level == logging.DEBUG


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging("LOUD")
