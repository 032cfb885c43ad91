"""Tests for environment settings and logging configuration."""

from __future__ import annotations

import logging

import pytest

from src.config.logging import configure_logging
from src.config.settings import load_settings


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    settings = load_settings()
    assert settings.log_level == "INFO"
    assert settings.output_indent is None


def test_values_from_environment(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("OUTPUT_INDENT", "2")

    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.output_indent == 2


@pytest.mark.parametrize(("name", "value"), [("LOG_LEVEL", "chatty"), ("OUTPUT_INDENT", "-1")])
def test_invalid_values_raise_runtime_error(
        clean_env: pytest.MonkeyPatch, name: str, value: str
) -> None:
    clean_env.setenv(name, value)
    with pytest.raises(RuntimeError):
        load_settings()


def test_configure_logging_sets_root_level(clean_env: pytest.MonkeyPatch) -> None:
    configure_logging("warning")
    assert logging.getLogger().level == logging.WARNING

    clean_env.setenv("LOG_LEVEL", "DEBUG")
    configure_logging()
    assert logging.getLogger().level == logging.DEBUG
