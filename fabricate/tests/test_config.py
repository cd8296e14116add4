"""
Tests for environment-driven settings and logging setup.
"""

import logging
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from fabricate.config import (
    DEFAULT_LOG_FORMAT,
    FabricateSettings,
    load_settings,
    setup_logging,
)


def test_defaults_when_environment_is_empty() -> None:
    settings = load_settings({})

    assert settings == FabricateSettings()
    assert settings.log_level == "INFO"
    assert settings.log_format == DEFAULT_LOG_FORMAT
    assert settings.id_start == 1


def test_values_read_from_environment() -> None:
    settings = load_settings(
        {
            "FABRICATE_LOG_LEVEL": " debug ",
            "FABRICATE_LOG_FORMAT": "%(message)s",
            "FABRICATE_ID_START": "10",
            "UNRELATED": "ignored",
        }
    )

    assert settings.log_level == "DEBUG"
    assert settings.log_format == "%(message)s"
    assert settings.id_start == 10


def test_reads_os_environ_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FABRICATE_ID_START", "0")

    assert load_settings().id_start == 0


@pytest.mark.parametrize(
    "environ,message",
    [
        ({"FABRICATE_ID_START": "-1"}, "greater than or equal to 0"),
        ({"FABRICATE_ID_START": "abc"}, "valid integer"),
        ({"FABRICATE_LOG_FORMAT": "   "}, "Log format cannot be empty"),
    ],
)
def test_invalid_values_are_rejected(environ, message: str) -> None:
    with pytest.raises(ValidationError, match=message):
        load_settings(environ)


def test_setup_logging_applies_settings(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    basic_config = MagicMock()
    monkeypatch.setattr(logging, "basicConfig", basic_config)

    setup_logging(
        FabricateSettings(log_level="warning", log_format="%(message)s")
    )

    basic_config.assert_called_once_with(
        level=logging.WARNING, format="%(message)s", force=True
    )


def test_setup_logging_falls_back_to_info(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    basic_config = MagicMock()
    monkeypatch.setattr(logging, "basicConfig", basic_config)

    setup_logging(FabricateSettings(log_level="chatty"))

    assert basic_config.call_args.kwargs["level"] == logging.INFO
    output = capsys.readouterr().out
    assert "Invalid log level: CHATTY, defaulting to INFO" in output


def test_setup_logging_reads_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    basic_config = MagicMock()
    monkeypatch.setattr(logging, "basicConfig", basic_config)
    monkeypatch.setenv("FABRICATE_LOG_LEVEL", "ERROR")

    setup_logging()

    assert basic_config.call_args.kwargs["level"] == logging.ERROR
