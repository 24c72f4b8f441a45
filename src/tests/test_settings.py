from __future__ import annotations

import logging
from pathlib import Path

import pytest

from infrastructure.config.settings import Settings
from infrastructure.logging_setup import setup_logging

_ENV_KEYS = (
    "TODOAPP_HOST",
    "TODOAPP_PORT",
    "TODOAPP_TITLE",
    "TODOAPP_DEBUG",
    "TODOAPP_LOG_DIR",
    "TODOAPP_QR_SIZE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    settings = Settings.from_env()

    assert settings == Settings()
    assert settings.port == 8000
    assert settings.qr_size == 512
    assert settings.debug is False


def test_values_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODOAPP_HOST", "127.0.0.1")
    monkeypatch.setenv("TODOAPP_PORT", "9001")
    monkeypatch.setenv("TODOAPP_TITLE", "My Todos")
    monkeypatch.setenv("TODOAPP_DEBUG", "1")
    monkeypatch.setenv("TODOAPP_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("TODOAPP_QR_SIZE", "256")

    settings = Settings.from_env()

    assert settings.host == "127.0.0.1"
    assert settings.port == 9001
    assert settings.title == "My Todos"
    assert settings.debug is True
    assert settings.log_dir == tmp_path
    assert settings.qr_size == 256


def test_invalid_integers_fall_back(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("TODOAPP_PORT", "eighty")
    monkeypatch.setenv("TODOAPP_QR_SIZE", "-5")

    with caplog.at_level(logging.WARNING):
        settings = Settings.from_env()

    assert settings.port == 8000
    assert settings.qr_size == 512
    assert "TODOAPP_PORT" in caplog.text


@pytest.fixture()
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    if hasattr(root_logger, "_todoapp_logging_configured"):
        del root_logger._todoapp_logging_configured


def test_setup_logging_writes_rotating_file(tmp_path: Path, restore_root_logger) -> None:
    setup_logging(Settings(log_dir=tmp_path / "logs", debug=True))
    logging.getLogger("todo.test").debug("hello log")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert restore_root_logger.level == logging.DEBUG
    assert "hello log" in (tmp_path / "logs" / "todoapp.log").read_text(encoding="utf-8")

    setup_logging(Settings(log_dir=tmp_path / "logs", debug=False))
    assert restore_root_logger.level == logging.INFO
    assert len(restore_root_logger.handlers) == 2
