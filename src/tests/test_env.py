from __future__ import annotations

import os
from pathlib import Path

import pytest

from infrastructure.config import env


def _point_at(monkeypatch: pytest.MonkeyPatch, src_dir: Path) -> None:
    # load_env looks two levels above its own module for the sources directory.
    fake_module = src_dir / "infrastructure" / "config" / "env.py"
    monkeypatch.setattr(env, "__file__", str(fake_module))
    monkeypatch.setattr(env, "_LOADED", False)


def test_load_env_keeps_existing_variables(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    tmp_path = tmp_path.resolve()
    src_dir = tmp_path / "src"
    src_dir.mkdir()
    (tmp_path / ".env").write_text("TODOAPP_TITLE=From file\nTODOAPP_PORT=9100\n", encoding="utf-8")
    monkeypatch.setenv("TODOAPP_TITLE", "From environment")
    monkeypatch.delenv("TODOAPP_PORT", raising=False)
    _point_at(monkeypatch, src_dir)

    loaded = env.load_env()

    assert loaded == tmp_path / ".env"
    assert os.environ["TODOAPP_TITLE"] == "From environment"
    assert os.environ["TODOAPP_PORT"] == "9100"


def test_load_env_prefers_project_root_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    tmp_path = tmp_path.resolve()
    src_dir = tmp_path / "src"
    src_dir.mkdir()
    (tmp_path / ".env").write_text("TODOAPP_HOST=10.0.0.1\n", encoding="utf-8")
    (src_dir / ".env").write_text("TODOAPP_HOST=10.0.0.2\nTODOAPP_QR_SIZE=128\n", encoding="utf-8")
    monkeypatch.delenv("TODOAPP_HOST", raising=False)
    monkeypatch.delenv("TODOAPP_QR_SIZE", raising=False)
    _point_at(monkeypatch, src_dir)

    loaded = env.load_env()

    assert loaded == tmp_path / ".env"
    assert os.environ["TODOAPP_HOST"] == "10.0.0.1"
    assert "TODOAPP_QR_SIZE" not in os.environ


def test_load_env_runs_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    tmp_path = tmp_path.resolve()
    src_dir = tmp_path / "src"
    src_dir.mkdir()
    (src_dir / ".env").write_text("TODOAPP_LOG_DIR=/tmp/todo-logs\n", encoding="utf-8")
    monkeypatch.delenv("TODOAPP_LOG_DIR", raising=False)
    _point_at(monkeypatch, src_dir)

    assert env.load_env() == src_dir / ".env"
    assert env.load_env() is None
