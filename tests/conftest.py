"""Pytest fixtures for human2duration tests."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime

import pytest

from human2duration.cli.console import set_json_output_mode
from human2duration.config import reset_settings


@pytest.fixture(autouse=True)
def reset_global_settings():
    """Reset global settings and console state before each test."""
    reset_settings()
    set_json_output_mode(False)
    yield
    reset_settings()
    set_json_output_mode(False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo logging configuration done by the --debug flag."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep user config files and HUMAN2DURATION_ variables out of tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in list(os.environ):
        if name.startswith("HUMAN2DURATION_"):
            monkeypatch.delenv(name)


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed reference instant for timestamp tests."""
    return datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config file and return a factory for its path."""

    def _write(content: str):
        path = tmp_path / "human2duration.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
