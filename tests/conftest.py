"""Shared test fixtures."""

import importlib.util
from pathlib import Path

import pytest

from stop import config

BUILD_CONFIG = Path(__file__).resolve().parent.parent / "build_backend" / "stop_build_config.py"


@pytest.fixture
def plain(monkeypatch):
    """Build with colour disabled."""
    monkeypatch.setattr(config, "COLORED", False)


@pytest.fixture
def colored(monkeypatch):
    """Build with colour enabled."""
    monkeypatch.setattr(config, "COLORED", True)


@pytest.fixture
def aborted(capsys):
    """Run a callable that must exit, return (exit code, stderr)."""

    def run(func, *args, **kwargs):
        with pytest.raises(SystemExit) as exc_info:
            func(*args, **kwargs)
        return exc_info.value.code, capsys.readouterr().err

    return run


@pytest.fixture
def build_config():
    """The build option module from build_backend/."""
    spec = importlib.util.spec_from_file_location("stop_build_config", BUILD_CONFIG)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
