"""
Pytest configuration and shared fixtures for fast-seed tests.
"""

import re
import sys
import textwrap
from pathlib import Path

import pytest

from fast_seed.config import DatabaseConfig
from fast_seed.core.faker_provider import reset_faker
from fast_seed.core.seeder_registry import SeederRegistry

TEST_NAMESPACE = "seedtests"

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture(autouse=True)
def isolate_seeders(monkeypatch):
    """Every test starts with an empty registry, no cached seeder modules and a CLI context."""
    monkeypatch.setenv("APP_CONTEXT", "cli")
    SeederRegistry.clear()
    reset_faker()
    yield
    SeederRegistry.clear()
    reset_faker()
    for module_name in list(sys.modules):
        if module_name.startswith(TEST_NAMESPACE):
            sys.modules.pop(module_name, None)


@pytest.fixture
def db():
    """Stand-in connection: seeders append what they did to it."""
    return []


@pytest.fixture
def files_path(tmp_path) -> Path:
    path = tmp_path / "app" / "db"
    (path / "seeders").mkdir(parents=True)
    return path


@pytest.fixture
def config(files_path) -> DatabaseConfig:
    return DatabaseConfig(files_path=str(files_path), app_namespace=TEST_NAMESPACE)


@pytest.fixture
def write_seeder(files_path):
    """Write a seeder module into the seeders directory (or a given directory)."""
    def _write(file_name: str, source: str, directory: Path | None = None) -> Path:
        target_dir = directory or files_path / "seeders"
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / file_name
        target.write_text(textwrap.dedent(source), encoding="utf-8")
        return target
    return _write


@pytest.fixture
def console_lines(capsys):
    """Captured stdout lines with terminal styling stripped."""
    def _lines() -> list[str]:
        out = capsys.readouterr().out
        return [line for line in _ANSI.sub("", out).splitlines() if line.strip()]
    return _lines


# Configure pytest-asyncio
pytest_plugins = ['pytest_asyncio']
