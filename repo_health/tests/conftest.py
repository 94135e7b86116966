"""
Pytest fixtures for the Repository Health test suite.

Repositories are built on the fly under ``tmp_path``; entries ending in
``/`` are created as directories, everything else as files.
"""

from pathlib import Path
from typing import Callable, Iterable

import pytest

from repo_health.security.config import set_server_config

COMPLIANT_REPO_ENTRIES = [
    "README.md",
    "LICENSE",
    ".gitignore",
    "CONTRIBUTING.md",
    "CODE_OF_CONDUCT.md",
    "SECURITY.md",
    ".github/workflows/ci.yml",
    "pyproject.toml",
    "tests/",
    "CHANGELOG.md",
]


@pytest.fixture
def make_repo(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a repository directory with the given entries."""
    def _make(entries: Iterable[str] = (), name: str = "repo") -> Path:
        root = tmp_path / name
        root.mkdir()
        for entry in entries:
            target = root / entry
            if entry.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text("content\n")
        return root
    return _make


@pytest.fixture
def compliant_repo(make_repo) -> Path:
    return make_repo(COMPLIANT_REPO_ENTRIES)


@pytest.fixture
def empty_repo(make_repo) -> Path:
    return make_repo()


@pytest.fixture(autouse=True)
def reset_server_config(monkeypatch):
    """Isolate tests from the process-wide configuration and environment."""
    for name in ("REPO_HEALTH_CONFIG", "REPO_HEALTH_LOG_LEVEL",
                 "REPO_HEALTH_ALLOWED_BASE_DIR", "REPO_HEALTH_MAX_PATH_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    set_server_config(None)
    yield
    set_server_config(None)
