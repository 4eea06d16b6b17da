"""Shared fixtures: a trusted root inside tmp_path and an app bound to it."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from filebox.config.models import ServerConfig
from filebox.server.app import create_app


@pytest.fixture
def trusted_root(tmp_path: Path) -> Path:
    """Create ``<tmp>/files`` and return its real path."""
    root = tmp_path / "files"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def outside(tmp_path: Path) -> Path:
    """A sibling of the trusted root holding a secret file."""
    directory = tmp_path / "outside"
    directory.mkdir()
    (directory / "secret.txt").write_text("top secret")
    return directory.resolve()


@pytest.fixture
def client(trusted_root: Path) -> TestClient:
    app = create_app(ServerConfig(trusted_root=trusted_root))
    return TestClient(app)
