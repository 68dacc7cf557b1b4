"""
pytest fixtures shared by the test suite.

Every test gets its own SQLite file under ``tmp_path`` and a static
directory with a small ``index.html`` and one asset, so nothing touches
the repository's ``data/`` or ``frontend_dist/``.
"""

from pathlib import Path
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from starter_api.app.core.config import Settings
from starter_api.app.main import create_app

INDEX_HTML = "<!doctype html><title>starter</title><div id=root></div>"
ASSET_JS = "console.log('app');"


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    root = tmp_path / "frontend_dist"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (root / "assets" / "app.js").write_text(ASSET_JS, encoding="utf-8")
    return root


@pytest.fixture
def make_settings(tmp_path: Path, static_dir: Path) -> Callable[..., Settings]:
    """Build ``Settings`` pointing at temporary paths, with overrides."""

    def _make(**overrides) -> Settings:
        values = dict(
            database_url=str(tmp_path / "db.sqlite"),
            static_dir=str(static_dir),
            serve_static=False,
            spa_fallback=True,
            validate_names=False,
            cors_origins="",
            log_file="",
        )
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture
def make_client(make_settings) -> Iterator[Callable[..., TestClient]]:
    """Start apps on demand; every started client is shut down afterwards."""
    started = []

    def _make(**overrides) -> TestClient:
        client = TestClient(create_app(make_settings(**overrides)))
        client.__enter__()
        started.append(client)
        return client

    yield _make

    for client in reversed(started):
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
