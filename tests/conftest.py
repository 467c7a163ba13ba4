from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from dashboard.app import create_app
from dashboard.settings import Settings


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "index.html").write_text("<h1>dashboard</h1>", encoding="utf-8")
    (directory / "app.js").write_text("console.log('poll');", encoding="utf-8")
    return directory


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / ".taskmgrr_data" / "history_graph.json"


@pytest.fixture
def make_client(log_path: Path, static_dir: Path):
    clients = []

    def _make(**overrides) -> TestClient:
        fields = {"log_path": log_path, "static_dir": static_dir}
        fields.update(overrides)
        client = TestClient(create_app(Settings(**fields)))
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


def write_log(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
