import asyncio

import pytest
from fastapi.testclient import TestClient

from playlist_api.app.core.config import settings
from playlist_api.app.main import app


@pytest.fixture
def data_file(tmp_path, monkeypatch):
    """Point the application at a fresh data file inside ``tmp_path``."""
    path = tmp_path / "data" / "videos.json"
    monkeypatch.setattr(settings, "data_file", str(path))
    return path


@pytest.fixture
def client(data_file):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def run():
    """Run a service coroutine to completion."""
    return asyncio.run
