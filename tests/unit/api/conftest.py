"""API test fixtures: FastAPI TestClient over a fresh app."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from csvjson.api.app import create_app
from csvjson.core.config import AppSettings, ServerConfig


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(server=ServerConfig(max_upload_bytes=1024))


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))


@pytest.fixture
def upload(client):
    def _post(filename: str, data: bytes, field: str = "csvfile"):
        return client.post("/convert", files={field: (filename, data, "text/csv")})

    return _post
