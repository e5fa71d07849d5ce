"""Shared fixtures: packaged datasets, the mock remotes app and an API test client."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from bankbridge.backend.app import create_app
from bankbridge.backend.config import Settings
from bankbridge.backend.state import BankDirectory, load_directory
from bankbridge.mock_remotes import create_mock_app


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def mock_remotes_app() -> FastAPI:
    return create_mock_app()


@pytest.fixture()
def directory(settings: Settings, mock_remotes_app: FastAPI) -> BankDirectory:
    return load_directory(settings, transport=httpx.ASGITransport(app=mock_remotes_app))


@pytest.fixture()
def test_client(directory: BankDirectory) -> TestClient:
    return TestClient(create_app(directory=directory))


@pytest.fixture()
def client_with_transport(settings: Settings) -> Callable[[httpx.AsyncBaseTransport], TestClient]:
    """Build a client whose remote calls go through the given transport."""

    def _build(transport: httpx.AsyncBaseTransport) -> TestClient:
        return TestClient(create_app(directory=load_directory(settings, transport=transport)))

    return _build
