from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from cache_session.api.app import create_app
from cache_session.application.persistence import CacheSessionConfig, CacheSessionPersistence
from cache_session.config.settings import Settings, get_settings
from cache_session.infra.cache_store_memory import InMemoryCacheStore

FIXED_NOW = 1_700_000_000.0  # Tue, 14 Nov 2023 22:13:20 GMT
FIXED_LAST_MODIFIED = 1_600_000_000  # Sun, 13 Sep 2020 12:26:40 GMT


@pytest.fixture()
def make_request():
    """Request mínima: header Cookie bruto e mapa de cookies parseados."""

    def _make(cookie_header: str = "", cookies: dict[str, str] | None = None):
        headers = {"cookie": cookie_header} if cookie_header else {}
        return SimpleNamespace(headers=headers, cookies=cookies or {})

    return _make


@pytest.fixture()
def cache() -> MagicMock:
    """InMemoryCacheStore real, com chamadas registradas."""
    return MagicMock(wraps=InMemoryCacheStore())


@pytest.fixture()
def make_persistence(cache):
    """Monta CacheSessionPersistence com relógio e Last-Modified fixos."""

    def _make(**overrides) -> CacheSessionPersistence:
        fields = {"cookie_name": "sess", "last_modified": FIXED_LAST_MODIFIED}
        fields.update(overrides)
        return CacheSessionPersistence(cache, CacheSessionConfig(**fields), clock=lambda: FIXED_NOW)

    return _make


@pytest.fixture()
def app_store() -> InMemoryCacheStore:
    return InMemoryCacheStore()


@pytest.fixture()
def app(app_store):
    get_settings.cache_clear()
    settings = Settings(cookie_name="sess", last_modified=FIXED_LAST_MODIFIED)
    yield create_app(settings, cache_store=app_store)
    get_settings.cache_clear()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
