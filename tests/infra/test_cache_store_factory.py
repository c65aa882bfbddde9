"""Testes para factory de CacheStore."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from cache_session.config.settings import Settings
from cache_session.exceptions import MissingDependencyError
from cache_session.infra.cache_store_factory import (
    create_cache_store,
    create_cache_store_from_settings,
)
from cache_session.infra.cache_store_memory import InMemoryCacheStore
from cache_session.infra.cache_store_redis import RedisCacheStore


class TestCreateCacheStore:
    """Testes para factory básica."""

    def test_create_memory_store(self):
        assert isinstance(create_cache_store("memory"), InMemoryCacheStore)

    def test_create_redis_store(self):
        store = create_cache_store("redis", redis_client=MagicMock(), key_prefix="x:")
        assert isinstance(store, RedisCacheStore)
        assert store._key_prefix == "x:"

    def test_redis_requires_client(self):
        with pytest.raises(MissingDependencyError, match="redis_client"):
            create_cache_store("redis", redis_client=None)

    def test_invalid_backend(self):
        with pytest.raises(ValueError, match="Unknown session cache backend"):
            create_cache_store("invalid")


class TestCreateCacheStoreFromSettings:
    def test_memory(self):
        assert isinstance(create_cache_store_from_settings(Settings()), InMemoryCacheStore)

    def test_backend_is_case_insensitive(self):
        store = create_cache_store_from_settings(Settings(cache_backend="MEMORY"))
        assert isinstance(store, InMemoryCacheStore)

    def test_redis_with_injected_client(self):
        store = create_cache_store_from_settings(
            Settings(cache_backend="redis"), redis_client=MagicMock()
        )
        assert isinstance(store, RedisCacheStore)

    def test_redis_without_url(self):
        with pytest.raises(MissingDependencyError, match="redis_url"):
            create_cache_store_from_settings(Settings(cache_backend="redis"))

    def test_redis_client_created_from_url(self, monkeypatch: pytest.MonkeyPatch):
        client = MagicMock()
        from_url = MagicMock(return_value=client)
        monkeypatch.setattr("redis.from_url", from_url)

        store = create_cache_store_from_settings(
            Settings(cache_backend="redis", redis_url="redis://localhost:6379/0", key_prefix="p:")
        )

        from_url.assert_called_once_with("redis://localhost:6379/0")
        assert isinstance(store, RedisCacheStore)
        assert store._redis is client
        assert store._key_prefix == "p:"

    def test_redis_client_creation_failure(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr("redis.from_url", MagicMock(side_effect=ValueError("bad url")))

        with pytest.raises(MissingDependencyError, match='"redis"'):
            create_cache_store_from_settings(Settings(cache_backend="redis", redis_url="nope://"))
