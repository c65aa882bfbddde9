"""Camada de infraestrutura — adapters para o cache de sessão.

Uso típico:
    from cache_session.infra import create_cache_store

Infraestrutura não decide regra de sessão; apenas guarda e recupera dados.
"""

from cache_session.infra.cache_contract import CacheStore, CacheStoreError
from cache_session.infra.cache_store_factory import (
    create_cache_store,
    create_cache_store_from_settings,
)
from cache_session.infra.cache_store_memory import InMemoryCacheStore
from cache_session.infra.cache_store_redis import RedisCacheStore

__all__ = [
    "CacheStore",
    "CacheStoreError",
    "InMemoryCacheStore",
    "RedisCacheStore",
    "create_cache_store",
    "create_cache_store_from_settings",
]
