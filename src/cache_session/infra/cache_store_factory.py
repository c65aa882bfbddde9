"""Factory para CacheStore — Criação Backend-Agnóstica.

Responsabilidades:
- Criar instâncias de CacheStore baseado em config
- Sinalizar serviço ausente com MissingDependencyError
- Registrar escolha de backend
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cache_session.exceptions import MissingDependencyError
from cache_session.infra.cache_contract import DEFAULT_KEY_PREFIX, CacheStore
from cache_session.infra.cache_store_memory import InMemoryCacheStore
from cache_session.infra.cache_store_redis import RedisCacheStore
from cache_session.observability.logging import get_logger

if TYPE_CHECKING:
    from cache_session.config.settings import Settings

logger: logging.Logger = get_logger(__name__)


def create_cache_store(
    backend: str,
    redis_client: Any | None = None,
    key_prefix: str = DEFAULT_KEY_PREFIX,
) -> CacheStore:
    """Factory para CacheStore.

    Args:
        backend: "redis" ou "memory"
        redis_client: Cliente Redis (obrigatório se backend="redis")
        key_prefix: Prefixo das chaves no Redis

    Returns:
        CacheStore configurado

    Raises:
        MissingDependencyError: Se backend="redis" sem cliente
        ValueError: Se backend inválido
    """
    if backend == "memory":
        logger.warning("Using in-memory session cache store (dev only)")
        return InMemoryCacheStore()

    if backend == "redis":
        if not redis_client:
            raise MissingDependencyError.for_service("redis_client")
        logger.info("Using Redis session cache store", extra={"key_prefix": key_prefix})
        return RedisCacheStore(redis_client, key_prefix=key_prefix)

    msg = f"Unknown session cache backend: {backend}"
    raise ValueError(msg)


def create_cache_store_from_settings(
    settings: Settings, redis_client: Any | None = None
) -> CacheStore:
    """Cria CacheStore a partir de Settings.

    Args:
        settings: Instância de Settings (carregada de env vars)
        redis_client: Cliente Redis (opcional, será criado a partir de redis_url)

    Returns:
        CacheStore configurado

    Raises:
        MissingDependencyError: Se o Redis configurado não pode ser montado
    """
    backend = settings.cache_backend.lower()

    if backend == "redis" and not redis_client:
        if not settings.redis_url:
            raise MissingDependencyError.for_service("redis_url")
        try:
            import redis

            redis_client = redis.from_url(settings.redis_url)
            logger.info("Auto-created Redis client for session cache")
        except Exception as e:
            logger.error(
                "Failed to create Redis client for session cache",
                extra={"error": type(e).__name__},
            )
            raise MissingDependencyError.for_service("redis") from e

    return create_cache_store(
        backend=backend,
        redis_client=redis_client,
        key_prefix=settings.key_prefix,
    )
