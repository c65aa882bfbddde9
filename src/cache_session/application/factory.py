"""Factory para CacheSessionPersistence a partir de Settings.

Responsabilidades:
- Mapear Settings -> CacheSessionConfig (campos nomeados)
- Montar o CacheStore quando não injetado
- Sinalizar cache indisponível com MissingDependencyError
"""

from __future__ import annotations

import logging
from typing import Any

from cache_session.application.persistence import CacheSessionConfig, CacheSessionPersistence
from cache_session.config.settings import Settings
from cache_session.domain.protocols.cache_store import CacheStoreProtocol
from cache_session.infra.cache_store_factory import create_cache_store_from_settings
from cache_session.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)


def build_config(settings: Settings) -> CacheSessionConfig:
    """Converte Settings na configuração imutável da persistência."""
    return CacheSessionConfig(
        cookie_name=settings.cookie_name,
        cookie_domain=settings.cookie_domain,
        cookie_path=settings.cookie_path,
        cookie_secure=settings.cookie_secure,
        cookie_http_only=settings.cookie_http_only,
        cache_limiter=settings.cache_limiter,
        cache_expire=settings.cache_expire,
        last_modified=settings.last_modified,
        persistent=settings.persistent,
    )


def create_session_persistence(
    settings: Settings,
    cache_store: CacheStoreProtocol | None = None,
    redis_client: Any | None = None,
) -> CacheSessionPersistence:
    """Cria CacheSessionPersistence.

    Args:
        settings: Instância de Settings
        cache_store: CacheStore já montado (opcional)
        redis_client: Cliente Redis para montar o store (opcional)

    Raises:
        MissingDependencyError: Se o cache configurado não pode ser montado
        InvalidArgumentError: Se cookie_name vazio
    """
    if cache_store is None:
        cache_store = create_cache_store_from_settings(settings, redis_client=redis_client)

    config = build_config(settings)
    persistence = CacheSessionPersistence(cache_store, config)
    logger.info(
        "Session persistence ready",
        extra={
            "cookie_name": config.cookie_name,
            "cache_limiter": config.cache_limiter,
            "cache_expire": config.cache_expire,
            "persistent": config.persistent,
        },
    )
    return persistence
