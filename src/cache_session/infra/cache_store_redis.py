"""Implementação de CacheStore usando Redis (produção)."""

from __future__ import annotations

import json
import logging
from typing import Any

from cache_session.infra.cache_contract import DEFAULT_KEY_PREFIX, CacheStore, CacheStoreError
from cache_session.observability.logging import get_logger, mask_session_id

logger: logging.Logger = get_logger(__name__)


class RedisCacheStore(CacheStore):
    """Armazenamento em Redis para produção.

    Características:
    - TTL nativo de Redis (SETEX)
    - Valores serializados como JSON
    - Escalável para múltiplas instâncias
    """

    def __init__(self, redis_client: Any, key_prefix: str = DEFAULT_KEY_PREFIX) -> None:
        self._redis = redis_client
        self._key_prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    def get(self, key: str) -> tuple[Any, bool]:
        try:
            payload = self._redis.get(self._key(key))
            if payload is None:
                logger.debug("Cache miss (Redis)", extra={"session_id": mask_session_id(key)})
                return None, False

            if isinstance(payload, bytes):
                payload = payload.decode("utf-8")

            value = json.loads(payload)
        except Exception as e:
            logger.error(
                "Failed to load session data from Redis",
                extra={"session_id": mask_session_id(key), "error": str(e)},
            )
            raise CacheStoreError(f"Redis get failed: {e}") from e

        logger.debug("Cache hit (Redis)", extra={"session_id": mask_session_id(key)})
        return value, True

    def has(self, key: str) -> bool:
        try:
            return bool(self._redis.exists(self._key(key)))
        except Exception as e:
            logger.error(
                "Failed to check session existence in Redis",
                extra={"session_id": mask_session_id(key), "error": str(e)},
            )
            raise CacheStoreError(f"Redis exists failed: {e}") from e

    def set(self, key: str, value: Any, ttl_seconds: int) -> bool:  # noqa: A003
        try:
            payload = json.dumps(value)
            if ttl_seconds > 0:
                self._redis.setex(self._key(key), ttl_seconds, payload)
            else:
                # SETEX rejeita TTL <= 0; grava sem expiração.
                self._redis.set(self._key(key), payload)
        except Exception as e:
            logger.error(
                "Failed to save session data to Redis",
                extra={"session_id": mask_session_id(key), "error": str(e)},
            )
            raise CacheStoreError(f"Redis save failed: {e}") from e

        logger.debug(
            "Session data saved (Redis)",
            extra={"session_id": mask_session_id(key), "ttl_seconds": ttl_seconds},
        )
        return True

    def delete(self, key: str) -> bool:
        try:
            deleted = self._redis.delete(self._key(key))
        except Exception as e:
            logger.error(
                "Failed to delete session data from Redis",
                extra={"session_id": mask_session_id(key), "error": str(e)},
            )
            raise CacheStoreError(f"Redis delete failed: {e}") from e

        if deleted:
            logger.debug("Session data deleted (Redis)", extra={"session_id": mask_session_id(key)})
        return bool(deleted)
