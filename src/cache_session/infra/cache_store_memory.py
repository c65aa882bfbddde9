"""Implementação de CacheStore em memória (apenas dev/testes)."""

from __future__ import annotations

import copy
import logging
import threading
from datetime import UTC, datetime
from typing import Any

from cache_session.infra.cache_contract import CacheStore
from cache_session.observability.logging import get_logger, mask_session_id

logger: logging.Logger = get_logger(__name__)


class InMemoryCacheStore(CacheStore):
    """Armazenamento em memória (não usar em produção).

    Os valores são copiados na escrita e na leitura, simulando a fronteira
    de serialização de um cache externo. TTL <= 0 grava sem expiração, como
    o RedisCacheStore. O acesso ao dict é serializado por lock, pois o
    middleware chama o store a partir do threadpool.
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[Any, float | None]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> tuple[Any, bool]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug("Cache miss (in-memory)", extra={"session_id": mask_session_id(key)})
                return None, False

            value, expire_at = entry
            if expire_at is not None and datetime.now(tz=UTC).timestamp() >= expire_at:
                self._entries.pop(key, None)
                logger.debug(
                    "Cache entry expired (in-memory)", extra={"session_id": mask_session_id(key)}
                )
                return None, False

            logger.debug("Cache hit (in-memory)", extra={"session_id": mask_session_id(key)})
            return copy.deepcopy(value), True

    def has(self, key: str) -> bool:
        _, hit = self.get(key)
        return hit

    def set(self, key: str, value: Any, ttl_seconds: int) -> bool:  # noqa: A003
        expire_at = None
        if ttl_seconds > 0:
            expire_at = datetime.now(tz=UTC).timestamp() + ttl_seconds

        with self._lock:
            self._entries[key] = (copy.deepcopy(value), expire_at)

        logger.debug(
            "Cache entry saved (in-memory)",
            extra={"session_id": mask_session_id(key), "ttl_seconds": ttl_seconds},
        )
        return True

    def delete(self, key: str) -> bool:
        with self._lock:
            removed = self._entries.pop(key, None) is not None

        if removed:
            logger.debug("Cache entry deleted (in-memory)", extra={"session_id": mask_session_id(key)})
        return removed
