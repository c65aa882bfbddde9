"""Protocolo de domínio para o cache que guarda os dados de sessão."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class CacheStoreProtocol(ABC):
    """Contrato mínimo síncrono: chave = session_id, valor = dict de dados."""

    @abstractmethod
    def get(self, key: str) -> tuple[Any, bool]: ...

    @abstractmethod
    def has(self, key: str) -> bool: ...

    @abstractmethod
    def set(self, key: str, value: Any, ttl_seconds: int) -> bool: ...  # noqa: A003

    @abstractmethod
    def delete(self, key: str) -> bool: ...
