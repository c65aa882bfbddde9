"""Contrato do cache de sessão (CacheStore).

Separado para manter SRP e permitir reuso entre implementações.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from cache_session.domain.protocols.cache_store import CacheStoreProtocol
from cache_session.exceptions import CacheSessionError

DEFAULT_KEY_PREFIX = "session:"


class CacheStoreError(CacheSessionError):
    """Erro ao persistir ou recuperar dados de sessão no cache."""

    pass


class CacheStore(CacheStoreProtocol):
    """Contrato abstrato para o cache de dados de sessão.

    Responsabilidades:
    - Persistir o dict de dados com TTL
    - Recuperar dados por session_id, sinalizando hit/miss
    - Remover entradas na rotação de identificador

    Falhas do backend são levantadas como CacheStoreError; nenhuma
    implementação deve engolir erros de leitura ou escrita.
    """

    @abstractmethod
    def get(self, key: str) -> tuple[Any, bool]:
        """Carrega o valor armazenado.

        Args:
            key: session_id

        Returns:
            Tupla (valor, hit). Em miss, (None, False).

        Raises:
            CacheStoreError: Em caso de falha do backend
        """
        ...

    @abstractmethod
    def has(self, key: str) -> bool:
        """Verifica se existe entrada ativa para a chave."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any, ttl_seconds: int) -> bool:  # noqa: A003
        """Persiste o valor com TTL.

        Args:
            key: session_id
            value: dict de dados da sessão
            ttl_seconds: Time-to-live em segundos

        Returns:
            True se persistido

        Raises:
            CacheStoreError: Em caso de falha de persistência
        """
        ...

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove a entrada. Retorna False se não existia."""
        ...
