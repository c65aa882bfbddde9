"""Hierarquia de erros do cache_session.

- InvalidArgumentError: configuração inválida detectada na construção
- MissingDependencyError: serviço de cache indisponível no momento da montagem
"""

from __future__ import annotations


class CacheSessionError(Exception):
    """Base para todos os erros levantados pelo pacote."""

    pass


class InvalidArgumentError(CacheSessionError, ValueError):
    """Argumento de configuração inválido (ex.: cookie_name vazio)."""

    pass


class MissingDependencyError(CacheSessionError, RuntimeError):
    """Serviço obrigatório para montar a persistência não foi encontrado."""

    @classmethod
    def for_service(cls, service_name: str) -> MissingDependencyError:
        """Cria o erro padrão para um serviço ausente."""
        return cls(
            "create_session_persistence requires the service "
            f'"{service_name}" in order to build a CacheSessionPersistence '
            "instance; none found"
        )
