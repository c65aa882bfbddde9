"""Configurações da aplicação via variáveis de ambiente.

Todas as variáveis usam o prefixo SESSION_CACHE_ (ex.: SESSION_CACHE_COOKIE_NAME).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from cache_session.infra.cache_contract import DEFAULT_KEY_PREFIX

# Padrão do session.cache_expire do PHP: 180 minutos.
DEFAULT_CACHE_EXPIRE: int = 10800
DEFAULT_COOKIE_NAME: str = "SESSION"


class Settings(BaseSettings):
    """Configurações lidas do ambiente."""

    model_config = SettingsConfigDict(
        env_prefix="SESSION_CACHE_",
        case_sensitive=False,
    )

    # Aplicação
    service_name: str = "cache_session"
    environment: str = "development"
    log_level: str = "INFO"

    # Backend do cache
    cache_backend: str = "memory"  # memory | redis
    redis_url: str | None = None  # Para cache_backend=redis
    key_prefix: str = DEFAULT_KEY_PREFIX

    # Cookie de sessão
    cookie_name: str = DEFAULT_COOKIE_NAME
    cookie_domain: str | None = None
    cookie_path: str = "/"
    cookie_secure: bool = False
    cookie_http_only: bool = False

    # Headers de cache HTTP e TTL
    cache_limiter: str = "nocache"  # nocache | public | private | private_no_expire
    cache_expire: int = DEFAULT_CACHE_EXPIRE  # TTL dos dados e max-age
    last_modified: int | None = None  # Timestamp Unix; derivado se ausente
    persistent: bool = False  # Cookie com Expires por padrão

    def validate_cache_backend(self) -> list[str]:
        """Valida backend do cache por ambiente.

        Em staging/prod, memory é proibido (instâncias não compartilham estado).
        Retorna lista de erros (vazia = tudo OK).
        """
        errors: list[str] = []
        backend = self.cache_backend.lower()

        valid_backends = {"memory", "redis"}
        if backend not in valid_backends:
            errors.append(
                f"SESSION_CACHE_CACHE_BACKEND '{backend}' inválido. Valores válidos: {valid_backends}"
            )

        if backend == "memory" and (self.is_staging or self.is_production):
            errors.append(
                "SESSION_CACHE_CACHE_BACKEND=memory é proibido em staging/production. "
                "Configure Redis."
            )

        if backend == "redis" and not self.redis_url:
            errors.append("SESSION_CACHE_CACHE_BACKEND=redis requer SESSION_CACHE_REDIS_URL")

        return errors

    def validate_cookie(self) -> list[str]:
        """Valida configuração do cookie de sessão."""
        errors: list[str] = []
        if not self.cookie_name:
            errors.append("SESSION_CACHE_COOKIE_NAME não pode ser vazio")
        if self.cache_expire < 0:
            errors.append("SESSION_CACHE_CACHE_EXPIRE deve ser >= 0")
        return errors

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment.lower() in ("production", "prod")

    @property
    def is_staging(self) -> bool:
        """Retorna True se ambiente é staging."""
        return self.environment.lower() in ("staging", "stage")

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment.lower() in ("development", "dev", "local")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings.

    A cache garante que mesmo múltiplas injeções não criam novos objetos.
    """
    return Settings()
