"""Persistência de sessão usando um cache externo.

Identificadores de sessão são 16 bytes aleatórios em hex. Na persistência,
se a sessão é nova, foi alterada ou pediu regeneração, um novo identificador
é emitido e a entrada antiga é removida do cache.

Fluxo por request:
- initialize_session: cookie -> session_id -> dados do cache
- persist_session: rotação -> escrita no cache -> Set-Cookie -> headers de cache
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

from cache_session.application.cache_headers import (
    CACHE_HEADER_NAMES,
    CACHE_LIMITER_NOCACHE,
    determine_last_modified,
    generate_cache_headers,
    normalize_cache_limiter,
)
from cache_session.config.settings import DEFAULT_CACHE_EXPIRE
from cache_session.domain.protocols.cache_store import CacheStoreProtocol
from cache_session.domain.protocols.http import RequestMessage, ResponseMessage
from cache_session.domain.session import Session
from cache_session.exceptions import InvalidArgumentError
from cache_session.http.cookies import SetCookie, read_request_cookie
from cache_session.http.dates import format_http_date
from cache_session.observability.logging import get_logger, mask_session_id
from cache_session.utils.ids import new_session_id

logger: logging.Logger = get_logger(__name__)

R = TypeVar("R", bound=ResponseMessage)


class CacheSessionConfig(BaseModel):
    """Configuração imutável da persistência (montada uma vez no startup).

    cache_expire é o TTL dos dados no cache, o max-age dos headers e a
    duração do cookie quando `persistent=True`. O padrão (10800s = 180 min)
    segue o session.cache_expire do PHP.
    """

    model_config = ConfigDict(frozen=True)

    cookie_name: str
    cookie_domain: str | None = None
    cookie_path: str = "/"
    cookie_secure: bool = False
    cookie_http_only: bool = False
    cache_limiter: str = CACHE_LIMITER_NOCACHE
    cache_expire: int = DEFAULT_CACHE_EXPIRE
    last_modified: int | None = None
    persistent: bool = False

    @field_validator("cache_limiter", mode="before")
    @classmethod
    def normalize_limiter(cls, value: Any) -> str:
        # Valor desconhecido não é erro: cai silenciosamente para nocache.
        if not isinstance(value, str):
            return CACHE_LIMITER_NOCACHE
        return normalize_cache_limiter(value)


class CacheSessionPersistence:
    """Resolve e persiste sessões num CacheStore, identificadas por cookie."""

    def __init__(
        self,
        cache: CacheStoreProtocol,
        config: CacheSessionConfig,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not config.cookie_name:
            raise InvalidArgumentError("Session cookie name must not be empty")

        self._cache = cache
        self._config = config
        self._clock = clock
        self._last_modified = (
            format_http_date(config.last_modified)
            if config.last_modified
            else determine_last_modified()
        )

    @property
    def config(self) -> CacheSessionConfig:
        return self._config

    @property
    def last_modified(self) -> str:
        """Valor do header Last-Modified (data HTTP)."""
        return self._last_modified

    def initialize_session(self, request: RequestMessage) -> Session:
        """Carrega a sessão identificada pelo cookie da request.

        Cookie ausente não é erro: retorna sessão vazia sem identificador.
        """
        session_id = read_request_cookie(request, self._config.cookie_name)
        data = self._get_session_data_from_cache(session_id) if session_id else {}
        return Session(id=session_id, data=data)

    def persist_session(self, session: Session, response: R) -> R:
        """Persiste a sessão e retorna a response com cookie e headers de cache.

        A response recebida nunca é alterada; toda escrita gera um novo valor.
        Erros do cache propagam sem tratamento, e o cookie só é emitido após a
        escrita no cache.
        """
        session_id = session.id

        # Sessão nova sem dados (ou sem alteração): nada a fazer.
        if not session_id and (not session.data or not session.changed):
            return response

        if not session_id or session.regenerated or session.changed:
            session_id = self._regenerate_session(session_id)

        self._cache.set(session_id, session.to_dict(), self._config.cache_expire)

        cookie = SetCookie(
            name=self._config.cookie_name,
            value=session_id,
            domain=self._config.cookie_domain,
            path=self._config.cookie_path,
            secure=self._config.cookie_secure,
            http_only=self._config.cookie_http_only,
        )

        duration = self.get_persistence_duration(session)
        if duration:
            expires = datetime.fromtimestamp(self._clock() + duration, tz=UTC)
            cookie = cookie.model_copy(update={"expires": expires})

        response = response.with_cookie(cookie)

        if self._response_already_has_cache_headers(response):
            return response

        headers = generate_cache_headers(
            self._config.cache_limiter,
            self._config.cache_expire,
            self._last_modified,
            now=self._clock(),
        )
        for name, value in headers.items():
            if value is not None:
                response = response.with_header(name, value)

        return response

    def get_persistence_duration(self, session: Session) -> int:
        """Duração do cookie em segundos; 0 = cookie sem Expires.

        A duração definida na sessão (persist_for) tem precedência sobre a
        flag global, inclusive quando é 0.
        """
        duration = self._config.cache_expire if self._config.persistent else 0
        if session.has_lifetime:
            duration = session.session_lifetime
        return max(duration, 0)

    def _regenerate_session(self, session_id: str) -> str:
        """Remove a entrada antiga (se existir) e emite novo identificador."""
        if session_id and self._cache.has(session_id):
            self._cache.delete(session_id)

        new_id = new_session_id()
        logger.debug(
            "Session id regenerated",
            extra={
                "old_session_id": mask_session_id(session_id),
                "session_id": mask_session_id(new_id),
            },
        )
        return new_id

    def _get_session_data_from_cache(self, session_id: str) -> dict[str, Any]:
        value, hit = self._cache.get(session_id)
        if not hit:
            return {}
        return value or {}

    @staticmethod
    def _response_already_has_cache_headers(response: ResponseMessage) -> bool:
        return any(response.has_header(name) for name in CACHE_HEADER_NAMES)
