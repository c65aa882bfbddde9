"""Protocolos das mensagens HTTP consumidas pela persistência de sessão."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from cache_session.http.messages import SetCookie

R = TypeVar("R", bound="ResponseMessage")


class RequestMessage(Protocol):
    """Request de entrada: header Cookie bruto e/ou cookies já parseados.

    `starlette.requests.Request` satisfaz este contrato.
    """

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def cookies(self) -> Mapping[str, str]: ...


class ResponseMessage(Protocol):
    """Response imutável: toda escrita retorna um novo valor."""

    def has_header(self, name: str) -> bool: ...

    def with_header(self: R, name: str, value: str) -> R: ...

    def with_cookie(self: R, cookie: SetCookie) -> R: ...
