"""Leitura e escrita de cookies nomeados."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from starlette.requests import cookie_parser

from cache_session.domain.protocols.http import RequestMessage
from cache_session.http.dates import format_http_date


class SetCookie(BaseModel):
    """Cookie estruturado para o header Set-Cookie.

    `expires=None` gera um cookie de sessão do navegador (sem atributo Expires).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: str = ""
    domain: str | None = None
    path: str | None = "/"
    secure: bool = False
    http_only: bool = False
    expires: datetime | None = None

    def render(self) -> str:
        """Retorna o valor do header Set-Cookie."""
        parts = [f"{self.name}={self.value}"]
        if self.domain:
            parts.append(f"Domain={self.domain}")
        if self.path:
            parts.append(f"Path={self.path}")
        if self.expires is not None:
            parts.append(f"Expires={format_http_date(self.expires)}")
        if self.secure:
            parts.append("Secure")
        if self.http_only:
            parts.append("HttpOnly")
        return "; ".join(parts)


def parse_cookie_header(header: str) -> dict[str, str]:
    """Parseia o header Cookie bruto em {nome: valor}."""
    return cookie_parser(header)


def read_request_cookie(request: RequestMessage, name: str) -> str:
    """Lê o cookie `name` da request, ou "" se ausente.

    Se o header Cookie bruto está presente, ele é a fonte. Caso contrário,
    usa o mapa de cookies já parseado (transportes que não entregam o header).
    """
    header = request.headers.get("cookie") or ""
    if header:
        return parse_cookie_header(header).get(name) or ""
    return request.cookies.get(name) or ""
