"""Response HTTP imutável usada pela persistência de sessão.

Toda escrita (header ou cookie) retorna uma nova instância; o valor
original nunca é alterado.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from starlette.responses import Response

from cache_session.http.cookies import SetCookie


class HttpResponse(BaseModel):
    """Snapshot imutável de status, headers e cookies de uma response."""

    model_config = ConfigDict(frozen=True)

    status_code: int = 200
    headers: tuple[tuple[str, str], ...] = ()
    cookies: tuple[SetCookie, ...] = ()

    def has_header(self, name: str) -> bool:
        return self.get_header(name) is not None

    def get_header(self, name: str) -> str | None:
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None

    def with_header(self, name: str, value: str) -> HttpResponse:
        """Define o header (substitui qualquer valor anterior, case-insensitive)."""
        lowered = name.lower()
        headers = tuple((k, v) for k, v in self.headers if k.lower() != lowered)
        return self.model_copy(update={"headers": headers + ((name, value),)})

    def with_cookie(self, cookie: SetCookie) -> HttpResponse:
        """Anexa o cookie, substituindo um anterior de mesmo nome."""
        cookies = tuple(c for c in self.cookies if c.name != cookie.name)
        return self.model_copy(update={"cookies": cookies + (cookie,)})

    def get_cookie(self, name: str) -> SetCookie | None:
        for cookie in self.cookies:
            if cookie.name == name:
                return cookie
        return None

    def header_items(self) -> list[tuple[str, str]]:
        """Headers seguidos de uma linha Set-Cookie por cookie."""
        items = list(self.headers)
        items.extend(("Set-Cookie", cookie.render()) for cookie in self.cookies)
        return items

    @classmethod
    def from_starlette(cls, response: Response) -> HttpResponse:
        """Captura os headers de uma response Starlette.

        Linhas Set-Cookie já presentes ficam na response de origem e não
        entram no snapshot.
        """
        headers = tuple(
            (key, value) for key, value in response.headers.items() if key != "set-cookie"
        )
        return cls(status_code=response.status_code, headers=headers)

    def apply_to(self, response: Response, original: HttpResponse | None = None) -> Response:
        """Escreve headers e cookies deste snapshot numa response Starlette.

        Com `original`, só as linhas ausentes dele são escritas; headers
        repetidos da rota (Link, Vary...) ficam intactos.
        """
        existing = set(original.headers) if original is not None else set()
        for name, value in self.headers:
            if (name, value) not in existing:
                response.headers[name] = value

        for cookie in self.cookies:
            prefix = f"{cookie.name}=".encode("latin-1")
            response.raw_headers[:] = [
                (key, value)
                for key, value in response.raw_headers
                if not (key == b"set-cookie" and value.startswith(prefix))
            ]
            response.headers.append("set-cookie", cookie.render())

        return response
