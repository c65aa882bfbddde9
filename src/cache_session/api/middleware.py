"""Middleware de sessão: resolve antes da rota, persiste depois."""

from __future__ import annotations

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from cache_session.application.persistence import CacheSessionPersistence
from cache_session.http.messages import HttpResponse


class SessionMiddleware(BaseHTTPMiddleware):
    """Expõe a sessão em `request.state.session` e grava cookie/headers na saída.

    As chamadas ao cache são bloqueantes; rodam no threadpool do Starlette.
    """

    def __init__(self, app: ASGIApp, persistence: CacheSessionPersistence) -> None:
        super().__init__(app)
        self._persistence = persistence

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        session = await run_in_threadpool(self._persistence.initialize_session, request)
        request.state.session = session

        response = await call_next(request)

        snapshot = HttpResponse.from_starlette(response)
        persisted = await run_in_threadpool(self._persistence.persist_session, session, snapshot)
        if persisted is not snapshot:
            persisted.apply_to(response, original=snapshot)
        return response
