"""Dependências injetadas nas rotas."""

from __future__ import annotations

from fastapi import Request

from cache_session.application.persistence import CacheSessionPersistence
from cache_session.config.settings import Settings
from cache_session.domain.session import Session


def get_settings(request: Request) -> Settings:
    """Retorna settings da aplicação."""

    return request.app.state.settings


def get_session_persistence(request: Request) -> CacheSessionPersistence:
    """Retorna a persistência de sessão ativa."""

    return request.app.state.session_persistence


def get_session(request: Request) -> Session:
    """Retorna a sessão resolvida pelo SessionMiddleware para esta request."""

    return request.state.session
