"""Fábrica da aplicação FastAPI."""

from __future__ import annotations

from fastapi import FastAPI

from cache_session.api.middleware import SessionMiddleware
from cache_session.api.routes import router
from cache_session.application.factory import create_session_persistence
from cache_session.config.settings import Settings, get_settings
from cache_session.domain.protocols.cache_store import CacheStoreProtocol
from cache_session.observability.logging import configure_logging, get_logger
from cache_session.observability.middleware import CorrelationIdMiddleware

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    cache_store: CacheStoreProtocol | None = None,
) -> FastAPI:
    """Cria a aplicação FastAPI com sessão persistida em cache."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.service_name)

    validation_errors: list[str] = []
    validation_errors.extend(settings.validate_cookie())
    if cache_store is None:
        validation_errors.extend(settings.validate_cache_backend())

    if validation_errors:
        error_msg = "; ".join(validation_errors)
        logger.error("Invalid configuration", extra={"errors": validation_errors})
        raise RuntimeError(f"Configuração inválida: {error_msg}")

    persistence = create_session_persistence(settings, cache_store=cache_store)

    app = FastAPI(title=settings.service_name)
    app.state.settings = settings
    app.state.session_persistence = persistence

    # Último adicionado é o mais externo: correlation_id cobre o middleware de sessão.
    app.add_middleware(SessionMiddleware, persistence=persistence)
    app.add_middleware(CorrelationIdMiddleware)
    app.include_router(router)

    logger.info(
        "Application created",
        extra={"environment": settings.environment, "cache_backend": settings.cache_backend},
    )
    return app
