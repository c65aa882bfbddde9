"""Rotas HTTP do serviço."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from cache_session.api.dependencies import get_settings
from cache_session.config.settings import Settings

router = APIRouter()


@router.get("/health")
def health(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    """Health check (não toca na sessão, portanto não emite cookie)."""

    return {"status": "ok", "service": settings.service_name}
