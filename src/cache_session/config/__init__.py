"""Configurações centralizadas do cache_session.

Uso típico:
    from cache_session.config import get_settings
"""

from cache_session.config.settings import (
    DEFAULT_CACHE_EXPIRE,
    DEFAULT_COOKIE_NAME,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "DEFAULT_CACHE_EXPIRE",
    "DEFAULT_COOKIE_NAME",
]
