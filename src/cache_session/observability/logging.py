"""Logging JSON da persistência de sessão.

Todo record recebe `service` e `correlation_id`; identificadores de sessão
que cheguem completos em `extra` são truncados antes da formatação.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from cache_session.observability.middleware import get_correlation_id

SESSION_ID_LOG_FIELDS = ("session_id", "old_session_id")
_MASK_SUFFIX = "..."
_MASK_PREFIX_LEN = 8


def mask_session_id(session_id: str) -> str:
    """Trunca o session_id para uso em logs (nunca logar o valor completo)."""

    if not session_id:
        return ""
    if session_id.endswith(_MASK_SUFFIX) and len(session_id) <= _MASK_PREFIX_LEN + len(_MASK_SUFFIX):
        return session_id
    return session_id[:_MASK_PREFIX_LEN] + _MASK_SUFFIX


class SessionLogFilter(logging.Filter):
    """Completa o record com service/correlation_id e mascara ids de sessão."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else get_correlation_id()
        record.service = self._service_name

        for field in SESSION_ID_LOG_FIELDS:
            value = getattr(record, field, None)
            if isinstance(value, str):
                setattr(record, field, mask_session_id(value))
        return True


def configure_logging(level: str, service_name: str) -> None:
    """Instala um único handler JSON no root logger."""

    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(correlation_id)s %(service)s",
        rename_fields={"levelname": "level", "name": "logger"},
    )

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(SessionLogFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
