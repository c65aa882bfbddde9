"""Formatação de datas HTTP (RFC 1123): `Ddd, DD Mon YYYY HH:MM:SS GMT`."""

from __future__ import annotations

from datetime import UTC, datetime
from email.utils import format_datetime


def format_http_date(value: datetime | float | int) -> str:
    """Formata datetime ou timestamp Unix como data HTTP em GMT."""
    if not isinstance(value, datetime):
        value = datetime.fromtimestamp(value, tz=UTC)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return format_datetime(value.astimezone(UTC), usegmt=True)
