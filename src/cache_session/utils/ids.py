"""Geradores de identificadores."""

from __future__ import annotations

import secrets

SESSION_ID_BYTES = 16


def new_session_id() -> str:
    """Gera um session_id: 16 bytes aleatórios (CSPRNG) em hex minúsculo."""

    return secrets.token_hex(SESSION_ID_BYTES)
