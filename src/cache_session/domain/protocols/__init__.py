"""Re-exports dos Protocolos de domínio para uso por Application."""

from __future__ import annotations

from cache_session.domain.protocols.cache_store import CacheStoreProtocol
from cache_session.domain.protocols.http import RequestMessage, ResponseMessage

__all__ = [
    "CacheStoreProtocol",
    "RequestMessage",
    "ResponseMessage",
]
