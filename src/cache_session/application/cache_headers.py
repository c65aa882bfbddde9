"""Tabela de headers de cache HTTP por cache limiter.

Espelha os quatro modos clássicos de session.cache_limiter do PHP.
Função pura: mesmo modo + instante + expire/last_modified => mesmos headers.
"""

from __future__ import annotations

import time
from pathlib import Path

from cache_session.http.dates import format_http_date

# Data passada usada "as is" pelo engine PHP; mantida por compatibilidade.
CACHE_PAST_DATE = "Thu, 19 Nov 1981 08:52:00 GMT"

CACHE_LIMITER_NOCACHE = "nocache"
CACHE_LIMITER_PUBLIC = "public"
CACHE_LIMITER_PRIVATE = "private"
CACHE_LIMITER_PRIVATE_NO_EXPIRE = "private_no_expire"

SUPPORTED_CACHE_LIMITERS = frozenset(
    {
        CACHE_LIMITER_NOCACHE,
        CACHE_LIMITER_PUBLIC,
        CACHE_LIMITER_PRIVATE,
        CACHE_LIMITER_PRIVATE_NO_EXPIRE,
    }
)

CACHE_HEADER_NAMES = ("Expires", "Last-Modified", "Cache-Control", "Pragma")

# Candidatos (relativos ao diretório de trabalho) para derivar Last-Modified.
LAST_MODIFIED_CANDIDATES = ("main.py", "app.py")


def normalize_cache_limiter(value: str) -> str:
    """Retorna o limiter se suportado; qualquer outro valor vira 'nocache'."""
    return value if value in SUPPORTED_CACHE_LIMITERS else CACHE_LIMITER_NOCACHE


def generate_cache_headers(
    cache_limiter: str,
    cache_expire: int,
    last_modified: str,
    now: float | None = None,
) -> dict[str, str | None]:
    """Gera o conjunto de headers de cache para o limiter.

    Sempre retorna as quatro chaves de CACHE_HEADER_NAMES; None indica que o
    header não deve ser emitido. Limiter desconhecido é tratado como nocache.
    """
    if now is None:
        now = time.time()

    headers: dict[str, str | None] = dict.fromkeys(CACHE_HEADER_NAMES)
    limiter = normalize_cache_limiter(cache_limiter)

    if limiter == CACHE_LIMITER_NOCACHE:
        headers["Expires"] = CACHE_PAST_DATE
        headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
        headers["Pragma"] = "no-cache"
        return headers

    visibility = "public" if limiter == CACHE_LIMITER_PUBLIC else "private"
    headers["Cache-Control"] = f"{visibility}, max-age={cache_expire}"
    headers["Last-Modified"] = last_modified

    if limiter == CACHE_LIMITER_PUBLIC:
        headers["Expires"] = format_http_date(now + cache_expire)
    elif limiter == CACHE_LIMITER_PRIVATE:
        headers["Expires"] = CACHE_PAST_DATE

    return headers


def determine_last_modified(cwd: Path | None = None) -> str:
    """Deriva Last-Modified do mtime do entrypoint da aplicação.

    Usa o primeiro arquivo existente de LAST_MODIFIED_CANDIDATES no diretório
    de trabalho; se nenhum existir, usa o mtime do próprio diretório.
    """
    cwd = cwd or Path.cwd()
    for filename in LAST_MODIFIED_CANDIDATES:
        path = cwd / filename
        if path.is_file():
            return format_http_date(path.stat().st_mtime)
    return format_http_date(cwd.stat().st_mtime)
