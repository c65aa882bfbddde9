"""Testes para initialize_session (resolver)."""

from __future__ import annotations

import pytest

from cache_session.domain.session import Session
from cache_session.infra.cache_contract import CacheStoreError

SESSION_ID = "0123456789abcdef0123456789abcdef"


class TestInitializeSessionWithoutCookie:
    """Sem cookie: sessão nova, sem acesso ao cache."""

    def test_returns_empty_session(self, make_persistence, make_request, cache) -> None:
        persistence = make_persistence()

        session = persistence.initialize_session(make_request())

        assert isinstance(session, Session)
        assert session.id == ""
        assert session.data == {}
        assert session.changed is False
        assert session.regenerated is False
        cache.get.assert_not_called()

    def test_other_cookie_only(self, make_persistence, make_request, cache) -> None:
        persistence = make_persistence()

        session = persistence.initialize_session(make_request("other=value"))

        assert session.id == ""
        cache.get.assert_not_called()


class TestInitializeSessionFromCookieHeader:
    """Header Cookie bruto é a fonte preferencial."""

    def test_cache_hit(self, make_persistence, make_request, cache) -> None:
        cache.set(SESSION_ID, {"k": "v"}, 60)
        persistence = make_persistence()

        session = persistence.initialize_session(make_request(f"a=1; sess={SESSION_ID}"))

        assert session.id == SESSION_ID
        assert session.data == {"k": "v"}
        assert session.changed is False
        cache.get.assert_called_once_with(SESSION_ID)

    def test_cache_miss_yields_empty_data(self, make_persistence, make_request) -> None:
        persistence = make_persistence()

        session = persistence.initialize_session(make_request(f"sess={SESSION_ID}"))

        assert session.id == SESSION_ID
        assert session.data == {}

    def test_falsy_cached_value_yields_empty_data(self, make_persistence, make_request, cache) -> None:
        cache.set(SESSION_ID, None, 60)
        persistence = make_persistence()

        session = persistence.initialize_session(make_request(f"sess={SESSION_ID}"))

        assert session.data == {}

    def test_header_wins_over_parsed_cookies(self, make_persistence, make_request, cache) -> None:
        persistence = make_persistence()

        session = persistence.initialize_session(
            make_request("other=1", cookies={"sess": SESSION_ID})
        )

        assert session.id == ""
        cache.get.assert_not_called()


class TestInitializeSessionFromParsedCookies:
    """Sem header bruto, usa o mapa de cookies já parseado."""

    def test_reads_cookie_params(self, make_persistence, make_request, cache) -> None:
        cache.set(SESSION_ID, {"user": 7}, 60)
        persistence = make_persistence()

        session = persistence.initialize_session(make_request(cookies={"sess": SESSION_ID}))

        assert session.id == SESSION_ID
        assert session.data == {"user": 7}


class TestInitializeSessionCacheFailure:
    """Falha do cache na leitura propaga para quem chamou."""

    def test_get_failure_propagates(self, make_persistence, make_request, cache) -> None:
        cache.get.side_effect = CacheStoreError("boom")
        persistence = make_persistence()

        with pytest.raises(CacheStoreError, match="boom"):
            persistence.initialize_session(make_request(f"sess={SESSION_ID}"))

        cache.get.assert_called_once_with(SESSION_ID)
