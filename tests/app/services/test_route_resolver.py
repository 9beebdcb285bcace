"""Testes da resolução routing key → backend."""

from __future__ import annotations

from app.domain.routing import BackendRoute, RouteTable
from app.services.route_resolver import resolve_backend


def _table(*entries: tuple[str, str]) -> RouteTable:
    return RouteTable.from_routes(BackendRoute(prefix=p, host=h) for p, h in entries)


class TestResolveBackend:
    def test_example_from_config(self) -> None:
        table = _table(("approve_req", "b1:9001"))
        assert resolve_backend("approve_req__42", table) == BackendRoute("approve_req", "b1:9001")

    def test_unsuffixed_key(self) -> None:
        table = _table(("form_submit", "b2:9002"))
        assert resolve_backend("form_submit", table).host == "b2:9002"

    def test_first_match_wins(self) -> None:
        table = _table(("approve_req", "b1:9001"), ("approve_req", "b2:9002"))
        assert resolve_backend("approve_req__1", table).host == "b1:9001"

    def test_strips_from_first_marker(self) -> None:
        table = _table(("a", "b1:9001"), ("a__b", "b2:9002"))
        assert resolve_backend("a__b__c", table).host == "b1:9001"

    def test_equality_not_prefix_comparison(self) -> None:
        table = _table(("approve", "b1:9001"))
        assert resolve_backend("approve_req__42", table) is None

    def test_no_match(self) -> None:
        table = _table(("approve_req", "b1:9001"))
        assert resolve_backend("deny__7", table) is None

    def test_empty_key_never_matches(self) -> None:
        table = _table(("", "b0:9000"))
        assert resolve_backend("", table) is None

    def test_marker_only_key_never_matches_empty_prefix(self) -> None:
        table = _table(("", "b0:9000"))
        assert resolve_backend("__abc", table) is None

    def test_empty_table(self) -> None:
        assert resolve_backend("approve_req", RouteTable()) is None
