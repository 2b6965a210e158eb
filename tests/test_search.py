"""Tests for free-text search and highlight expansion."""

from __future__ import annotations

import pytest

from service_catalog.analysis.search import search_services
from service_catalog.models.service import Service


def svc(
    name: str,
    *deps: str,
    description: str = "",
    owner: str = "ops",
) -> Service:
    """Create a service with the given dependencies and metadata."""
    return Service(
        name=name,
        description=description,
        owner=owner,
        dependencies=deps,
    )


@pytest.fixture
def chain() -> list[Service]:
    """A -> B -> C."""
    return [svc("A", "B"), svc("B", "C"), svc("C")]


class TestEmptyQuery:
    """Blank queries disable filtering."""

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_blank_query_is_inactive(self, chain: list[Service], query: str) -> None:
        """Empty or whitespace-only query -> empty sets, zero counts."""
        result = search_services(query, chain)

        assert result.matched == frozenset()
        assert result.highlighted == frozenset()
        assert result.matched_count == 0
        assert result.related_count == 0
        assert not result.is_active

    def test_blank_query_dims_nothing(self, chain: list[Service]) -> None:
        """Inactive result means render everything normally."""
        result = search_services("", chain)

        assert not any(result.is_dimmed(s.name) for s in chain)


class TestMatching:
    """Tests for the matched set."""

    def test_match_by_name_case_insensitive(self) -> None:
        """Query matches name regardless of case."""
        services = [svc("user-service"), svc("order-service")]

        result = search_services("USER", services)

        assert result.matched == {"user-service"}

    def test_match_by_description(self) -> None:
        """Description text is searched."""
        services = [svc("auth", description="Issues login tokens"), svc("other")]

        assert search_services("login", services).matched == {"auth"}

    def test_match_by_owner(self) -> None:
        """Owner text is searched."""
        services = [svc("auth", owner="Identity Squad"), svc("other")]

        assert search_services("identity", services).matched == {"auth"}

    def test_github_not_searched(self) -> None:
        """Only name, description and owner are scanned."""
        services = [
            Service(
                name="auth",
                description="tokens",
                owner="team",
                github="https://github.com/acme/secret-repo",
            )
        ]

        assert search_services("secret-repo", services).matched == frozenset()

    def test_no_match(self, chain: list[Service]) -> None:
        """Zero matches -> empty sets and zero counts, not an error."""
        result = search_services("zzz-nothing", chain)

        assert result.matched == frozenset()
        assert result.highlighted == frozenset()
        assert result.matched_count == 0
        assert result.related_count == 0
        assert result.is_active


class TestHighlightExpansion:
    """Tests for one-hop expansion around matches."""

    def test_exactly_one_hop(self, chain: list[Service]) -> None:
        """Query matching only A highlights {A, B}, not C."""
        result = search_services("A", chain)

        assert result.matched == {"A"}
        assert result.highlighted == {"A", "B"}
        assert "C" not in result.highlighted
        assert result.related_count == 1

    def test_inbound_hop(self, chain: list[Service]) -> None:
        """Matching the middle pulls in both neighbors."""
        result = search_services("B", chain)

        assert result.matched == {"B"}
        assert result.highlighted == {"A", "B", "C"}
        assert result.related_count == 2

    def test_leaf_match_pulls_dependents_only(self, chain: list[Service]) -> None:
        """Matching the leaf pulls in its direct dependent only."""
        result = search_services("C", chain)

        assert result.highlighted == {"B", "C"}

    def test_dangling_dependency_highlighted(self) -> None:
        """Declared dependencies are highlighted as written."""
        services = [svc("billing", "ghost"), svc("other")]

        result = search_services("billing", services)

        assert result.highlighted == {"billing", "ghost"}
        assert result.related_count == 1

    def test_neighbor_that_also_matches_counts_as_matched(self) -> None:
        """A neighbor that matches on its own is not 'related'."""
        services = [svc("pay-api", "pay-db"), svc("pay-db"), svc("reports", "pay-db")]

        result = search_services("pay", services)

        assert result.matched == {"pay-api", "pay-db"}
        assert result.highlighted == {"pay-api", "pay-db", "reports"}
        assert result.matched_count == 2
        assert result.related_count == 1

    def test_dimming(self, chain: list[Service]) -> None:
        """Services outside the highlight are dimmed."""
        result = search_services("A", chain)

        assert not result.is_dimmed("A")
        assert not result.is_dimmed("B")
        assert result.is_dimmed("C")


class TestDeterminism:
    """Repeated searches agree."""

    def test_repeated_calls(self, chain: list[Service]) -> None:
        assert search_services("b", chain) == search_services("b", chain)
