"""Tests for sorting and pagination."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from claimboard.core.types import SortDirection
from claimboard.query.paging import paginate, sort_claims


if TYPE_CHECKING:
    from collections.abc import Callable


def _ids(claims: list) -> list[str]:
    return [claim.claim_id for claim in claims]


class TestSortClaims:
    def test_numeric_descending(self, make_claims: Callable) -> None:
        claims = make_claims(
            {"claim_id": "a", "score": 0.2},
            {"claim_id": "b", "score": 0.9},
            {"claim_id": "c", "score": 0.5},
        )
        assert _ids(sort_claims(claims, "score")) == ["b", "c", "a"]

    @pytest.mark.parametrize("direction", [SortDirection.ASC, SortDirection.DESC, "DESC"])
    def test_equal_keys_keep_input_order(self, make_claims: Callable, direction: SortDirection | str) -> None:
        claims = make_claims(*({"claim_id": claim_id, "score": 0.5} for claim_id in ("x", "y", "z")))
        assert _ids(sort_claims(claims, "score", direction)) == ["x", "y", "z"]

    def test_text_is_case_insensitive(self, make_claims: Callable) -> None:
        claims = make_claims(
            {"claim_id": "1", "provider_city": "boston"},
            {"claim_id": "2", "provider_city": "Austin"},
            {"claim_id": "3", "provider_city": "Chicago"},
        )
        assert _ids(sort_claims(claims, "provider_city", SortDirection.ASC)) == ["2", "1", "3"]

    def test_unknown_field(self, make_claims: Callable) -> None:
        with pytest.raises(ValueError, match="Unknown sort field"):
            sort_claims(make_claims({}), "bogus")


class TestPaginate:
    def test_last_partial_page(self, make_claims: Callable) -> None:
        claims = make_claims(*({"claim_id": str(index)} for index in range(23)))
        page = paginate(claims, page_size=10, page_number=3)

        assert len(page.items) == 3
        assert page.total_pages == 3
        assert page.total_count == 23
        assert _ids(page.items) == ["20", "21", "22"]

    def test_empty_has_one_page(self) -> None:
        page = paginate([], page_size=10, page_number=1)

        assert page.items == []
        assert page.total_pages == 1
        assert page.page_number == 1

    @pytest.mark.parametrize(("requested", "expected"), [(0, 1), (-3, 1), (9, 3)])
    def test_page_number_clamped(self, make_claims: Callable, requested: int, expected: int) -> None:
        claims = make_claims(*({"claim_id": str(index)} for index in range(23)))
        assert paginate(claims, page_size=10, page_number=requested).page_number == expected

    def test_invalid_page_size(self) -> None:
        with pytest.raises(ValueError, match="page_size"):
            paginate([], page_size=0, page_number=1)
