"""Tests for query filtering."""

from collections.abc import Sequence
from functools import partial

import pytest

from apiscope.search.entries import ApiClass, ApiMethod, ApiNamespace
from apiscope.search.items import build_search_items
from apiscope.search.matching import SearchResult, filter_items, subsequence_match
from apiscope.search.render import Run


@pytest.fixture
def items():
    page = ApiClass(
        name="Page",
        namespaces=(ApiNamespace("keyboard", "Page"),),
        methods=(ApiMethod("click", "Page", "selector"), ApiMethod("close", "Page")),
    )
    return build_search_items([page])


class TestSubsequenceMatch:
    """Tests for subsequence_match."""

    @pytest.mark.parametrize(
        ("query", "text", "expected"),
        [
            ("pgc", "page.click()", [0, 2, 5]),
            ("page.c", "page.click(selector)", [0, 1, 2, 3, 4, 5]),
            ("PC", "page.click()", [0, 5]),
            ("", "page", []),
            ("xyz", "page.click()", None),
            ("pp", "page", None),
        ],
    )
    def test_matches(self, query: str, text: str, expected: list[int] | None) -> None:
        assert subsequence_match(query, text) == expected

    def test_case_sensitive(self) -> None:
        assert subsequence_match("PC", "page.click()", case_sensitive=True) is None
        assert subsequence_match("pC", "page.Click()", case_sensitive=True) == [0, 5]

    def test_offsets_strictly_increasing(self) -> None:
        offsets = subsequence_match("aaa", "banana")

        assert offsets == [1, 3, 5]


class TestFilterItems:
    """Tests for filter_items."""

    def test_empty_query_lists_everything_in_index_order(self, items) -> None:
        # When
        results = filter_items(items, "   ")

        # Then
        assert [r.item.text for r in results] == [
            "Page",
            "page.keyboard",
            "page.click(selector)",
            "page.close()",
        ]
        assert all(r.matches == () for r in results)

    def test_query_keeps_matching_items_with_offsets(self, items) -> None:
        results = filter_items(items, "close")

        assert [r.item.text for r in results] == ["page.close()"]
        assert results[0].matches == (5, 6, 7, 8, 9)

    def test_limit(self, items) -> None:
        results = filter_items(items, "page", limit=2)

        assert len(results) == 2

    def test_custom_matcher(self, items) -> None:
        """Any callable with the matcher shape can be plugged in."""

        def prefix(query: str, text: str) -> Sequence[int] | None:
            return list(range(len(query))) if text.startswith(query) else None

        results = filter_items(items, "page.c", prefix)

        assert [r.item.text for r in results] == ["page.click(selector)", "page.close()"]

    def test_partial_matcher_with_case_sensitivity(self, items) -> None:
        matcher = partial(subsequence_match, case_sensitive=True)

        results = filter_items(items, "P", matcher)

        assert [r.item.text for r in results] == ["Page"]

    def test_result_renders_title(self, items) -> None:
        # Given
        result = filter_items(items, "page.c")[0]

        # When
        rendered = result.render_title()

        # Then
        assert result.item.text == "page.click(selector)"
        assert rendered[0].runs == (Run("page.", highlighted=True),)
        assert rendered[1].runs == (Run("c", highlighted=True), Run("lick(selector)"))

    def test_search_result_defaults(self, items) -> None:
        assert SearchResult(items[0]).matches == ()
