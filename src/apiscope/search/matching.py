"""Query filtering over search items.

Matching is pluggable: any callable with the ``Matcher`` shape can score a
query against an item's text. ``subsequence_match`` is the built-in matcher.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from apiscope.search.items import SearchItem
from apiscope.search.render import RenderedToken


class Matcher(Protocol):
    """Protocol for fuzzy matchers."""

    def __call__(self, query: str, text: str) -> Sequence[int] | None:
        """Return sorted matched offsets into ``text``, or None for no match."""
        ...


def subsequence_match(query: str, text: str, *, case_sensitive: bool = False) -> list[int] | None:
    """Match ``query`` as a subsequence of ``text``, taking the earliest position each time.

    Examples:
        ("pgc", "page.click()") -> [0, 2, 5]
        ("xyz", "page.click()") -> None
    """
    if not case_sensitive:
        query = query.lower()
        text = text.lower()
    offsets: list[int] = []
    position = 0
    for char in query:
        found = text.find(char, position)
        if found < 0:
            return None
        offsets.append(found)
        position = found + 1
    return offsets


@dataclass(frozen=True, slots=True)
class SearchResult:
    item: SearchItem
    matches: tuple[int, ...] = ()

    def render_title(self, *, strict: bool = True) -> list[RenderedToken]:
        return self.item.render_title(self.matches, strict=strict)


def filter_items(
    items: Iterable[SearchItem],
    query: str,
    matcher: Matcher = subsequence_match,
    *,
    limit: int | None = None,
) -> list[SearchResult]:
    """Keep the items whose text matches ``query``, in index order.

    An empty query returns the unfiltered listing.
    """
    query = query.strip()
    results: list[SearchResult] = []
    for item in items:
        if limit is not None and len(results) >= limit:
            break
        if not query:
            results.append(SearchResult(item))
            continue
        matches = matcher(query, item.text)
        if matches is None:
            continue
        results.append(SearchResult(item, tuple(matches)))
    return results
