"""Search index and match rendering for API reference entries."""

from apiscope.search.entries import (
    ApiClass,
    ApiEntry,
    ApiEvent,
    ApiMethod,
    ApiNamespace,
    extract_classes,
    lower_first,
)
from apiscope.search.items import (
    SearchIcon,
    SearchItem,
    build_search_items,
    item_for_entry,
)
from apiscope.search.matching import Matcher, SearchResult, filter_items, subsequence_match
from apiscope.search.render import (
    MatchToken,
    RenderedToken,
    Run,
    TokenStyle,
    render_tokens_with_matches,
    to_html,
)

__all__ = [
    "ApiClass",
    "ApiEntry",
    "ApiEvent",
    "ApiMethod",
    "ApiNamespace",
    "MatchToken",
    "Matcher",
    "RenderedToken",
    "Run",
    "SearchIcon",
    "SearchItem",
    "SearchResult",
    "TokenStyle",
    "build_search_items",
    "extract_classes",
    "filter_items",
    "item_for_entry",
    "lower_first",
    "render_tokens_with_matches",
    "subsequence_match",
    "to_html",
]
