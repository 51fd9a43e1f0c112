"""Search items for one loaded version of the API reference."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from apiscope.core.kinds import EntryKind
from apiscope.search.entries import (
    ApiClass,
    ApiEntry,
    ApiEvent,
    ApiMethod,
    ApiNamespace,
)
from apiscope.search.render import (
    MatchToken,
    RenderedToken,
    TokenStyle,
    render_tokens_with_matches,
)


class SearchIcon(StrEnum):
    CLASS = "api-class-icon"
    EVENT = "api-event-icon"
    METHOD = "api-method-icon"
    NAMESPACE = "api-ns-icon"


@dataclass(frozen=True, slots=True)
class SearchItem:
    """One searchable class, event, method or namespace.

    ``tokens`` concatenate to ``text``; match offsets produced against ``text``
    therefore map onto the tokens.
    """

    entry: ApiEntry
    text: str
    icon: SearchIcon
    tokens: tuple[MatchToken, ...]
    description: str = ""

    def __post_init__(self) -> None:
        joined = "".join(token.text for token in self.tokens)
        if joined != self.text:
            raise ValueError(f"Title tokens {joined!r} do not spell item text {self.text!r}")

    @property
    def kind(self) -> EntryKind:
        return self.entry.kind

    def render_title(self, matches: Iterable[int], *, strict: bool = True) -> list[RenderedToken]:
        return render_tokens_with_matches(matches, self.tokens, strict=strict)


def item_for_class(api_class: ApiClass) -> SearchItem:
    return SearchItem(
        entry=api_class,
        text=api_class.name,
        icon=SearchIcon.CLASS,
        tokens=(MatchToken(api_class.name, TokenStyle.NAME),),
        description=api_class.description,
    )


def item_for_event(event: ApiEvent) -> SearchItem:
    class_var = event.class_var
    return SearchItem(
        entry=event,
        text=f"{class_var}.on('{event.name}')",
        icon=SearchIcon.EVENT,
        tokens=(
            MatchToken(f"{class_var}.on(", TokenStyle.CLASS),
            MatchToken(f"'{event.name}'", TokenStyle.NAME),
            MatchToken(")", TokenStyle.CLASS),
        ),
        description=event.description,
    )


def item_for_namespace(namespace: ApiNamespace) -> SearchItem:
    class_var = namespace.class_var
    return SearchItem(
        entry=namespace,
        text=f"{class_var}.{namespace.name}",
        icon=SearchIcon.NAMESPACE,
        tokens=(
            MatchToken(f"{class_var}.", TokenStyle.CLASS),
            MatchToken(namespace.name, TokenStyle.NAME),
        ),
        description=namespace.description,
    )


def item_for_method(method: ApiMethod) -> SearchItem:
    class_var = method.class_var
    return SearchItem(
        entry=method,
        text=f"{class_var}.{method.name}({method.args})",
        icon=SearchIcon.METHOD,
        tokens=(
            MatchToken(f"{class_var}.", TokenStyle.CLASS),
            MatchToken(f"{method.name}({method.args})", TokenStyle.NAME),
        ),
        description=method.description,
    )


_BUILDERS: dict[EntryKind, Callable[..., SearchItem]] = {
    EntryKind.CLASS: item_for_class,
    EntryKind.EVENT: item_for_event,
    EntryKind.NAMESPACE: item_for_namespace,
    EntryKind.METHOD: item_for_method,
}


def item_for_entry(entry: ApiEntry) -> SearchItem:
    """Build the search item for any entry, dispatching on ``entry.kind``."""
    return _BUILDERS[entry.kind](entry)


def build_search_items(classes: Sequence[ApiClass]) -> list[SearchItem]:
    """Index classes in listing order: each class, then its events, namespaces, methods."""
    items: list[SearchItem] = []
    for api_class in classes:
        items.append(item_for_class(api_class))
        for members in (api_class.events, api_class.namespaces, api_class.methods):
            items.extend(item_for_entry(member) for member in members)
    return items
