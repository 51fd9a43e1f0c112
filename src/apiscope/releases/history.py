"""Release history: ordered releases, their lifespan index and per-version views."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from functools import cached_property

import structlog

from apiscope.core.formatting import describe_age
from apiscope.core.kinds import EntryKind
from apiscope.lifespan import ClassLifespan, LifespanIndex, SymbolLifespan, build_lifespan_index
from apiscope.releases.models import Release, VersionDescription
from apiscope.releases.versions import chromium_version, sort_releases
from apiscope.search import (
    ApiClass,
    ApiEntry,
    Matcher,
    SearchItem,
    SearchResult,
    build_search_items,
    extract_classes,
    filter_items,
    subsequence_match,
)

logger = structlog.get_logger()


def _as_utc(moment: datetime) -> datetime:
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=timezone.utc)


class VersionView:
    """One loaded version: its classes, lifespans and search items."""

    def __init__(self, release: Release, index: LifespanIndex) -> None:
        self._release = release
        self._index = index

    @property
    def name(self) -> str:
        return self._release.name

    @property
    def release(self) -> Release:
        return self._release

    @cached_property
    def classes(self) -> tuple[ApiClass, ...]:
        return tuple(extract_classes(self._release.api_text, release=self.name))

    @cached_property
    def search_items(self) -> tuple[SearchItem, ...]:
        items = tuple(build_search_items(self.classes))
        logger.debug("search_items_built", version=self.name, items=len(items))
        return items

    @property
    def classes_lifespan(self) -> Mapping[str, ClassLifespan]:
        lifespans = self._index.classes_lifespan(self.name)
        return lifespans if lifespans is not None else {}

    def lifespan_of(self, entry: ApiEntry) -> SymbolLifespan | None:
        """Lifespan of an entry of this version, or None if the index has none."""
        if entry.kind is EntryKind.CLASS:
            return self._index.lookup_symbol(self.name, entry.name, EntryKind.CLASS, entry.name)
        return self._index.lookup_symbol(self.name, entry.class_name, entry.kind, entry.name)

    def search(
        self,
        query: str,
        matcher: Matcher = subsequence_match,
        *,
        limit: int | None = None,
    ) -> list[SearchResult]:
        return filter_items(self.search_items, query, matcher, limit=limit)


class ReleaseHistory:
    """All known releases of the library, newest first.

    Building the history builds the lifespan index; a malformed release fails
    construction.
    """

    def __init__(
        self,
        releases: Iterable[Release],
        *,
        tip_of_tree: str = "main",
        unknown_chromium: str = "N/A",
        fetched_at: datetime | None = None,
    ) -> None:
        self._tip_of_tree = tip_of_tree
        self._unknown_chromium = unknown_chromium
        self._fetched_at = fetched_at
        self._releases = sort_releases(releases, tip_of_tree=tip_of_tree)
        self._index = build_lifespan_index([release.headings() for release in self._releases])
        self._views: dict[str, VersionView] = {}

    @property
    def releases(self) -> tuple[Release, ...]:
        return tuple(self._releases)

    @property
    def lifespan_index(self) -> LifespanIndex:
        return self._index

    def version_names(self) -> list[str]:
        return [release.name for release in self._releases]

    def default_version_name(self) -> str | None:
        """Newest tagged release, falling back to the tip-of-tree."""
        for release in self._releases:
            if release.name != self._tip_of_tree:
                return release.name
        return self._releases[0].name if self._releases else None

    def version_descriptions(self) -> list[VersionDescription]:
        return [
            VersionDescription(
                name=release.name,
                description=(
                    self._unknown_chromium
                    if release.name == self._tip_of_tree
                    else chromium_version(release, unknown=self._unknown_chromium)
                ),
                published=release.published,
            )
            for release in self._releases
        ]

    def get_version(self, name: str) -> VersionView | None:
        view = self._views.get(name)
        if view is not None:
            return view
        release = next((release for release in self._releases if release.name == name), None)
        if release is None:
            return None
        view = VersionView(release, self._index)
        self._views[name] = view
        return view

    def freshness(self, now: datetime | None = None) -> str | None:
        """How long ago the release data was collected, e.g. "5 minutes ago"."""
        if self._fetched_at is None:
            return None
        now = _as_utc(now or datetime.now(timezone.utc))
        return describe_age(max((now - _as_utc(self._fetched_at)).total_seconds(), 0.0))
