"""Lifespan index over a release history.

Usage::

    index = build_lifespan_index(
        [
            ReleaseHeadings.from_api_text("v1.1.0", text_110),
            ReleaseHeadings.from_api_text("v1.0.0", text_100),
        ]
    )
    index.lookup_symbol("v1.0.0", "Page", EntryKind.METHOD, "close")

Lookups never raise; anything unknown comes back as ``None``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import structlog

from apiscope.core.errors import LifespanError
from apiscope.core.kinds import EntryKind
from apiscope.lifespan.models import (
    ClassLifespan,
    ReleaseHeadings,
    ReleaseSnapshot,
    SymbolLifespan,
)
from apiscope.lifespan.sweeps import propagate_since, propagate_until, scan_release

logger = structlog.get_logger()


class LifespanIndex:
    """Finalized per-release class lifespans, newest release first."""

    def __init__(self, snapshots: Sequence[ReleaseSnapshot]) -> None:
        self._snapshots = tuple(snapshots)
        self._by_name = {snapshot.name: snapshot for snapshot in self._snapshots}

    def __len__(self) -> int:
        return len(self._snapshots)

    def __contains__(self, version: object) -> bool:
        return version in self._by_name

    @property
    def versions(self) -> tuple[str, ...]:
        return tuple(snapshot.name for snapshot in self._snapshots)

    @property
    def snapshots(self) -> tuple[ReleaseSnapshot, ...]:
        return self._snapshots

    def classes_lifespan(self, version: str) -> Mapping[str, ClassLifespan] | None:
        snapshot = self._by_name.get(version)
        return snapshot.classes if snapshot is not None else None

    def lookup_class(self, version: str, class_name: str) -> ClassLifespan | None:
        snapshot = self._by_name.get(version)
        if snapshot is None:
            return None
        return snapshot.get(class_name)

    def lookup_symbol(
        self,
        version: str,
        class_name: str,
        kind: EntryKind,
        name: str,
    ) -> SymbolLifespan | None:
        """Lifespan of a class or member as seen from ``version``.

        For ``EntryKind.CLASS`` the ``name`` must equal ``class_name``.
        """
        lifespan = self.lookup_class(version, class_name)
        if lifespan is None:
            return None
        if kind is EntryKind.CLASS:
            if name != class_name:
                return None
            return SymbolLifespan(since=lifespan.since, until=lifespan.until)
        return lifespan.member(kind, name)


def build_lifespan_index(releases: Sequence[ReleaseHeadings]) -> LifespanIndex:
    """Run build -> since -> until over releases ordered newest first.

    The caller sorts the releases. A release that fails to scan fails the whole
    index.

    Raises:
        LifespanError: Duplicate release names or a malformed heading sequence.
    """
    seen: set[str] = set()
    for release in releases:
        if release.name in seen:
            raise LifespanError.duplicate_release(release.name)
        seen.add(release.name)

    scanned = [scan_release(release) for release in releases]
    finalized = propagate_until(propagate_since(scanned))

    class_names = {name for snapshot in finalized for name in snapshot.classes}
    logger.info(
        "lifespan_index_built",
        releases=len(finalized),
        classes=len(class_names),
    )
    return LifespanIndex(finalized)
