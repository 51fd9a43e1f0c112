"""Build, since and until phases of the lifespan pipeline.

Each phase takes snapshots ordered newest first and returns a new list in the
same order; inputs are never modified. The phases must run in order:

    scan_release (per release) -> propagate_since -> propagate_until

Lifespans are reconstructed from point samples: a member removed and re-added
between two scanned releases looks continuous. When the gap is sampled, the
older lifespan ends at the release where the member went missing and the
re-added member starts over with its own ``since``. Members of a class that
vanishes entirely get no ``until`` of their own; the class ``until`` covers them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace

import structlog

from apiscope.core.errors import LifespanError
from apiscope.core.kinds import EntryKind
from apiscope.lifespan.headings import iter_classified
from apiscope.lifespan.models import (
    ClassLifespan,
    ReleaseHeadings,
    ReleaseSnapshot,
    freeze,
)

logger = structlog.get_logger()


@dataclass(slots=True)
class _OpenClass:
    """Mutable accumulator for the class currently being scanned."""

    name: str
    events: dict[str, str] = field(default_factory=dict)
    methods: dict[str, str] = field(default_factory=dict)
    namespaces: dict[str, str] = field(default_factory=dict)

    def add(self, kind: EntryKind, member: str, release: str) -> None:
        if kind is EntryKind.EVENT:
            self.events[member] = release
        elif kind is EntryKind.METHOD:
            self.methods[member] = release
        else:
            self.namespaces[member] = release

    def seal(self, release: str) -> ClassLifespan:
        return ClassLifespan(
            name=self.name,
            since=release,
            events_since=freeze(self.events),
            methods_since=freeze(self.methods),
            namespaces_since=freeze(self.namespaces),
        )


def scan_release(release: ReleaseHeadings) -> ReleaseSnapshot:
    """Build phase: classify one release's headings into class lifespans.

    Every class and member found is stamped with this release's name as its
    ``since``; ``until`` maps start empty.

    Raises:
        LifespanError: A member heading appears before any class heading.
    """
    classes: dict[str, ClassLifespan] = {}
    current: _OpenClass | None = None

    for heading in iter_classified(release.headings):
        if heading.kind is EntryKind.CLASS:
            if current is not None:
                classes[current.name] = current.seal(release.name)
            current = _OpenClass(name=heading.name)
            continue
        if current is None:
            raise LifespanError.heading_outside_class(release.name, heading.text)
        current.add(heading.kind, heading.name, release.name)

    if current is not None:
        classes[current.name] = current.seal(release.name)

    logger.debug("release_scanned", release=release.name, classes=len(classes))
    return ReleaseSnapshot(name=release.name, classes=freeze(classes))


def _carry_since(current: Mapping[str, str], older: Mapping[str, str]) -> Mapping[str, str]:
    return freeze({name: older.get(name, since) for name, since in current.items()})


def _with_older(current: ClassLifespan, older: ClassLifespan) -> ClassLifespan:
    return replace(
        current,
        since=older.since,
        events_since=_carry_since(current.events_since, older.events_since),
        methods_since=_carry_since(current.methods_since, older.methods_since),
        namespaces_since=_carry_since(current.namespaces_since, older.namespaces_since),
    )


def propagate_since(snapshots: Sequence[ReleaseSnapshot]) -> list[ReleaseSnapshot]:
    """Since phase: carry introduction versions from older releases to newer ones.

    Walks from the second-oldest release toward the newest. A class or member
    present in both a release and its older neighbour inherits the neighbour's
    ``since``; anything missing from the neighbour keeps its own release name.
    """
    if not snapshots:
        return []

    result: list[ReleaseSnapshot] = [snapshots[-1]]
    for snapshot in reversed(snapshots[:-1]):
        older = result[-1]
        classes: dict[str, ClassLifespan] = {}
        for class_name, lifespan in snapshot.classes.items():
            older_lifespan = older.get(class_name)
            classes[class_name] = (
                lifespan if older_lifespan is None else _with_older(lifespan, older_lifespan)
            )
        result.append(replace(snapshot, classes=freeze(classes)))

    result.reverse()
    return result


def _carry_until(
    current: ClassLifespan,
    newer: ClassLifespan,
    newer_release: str,
    kind: EntryKind,
) -> Mapping[str, str]:
    until = dict(current.until_map(kind))
    newer_since = newer.since_map(kind)
    newer_until = newer.until_map(kind)
    for name in current.since_map(kind):
        if name in newer_until:
            until[name] = newer_until[name]
        elif name not in newer_since:
            until[name] = newer_release
    return freeze(until)


def _with_newer(
    current: ClassLifespan,
    newer: ClassLifespan | None,
    newer_release: str,
) -> ClassLifespan:
    if newer is None:
        # The whole class vanished in the newer release.
        return replace(
            current,
            until=newer_release,
            events_until=freeze(dict.fromkeys(current.events_until, newer_release)),
            methods_until=freeze(dict.fromkeys(current.methods_until, newer_release)),
            namespaces_until=freeze(dict.fromkeys(current.namespaces_until, newer_release)),
        )
    return replace(
        current,
        until=newer.until,
        events_until=_carry_until(current, newer, newer_release, EntryKind.EVENT),
        methods_until=_carry_until(current, newer, newer_release, EntryKind.METHOD),
        namespaces_until=_carry_until(current, newer, newer_release, EntryKind.NAMESPACE),
    )


def propagate_until(snapshots: Sequence[ReleaseSnapshot]) -> list[ReleaseSnapshot]:
    """Until phase: carry removal versions from newer releases to older ones.

    Walks from the newest release toward the oldest. A class absent from the
    newer neighbour was removed there. A member present here but missing from
    the newer neighbour's class was removed there; otherwise it inherits the
    neighbour's resolved removal, if any.
    """
    if not snapshots:
        return []

    result: list[ReleaseSnapshot] = [snapshots[0]]
    for snapshot in snapshots[1:]:
        newer = result[-1]
        classes = {
            class_name: _with_newer(lifespan, newer.get(class_name), newer.name)
            for class_name, lifespan in snapshot.classes.items()
        }
        result.append(replace(snapshot, classes=freeze(classes)))
    return result
