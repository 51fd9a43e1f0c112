"""Lifespan data model.

A ``ClassLifespan`` is a frozen snapshot of one class as seen from one release.
The sweeps in ``sweeps.py`` never mutate a snapshot; they build new ones with
``dataclasses.replace`` so the output of each phase shares no mutable state with
its input.

Unresolved ``until`` values are ``None``: the entity is still present in the
newest scanned release.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeVar

from apiscope.core.kinds import EntryKind
from apiscope.lifespan.headings import extract_headings

K = TypeVar("K")
V = TypeVar("V")


def _empty() -> Mapping[str, str]:
    return MappingProxyType({})


def freeze(mapping: Mapping[K, V]) -> Mapping[K, V]:
    """Return a read-only copy of ``mapping``."""
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class ReleaseHeadings:
    """The headings of one release's API document, in document order."""

    name: str
    headings: tuple[str, ...]

    @classmethod
    def from_api_text(cls, name: str, api_text: str) -> ReleaseHeadings:
        return cls(name=name, headings=tuple(extract_headings(api_text)))


@dataclass(frozen=True, slots=True)
class SymbolLifespan:
    """[since, until) range of one class member."""

    since: str
    until: str | None = None

    @property
    def removed(self) -> bool:
        return self.until is not None


@dataclass(frozen=True, slots=True)
class ClassLifespan:
    """Lifespan of a class and of every member it owns in one release."""

    name: str
    since: str
    until: str | None = None
    # name -> first introduced version
    events_since: Mapping[str, str] = field(default_factory=_empty)
    methods_since: Mapping[str, str] = field(default_factory=_empty)
    namespaces_since: Mapping[str, str] = field(default_factory=_empty)
    # name -> first removed version
    events_until: Mapping[str, str] = field(default_factory=_empty)
    methods_until: Mapping[str, str] = field(default_factory=_empty)
    namespaces_until: Mapping[str, str] = field(default_factory=_empty)

    def since_map(self, kind: EntryKind) -> Mapping[str, str]:
        if kind is EntryKind.EVENT:
            return self.events_since
        if kind is EntryKind.METHOD:
            return self.methods_since
        if kind is EntryKind.NAMESPACE:
            return self.namespaces_since
        raise ValueError(f"Classes own no {kind} members")

    def until_map(self, kind: EntryKind) -> Mapping[str, str]:
        if kind is EntryKind.EVENT:
            return self.events_until
        if kind is EntryKind.METHOD:
            return self.methods_until
        if kind is EntryKind.NAMESPACE:
            return self.namespaces_until
        raise ValueError(f"Classes own no {kind} members")

    def has_member(self, kind: EntryKind, name: str) -> bool:
        return name in self.since_map(kind)

    def member(self, kind: EntryKind, name: str) -> SymbolLifespan | None:
        """Lifespan of one member, or None if the class has no such member here."""
        since = self.since_map(kind).get(name)
        if since is None:
            return None
        return SymbolLifespan(since=since, until=self.until_map(kind).get(name))

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "since": self.since,
            "until": self.until,
            "events_since": dict(self.events_since),
            "methods_since": dict(self.methods_since),
            "namespaces_since": dict(self.namespaces_since),
            "events_until": dict(self.events_until),
            "methods_until": dict(self.methods_until),
            "namespaces_until": dict(self.namespaces_until),
        }


@dataclass(frozen=True, slots=True)
class ReleaseSnapshot:
    """Per-release view: class name -> lifespan of that class in this release."""

    name: str
    classes: Mapping[str, ClassLifespan]

    def get(self, class_name: str) -> ClassLifespan | None:
        return self.classes.get(class_name)
