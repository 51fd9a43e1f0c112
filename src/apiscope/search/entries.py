"""API reference entries and a heading-level symbol table extractor.

Entries form a tagged union discriminated by ``kind``::

    ApiEntry = ApiClass | ApiEvent | ApiMethod | ApiNamespace

The extractor only reads headings plus the first prose line under each one.
Full markdown rendering of entry bodies is out of scope.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal

from apiscope.core.errors import LifespanError
from apiscope.core.kinds import EntryKind
from apiscope.lifespan.headings import HEADING_PREFIX, classify_heading

_METHOD_ARGS_RE = re.compile(r"#### \w+\.[\w$]+\((.*)\)\s*$", re.ASCII)

# Lines that open markup rather than prose.
_NON_PROSE_PREFIXES = ("-", "*", "<", "`", "|", ">", "[")


def lower_first(name: str) -> str:
    """``ElementHandle`` -> ``elementHandle``."""
    return name[:1].lower() + name[1:]


@dataclass(frozen=True, slots=True)
class ApiEvent:
    name: str
    class_name: str
    description: str = ""
    kind: Literal[EntryKind.EVENT] = field(default=EntryKind.EVENT, init=False)

    @property
    def class_var(self) -> str:
        return lower_first(self.class_name)


@dataclass(frozen=True, slots=True)
class ApiMethod:
    name: str
    class_name: str
    args: str = ""
    description: str = ""
    kind: Literal[EntryKind.METHOD] = field(default=EntryKind.METHOD, init=False)

    @property
    def class_var(self) -> str:
        return lower_first(self.class_name)


@dataclass(frozen=True, slots=True)
class ApiNamespace:
    name: str
    class_name: str
    description: str = ""
    kind: Literal[EntryKind.NAMESPACE] = field(default=EntryKind.NAMESPACE, init=False)

    @property
    def class_var(self) -> str:
        return lower_first(self.class_name)


@dataclass(frozen=True, slots=True)
class ApiClass:
    name: str
    description: str = ""
    events: tuple[ApiEvent, ...] = ()
    namespaces: tuple[ApiNamespace, ...] = ()
    methods: tuple[ApiMethod, ...] = ()
    kind: Literal[EntryKind.CLASS] = field(default=EntryKind.CLASS, init=False)

    @property
    def lowered_name(self) -> str:
        return lower_first(self.name)


ApiEntry = ApiClass | ApiEvent | ApiMethod | ApiNamespace


@dataclass(slots=True)
class _ClassBuilder:
    name: str
    description: str = ""
    events: list[ApiEvent] = field(default_factory=list)
    namespaces: list[ApiNamespace] = field(default_factory=list)
    methods: list[ApiMethod] = field(default_factory=list)

    def build(self) -> ApiClass:
        return ApiClass(
            name=self.name,
            description=self.description,
            events=tuple(self.events),
            namespaces=tuple(self.namespaces),
            methods=tuple(self.methods),
        )


def _first_prose_line(lines: list[str], start: int) -> str:
    """First prose line after ``start``, stopping at the next heading."""
    for line in lines[start + 1 :]:
        stripped = line.strip()
        if stripped.startswith("#"):
            return ""
        if stripped and not stripped.startswith(_NON_PROSE_PREFIXES):
            return stripped
    return ""


def _method_args(heading: str) -> str:
    match = _METHOD_ARGS_RE.search(heading)
    return match.group(1) if match else ""


def extract_classes(api_text: str, *, release: str = "") -> list[ApiClass]:
    """Extract classes and their members from an API document.

    Args:
        api_text: Markdown API reference for one release.
        release: Release name used in error details.

    Raises:
        LifespanError: A member heading appears before any class heading.
    """
    lines = api_text.split("\n")
    classes: list[ApiClass] = []
    current: _ClassBuilder | None = None

    for position, line in enumerate(lines):
        if not line.startswith(HEADING_PREFIX):
            continue
        heading = classify_heading(line)
        if heading is None:
            continue
        description = _first_prose_line(lines, position)
        if heading.kind is EntryKind.CLASS:
            if current is not None:
                classes.append(current.build())
            current = _ClassBuilder(name=heading.name, description=description)
            continue
        if current is None:
            raise LifespanError.heading_outside_class(release, line)
        if heading.kind is EntryKind.EVENT:
            current.events.append(ApiEvent(heading.name, current.name, description))
        elif heading.kind is EntryKind.METHOD:
            current.methods.append(
                ApiMethod(heading.name, current.name, _method_args(line), description)
            )
        else:
            current.namespaces.append(ApiNamespace(heading.name, current.name, description))

    if current is not None:
        classes.append(current.build())
    return classes
