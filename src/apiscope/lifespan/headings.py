"""Classification of API reference section headings.

The reference document announces every class with a level-3 heading and every
member with a level-4 heading:

    ### class: Page
    #### event: 'close'
    #### page.click(selector[, options])
    #### page.keyboard

Methods and namespaces share the ``var.name`` shape and are told apart by the
opening parenthesis.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from apiscope.core.kinds import EntryKind

HEADING_PREFIX = "###"

_CLASS_RE = re.compile(r"### class:\s+(\w+)\s*$", re.ASCII)
_EVENT_RE = re.compile(r"#### event:\s+'(\w+)'\s*$", re.ASCII)
_METHOD_RE = re.compile(r"#### \w+\.([\w$]+)\(", re.ASCII)
_NAMESPACE_RE = re.compile(r"#### \w+\.(\w+)\s*$", re.ASCII)

# Tried in order; the first pattern that matches decides the kind.
_PATTERNS: tuple[tuple[EntryKind, re.Pattern[str]], ...] = (
    (EntryKind.CLASS, _CLASS_RE),
    (EntryKind.EVENT, _EVENT_RE),
    (EntryKind.METHOD, _METHOD_RE),
    (EntryKind.NAMESPACE, _NAMESPACE_RE),
)


@dataclass(frozen=True, slots=True)
class Heading:
    """A classified heading line."""

    kind: EntryKind
    name: str
    text: str


def classify_heading(line: str) -> Heading | None:
    """Classify one heading line, or return None if it names no API entry."""
    for kind, pattern in _PATTERNS:
        match = pattern.search(line)
        if match:
            return Heading(kind=kind, name=match.group(1), text=line)
    return None


def extract_headings(api_text: str) -> list[str]:
    """Return the heading lines of an API document in document order."""
    return [line for line in api_text.split("\n") if line.startswith(HEADING_PREFIX)]


def iter_classified(headings: list[str] | tuple[str, ...]) -> Iterator[Heading]:
    """Yield classified headings, skipping headings that name no API entry."""
    for line in headings:
        heading = classify_heading(line)
        if heading is not None:
            yield heading
