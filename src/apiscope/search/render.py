"""Rendering of search titles with matched characters highlighted.

A title is an ordered list of styled tokens whose texts concatenate to the
item's canonical text. Match offsets index into that concatenation. Each token
renders independently: a contiguous match that crosses a token boundary becomes
one highlighted run per token.
"""

from __future__ import annotations

import html
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

import structlog

from apiscope.config.constants import HIGHLIGHT_TAG
from apiscope.core.errors import RenderError

logger = structlog.get_logger()


class TokenStyle(StrEnum):
    """Element names used to style title tokens."""

    CLASS = "search-item-api-method-class"
    NAME = "search-item-api-method-name"


@dataclass(frozen=True, slots=True)
class MatchToken:
    text: str
    style: TokenStyle | None = None


@dataclass(frozen=True, slots=True)
class Run:
    """A plain or highlighted slice of one token."""

    text: str
    highlighted: bool = False


@dataclass(frozen=True, slots=True)
class RenderedToken:
    style: TokenStyle | None
    runs: tuple[Run, ...]

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


def _matched_set(matches: Iterable[int], length: int, *, strict: bool) -> set[int]:
    matched: set[int] = set()
    for offset in matches:
        if 0 <= offset < length:
            matched.add(offset)
        elif strict:
            raise RenderError.offset_out_of_range(offset, length)
        else:
            logger.debug("match_offset_dropped", offset=offset, length=length)
    return matched


def _render_token(token: MatchToken, offset: int, matched: set[int]) -> RenderedToken:
    text = token.text
    runs: list[Run] = []
    start = 0
    inside = False
    for end in range(len(text) + 1):
        now_inside = (end + offset) in matched
        if now_inside == inside and end < len(text):
            continue
        if start < end:
            runs.append(Run(text[start:end], highlighted=inside))
            start = end
        inside = now_inside
    return RenderedToken(style=token.style, runs=tuple(runs))


def render_tokens_with_matches(
    matches: Iterable[int],
    tokens: Sequence[MatchToken],
    *,
    strict: bool = True,
) -> list[RenderedToken]:
    """Split each token into plain and highlighted runs.

    Args:
        matches: Matched character offsets into the concatenated token text.
        tokens: Title tokens in display order.
        strict: Raise on offsets outside the text. When False, such offsets
            are dropped and logged.

    Returns:
        One rendered token per input token, in the same order.

    Raises:
        RenderError: An offset is out of range and ``strict`` is set.
    """
    length = sum(len(token.text) for token in tokens)
    matched = _matched_set(matches, length, strict=strict)

    if not matched:
        return [
            RenderedToken(style=token.style, runs=(Run(token.text),) if token.text else ())
            for token in tokens
        ]

    rendered: list[RenderedToken] = []
    offset = 0
    for token in tokens:
        rendered.append(_render_token(token, offset, matched))
        offset += len(token.text)
    return rendered


def to_html(rendered: Sequence[RenderedToken]) -> str:
    """Serialize rendered tokens as markup.

    Styled tokens become ``<style>...</style>`` elements and highlighted runs
    are wrapped in ``<search-highlight>``.
    """
    parts: list[str] = []
    for token in rendered:
        inner = "".join(
            f"<{HIGHLIGHT_TAG}>{html.escape(run.text, quote=False)}</{HIGHLIGHT_TAG}>"
            if run.highlighted
            else html.escape(run.text, quote=False)
            for run in token.runs
        )
        parts.append(f"<{token.style}>{inner}</{token.style}>" if token.style else inner)
    return "".join(parts)
