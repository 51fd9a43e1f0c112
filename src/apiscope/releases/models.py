"""Release data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from apiscope.lifespan.models import ReleaseHeadings


@dataclass(frozen=True, slots=True)
class Release:
    """One published release, or the tip-of-tree snapshot.

    ``priority`` orders tagged releases chronologically and is None for the
    tip-of-tree snapshot.
    """

    name: str
    api_text: str
    release_notes: str = ""
    published: date | None = None
    priority: int | None = None

    def headings(self) -> ReleaseHeadings:
        return ReleaseHeadings.from_api_text(self.name, self.api_text)


@dataclass(frozen=True, slots=True)
class VersionDescription:
    name: str
    description: str
    published: date | None = None
