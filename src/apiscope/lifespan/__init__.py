"""Version lifespan index for API reference history.

Computes, for every class and class member, the release that introduced it
and the release that removed it, from per-release API heading snapshots.
"""

from apiscope.lifespan.headings import Heading, classify_heading, extract_headings
from apiscope.lifespan.index import LifespanIndex, build_lifespan_index
from apiscope.lifespan.models import (
    ClassLifespan,
    ReleaseHeadings,
    ReleaseSnapshot,
    SymbolLifespan,
)
from apiscope.lifespan.sweeps import propagate_since, propagate_until, scan_release

__all__ = [
    "ClassLifespan",
    "Heading",
    "LifespanIndex",
    "ReleaseHeadings",
    "ReleaseSnapshot",
    "SymbolLifespan",
    "build_lifespan_index",
    "classify_heading",
    "extract_headings",
    "propagate_since",
    "propagate_until",
    "scan_release",
]
