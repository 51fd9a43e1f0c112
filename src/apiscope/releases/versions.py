"""Version naming, ordering and browser build notes."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import replace

from apiscope.config.constants import PRIORITY_MAJOR_WEIGHT, PRIORITY_MINOR_WEIGHT
from apiscope.core.errors import LifespanError
from apiscope.releases.models import Release

_VERSION_RE = re.compile(r"v(\d+)\.(\d+)\.(\d+)", re.ASCII)
_CHROMIUM_RE = re.compile(r"Chromium\s+(\d+\.\d+\.\d+\.\d+)\s*\((r\d{6})\)", re.IGNORECASE)

# Early release notes do not name the bundled browser build.
PINNED_CHROMIUM_VERSIONS: dict[str, str] = {
    "v0.9.0": "Chromium 62.0.3188.0 (r494755)",
    "v0.10.0": "Chromium 62.0.3193.0 (r496140)",
    "v0.10.1": "Chromium 62.0.3193.0 (r496140)",
    "v0.13.0": "Chromium 64.0.3265.0 (r515411)",
    "v1.1.0": "Chromium 66.0.3347.0 (r536395)",
    "v1.1.1": "Chromium 66.0.3347.0 (r536395)",
    "v1.3.0": "Chromium 67.0.3392.0 (r536395)",
    "v5.1.0": "Chromium 84.0.4147.0 (r768783)",
    "v5.5.0": "Chromium 88.0.4298.0 (r818858)",
    "v6.0.0": "Chromium 89.0.4389.0 (r843427)",
    "v7.0.0": "Chromium 90.0.4403.0 (r848005)",
    "v8.0.0": "Chromium 90.0.4427.0 (r856583)",
}


def release_priority(name: str) -> int:
    """``vMAJOR.MINOR.PATCH`` -> sortable integer (newer is larger).

    Raises:
        LifespanError: The name is not a version tag.
    """
    match = _VERSION_RE.fullmatch(name)
    if match is None:
        raise LifespanError.invalid_version_name(name)
    major, minor, patch = (int(part) for part in match.groups())
    return major * PRIORITY_MAJOR_WEIGHT + minor * PRIORITY_MINOR_WEIGHT + patch


def sort_releases(releases: Iterable[Release], *, tip_of_tree: str = "main") -> list[Release]:
    """Order releases newest first, with the tip-of-tree snapshot leading.

    Tagged releases get their ``priority`` filled in; the tip-of-tree keeps None.
    """
    tips: list[Release] = []
    tagged: list[Release] = []
    for release in releases:
        if release.name == tip_of_tree:
            tips.append(replace(release, priority=None))
        else:
            tagged.append(replace(release, priority=release_priority(release.name)))
    tagged.sort(key=lambda release: release.priority or 0, reverse=True)
    return tips + tagged


def parse_chromium_version(release_notes: str) -> str | None:
    """Find the bundled browser build announced in release notes."""
    match = _CHROMIUM_RE.search(release_notes)
    if match is None:
        return None
    return f"Chromium {match.group(1)} ({match.group(2)})"


def chromium_version(release: Release, *, unknown: str = "N/A") -> str:
    """Browser build for a release: pinned table first, then release notes."""
    pinned = PINNED_CHROMIUM_VERSIONS.get(release.name)
    if pinned is not None:
        return pinned
    return parse_chromium_version(release.release_notes) or unknown
