"""Release history of the documented library."""

from apiscope.releases.history import ReleaseHistory, VersionView
from apiscope.releases.loader import LoadedReleases, load_release_directory
from apiscope.releases.models import Release, VersionDescription
from apiscope.releases.versions import (
    chromium_version,
    parse_chromium_version,
    release_priority,
    sort_releases,
)

__all__ = [
    "LoadedReleases",
    "Release",
    "ReleaseHistory",
    "VersionDescription",
    "VersionView",
    "chromium_version",
    "load_release_directory",
    "parse_chromium_version",
    "release_priority",
    "sort_releases",
]
