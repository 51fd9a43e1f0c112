"""Loading release snapshots from a local directory.

Layout::

    releases/
      main.md          # tip-of-tree API reference
      v1.1.0.md
      v1.0.0.md
      releases.yaml    # optional metadata

``releases.yaml``::

    fetched_at: 2024-05-01T12:00:00Z
    releases:
      v1.1.0:
        published: 2018-02-13
        notes: "Big changes ... Chromium 66.0.3347.0 (r536395)"
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError

from apiscope.core.errors import ReleaseSourceError
from apiscope.releases.models import Release

logger = structlog.get_logger()

MANIFEST_NAME = "releases.yaml"
SNAPSHOT_SUFFIX = ".md"


class ReleaseMeta(BaseModel):
    notes: str = ""
    published: date | None = None


class ReleaseManifest(BaseModel):
    fetched_at: datetime | None = None
    releases: dict[str, ReleaseMeta] = Field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class LoadedReleases:
    releases: list[Release]
    fetched_at: datetime | None = None


def load_manifest(path: Path) -> ReleaseManifest:
    """Load ``releases.yaml``; a missing file yields an empty manifest."""
    if not path.exists():
        return ReleaseManifest()
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
        return ReleaseManifest.model_validate(data)
    except yaml.YAMLError as e:
        raise ReleaseSourceError.invalid_manifest(str(path), str(e)) from e
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ReleaseSourceError.invalid_manifest(str(path), f"{field}: {err['msg']}") from e


def load_release_directory(directory: Path) -> LoadedReleases:
    """Read every ``<version>.md`` snapshot in ``directory``.

    Raises:
        ReleaseSourceError: The directory is missing, holds no snapshots, or
            has an invalid manifest.
    """
    if not directory.is_dir():
        raise ReleaseSourceError.not_found(str(directory))

    snapshots = sorted(directory.glob(f"*{SNAPSHOT_SUFFIX}"))
    if not snapshots:
        raise ReleaseSourceError.not_found(str(directory))

    manifest = load_manifest(directory / MANIFEST_NAME)
    releases: list[Release] = []
    for path in snapshots:
        name = path.name[: -len(SNAPSHOT_SUFFIX)]
        meta = manifest.releases.get(name, ReleaseMeta())
        releases.append(
            Release(
                name=name,
                api_text=path.read_text(encoding="utf-8"),
                release_notes=meta.notes,
                published=meta.published,
            )
        )

    unknown = sorted(set(manifest.releases) - {release.name for release in releases})
    if unknown:
        logger.warning("manifest_entries_without_snapshot", releases=unknown)

    logger.debug("releases_loaded", directory=str(directory), releases=len(releases))
    return LoadedReleases(releases=releases, fetched_at=manifest.fetched_at)
