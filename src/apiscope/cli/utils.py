"""CLI utilities."""

from pathlib import Path

import click

from apiscope.config.models import ApiScopeConfig
from apiscope.core.errors import ApiScopeError
from apiscope.releases import ReleaseHistory, VersionView, load_release_directory


def get_config(ctx: click.Context) -> ApiScopeConfig:
    obj = ctx.find_object(dict) or {}
    config = obj.get("config")
    return config if config is not None else ApiScopeConfig()


def load_history(directory: Path, config: ApiScopeConfig) -> ReleaseHistory:
    """Load release snapshots and build the history.

    Raises:
        click.ClickException: Loading or indexing failed.
    """
    try:
        loaded = load_release_directory(directory)
        return ReleaseHistory(
            loaded.releases,
            tip_of_tree=config.releases.tip_of_tree,
            unknown_chromium=config.releases.unknown_chromium,
            fetched_at=loaded.fetched_at,
        )
    except ApiScopeError as e:
        raise click.ClickException(str(e)) from e


def resolve_version(history: ReleaseHistory, version: str | None) -> VersionView:
    """Pick the requested version, or the default one.

    Raises:
        click.ClickException: The version is unknown.
    """
    name = version or history.default_version_name()
    view = history.get_version(name) if name else None
    if view is None:
        known = ", ".join(history.version_names())
        raise click.ClickException(f"Unknown version {name!r}. Known versions: {known}")
    return view
