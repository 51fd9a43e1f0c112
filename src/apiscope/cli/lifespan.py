"""apiscope lifespan command - show since/until versions of classes and members."""

import json
from pathlib import Path

import click

from apiscope.cli.utils import get_config, load_history, resolve_version
from apiscope.core.formatting import pluralize
from apiscope.core.kinds import EntryKind
from apiscope.lifespan import ClassLifespan


def _span(since: str, until: str | None) -> str:
    return f"since {since}" + (f", removed in {until}" if until else "")


def _echo_class(lifespan: ClassLifespan) -> None:
    click.echo(f"{lifespan.name} ({_span(lifespan.since, lifespan.until)})")
    for kind in EntryKind.member_kinds():
        for name in lifespan.since_map(kind):
            member = lifespan.member(kind, name)
            if member is None:
                continue
            click.echo(f"  {kind.value:<9} {name} ({_span(member.since, member.until)})")


@click.command()
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--version", "version", default=None, help="Version to inspect (default: newest)")
@click.option("--class", "class_name", default=None, help="Only show this class")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def lifespan_command(
    ctx: click.Context,
    directory: Path,
    version: str | None,
    class_name: str | None,
    as_json: bool,
) -> None:
    """Show when each class and member of a version appeared and disappeared.

    DIRECTORY holds one <version>.md API reference per release.
    """
    history = load_history(directory, get_config(ctx))
    view = resolve_version(history, version)

    lifespans = list(view.classes_lifespan.values())
    if class_name is not None:
        lifespans = [lifespan for lifespan in lifespans if lifespan.name == class_name]
        if not lifespans:
            raise click.ClickException(f"Class {class_name!r} not found in {view.name}")

    if as_json:
        payload = {
            "version": view.name,
            "classes": [lifespan.to_dict() for lifespan in lifespans],
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"{view.name}: {pluralize(len(lifespans), 'class', 'classes')}")
    for lifespan in lifespans:
        _echo_class(lifespan)
