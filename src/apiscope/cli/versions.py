"""apiscope versions command - list known releases."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from apiscope.cli.utils import get_config, load_history


@click.command()
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def versions_command(ctx: click.Context, directory: Path, as_json: bool) -> None:
    """List releases newest first with their bundled browser builds.

    DIRECTORY holds one <version>.md API reference per release.
    """
    history = load_history(directory, get_config(ctx))
    default = history.default_version_name()
    descriptions = history.version_descriptions()

    if as_json:
        payload = {
            "default": default,
            "fetched": history.freshness(),
            "versions": [
                {
                    "name": entry.name,
                    "description": entry.description,
                    "published": entry.published.isoformat() if entry.published else None,
                }
                for entry in descriptions
            ],
        }
        click.echo(json.dumps(payload, indent=2))
        return

    table = Table(show_header=False, box=None, padding=(0, 1), pad_edge=False)
    table.add_column("default", style="green", width=1)
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("description", no_wrap=True)
    table.add_column("published", style="dim", no_wrap=True)
    for entry in descriptions:
        table.add_row(
            "*" if entry.name == default else "",
            entry.name,
            entry.description,
            entry.published.isoformat() if entry.published else "",
        )

    console = Console(highlight=False)
    console.print(table)

    freshness = history.freshness()
    if freshness is not None:
        console.print(f"[dim]Data fetched {freshness}[/dim]")
