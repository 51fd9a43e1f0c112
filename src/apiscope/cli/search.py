"""apiscope search command - fuzzy search classes, events, methods and namespaces."""

import json
from functools import partial
from pathlib import Path

import click
from rich.console import Console
from rich.text import Text

from apiscope.cli.utils import get_config, load_history, resolve_version
from apiscope.config.constants import SEARCH_MAX_LIMIT
from apiscope.core.errors import RenderError
from apiscope.core.formatting import pluralize, truncate_at_word
from apiscope.search import RenderedToken, TokenStyle, subsequence_match, to_html

_TOKEN_STYLES = {TokenStyle.CLASS: "dim", TokenStyle.NAME: "cyan"}


def _rich_title(rendered: list[RenderedToken]) -> Text:
    title = Text()
    for token in rendered:
        base = _TOKEN_STYLES[token.style] if token.style else ""
        highlight = f"{base} bold underline".strip()
        for run in token.runs:
            title.append(run.text, style=highlight if run.highlighted else base)
    return title


@click.command()
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("query", default="")
@click.option("--version", "version", default=None, help="Version to search (default: newest)")
@click.option(
    "--limit",
    type=click.IntRange(1, SEARCH_MAX_LIMIT),
    default=None,
    help="Maximum results (default from config)",
)
@click.option("--html", "as_html", is_flag=True, help="Print titles as highlight markup")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def search_command(
    ctx: click.Context,
    directory: Path,
    query: str,
    version: str | None,
    limit: int | None,
    as_html: bool,
    as_json: bool,
) -> None:
    """Search API entries of a version.

    DIRECTORY holds one <version>.md API reference per release. An empty
    QUERY lists every entry.
    """
    config = get_config(ctx)
    history = load_history(directory, config)
    view = resolve_version(history, version)

    matcher = partial(subsequence_match, case_sensitive=config.search.case_sensitive)
    results = view.search(query, matcher, limit=limit or config.search.limit_default)

    try:
        titles = [result.render_title(strict=config.render.strict_offsets) for result in results]
    except RenderError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        payload = []
        for result, title in zip(results, titles, strict=True):
            lifespan = view.lifespan_of(result.item.entry)
            payload.append(
                {
                    "text": result.item.text,
                    "kind": result.item.kind.value,
                    "matches": list(result.matches),
                    "title": to_html(title),
                    "description": result.item.description,
                    "since": lifespan.since if lifespan else None,
                    "until": lifespan.until if lifespan else None,
                }
            )
        click.echo(json.dumps(payload, indent=2))
        return

    console = Console(highlight=False, soft_wrap=True)
    console.print(f"{view.name}: {pluralize(len(results), 'result')}", markup=False)
    for result, title in zip(results, titles, strict=True):
        line = Text(f"  {result.item.kind.value:<9} ")
        line.append(to_html(title) if as_html else _rich_title(title))
        if result.item.description:
            line.append(f"  {truncate_at_word(result.item.description)}", style="dim")
        console.print(line)
