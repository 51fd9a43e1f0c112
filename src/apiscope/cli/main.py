"""apiscope CLI - apiscope command."""

from pathlib import Path

import click

from apiscope import __version__
from apiscope.cli.lifespan import lifespan_command
from apiscope.cli.search import search_command
from apiscope.cli.versions import versions_command
from apiscope.config.loader import load_config
from apiscope.core.errors import ConfigError
from apiscope.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="apiscope")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of .apiscope/config.yaml",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """apiscope - Browse an API reference across its release history."""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path=config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    if verbose:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": "DEBUG"})}
        )
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config
    configure_logging(config=config.logging)


cli.add_command(lifespan_command, name="lifespan")
cli.add_command(search_command, name="search")
cli.add_command(versions_command, name="versions")


if __name__ == "__main__":
    cli()
