"""apiscope CLI."""

from apiscope.cli.main import cli

__all__ = ["cli"]
