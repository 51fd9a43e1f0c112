"""apiscope - API reference history: version lifespans and symbol search."""

__version__ = "0.1.0"
