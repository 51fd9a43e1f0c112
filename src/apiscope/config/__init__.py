"""Config module exports."""

from apiscope.config.loader import load_config
from apiscope.config.models import (
    ApiScopeConfig,
    LoggingConfig,
    ReleasesConfig,
    RenderConfig,
    SearchConfig,
)

__all__ = [
    "load_config",
    "ApiScopeConfig",
    "LoggingConfig",
    "ReleasesConfig",
    "RenderConfig",
    "SearchConfig",
]
