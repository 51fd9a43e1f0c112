"""Core module exports."""

from apiscope.core.errors import (
    ApiScopeError,
    ConfigError,
    ErrorCode,
    LifespanError,
    ReleaseSourceError,
    RenderError,
)
from apiscope.core.logging import configure_logging, get_log_file_path, get_logger

__all__ = [
    # Errors
    "ApiScopeError",
    "ConfigError",
    "ErrorCode",
    "LifespanError",
    "ReleaseSourceError",
    "RenderError",
    # Logging
    "configure_logging",
    "get_log_file_path",
    "get_logger",
]
