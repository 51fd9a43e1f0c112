"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (APISCOPE__SECTION__KEY)
3. Working-root YAML (.apiscope/config.yaml)
4. Global YAML (~/.config/apiscope/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    APISCOPE__<SECTION>__<KEY>=<VALUE>

Examples:
    APISCOPE__LOGGING__LEVEL=DEBUG
    APISCOPE__SEARCH__LIMIT_DEFAULT=20
    APISCOPE__RENDER__STRICT_OFFSETS=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from apiscope.config.constants import SEARCH_MAX_LIMIT

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        APISCOPE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every scanned release.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ReleasesConfig(BaseModel):
    """Release history configuration.

    Env vars:
        APISCOPE__RELEASES__TIP_OF_TREE: Name of the untagged tip-of-tree snapshot
        APISCOPE__RELEASES__UNKNOWN_CHROMIUM: Description used when no browser version is known
    """

    tip_of_tree: str = Field(
        default="main",
        description="Snapshot name that is always listed first and never parsed as a version.",
    )
    unknown_chromium: str = Field(
        default="N/A",
        description="Version description shown when release notes name no browser build.",
    )


class SearchConfig(BaseModel):
    """Search configuration.

    Env vars:
        APISCOPE__SEARCH__LIMIT_DEFAULT: Default number of results
        APISCOPE__SEARCH__CASE_SENSITIVE: Match case when using the built-in matcher
    """

    limit_default: int = Field(
        default=50,
        description="Default number of search results. Hard maximum is in constants.py.",
    )
    case_sensitive: bool = Field(
        default=False,
        description="Case-sensitive subsequence matching.",
    )

    @field_validator("limit_default")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        if not (1 <= v <= SEARCH_MAX_LIMIT):
            raise ValueError(f"limit_default must be 1-{SEARCH_MAX_LIMIT}, got {v}")
        return v


class RenderConfig(BaseModel):
    """Match rendering configuration.

    Env vars:
        APISCOPE__RENDER__STRICT_OFFSETS: Raise on out-of-range match offsets
    """

    strict_offsets: bool = Field(
        default=True,
        description="Raise on match offsets outside the item text. "
        "When false, such offsets are dropped and logged at debug level.",
    )


class ApiScopeConfig(BaseModel):
    """Root configuration for apiscope.

    All settings can be configured via:
    1. Environment variables: APISCOPE__SECTION__KEY
    2. YAML config files (working root or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    releases: ReleasesConfig = Field(default_factory=ReleasesConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
