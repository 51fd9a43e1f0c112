"""apiscope error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Lifespan
- 4xxx: Render
- 5xxx: Releases
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Lifespan (3xxx)
    HEADING_OUTSIDE_CLASS = 3001
    INVALID_VERSION_NAME = 3002
    DUPLICATE_RELEASE = 3003

    # Render (4xxx)
    MATCH_OFFSET_OUT_OF_RANGE = 4001

    # Releases (5xxx)
    RELEASE_SOURCE_NOT_FOUND = 5001
    RELEASE_MANIFEST_INVALID = 5002


@dataclass(frozen=True, slots=True)
class ApiScopeError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'HEADING_OUTSIDE_CLASS')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(ApiScopeError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class LifespanError(ApiScopeError):
    """Errors raised while building the lifespan index."""

    @classmethod
    def heading_outside_class(cls, release: str, heading: str) -> "LifespanError":
        return cls(
            code=ErrorCode.HEADING_OUTSIDE_CLASS,
            message=f"Release {release}: symbol heading before any class heading: {heading!r}",
            details={"release": release, "heading": heading},
        )

    @classmethod
    def invalid_version_name(cls, name: str) -> "LifespanError":
        return cls(
            code=ErrorCode.INVALID_VERSION_NAME,
            message=f"Version name must look like vMAJOR.MINOR.PATCH, got {name!r}",
            details={"name": name},
        )

    @classmethod
    def duplicate_release(cls, name: str) -> "LifespanError":
        return cls(
            code=ErrorCode.DUPLICATE_RELEASE,
            message=f"Release listed more than once: {name}",
            details={"name": name},
        )


class RenderError(ApiScopeError):
    """Match renderer contract violations."""

    @classmethod
    def offset_out_of_range(cls, offset: int, length: int) -> "RenderError":
        return cls(
            code=ErrorCode.MATCH_OFFSET_OUT_OF_RANGE,
            message=f"Match offset {offset} outside text of length {length}",
            details={"offset": offset, "length": length},
        )


class ReleaseSourceError(ApiScopeError):
    """Errors loading local release snapshots."""

    @classmethod
    def not_found(cls, path: str) -> "ReleaseSourceError":
        return cls(
            code=ErrorCode.RELEASE_SOURCE_NOT_FOUND,
            message=f"No release snapshots found at {path}",
            details={"path": path},
        )

    @classmethod
    def invalid_manifest(cls, path: str, reason: str) -> "ReleaseSourceError":
        return cls(
            code=ErrorCode.RELEASE_MANIFEST_INVALID,
            message=f"Invalid release manifest at {path}: {reason}",
            details={"path": path, "reason": reason},
        )
