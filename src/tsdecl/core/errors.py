"""tsdecl error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Source (loading, parsing, kind tables)

Walking a tree never raises these. They come from the layers that produce
the raw AST or configure the walk.
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

    # Source (3xxx)
    SOURCE_NOT_FOUND = 3001
    SOURCE_UNSUPPORTED = 3002
    SOURCE_PARSE_ERROR = 3003
    SOURCE_GRAMMAR_MISSING = 3004
    KIND_TABLE_INVALID = 3010


@dataclass(frozen=True, slots=True)
class TsdeclError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'SOURCE_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TsdeclError):
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


class SourceError(TsdeclError):
    """Errors raised while turning a file into a raw AST."""

    @classmethod
    def not_found(cls, path: str) -> "SourceError":
        return cls(
            code=ErrorCode.SOURCE_NOT_FOUND,
            message=f"Source file not found: {path}",
            details={"path": path},
        )

    @classmethod
    def unsupported(cls, path: str, suffix: str) -> "SourceError":
        return cls(
            code=ErrorCode.SOURCE_UNSUPPORTED,
            message=f"Unsupported file extension '{suffix}': {path}",
            details={"path": path, "suffix": suffix},
        )

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "SourceError":
        return cls(
            code=ErrorCode.SOURCE_PARSE_ERROR,
            message=f"Failed to read AST from {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def grammar_missing(cls, grammar: str) -> "SourceError":
        return cls(
            code=ErrorCode.SOURCE_GRAMMAR_MISSING,
            message=f"Tree-sitter grammar not available: {grammar}",
            details={"grammar": grammar},
        )

    @classmethod
    def invalid_kind_table(cls, path: str, reason: str) -> "SourceError":
        return cls(
            code=ErrorCode.KIND_TABLE_INVALID,
            message=f"Invalid SyntaxKind table at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

