"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TSDECL__SECTION__KEY)
3. Project YAML (./.tsdecl.yaml)
4. Global YAML (~/.config/tsdecl/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TSDECL__<SECTION>__<KEY>=<VALUE>

Examples:
    TSDECL__LOGGING__LEVEL=DEBUG
    TSDECL__WALK__NAMESPACE_MODE=stack
    TSDECL__KINDS__TABLE_PATH=/tmp/syntax-kind.json
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from tsdecl.syntax.kinds import NodeFlags

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
NamespaceMode = Literal["flat", "stack"]
OutputFormat = Literal["json", "tree"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

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
        TSDECL__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs every collected declaration.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class WalkConfig(BaseModel):
    """Tree walk configuration.

    Env vars:
        TSDECL__WALK__NAMESPACE_MODE: flat (last write wins) or stack (restore on exit)
        TSDECL__WALK__MAX_DEPTH: Module/namespace nesting limit
    """

    namespace_mode: NamespaceMode = Field(
        default="flat",
        description="flat keeps the most recently entered namespace after its body "
        "is walked. stack restores the enclosing namespace on exit.",
    )
    max_depth: int = Field(
        default=200,
        description="Bodies nested deeper than this are skipped with a warning.",
    )
    namespace_flags: list[int] = Field(
        default_factory=lambda: [int(NodeFlags.NAMESPACE), int(NodeFlags.EXPORT_NAMESPACE)],
        description="ModuleDeclaration flag values that mark a namespace.",
    )

    @field_validator("max_depth")
    @classmethod
    def validate_max_depth(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_depth must be positive, got {v}")
        return v


class KindsConfig(BaseModel):
    """SyntaxKind table configuration.

    Env vars:
        TSDECL__KINDS__TABLE_PATH: JSON/YAML dump of ts.SyntaxKind
    """

    table_path: str | None = Field(
        default=None,
        description="Needed only for ASTs with numeric kinds. "
        "Produce it with JSON.stringify(ts.SyntaxKind).",
    )


class OutputConfig(BaseModel):
    """Output configuration for the CLI."""

    format: OutputFormat = "json"
    indent: int = Field(default=2, ge=0)


class TsdeclConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    walk: WalkConfig = Field(default_factory=WalkConfig)
    kinds: KindsConfig = Field(default_factory=KindsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
