"""Core module exports."""

from tsdecl.core.errors import (
    ConfigError,
    ErrorCode,
    SourceError,
    TsdeclError,
)
from tsdecl.core.logging import (
    clear_walk_id,
    configure_logging,
    get_logger,
    get_walk_id,
    install_quiet_default,
    set_walk_id,
    walk_scope,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "SourceError",
    "TsdeclError",
    # Logging
    "clear_walk_id",
    "configure_logging",
    "get_logger",
    "get_walk_id",
    "install_quiet_default",
    "set_walk_id",
    "walk_scope",
]
