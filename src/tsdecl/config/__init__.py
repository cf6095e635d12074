"""Config module exports."""

from tsdecl.config.loader import load_config
from tsdecl.config.models import (
    KindsConfig,
    LoggingConfig,
    LogOutputConfig,
    OutputConfig,
    TsdeclConfig,
    WalkConfig,
)

__all__ = [
    "load_config",
    "KindsConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "OutputConfig",
    "TsdeclConfig",
    "WalkConfig",
]
