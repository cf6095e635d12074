"""Structured logging for tsdecl.

structlog events are routed through stdlib logging so each configured
output (stderr, stdout or a file) gets its own level and renderer. Events
emitted while a walk is running carry that walk's ``walk_id``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from tsdecl.config.models import LoggingConfig, LogOutputConfig

_walk_id: ContextVar[str | None] = ContextVar("walk_id", default=None)


def get_walk_id() -> str | None:
    return _walk_id.get()


def set_walk_id(walk_id: str | None = None) -> str:
    """Bind a walk id (a fresh 12-char hex id when none is given)."""
    value = walk_id or uuid4().hex[:12]
    _walk_id.set(value)
    return value


def clear_walk_id() -> None:
    _walk_id.set(None)


@contextmanager
def walk_scope(walk_id: str | None = None) -> Iterator[str]:
    """Bind a walk id for the duration of the block."""
    token = _walk_id.set(walk_id or uuid4().hex[:12])
    try:
        yield _walk_id.get() or ""
    finally:
        _walk_id.reset(token)


def _add_walk_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    walk_id = get_walk_id()
    if walk_id:
        event_dict["walk_id"] = walk_id
    return event_dict


def install_quiet_default() -> None:
    """Send warnings and above to stderr until ``configure_logging`` runs.

    structlog's own defaults print every level to stdout, which would mix
    walk events into a library caller's output. An existing structlog
    configuration is left alone.
    """
    if structlog.is_configured():
        return
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def _level(name: str | None, fallback: int = logging.WARNING) -> int:
    if not name:
        return fallback
    name = name.upper()
    if name == "WARN":
        return logging.WARNING
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else fallback


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "WARNING",
) -> None:
    """Configure structlog and the root stdlib logger.

    Without ``config`` a single stderr output is set up from ``json_format``
    and ``level``. Reconfiguring replaces (and closes) earlier handlers.
    """
    from tsdecl.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        fmt = "json" if json_format else "console"
        config = LoggingConfig(level=level, outputs=[LogOutputConfig(format=fmt)])

    default_level = _level(config.level)
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _add_walk_id,  # type: ignore[list-item]
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(default_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Level changes from a later configure_logging call must take effect
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for old in list(root.handlers):
        old.close()
        root.removeHandler(old)
    root.setLevel(default_level)

    for output in config.outputs:
        handler = _open_handler(output.destination)
        handler.setLevel(_level(output.level, default_level))
        handler.setFormatter(_formatter_for(output, pre_chain))
        root.addHandler(handler)


def _formatter_for(
    output: LogOutputConfig, pre_chain: list[structlog.types.Processor]
) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        stream = sys.stdout if output.destination == "stdout" else sys.stderr
        on_terminal = output.destination in ("stderr", "stdout") and stream.isatty()
        renderer = structlog.dev.ConsoleRenderer(
            colors=on_terminal, pad_event_to=0, pad_level=False
        )
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)


def _open_handler(destination: str) -> logging.Handler:
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, bound to ``logger=name`` when a name is given."""
    logger = structlog.get_logger()
    return logger.bind(logger=name) if name else logger  # type: ignore[no-any-return]
