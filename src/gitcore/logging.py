"""structlog setup for gitcore.

Every module logs through ``get_logger(__name__)`` with snake_case event
names. Output is rendered once, at the stdlib root handler, so records from
third-party libraries share the same format:

- ``GITCORE_LOG_FORMAT=json`` renders one JSON object per line.
- Anything else renders the structlog console format.

``GitClient`` binds ``operation``, ``request_id`` and ``tenant_id`` around
each call with :func:`operation_context`; everything logged underneath (the
runner, the operation modules) picks them up from contextvars.

Usage:
    from gitcore.logging import configure_logging, get_logger

    configure_logging()
    logger = get_logger(__name__)
    logger.info("git_command_started", subcommand="status")
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from structlog.types import Processor

__all__ = [
    "get_logger",
    "configure_logging",
    "bind_context",
    "clear_context",
    "operation_context",
]

FORMAT_ENV = "GITCORE_LOG_FORMAT"
LEVEL_ENV = "GITCORE_LOG_LEVEL"
FALLBACK_LEVEL = logging.INFO


def _level_from_env() -> int:
    name = os.environ.get(LEVEL_ENV, "").strip().upper()
    if not name:
        return FALLBACK_LEVEL
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else FALLBACK_LEVEL


def _json_requested() -> bool:
    return os.environ.get(FORMAT_ENV, "").strip().lower() == "json"


def _pre_chain() -> list[Processor]:
    """Processors run for both structlog and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(as_json: bool) -> Processor:
    if as_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging(
    *,
    force_json: bool = False,
    level: int | None = None,
) -> None:
    """Install the gitcore logging pipeline on the root logger.

    Safe to call more than once; each call replaces the root handlers.

    Args:
        force_json: Render JSON even when ``GITCORE_LOG_FORMAT`` is unset.
        level: Root level. Defaults to ``GITCORE_LOG_LEVEL``, then INFO.
    """
    as_json = force_json or _json_requested()
    root_level = _level_from_env() if level is None else level

    structlog.configure(
        processors=[
            *_pre_chain(),
            (
                structlog.processors.dict_tracebacks
                if as_json
                else structlog.processors.format_exc_info
            ),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(as_json),
        ],
        foreign_pre_chain=_pre_chain(),
    )
    stream = logging.StreamHandler(sys.stderr)
    stream.setLevel(root_level)
    stream.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(stream)
    root.setLevel(root_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, normally ``get_logger(__name__)``."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger


def bind_context(**context: Any) -> None:
    """Bind fields to every later log record in the current task.

    Uses structlog contextvars, so bindings follow the task across ``await``
    points and never leak into concurrently running calls.
    """
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


@contextmanager
def operation_context(**context: Any) -> Iterator[None]:
    """Bind *context* for the ``with`` block, restoring prior values on exit.

    Example:
        with operation_context(operation="status", request_id="req-1"):
            logger.info("git_command_started")
    """
    with structlog.contextvars.bound_contextvars(**context):
        yield
