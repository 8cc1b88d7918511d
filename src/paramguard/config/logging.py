"""Opt-in structlog output for paramguard's own loggers.

Importing paramguard configures nothing.  Applications that want to see
why validations fail call :func:`configure_logging` (or
:func:`configure_from_settings`), which renders records from the
``paramguard`` logger tree to stderr as console text or JSON lines.

Only the ``paramguard`` logger is touched: its records stop propagating
to the root logger, and the root logger's handlers and level belong to
the host application.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from paramguard.config.settings import GuardSettings

LOGGER_NAME = "paramguard"

# Marks the handler this module installs so a later call can swap it out.
_HANDLER_NAME = "paramguard.stderr"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _build_formatter(log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_PRE_CHAIN,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def _replace_handler(logger: logging.Logger, handler: logging.Handler) -> None:
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)
            existing.close()
    handler.set_name(_HANDLER_NAME)
    logger.addHandler(handler)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route the ``paramguard`` logger tree to stderr through structlog.

    Args:
        verbose: Emit DEBUG records (failed validations among them).
            Otherwise only WARNING and above get through.
        log_json: Render JSON lines instead of console text.

    Calling this again swaps the handler it installed earlier; handlers
    added to the ``paramguard`` logger by anyone else are kept.
    """
    structlog.configure(
        processors=[
            *_PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter(log_json))

    guard = logging.getLogger(LOGGER_NAME)
    _replace_handler(guard, handler)
    guard.setLevel(logging.DEBUG if verbose else logging.WARNING)
    guard.propagate = False


def configure_from_settings(settings: GuardSettings) -> None:
    """Apply the logging flags carried by *settings*."""
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
