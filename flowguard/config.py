from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: int = logging.INFO, json_output: bool = False) -> None:
    """Configure structlog for the CLI and server.

    Logs go to stderr so command output on stdout stays machine-readable.
    """
    renderer: structlog.types.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # sys.stderr is looked up per logger, not captured here.
        logger_factory=lambda *args: structlog.PrintLogger(sys.stderr),
        cache_logger_on_first_use=False,
    )


def level_from_name(name: str) -> int:
    return logging.getLevelNamesMapping()[name.upper()]
