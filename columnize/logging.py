"""Structlog configuration for the command line."""

import logging as std_logging
import sys

import structlog


def _level_from_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return std_logging.WARNING
    if verbosity == 1:
        return std_logging.INFO
    return std_logging.DEBUG


def configure_logging(verbosity: int = 0) -> None:
    level = _level_from_verbosity(verbosity)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # stdout carries the table, so log output goes to stderr
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # reconfiguring must reach module-level loggers already used
        cache_logger_on_first_use=False,
    )
