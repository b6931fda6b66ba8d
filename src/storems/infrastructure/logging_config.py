"""Configure application logging using the Python standard library.

Records are written through ``click.echo(err=True)`` so they go to
whatever stderr is current and never interleave with the menu on stdout.
Only the ``storems`` logger is touched; the root logger is left to
whoever embeds the package.
"""

from __future__ import annotations

import logging

import click

LOGGER_NAME = "storems"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ClickEchoHandler(logging.Handler):
    """Emit log records on stderr via click."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Safe to call more than once: previous handlers installed here are
    replaced rather than stacked.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = ClickEchoHandler(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
