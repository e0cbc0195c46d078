from __future__ import annotations

import logging
import sys


def configure_logging(level: str | int = logging.INFO, *, sql_echo: bool = False) -> None:
    """
    Send every log record to stderr with a timestamped format.

    Call this once, before the first request is served.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    # With DATABASE_ECHO off the engine logger stays quiet; with it on SQLAlchemy manages it.
    if not sql_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.captureWarnings(True)
