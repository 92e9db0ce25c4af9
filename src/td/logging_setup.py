"""Logging configuration for the td command line."""

import logging
import os
import sys
from typing import Optional


def setup_logging(
    *,
    console_level: int = logging.WARNING,
    log_file: Optional[str] = None,
    file_level: int = logging.DEBUG,
) -> None:
    """Configure logging once, before the first command runs.

    Console output goes to stderr so it never mixes with task listings on
    stdout. A file handler is added only when ``log_file`` is given.
    """
    root = logging.getLogger()
    root.setLevel(min(console_level, file_level) if log_file else console_level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)


def level_for(verbosity: int, default: str = "WARNING") -> int:
    """Map -v counts onto a level; zero falls back to the named default."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return getattr(logging, default.upper(), logging.WARNING)
