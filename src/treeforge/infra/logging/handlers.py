from __future__ import annotations

"""
Logging Handler Factories.

Builds the console and rotating-file handlers and tags them so that the
application can tell its own handlers apart from ones installed by
libraries or test runners.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from treeforge.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR: str = "_treeforge_handler"


def tag_handler(handler: logging.Handler) -> logging.Handler:
    """Mark a handler as managed by this package and return it."""
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def is_own_handler(handler: logging.Handler) -> bool:
    """Return True if the handler carries our tag."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_console_handler(cfg: LoggingConfig) -> logging.Handler:
    """Create the stderr handler."""
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(cfg.level_int)
    sh.setFormatter(logging.Formatter(cfg.console_fmt))
    return tag_handler(sh)


def build_file_handler(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """
    Create the rotating file handler for ``cfg.log_file``.

    Returns:
        Optional[RotatingFileHandler]: The handler, or None if the file
        cannot be opened (a warning is written to stderr).
    """
    if not cfg.log_file:
        return None
    try:
        parent = os.path.dirname(os.path.abspath(cfg.log_file))
        os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            cfg.log_file,
            maxBytes=int(cfg.max_bytes),
            backupCount=int(cfg.backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: cannot open log file '{cfg.log_file}': {e}\n")
        return None

    fh.setLevel(cfg.level_int)
    fh.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    tag_handler(fh)
    return fh
