"""
Logging configuration for the core-bridge subcommands.

The calculator and decoder modules only emit DEBUG records through
``logging.getLogger(__name__)``; nothing is shown unless a subcommand calls
``setup_logging()``.  The console always gets a handler.  A per-run log file
is written only when ``logging.log_dir`` is set in config/config.yaml, since
the package is usually run from an arbitrary working directory and should
not drop files there uninvited.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime

__all__ = ["DETAILED_FORMAT", "BRIEF_FORMAT", "setup_logging"]

DETAILED_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
BRIEF_FORMAT = "%(levelname)-8s  %(message)s"


def _file_handler(log_dir: str, log_prefix: str) -> logging.FileHandler:
    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d-%H%M%S")
    handler = logging.FileHandler(
        os.path.join(log_dir, f"{log_prefix}_{timestamp}.log"), encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(DETAILED_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    verbose: bool = False,
    log_dir: str | None = None,
    log_prefix: str = "core_bridge",
) -> str | None:
    """Replace the root logger's handlers for one CLI run.

    - Console (stderr): WARNING+ in the brief format; with *verbose*,
      DEBUG in the detailed format.
    - File: only when *log_dir* is given.  Always DEBUG, written to
      <log_dir>/<prefix>_<timestamp>.log so a quiet console run still
      leaves a full trace behind.

    Returns the log file path, or None when logging to the console only.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter(
        DETAILED_FORMAT if verbose else BRIEF_FORMAT, datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console)

    if not log_dir:
        return None

    handler = _file_handler(log_dir, log_prefix)
    root_logger.addHandler(handler)
    return handler.baseFilename
