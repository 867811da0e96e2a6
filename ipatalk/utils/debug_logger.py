"""Debug logger configuration.

This module configures a **single** file-backed logger for the whole
``ipatalk`` package.  The library itself never attaches handlers; the
preview window (or any application embedding ipatalk) calls
:func:`configure_debug_logger` once at start-up.

Behaviour
---------
- Writes ``ipatalk_debug.log`` into *log_dir* (default: the current
  working directory).
- Idempotent: calling it again does not add a second handler for the
  same file.
- Emits a visible *startup* entry so users can confirm the log is
  active.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from threading import Lock
from typing import Optional, Union

_LOCK = Lock()
_CONFIGURED = False

LOG_FILENAME = "ipatalk_debug.log"
LOGGER_NAME = "ipatalk"


def get_log_path(log_dir: Optional[Union[str, os.PathLike]] = None) -> Path:
    """Return the absolute path of the debug log file."""
    base = Path(log_dir) if log_dir else Path.cwd()
    return (base / LOG_FILENAME).resolve()


def configure_debug_logger(
    log_dir: Optional[Union[str, os.PathLike]] = None,
    force: bool = False,
) -> logging.Logger:
    """Configure the package debug logger and return it.

    Parameters
    ----------
    log_dir:
        Directory that receives ``ipatalk_debug.log``.
    force:
        If True, forces adding a fresh FileHandler and writing a startup
        line even if the logger seems configured already.

    Returns
    -------
    logging.Logger
        The configured logger named ``ipatalk``.
    """
    global _CONFIGURED

    with _LOCK:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)

        log_path = get_log_path(log_dir)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        has_matching_file_handler = any(
            isinstance(h, logging.FileHandler)
            and os.path.abspath(h.baseFilename) == str(log_path)
            for h in logger.handlers
        )

        if force or not has_matching_file_handler:
            fh = logging.FileHandler(str(log_path), mode="a", encoding="utf-8")
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            logger.addHandler(fh)

        # Startup entry: write exactly once per process (unless forced).
        if force or not _CONFIGURED:
            logger.info("=== ipatalk debug logging started (pid=%s) ===", os.getpid())
            for h in logger.handlers:
                h.flush()
            _CONFIGURED = True

        return logger
