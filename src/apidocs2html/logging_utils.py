"""Centralized logging utilities for the apidocs2html command line."""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "apidocs2html"


def resolve_log_level(log_level: int | str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Only the ``apidocs2html`` logger hierarchy is configured, so embedding
    applications keep control over their own root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file that receives a copy of every record.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured package logger.

    """
    level = resolve_log_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()
    package_logger.propagate = False

    if trace_mode:
        formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", "%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger
