"""Logging setup for confhelper.

Every component logs under the ``confhelper`` hierarchy:

* ``confhelper.resolver`` reports why structural enrichment was skipped.
* ``confhelper.analyzers.project_type`` reports per-signature scores.
* ``confhelper.cli`` reports configuration loading and unmanaged files.

Console output stays at WARNING unless ``--verbose`` is given, so command
results printed to stdout are not interleaved with diagnostics. A log file,
when requested, always receives DEBUG records.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "confhelper"

CONSOLE_FORMAT = "[confhelper] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``confhelper`` or the ``confhelper.<name>`` child logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install fresh handlers on the ``confhelper`` logger and return it."""
    console_level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(ROOT_LOGGER)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        logger.addHandler(_file_handler(log_file))
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(console_level)
    return logger


__all__ = ["configure_logging", "get_logger"]
