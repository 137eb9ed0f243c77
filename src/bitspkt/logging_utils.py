"""
Logging setup for programs that use bitspkt.

The library modules only create loggers under the "bitspkt" namespace;
handlers are attached by the calling program through setup_logging().
The root logger is left alone, so an application's own logging
configuration is not disturbed.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "bitspkt"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def setup_logging(level: int = logging.WARNING,
                  log_file: Optional[Union[str, Path]] = None,
                  file_level: int = logging.DEBUG) -> logging.Logger:
    """
    Attach handlers to the bitspkt package logger.

    Decoder and evaluator trace messages are emitted at DEBUG, analyzer
    warnings at WARNING. Calling this again replaces the handlers a
    previous call installed.

    Args:
        level: Threshold for the stderr handler
        log_file: Optional path of a log file (parent directories are
            created; the file is overwritten)
        file_level: Threshold for the file handler

    Returns:
        The configured "bitspkt" logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    package_logger.addHandler(console)

    levels = [level]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode='w', encoding='utf-8')
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)
        levels.append(file_level)

    package_logger.setLevel(min(levels))
    package_logger.propagate = False
    return package_logger


__all__ = ["setup_logging", "LOG_FORMAT", "PACKAGE_LOGGER"]
