"""Logging utilities."""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(
    name: str,
    level: Optional[int] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """Get a logger namespaced under ``jumphash``.

    Handlers are attached once per logger; repeated calls return the same
    configured logger. The root logger is never touched.

    Args:
        name: Logger name (prefixed with "jumphash." if not already)
        level: Logging level (default: inherit from parent)
        log_file: Optional file to also write records to

    Returns:
        Configured logger
    """
    if not name.startswith("jumphash"):
        name = f"jumphash.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)

    if log_file is not None:
        log_path = Path(log_file)
        has_file = any(
            isinstance(h, logging.FileHandler)
            and Path(h.baseFilename).resolve() == log_path.resolve()
            for h in logger.handlers
        )
        if not has_file:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(file_handler)

    return logger

