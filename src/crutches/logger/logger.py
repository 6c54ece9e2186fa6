"""Global logger configuration for the crutches package.

The package logs only at DEBUG level, so nothing is printed unless the
level is lowered through ``CRUTCHES_LOG_LEVEL`` (or the generic
``LOG_LEVEL``) or by calling :func:`setup_logger` explicitly.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger"]


def _level_number(name: str) -> int | None:
    numeric_level = logging.getLevelName(name.upper())
    return numeric_level if isinstance(numeric_level, int) else None


def _env_level() -> int:
    # Host applications may use level names logging does not know
    for variable in ("CRUTCHES_LOG_LEVEL", "LOG_LEVEL"):
        value = os.getenv(variable)
        if value and _level_number(value) is not None:
            return _level_number(value)
    return logging.INFO


def _has_stdout_handler(logger: logging.Logger) -> bool:
    return any(type(handler) is logging.StreamHandler for handler in logger.handlers)


def setup_logger(
    name: str = "crutches",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically the package name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). When omitted
            it is read from the environment, falling back to INFO if the
            variable is unset or not a known level.
        format_string: Custom format string

    Returns:
        Configured logger instance

    Raises:
        ValueError: If an explicit ``level`` is not a known logging level.
    """
    if level is None:
        numeric_level = _env_level()
    else:
        numeric_level = _level_number(level)
        if numeric_level is None:
            raise ValueError(f"Unknown log level: {level.upper()}")

    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # The stdout handler is attached once; later calls only adjust the level
    if not _has_stdout_handler(logger):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(numeric_level)

    return logger


logger = setup_logger()
