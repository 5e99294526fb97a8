"""
kmehr.logger

Stream logger shared by the package and the CLI. Messages are prefixed with
the calling module and function so catalog misses can be traced back to the
code that asked for them.

The level comes from the LOG_LEVEL environment variable unless the caller
passes one explicitly.
"""

import inspect
import logging
import os
from enum import IntEnum
from pathlib import Path

LOGGER_NAME = "kmehr"


class LogLevel(IntEnum):
    NOTSET = 0
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    CRITICAL = 50


def get_log_level_from_env(default: LogLevel = LogLevel.INFO) -> LogLevel:
    """
    Read log level from environment variable LOG_LEVEL.
    Accepts level names (DEBUG, info, ...) or their integer values.
    Unknown values fall back to `default` with a warning on the logger.
    """
    raw = os.getenv("LOG_LEVEL")
    if raw is None:
        return default

    raw = raw.strip()

    if raw.isdigit():
        try:
            return LogLevel(int(raw))
        except ValueError:
            logging.getLogger(LOGGER_NAME).warning(
                "Unknown numeric log level: %s. Falling back to %s", raw, default.name
            )
            return default

    try:
        return LogLevel[raw.upper()]
    except KeyError:
        logging.getLogger(LOGGER_NAME).warning(
            "Unknown log level: %s. Falling back to %s", raw, default.name
        )
        return default


def get_logger(level: LogLevel | int | None = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level if level is not None else get_log_level_from_env())
    return logger


def _caller(levels: int = 2) -> str:
    # [0] _caller, [1] _log, [2] log_*, [3] the code that logged
    frame = inspect.stack()[3]
    short_path = "/".join(Path(frame.filename).parts[-levels:])
    return f"{short_path}:{frame.function}"


def _log(level: LogLevel, message: str | None = None) -> None:
    logger = get_logger()
    suffix = f" - {message}" if message else ""
    logger.log(level, f"{_caller()}{suffix}")


def log_debug(msg: str | None = None) -> None:
    _log(LogLevel.DEBUG, msg)


def log_info(msg: str | None = None) -> None:
    _log(LogLevel.INFO, msg)


def log_warning(msg: str | None = None) -> None:
    _log(LogLevel.WARN, msg)


def log_error(msg: str | None = None) -> None:
    _log(LogLevel.ERROR, msg)
