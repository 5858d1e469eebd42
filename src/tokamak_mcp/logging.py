"""Logging configuration for tokamak_mcp.

Uses Python's standard logging module with support for:
- File logging via config or the TNM_LOG environment variable
- Verbosity levels: error(0), warning(1), info(2), verbose(3), trace(4)
- Stderr otherwise; stdout carries the MCP protocol and is never logged to
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tokamak_mcp.config.schema import LoggingConfig

# Custom log levels
TRACE = 5
VERBOSE = 15

logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(VERBOSE, "VERBOSE")

logger = logging.getLogger("tokamak_mcp")

_initialized = False

_LEVEL_MAP = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "VERBOSE": VERBOSE,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Map verbose=N to log levels (0=errors only, 4=everything)
_VERBOSITY_MAP = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: VERBOSE,
    4: TRACE,
}


class _LowercaseLevelFormatter(logging.Formatter):
    """Formatter that emits lowercase level names."""

    def format(self, record: logging.LogRecord) -> str:
        record.levelname = record.levelname.lower()
        return super().format(record)


def resolve_level(config: LoggingConfig | None) -> int:
    """Pick the log level: verbose (int) wins over level (str), default INFO."""
    if config is None:
        return logging.INFO
    if config.verbose is not None:
        return _VERBOSITY_MAP.get(config.verbose, TRACE)
    if config.level:
        return _LEVEL_MAP.get(config.level.upper(), logging.INFO)
    return logging.INFO


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Initialize logging. Call once at startup; later calls are no-ops."""
    global _initialized
    if _initialized:
        return
    _initialized = True

    log_level = resolve_level(config)
    logger.setLevel(log_level)
    # Keep records away from the root logger, whose handlers may write to stdout
    logger.propagate = False

    formatter = _LowercaseLevelFormatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S"
    )

    log_path = config.file if config and config.file else os.environ.get("TNM_LOG")

    if log_path:
        log_path = os.path.expanduser(log_path)
        try:
            file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        except OSError as e:
            print(f"[tokamak-mcp] Failed to open log file: {e}", file=sys.stderr)
            _add_stderr_handler(formatter, log_level)
        else:
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    else:
        _add_stderr_handler(formatter, log_level)


def _add_stderr_handler(formatter: logging.Formatter, level: int = logging.DEBUG) -> None:
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(formatter)
    logger.addHandler(stderr_handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """Get the tokamak_mcp logger, or a child such as "bridge" or "tools"."""
    if name:
        return logger.getChild(name)
    return logger
