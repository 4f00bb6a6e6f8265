"""Debug/logging helpers for malapi.

Provides debug(), info(), warn(), error() functions for consistent logging.
Debug output is controlled by the MALAPI_DEBUG environment variable.
"""

import logging
import os

_logger: logging.Logger | None = None


def debug_enabled() -> bool:
    return os.getenv("MALAPI_DEBUG", "0") == "1"


def setup_logger() -> logging.Logger:
    """Return the ``malapi`` logger, attaching a stream handler on first use.

    The level follows MALAPI_DEBUG at every call.
    """
    global _logger
    if _logger is None:
        logger = logging.getLogger("malapi")
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("[%(levelname)s] %(asctime)s %(message)s")
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        _logger = logger
    _logger.setLevel(logging.DEBUG if debug_enabled() else logging.INFO)
    return _logger


def debug(msg: str) -> None:
    """Log a debug message if debugging is enabled."""
    if debug_enabled():
        setup_logger().debug(msg)


def info(msg: str) -> None:
    """Log an info message."""
    setup_logger().info(msg)


def warn(msg: str) -> None:
    """Log a warning message."""
    setup_logger().warning(msg)


def error(msg: str) -> None:
    """Log an error message."""
    setup_logger().error(msg)
