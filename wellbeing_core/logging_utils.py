"""
Standardized logging for the well-being core.

Modules call get_logger(__name__). The library never touches the root
logger on import; applications (or tests) call configure_logging().
"""

import logging
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module name."""
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: Optional[str] = None,
) -> None:
    """
    Attach a stream handler to the package logger.

    Idempotent: repeated calls only adjust the level.
    """
    global _configured
    package_logger = logging.getLogger("wellbeing_core")
    package_logger.setLevel(level)
    if _configured:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    package_logger.addHandler(handler)
    _configured = True
