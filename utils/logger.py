"""
utils/logger.py
---------------
Logging setup for the persistence layer.

Modules call ``get_logger(__name__)``; the first call installs one stdout
handler on the root logger at the LOG_LEVEL from config.py. Scripts and tests
can call ``configure_logging`` again to change the level without stacking
handlers.
"""

import logging
import sys
from typing import Optional

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: Optional[logging.Handler] = None


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Install the stdout handler (once) and set the root level.

    Args:
        level: A level name such as ``"DEBUG"`` or ``"WARNING"``. Unknown
            names fall back to INFO.
    """
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        root.addHandler(_handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Named logger; configures logging on first use."""
    if _handler is None:
        configure_logging()
    return logging.getLogger(name)
