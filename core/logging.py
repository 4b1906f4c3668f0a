import logging
import os
import sys
from typing import Final

_LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
_TRUTHY: Final[frozenset] = frozenset({"1", "true", "yes", "on"})


def configure_logger(name: str) -> logging.Logger:
    """Return a named logger for service code.

    When Django's ``LOGGING`` dict has already configured the root logger the
    returned logger simply propagates to it. Standalone usage (management
    shells, scripts) gets a stdout handler of its own.
    """

    logger = logging.getLogger(name)

    if os.getenv("LOG_ENABLED", "1").strip().lower() not in _TRUTHY:
        logger.disabled = True
        return logger

    if logger.handlers or logging.getLogger().handlers:
        return logger

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    logger.setLevel(log_level)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
