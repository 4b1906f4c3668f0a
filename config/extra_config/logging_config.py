"""Logging configuration for the Storefront API.

Services log through ``store.<ServiceName>`` loggers (see ``core.logging``),
the exception handler through ``core.exception_handler``. Both families get
their own level so service chatter can be raised without touching Django's.
"""

import os
from pathlib import Path

from .environment import BASE_DIR


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _propagating(level: str) -> dict:
    return {"level": level, "propagate": True}


LOG_ENABLED = _env_bool("LOG_ENABLED", True)

if not LOG_ENABLED:
    LOGGING_CONFIG = None
    LOGGING = {}
else:
    LOGGING_CONFIG = "logging.config.dictConfig"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    SERVICE_LOG_LEVEL = os.getenv("SERVICE_LOG_LEVEL", LOG_LEVEL).upper()
    DJANGO_LOG_LEVEL = os.getenv("DJANGO_LOG_LEVEL", LOG_LEVEL).upper()
    SQL_LOG_LEVEL = os.getenv("SQL_LOG_LEVEL", "WARNING").upper()

    LOG_FILE_ENABLED = _env_bool("LOG_FILE_ENABLED", False)
    LOG_FILE_PATH = Path(os.getenv("LOG_FILE_PATH", str(Path(BASE_DIR) / "logs" / "storefront.log")))

    handlers = {}
    if _env_bool("LOG_CONSOLE_ENABLED", True):
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "level": LOG_LEVEL,
            "formatter": "standard",
        }
    if LOG_FILE_ENABLED:
        LOG_FILE_PATH.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": LOG_LEVEL,
            "formatter": "standard",
            "filename": str(LOG_FILE_PATH),
            "maxBytes": _env_int("LOG_MAX_BYTES", 10 * 1024 * 1024),
            "backupCount": _env_int("LOG_BACKUP_COUNT", 5),
            "encoding": "utf-8",
        }

    LOGGING = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s - %(message)s"},
        },
        "handlers": handlers,
        "root": {"level": LOG_LEVEL, "handlers": list(handlers)},
        "loggers": {
            "django": _propagating(DJANGO_LOG_LEVEL),
            "django.db.backends": _propagating(SQL_LOG_LEVEL),
            "store": _propagating(SERVICE_LOG_LEVEL),
            "core": _propagating(LOG_LEVEL),
        },
    }


__all__ = ["LOGGING", "LOGGING_CONFIG", "LOG_ENABLED"]
