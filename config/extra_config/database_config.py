"""Database configuration for the Storefront API."""

import os

from typing import Any, Dict

from .environment import BASE_DIR

engine = os.getenv("SQL_ENGINE", "django.db.backends.postgresql")

default_db: Dict[str, Any] = {
    "ENGINE": engine,
    "NAME": os.getenv("SQL_DATABASE", "storefront"),
    "USER": os.getenv("SQL_USER", "storefront"),
    "PASSWORD": os.getenv("SQL_PASSWORD", "storefront"),
    "HOST": os.getenv("SQL_HOST", "127.0.0.1"),
    "PORT": os.getenv("SQL_PORT", "5432"),
    "ATOMIC_REQUESTS": False,
    "CONN_MAX_AGE": int(os.getenv("SQL_CONN_MAX_AGE", "0")),
}

if "postgres" in engine:
    default_db["OPTIONS"] = {
        "options": os.getenv("SQL_OPTIONS", "-c client_encoding=UTF8"),
    }
elif "sqlite" in engine and not os.getenv("SQL_DATABASE"):
    default_db["NAME"] = str(BASE_DIR / "storefront.sqlite3")

DATABASES = {"default": default_db}

__all__ = ["DATABASES"]
