"""Test settings for pytest.

In-memory SQLite so the suite runs without PostgreSQL. Row locks taken with
``select_for_update`` are no-ops there.
"""

from .settings import *  # noqa: F401,F403
from .settings import REST_FRAMEWORK

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

REST_FRAMEWORK = {**REST_FRAMEWORK, "TEST_REQUEST_DEFAULT_FORMAT": "json"}

REVIEW_PAGE_SIZE_LIMIT = 50

LOGGING_CONFIG = None
