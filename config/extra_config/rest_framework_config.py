"""Django REST framework configuration."""

REST_FRAMEWORK = {
    "DEFAULT_PAGINATION_CLASS": "store_app.pagination.EnvelopePagination",
    "DEFAULT_FILTER_BACKENDS": [
        "django_filters.rest_framework.DjangoFilterBackend",
        "rest_framework.filters.OrderingFilter",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "core.exception_handler.envelope_exception_handler",
    "COERCE_DECIMAL_TO_STRING": False,
}

__all__ = ["REST_FRAMEWORK"]
