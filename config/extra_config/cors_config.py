"""CORS/CSRF configuration for the storefront frontends."""

import os

from corsheaders.defaults import default_headers, default_methods


def _parse_space_separated(raw: str) -> list[str]:
    return [value for value in (part.strip() for part in raw.replace(",", " ").split()) if value]


# Local storefront and admin frontends.
DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://localhost:8000",
    "http://127.0.0.1:8000",
]

_frontend_url = os.getenv("STOREFRONT_FRONTEND_URL", "").strip().rstrip("/")
_env_origins = _parse_space_separated(os.getenv("CORS_ALLOWED_ORIGINS", ""))

CORS_ALLOWED_ORIGINS = _env_origins or DEFAULT_ORIGINS
if _frontend_url and _frontend_url not in CORS_ALLOWED_ORIGINS:
    CORS_ALLOWED_ORIGINS = [*CORS_ALLOWED_ORIGINS, _frontend_url]

CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_METHODS = list(default_methods)
CORS_ALLOW_HEADERS = list(default_headers) + ["x-requested-with"]

CSRF_TRUSTED_ORIGINS = _parse_space_separated(os.getenv("CSRF_TRUSTED_ORIGINS", "")) or list(CORS_ALLOWED_ORIGINS)


__all__ = [
    "CORS_ALLOWED_ORIGINS",
    "CORS_ALLOW_CREDENTIALS",
    "CORS_ALLOW_METHODS",
    "CORS_ALLOW_HEADERS",
    "CSRF_TRUSTED_ORIGINS",
]
