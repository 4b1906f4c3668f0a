import re
import secrets
import string
import time
from typing import Callable

_ALPHABET = string.ascii_uppercase + string.digits
_TOKEN_LENGTH = 8

_WHITESPACE_RE = re.compile(r"\s+")
_INVALID_RE = re.compile(r"[^a-z0-9-]")
_HYPHENS_RE = re.compile(r"-{2,}")


def new_id(prefix: str) -> str:
    """Return ``"{PREFIX}-XXXXXXXX"`` with an uppercase alphanumeric token.

    Collisions are unlikely but possible; inserts still rely on the unique
    column constraint.
    """

    token = "".join(secrets.choice(_ALPHABET) for _ in range(_TOKEN_LENGTH))
    return f"{prefix.upper()}-{token}"


def derive_slug(*parts: str) -> str:
    raw = "-".join(str(part) for part in parts if part not in (None, ""))
    slug = _WHITESPACE_RE.sub("-", raw.strip().lower())
    slug = _INVALID_RE.sub("", slug)
    slug = _HYPHENS_RE.sub("-", slug)
    return slug.strip("-")


def ensure_unique(candidate: str, exists: Callable[[str], bool]) -> str:
    """Suffix ``candidate`` with a millisecond timestamp when already taken.

    The suffixed value is not checked again.
    """

    if exists(candidate):
        return f"{candidate}-{int(time.time() * 1000)}"
    return candidate
