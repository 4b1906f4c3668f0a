from typing import Any, Dict, Optional

from rest_framework import status as http_status
from rest_framework.response import Response


def envelope(
    message: str,
    data: Any = None,
    *,
    status: int = http_status.HTTP_200_OK,
    success: bool = True,
    pagination: Optional[Dict[str, Any]] = None,
    **extra: Any,
) -> Response:
    """Wrap a payload in the ``{success, message, data, ...}`` envelope."""

    body: Dict[str, Any] = {"success": success, "message": message}
    if data is not None:
        body["data"] = data
    if pagination is not None:
        body["pagination"] = pagination
    body.update(extra)
    return Response(body, status=status)


def error_envelope(message: str, *, status: int, errors: Any = None) -> Response:
    extra = {"errors": errors} if errors else {}
    return envelope(message, status=status, success=False, **extra)
