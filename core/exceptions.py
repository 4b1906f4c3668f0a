from typing import Iterable, Optional


class ServiceError(RuntimeError):
    """Base exception for all store service errors."""

    status_code = 500
    default_message = "Internal server error. Please try again later."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Raised when input is malformed or required fields are missing."""

    status_code = 400
    default_message = "Invalid input."


class NotFoundError(ServiceError):
    """Raised when a referenced entity is absent or a query matched nothing."""

    status_code = 404
    default_message = "Not found."

    @classmethod
    def for_ids(cls, label: str, ids: Iterable[str]) -> "NotFoundError":
        return cls(f"{label} not found: {', '.join(ids)}")


class ConflictError(ServiceError):
    """Raised on uniqueness violations and duplicate state transitions."""

    status_code = 409
    default_message = "Conflict."


class InternalError(ServiceError):
    """Raised when storage or another collaborator fails unexpectedly."""
