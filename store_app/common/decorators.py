from functools import wraps
from typing import Any, Callable, TypeVar

from django.db import DatabaseError, IntegrityError

from core.exceptions import ConflictError, InternalError, ServiceError

F = TypeVar("F", bound=Callable[..., Any])


def translate_storage_errors(conflict_message: str = ConflictError.default_message) -> Callable[[F], F]:
    """
    Map ORM failures raised by a service method onto service errors.

    ``IntegrityError`` (a unique constraint lost a race with a concurrent
    writer) becomes :class:`ConflictError` carrying ``conflict_message``.
    Any other ``DatabaseError`` is logged on the service logger and becomes
    :class:`InternalError`.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except ServiceError:
                raise
            except IntegrityError as exc:
                self.logger.warning("%s rejected by a constraint: %s", func.__name__, exc)
                raise ConflictError(conflict_message) from exc
            except DatabaseError as exc:
                self.logger.exception("Storage failure in %s", func.__name__)
                raise InternalError(str(exc)) from exc

        return wrapper  # type: ignore[return-value]

    return decorator
