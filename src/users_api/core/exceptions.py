"""Domain errors raised by the service layer.

Not-found is never an exception: services return ``None``/``False`` for
absent records. Anything not listed here is an unclassified fault and is
left to propagate.
"""

from collections.abc import Iterable, Mapping
from typing import Any

USER_ALREADY_EXISTS = "User already exists"
USER_NOT_FOUND = "User not found"


class UserServiceError(Exception):
    """Base class for classified user service failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConflictError(UserServiceError):
    """The operation would break email uniqueness."""


class InvalidArgumentError(UserServiceError):
    """Input does not satisfy the user field invariants."""


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Render pydantic error dicts as one human readable line.

    ``body`` location prefixes added by FastAPI are dropped, so a missing
    field reads ``firstName: Field required``.
    """
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"
