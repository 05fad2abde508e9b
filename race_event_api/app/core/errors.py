"""Domain error codes and their HTTP mapping.

Services raise these errors; ``main.create_app`` installs handlers that
turn every one of them into a ``{"message": ...}`` body with the status
given by ``status_code``.  Absence on plain lookups is never an error at
the storage level: services check for ``None`` and raise
``NotFoundError`` themselves.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    POLICY_VIOLATION = "POLICY_VIOLATION"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL = "INTERNAL"


STATUS_BY_CODE = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.CONFLICT: 400,
    ErrorCode.POLICY_VIOLATION: 400,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.INTERNAL: 500,
}


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    @property
    def status_code(self) -> int:
        return STATUS_BY_CODE.get(self.code, 500)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when a payload is malformed or misses required fields."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)


class NotFoundError(DomainError):
    """Raised when a record with the requested id does not exist."""

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=message)


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness rule."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.CONFLICT, message=message)


class PolicyViolationError(DomainError):
    """Raised when a business rule refuses an otherwise valid request."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.POLICY_VIOLATION, message=message)


class UnauthorizedError(DomainError):
    """Raised for missing, invalid or expired credentials."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(code=ErrorCode.UNAUTHORIZED, message=message)


class ForbiddenError(DomainError):
    """Raised when the caller's role does not grant access."""

    def __init__(self, message: str = "Insufficient permissions") -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message=message)


class DuplicateRegistrationError(ConflictError):
    def __init__(self) -> None:
        super().__init__("User is already registered for this event")


class EventNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("Event not found")


class RegistrationClosedError(PolicyViolationError):
    def __init__(self) -> None:
        super().__init__("Registration for this event is closed")


class CapacityExceededError(PolicyViolationError):
    def __init__(self) -> None:
        super().__init__("Event has reached maximum capacity")


def _field_path(loc: Iterable[Any]) -> str:
    # Request errors are prefixed with where the value came from.
    parts = [str(part) for part in loc]
    if parts and parts[0] in {"body", "query", "path", "header"}:
        parts = parts[1:]
    return ".".join(parts)


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Render a Pydantic error list as a single readable message.

    Every offending field is named, e.g.
    ``Validation error: Field required at "eventId"; Input should be a
    valid integer at "userId"``.
    """
    details = []
    for error in errors:
        path = _field_path(error.get("loc", ()))
        msg = error.get("msg", "Invalid value")
        details.append(f'{msg} at "{path}"' if path else msg)
    if not details:
        return "Validation error"
    return "Validation error: " + "; ".join(details)
