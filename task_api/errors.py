"""Fault types raised by the task service and their HTTP mapping."""

from enum import Enum

from fastapi import status

from .models import FieldError


class FaultKind(str, Enum):
    """Failure categories the error handlers know how to render."""

    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    VALIDATION_FAILED = "validation_failed"
    INTERNAL = "internal"


FAULT_RESPONSES: dict[FaultKind, tuple[int, str]] = {
    FaultKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    FaultKind.INVALID_INPUT: (status.HTTP_400_BAD_REQUEST, "Bad Request"),
    FaultKind.VALIDATION_FAILED: (status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    FaultKind.INTERNAL: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"),
}


def fault_response(kind: FaultKind) -> tuple[int, str]:
    """Return the (HTTP status, error label) pair for a fault kind."""
    return FAULT_RESPONSES[kind]


class TaskFault(Exception):
    """Base class for faults that the error handlers translate to responses."""

    kind: FaultKind = FaultKind.INTERNAL

    def __init__(self, message: str, *, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class NotFoundError(TaskFault):
    """Raised when no task exists for the requested id."""

    kind = FaultKind.NOT_FOUND


class InvalidInputError(TaskFault):
    """Raised for malformed arguments such as a non-positive task id."""

    kind = FaultKind.INVALID_INPUT


class InternalError(TaskFault):
    """Raised when storage fails; the cause is logged, never returned."""

    kind = FaultKind.INTERNAL


class ValidationFailedError(TaskFault):
    """Raised when request fields break their declared constraints."""

    kind = FaultKind.VALIDATION_FAILED

    def __init__(self, errors: list[FieldError]):
        super().__init__("Validation failed for one or more fields")
        self.errors = errors
