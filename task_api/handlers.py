"""Exception handlers rendering every failure as an ApiError body."""

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import TaskFault, ValidationFailedError, fault_response
from .models import ApiError, FieldError

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

# Messages for the request constraints, keyed by (field, pydantic error type).
FIELD_MESSAGES = {
    ("title", "missing"): "Title is required",
    ("title", "string_too_short"): "Title must be between 1 and 100 characters",
    ("title", "string_too_long"): "Title must be between 1 and 100 characters",
    ("description", "string_too_long"): "Description cannot exceed 500 characters",
    ("status", "missing"): "Status is required",
    ("status", "enum"): "Status must be one of TODO, IN_PROGRESS, DONE",
}


def field_errors(errors: list[dict[str, Any]]) -> list[FieldError]:
    """Convert pydantic error dicts into field/message/rejected value entries."""
    result = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in ("body", "path", "query") and len(loc) > 1:
            loc = loc[1:]
        field = ".".join(loc)
        message = FIELD_MESSAGES.get((field, err.get("type")), err.get("msg", ""))
        rejected = None if err.get("type") == "missing" else err.get("input")
        result.append(
            FieldError(
                field=field,
                message=message,
                rejected_value=jsonable_encoder(rejected),
            )
        )
    return result


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    validation_errors: list[FieldError] | None = None,
) -> JSONResponse:
    """Build an ApiError JSON response for the current request."""
    body = ApiError(
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
        validation_errors=validation_errors,
    )
    content = body.model_dump(mode="json", by_alias=True)
    if validation_errors is None:
        content.pop("validationErrors")
    return JSONResponse(status_code=status_code, content=content)


async def handle_task_fault(request: Request, exc: TaskFault) -> JSONResponse:
    """Render a service fault using its status and label."""
    status_code, label = fault_response(exc.kind)
    if status_code >= 500:
        logger.error(
            "%s: %s", label, exc.message, exc_info=exc.cause or exc
        )
    else:
        logger.warning("%s: %s", label, exc.message)
    errors = exc.errors if isinstance(exc, ValidationFailedError) else None
    return error_response(request, status_code, label, exc.message, errors)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation errors as a Validation Failed fault."""
    return await handle_task_fault(
        request, ValidationFailedError(field_errors(list(exc.errors())))
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework HTTP errors such as unknown routes."""
    label = HTTPStatus(exc.status_code).phrase
    logger.warning("%s: %s %s", label, request.method, request.url.path)
    response = error_response(request, exc.status_code, label, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    """Render any other exception as a generic 500."""
    logger.error("Unexpected error occurred", exc_info=exc)
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        HTTPStatus.INTERNAL_SERVER_ERROR.phrase,
        UNEXPECTED_ERROR_MESSAGE,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install all error handlers on the app."""
    app.add_exception_handler(TaskFault, handle_task_fault)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
