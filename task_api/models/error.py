"""Pydantic models for error responses."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FieldError(BaseModel):
    """A single rejected request field."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    field: str
    message: str
    rejected_value: Any = None


class ApiError(BaseModel):
    """Uniform error body returned for every failed request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    timestamp: datetime = Field(default_factory=datetime.now)
    status: int
    error: str
    message: str
    path: str | None = None
    validation_errors: list[FieldError] | None = None
