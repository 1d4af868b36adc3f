"""Shared error taxonomy for the grid select codec."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, TypeVar


class ErrorCode(str, Enum):
    """Stable codes surfaced to callers across the process boundary."""

    INTERNAL = "Internal"
    INVALID_DATA = "InvalidData"
    INVALID_CONFIGURATION = "InvalidConfiguration"
    INVALID_CHANGESET_PAYLOAD = "InvalidChangesetPayload"
    FIELD_INVALID_OPERATION = "FieldInvalidOperation"
    FIELD_DOES_NOT_EXIST = "FieldDoesNotExist"
    OPTION_ID_IS_EMPTY = "OptionIdIsEmpty"
    GRID_ID_IS_EMPTY = "GridIdIsEmpty"
    FIELD_ID_IS_EMPTY = "FieldIdIsEmpty"
    ROW_ID_IS_EMPTY = "RowIdIsEmpty"


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class GridError(Exception):
    """Base error type for typed failure handling."""

    default_code: ErrorCode = ErrorCode.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode | None = None,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code or self.default_code
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.error_type,
            "code": self.code.value,
            "message": str(self),
            "context": self.context,
        }


class InvalidChangesetPayloadError(GridError):
    """A cell changeset instruction could not be parsed."""

    default_code = ErrorCode.INVALID_CHANGESET_PAYLOAD


class UnsupportedFieldTypeError(GridError):
    """An operation needs a select field but got another field type."""

    default_code = ErrorCode.FIELD_INVALID_OPERATION


class OptionIdIsEmptyError(GridError):
    """An option id was provided but is blank."""

    default_code = ErrorCode.OPTION_ID_IS_EMPTY


class InvalidCellIdentifierError(GridError):
    """Grid, field or row id missing from a cell identifier."""

    default_code = ErrorCode.INVALID_DATA


class InvalidTypeOptionDataError(GridError):
    """Stored type option data does not match the expected schema."""

    default_code = ErrorCode.INVALID_DATA


class FieldNotFoundError(GridError):
    """The storage layer has no revision for the requested field."""

    default_code = ErrorCode.FIELD_DOES_NOT_EXIST


class ConfigurationError(GridError):
    """Failure due to invalid configuration."""

    default_code = ErrorCode.INVALID_CONFIGURATION


T = TypeVar("T", bound=GridError)


def wrap_error(
    error_cls: type[T],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> T:
    """Create a typed GridError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: GridError) -> dict[str, Any]:
    """Convert a GridError to a response payload."""
    return {
        "error_type": error.error_type,
        "error_code": error.code.value,
        "error": str(error),
        "error_context": error.context,
    }
