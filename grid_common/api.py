"""Public API surface for grid_common."""

from grid_common.config.env import parse_bool_env, parse_int_env
from grid_common.errors import (
    ConfigurationError,
    ErrorCode,
    FieldNotFoundError,
    GridError,
    InvalidCellIdentifierError,
    InvalidChangesetPayloadError,
    InvalidTypeOptionDataError,
    OptionIdIsEmptyError,
    UnsupportedFieldTypeError,
    error_to_payload,
    wrap_error,
)
from grid_common.logging import configure_logging

__all__ = [
    "ConfigurationError",
    "ErrorCode",
    "FieldNotFoundError",
    "GridError",
    "InvalidCellIdentifierError",
    "InvalidChangesetPayloadError",
    "InvalidTypeOptionDataError",
    "OptionIdIsEmptyError",
    "UnsupportedFieldTypeError",
    "configure_logging",
    "error_to_payload",
    "parse_bool_env",
    "parse_int_env",
    "wrap_error",
]
