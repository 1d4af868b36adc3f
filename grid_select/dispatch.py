"""Dispatch from a field type tag to its select type option."""

from __future__ import annotations

import logging
from typing import Dict, Type

from grid_common.errors import UnsupportedFieldTypeError, error_to_payload

from .field_type import FieldType
from .revision import FieldRevision
from .type_options import (
    ChecklistSelectTypeOption,
    ChecklistSelectTypeOptionBuilder,
    MultiSelectTypeOption,
    MultiSelectTypeOptionBuilder,
    SelectTypeOption,
    SelectTypeOptionBuilder,
    SingleSelectTypeOption,
    SingleSelectTypeOptionBuilder,
)

logger = logging.getLogger(__name__)

_BUILDERS: Dict[Type[SelectTypeOption], Type[SelectTypeOptionBuilder]] = {
    SingleSelectTypeOption: SingleSelectTypeOptionBuilder,
    MultiSelectTypeOption: MultiSelectTypeOptionBuilder,
    ChecklistSelectTypeOption: ChecklistSelectTypeOptionBuilder,
}


def _unsupported(field_type: FieldType) -> UnsupportedFieldTypeError:
    error = UnsupportedFieldTypeError(
        f"Field type {field_type.name} has no select options",
        context={"field_type": field_type.name},
    )
    logger.error(
        "Unsupported field type: %s for this handler",
        field_type.name,
        extra=error_to_payload(error),
    )
    return error


def type_option_cls_for(field_type: FieldType) -> Type[SelectTypeOption]:
    if field_type.is_single_select():
        return SingleSelectTypeOption
    if field_type.is_multi_select():
        return MultiSelectTypeOption
    if field_type.is_checklist_select():
        return ChecklistSelectTypeOption
    raise _unsupported(field_type)


def type_option_builder_for(field_type: FieldType) -> SelectTypeOptionBuilder:
    """Return an empty builder for a select field type."""
    return _BUILDERS[type_option_cls_for(field_type)]()


def select_option_operation(field_rev: FieldRevision) -> SelectTypeOption:
    """Load the select type option stored on ``field_rev``.

    Raises:
        UnsupportedFieldTypeError: if the field is not a select field.
    """
    return type_option_cls_for(field_rev.field_type).from_field_rev(field_rev)
