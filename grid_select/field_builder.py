"""Builder for select field revisions."""

from __future__ import annotations

import uuid

from .field_type import FieldType
from .revision import FieldRevision
from .type_options import SelectTypeOptionBuilder


class FieldBuilder:
    """Assemble a FieldRevision around a type option builder.

    Usage:
        field_rev = (
            FieldBuilder(MultiSelectTypeOptionBuilder().option(opt))
            .name("Platform")
            .visibility(True)
            .build()
        )
    """

    def __init__(self, type_option_builder: SelectTypeOptionBuilder) -> None:
        field_type: FieldType = type_option_builder.field_type()
        self._type_option_builder = type_option_builder
        self._field_rev = FieldRevision(
            id=uuid.uuid4().hex,
            field_type=field_type,
            width=field_type.default_cell_width(),
        )

    def name(self, name: str) -> "FieldBuilder":
        self._field_rev.name = name
        return self

    def desc(self, desc: str) -> "FieldBuilder":
        self._field_rev.desc = desc
        return self

    def visibility(self, visibility: bool) -> "FieldBuilder":
        self._field_rev.visibility = visibility
        return self

    def width(self, width: int) -> "FieldBuilder":
        self._field_rev.width = width
        return self

    def frozen(self, frozen: bool) -> "FieldBuilder":
        self._field_rev.frozen = frozen
        return self

    def primary(self, is_primary: bool) -> "FieldBuilder":
        self._field_rev.is_primary = is_primary
        return self

    def build(self) -> FieldRevision:
        field_rev = self._field_rev.model_copy(deep=True)
        field_rev.insert_type_option_entry(self._type_option_builder.build())
        return field_rev
