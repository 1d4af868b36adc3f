"""Field type tags for the grid data model."""

from __future__ import annotations

from enum import IntEnum


class FieldType(IntEnum):
    RICH_TEXT = 0
    NUMBER = 1
    DATE_TIME = 2
    SINGLE_SELECT = 3
    MULTI_SELECT = 4
    CHECKLIST_SELECT = 5
    CHECKBOX = 6
    URL = 7

    def type_id(self) -> str:
        """Key under which a field revision stores this type's options."""
        return str(int(self))

    def default_cell_width(self) -> int:
        if self is FieldType.DATE_TIME:
            return 180
        return 150

    def is_single_select(self) -> bool:
        return self is FieldType.SINGLE_SELECT

    def is_multi_select(self) -> bool:
        return self is FieldType.MULTI_SELECT

    def is_checklist_select(self) -> bool:
        return self is FieldType.CHECKLIST_SELECT

    def is_select_option(self) -> bool:
        return self in SELECT_FIELD_TYPES


SELECT_FIELD_TYPES = frozenset(
    {FieldType.SINGLE_SELECT, FieldType.MULTI_SELECT, FieldType.CHECKLIST_SELECT}
)
