"""Checklist select: options are ticked on and off per cell."""

from __future__ import annotations

from typing import ClassVar, Optional

from ..changeset import SelectOptionCellChangeset
from ..field_type import FieldType
from ..revision import CellRevision
from .base import SelectTypeOption, SelectTypeOptionBuilder, apply_toggle_changeset


class ChecklistSelectTypeOption(SelectTypeOption):
    FIELD_TYPE: ClassVar[FieldType] = FieldType.CHECKLIST_SELECT

    def _apply_cell_changeset(
        self,
        changeset: SelectOptionCellChangeset,
        cell_rev: Optional[CellRevision],
    ) -> str:
        return apply_toggle_changeset(changeset, cell_rev, self.field_type())


class ChecklistSelectTypeOptionBuilder(
    SelectTypeOptionBuilder[ChecklistSelectTypeOption]
):
    entry_cls = ChecklistSelectTypeOption
