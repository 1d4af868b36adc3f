"""Multi select: a cell holds an ordered list of options."""

from __future__ import annotations

from typing import ClassVar, Optional

from ..changeset import SelectOptionCellChangeset
from ..field_type import FieldType
from ..revision import CellRevision
from .base import SelectTypeOption, SelectTypeOptionBuilder, apply_toggle_changeset


class MultiSelectTypeOption(SelectTypeOption):
    FIELD_TYPE: ClassVar[FieldType] = FieldType.MULTI_SELECT

    def _apply_cell_changeset(
        self,
        changeset: SelectOptionCellChangeset,
        cell_rev: Optional[CellRevision],
    ) -> str:
        return apply_toggle_changeset(changeset, cell_rev, self.field_type())


class MultiSelectTypeOptionBuilder(SelectTypeOptionBuilder[MultiSelectTypeOption]):
    entry_cls = MultiSelectTypeOption
