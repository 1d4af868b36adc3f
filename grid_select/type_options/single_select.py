"""Single select: a cell holds at most one option."""

from __future__ import annotations

import logging
from typing import ClassVar, Optional

from ..cell_data import make_selected_select_options
from ..changeset import SelectOptionCellChangeset
from ..field_type import FieldType
from ..options import SELECTION_IDS_SEPARATOR, SelectOption
from ..revision import CellRevision
from .base import SelectTypeOption, SelectTypeOptionBuilder

logger = logging.getLogger(__name__)


class SingleSelectTypeOption(SelectTypeOption):
    FIELD_TYPE: ClassVar[FieldType] = FieldType.SINGLE_SELECT

    def _selected_options(self, encoded_data: str) -> list[SelectOption]:
        # Only the first raw segment counts, so ",A" selects nothing.
        first_id = encoded_data.split(SELECTION_IDS_SEPARATOR, 1)[0]
        return make_selected_select_options(first_id, self.options)

    def _apply_cell_changeset(
        self,
        changeset: SelectOptionCellChangeset,
        cell_rev: Optional[CellRevision],
    ) -> str:
        # Last write wins; the previous value and delete_option_id are ignored.
        new_cell_data = changeset.insert_option_id
        if new_cell_data is None:
            new_cell_data = ""
        logger.debug(
            "Applied single_select changeset",
            extra={
                "field_type": self.field_type().name,
                "insert_option_id": changeset.insert_option_id,
                "delete_option_id": changeset.delete_option_id,
                "cell_data": new_cell_data,
            },
        )
        return new_cell_data


class SingleSelectTypeOptionBuilder(SelectTypeOptionBuilder[SingleSelectTypeOption]):
    entry_cls = SingleSelectTypeOption
