"""Select field editing on top of a revision store."""

from __future__ import annotations

import logging

from grid_common.errors import FieldNotFoundError

from .cell_data import SelectOptionCellData
from .changeset import SelectOptionCellChangesetParams, SelectOptionChangeset
from .dispatch import select_option_operation
from .options import SelectOption
from .revision import FieldRevision, RevisionStore

logger = logging.getLogger(__name__)


class SelectOptionEditor:
    """Reads and writes select cells and option registries through a store.

    The store guarantees that the field revision and the previous cell value
    it hands out belong together; every method here is a read, a pure
    transformation, and a single write back.
    """

    def __init__(self, store: RevisionStore) -> None:
        self._store = store

    def _field_rev(self, grid_id: str, field_id: str) -> FieldRevision:
        field_rev = self._store.get_field_rev(grid_id, field_id)
        if field_rev is None:
            raise FieldNotFoundError(
                f"Field {field_id} not found",
                context={"grid_id": grid_id, "field_id": field_id},
            )
        return field_rev

    def get_cell_data(self, grid_id: str, field_id: str, row_id: str) -> SelectOptionCellData:
        field_rev = self._field_rev(grid_id, field_id)
        type_option = select_option_operation(field_rev)
        cell_rev = self._store.get_cell_rev(grid_id, field_id, row_id)
        return type_option.selected_select_option(cell_rev)

    def update_cell(self, params: SelectOptionCellChangesetParams) -> str:
        """Apply a cell changeset and persist the new value."""
        identifier = params.cell_identifier
        field_rev = self._field_rev(identifier.grid_id, identifier.field_id)
        type_option = select_option_operation(field_rev)
        cell_rev = self._store.get_cell_rev(
            identifier.grid_id, identifier.field_id, identifier.row_id
        )
        cell_changeset = params.to_cell_changeset()
        new_cell_data = type_option.apply_changeset(
            cell_changeset.cell_content_changeset, cell_rev
        )
        self._store.update_cell(
            identifier.grid_id, identifier.field_id, identifier.row_id, new_cell_data
        )
        logger.debug(
            "Updated select cell",
            extra={
                "grid_id": identifier.grid_id,
                "field_id": identifier.field_id,
                "row_id": identifier.row_id,
                "field_type": field_rev.field_type.name,
                "cell_data": new_cell_data,
            },
        )
        return new_cell_data

    def apply_option_changeset(self, changeset: SelectOptionChangeset) -> FieldRevision:
        """Insert, update or delete an option and persist the field."""
        identifier = changeset.cell_identifier
        field_rev = self._field_rev(identifier.grid_id, identifier.field_id)
        type_option = select_option_operation(field_rev)
        type_option.apply_option_changeset(changeset)

        updated = field_rev.model_copy(deep=True)
        updated.insert_type_option_entry(type_option)
        self._store.update_field_rev(identifier.grid_id, updated)
        return updated

    def create_option(self, grid_id: str, field_id: str, name: str) -> SelectOption:
        """New option for a field, colored by its registry size. Not inserted."""
        type_option = select_option_operation(self._field_rev(grid_id, field_id))
        return type_option.create_option(name)
