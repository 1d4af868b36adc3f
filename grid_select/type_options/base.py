"""Shared behaviour of the select field type options."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Optional, TypeVar

from pydantic import BaseModel, Field, ValidationError

from grid_common.errors import InvalidTypeOptionDataError

from ..cell_data import SelectOptionCellData, make_selected_select_options
from ..changeset import SelectOptionCellChangeset, SelectOptionChangeset
from ..field_type import FieldType
from ..options import (
    SelectOption,
    join_option_ids,
    select_option_color_from_index,
    select_option_ids,
)
from ..revision import CellRevision, FieldRevision

logger = logging.getLogger(__name__)


class SelectTypeOption(BaseModel, ABC):
    """Option registry of a select field plus its cell codec.

    Concrete types must:
    1. Set ``FIELD_TYPE`` to the field type they serve
    2. Implement ``_apply_cell_changeset()`` with their insert semantics
    """

    FIELD_TYPE: ClassVar[FieldType]

    options: list[SelectOption] = Field(
        default_factory=list, description="Ordered option registry"
    )
    disable_color: bool = Field(default=False, description="Hide option colors")

    model_config = {"extra": "ignore"}

    @classmethod
    def field_type(cls) -> FieldType:
        return cls.FIELD_TYPE

    @classmethod
    def from_field_rev(cls, field_rev: FieldRevision) -> "SelectTypeOption":
        return field_rev.get_type_option_entry(cls)

    def json_str(self) -> str:
        return self.model_dump_json()

    # ----- registry -----

    def insert_option(self, new_option: SelectOption) -> None:
        """Replace the option matching by id or name in place, else prepend."""
        for index, option in enumerate(self.options):
            if option.id == new_option.id or option.name == new_option.name:
                self.options[index] = new_option
                return
        self.options.insert(0, new_option)

    def delete_option(self, delete_option: SelectOption) -> None:
        for index, option in enumerate(self.options):
            if option.id == delete_option.id:
                del self.options[index]
                return

    def create_option(self, name: str) -> SelectOption:
        """New option colored by registry size. Not inserted."""
        color = select_option_color_from_index(len(self.options))
        return SelectOption.with_color(name, color)

    def apply_option_changeset(self, changeset: SelectOptionChangeset) -> None:
        if changeset.insert_option is not None:
            self.insert_option(changeset.insert_option)
        if changeset.update_option is not None:
            self.insert_option(changeset.update_option)
        if changeset.delete_option is not None:
            self.delete_option(changeset.delete_option)

    # ----- cell codec -----

    def selected_select_option(
        self, cell_rev: Optional[CellRevision]
    ) -> SelectOptionCellData:
        data = cell_rev.data if cell_rev is not None else ""
        return self.decode_cell_data(data, self.field_type())

    def decode_cell_data(
        self, encoded_data: str, decoded_field_type: FieldType
    ) -> SelectOptionCellData:
        """Resolve a persisted value against the registry. Never fails."""
        if not decoded_field_type.is_select_option():
            return SelectOptionCellData()
        return SelectOptionCellData(
            options=[option.model_copy() for option in self.options],
            select_options=self._selected_options(encoded_data),
        )

    def _selected_options(self, encoded_data: str) -> list[SelectOption]:
        return make_selected_select_options(encoded_data, self.options)

    def apply_changeset(
        self, changeset: Any, cell_rev: Optional[CellRevision] = None
    ) -> str:
        """Return the new persisted value for a cell.

        Raises:
            InvalidChangesetPayloadError: if ``changeset`` is not a valid
                select option instruction.
        """
        content = SelectOptionCellChangeset.parse(changeset)
        return self._apply_cell_changeset(content, cell_rev)

    @abstractmethod
    def _apply_cell_changeset(
        self,
        changeset: SelectOptionCellChangeset,
        cell_rev: Optional[CellRevision],
    ) -> str:
        ...


def apply_toggle_changeset(
    changeset: SelectOptionCellChangeset,
    cell_rev: Optional[CellRevision],
    field_type: FieldType,
) -> str:
    """Toggle ``insert_option_id`` then drop every ``delete_option_id``."""
    previous = cell_rev.data if cell_rev is not None else ""
    select_ids = select_option_ids(previous)

    insert_option_id = changeset.insert_option_id
    if insert_option_id:
        if insert_option_id in select_ids:
            select_ids = [option_id for option_id in select_ids if option_id != insert_option_id]
        else:
            select_ids.append(insert_option_id)

    delete_option_id = changeset.delete_option_id
    if delete_option_id:
        select_ids = [option_id for option_id in select_ids if option_id != delete_option_id]

    new_cell_data = join_option_ids(select_ids)
    logger.debug(
        "Applied %s changeset",
        field_type.name.lower(),
        extra={
            "field_type": field_type.name,
            "insert_option_id": insert_option_id,
            "delete_option_id": delete_option_id,
            "previous_cell_data": previous,
            "cell_data": new_cell_data,
        },
    )
    return new_cell_data


EntryT = TypeVar("EntryT", bound=SelectTypeOption)


class SelectTypeOptionBuilder(Generic[EntryT]):
    """Accumulates options before a field is finalized."""

    entry_cls: ClassVar[type[SelectTypeOption]]

    def __init__(self, entry: Optional[EntryT] = None) -> None:
        self._entry: EntryT = entry if entry is not None else self.entry_cls()  # type: ignore[assignment]

    @classmethod
    def from_json_str(cls, data: str) -> "SelectTypeOptionBuilder[EntryT]":
        try:
            entry = cls.entry_cls.model_validate_json(data)
        except ValidationError as exc:
            raise InvalidTypeOptionDataError(
                f"Invalid {cls.entry_cls.field_type().name.lower()} type option data",
                context={"payload": data},
                cause=exc,
            ) from exc
        return cls(entry)  # type: ignore[arg-type]

    def option(self, opt: SelectOption) -> "SelectTypeOptionBuilder[EntryT]":
        self._entry.options.append(opt)
        return self

    def field_type(self) -> FieldType:
        return self.entry_cls.field_type()

    def entry(self) -> EntryT:
        return self._entry

    def build(self) -> EntryT:
        return self._entry.model_copy(deep=True)
