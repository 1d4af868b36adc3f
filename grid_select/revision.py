"""Field and cell records exchanged with the storage layer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError

from grid_common.errors import InvalidTypeOptionDataError

from .field_type import FieldType

if TYPE_CHECKING:
    from .type_options.base import SelectTypeOption

logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT", bound="SelectTypeOption")


class CellRevision(BaseModel):
    """Persisted state of one cell."""

    data: str = ""


class FieldRevision(BaseModel):
    """Persisted definition of one field.

    ``type_options`` maps a field type id to the JSON of that type's options,
    so switching the field type back and forth keeps each type's registry.
    """

    id: str
    name: str = ""
    desc: str = ""
    field_type: FieldType = FieldType.RICH_TEXT
    frozen: bool = False
    visibility: bool = True
    width: int = 150
    is_primary: bool = False
    type_options: Dict[str, str] = Field(default_factory=dict)

    def get_type_option_entry(self, entry_cls: Type[EntryT]) -> EntryT:
        """Load the stored options for ``entry_cls``, or an empty entry."""
        raw = self.type_options.get(entry_cls.field_type().type_id())
        if raw is None:
            return entry_cls()
        try:
            return entry_cls.model_validate_json(raw)
        except ValidationError as exc:
            raise InvalidTypeOptionDataError(
                f"Stored type option of field {self.id} is invalid",
                context={"field_id": self.id, "field_type": entry_cls.field_type()},
                cause=exc,
            ) from exc

    def insert_type_option_entry(self, entry: "SelectTypeOption") -> None:
        type_id = entry.field_type().type_id()
        self.type_options[type_id] = entry.json_str()
        logger.debug("Stored type option %s on field %s", type_id, self.id)


class RevisionStore(Protocol):
    """Storage collaborator that persists field and cell revisions.

    Implementations serialize concurrent edits; the codec only reads a
    consistent snapshot and hands back new values.
    """

    def get_field_rev(self, grid_id: str, field_id: str) -> Optional[FieldRevision]:
        ...

    def get_cell_rev(
        self, grid_id: str, field_id: str, row_id: str
    ) -> Optional[CellRevision]:
        ...

    def update_field_rev(self, grid_id: str, field_rev: FieldRevision) -> None:
        ...

    def update_cell(self, grid_id: str, field_id: str, row_id: str, data: str) -> None:
        ...
