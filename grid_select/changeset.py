"""Cell and option changesets exchanged with clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from grid_common.errors import (
    ErrorCode,
    InvalidCellIdentifierError,
    InvalidChangesetPayloadError,
    OptionIdIsEmptyError,
)

from .options import SelectOption


class SelectOptionCellChangeset(BaseModel):
    """Instruction to insert and/or delete one option id on a cell.

    Crosses the process boundary as JSON; both fields may be absent.
    """

    insert_option_id: Optional[str] = Field(
        default=None, description="Option id to select (toggled for multi-value cells)"
    )
    delete_option_id: Optional[str] = Field(
        default=None, description="Option id to remove from the cell"
    )

    model_config = {"extra": "forbid"}

    @classmethod
    def from_insert(cls, option_id: str) -> "SelectOptionCellChangeset":
        return cls(insert_option_id=option_id)

    @classmethod
    def from_delete(cls, option_id: str) -> "SelectOptionCellChangeset":
        return cls(delete_option_id=option_id)

    def to_str(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_str(cls, data: Union[str, bytes]) -> "SelectOptionCellChangeset":
        try:
            return cls.model_validate_json(data)
        except ValidationError as exc:
            raise InvalidChangesetPayloadError(
                "Cell changeset is not a valid select option instruction",
                context={"payload": data, "errors": exc.errors(include_url=False)},
                cause=exc,
            ) from exc

    @classmethod
    def parse(cls, changeset: Any) -> "SelectOptionCellChangeset":
        """Accept a model, its JSON transport string or a plain mapping."""
        if isinstance(changeset, cls):
            return changeset
        if isinstance(changeset, (str, bytes)):
            return cls.from_str(changeset)
        if isinstance(changeset, Mapping):
            try:
                return cls.model_validate(dict(changeset))
            except ValidationError as exc:
                raise InvalidChangesetPayloadError(
                    "Cell changeset is not a valid select option instruction",
                    context={"payload": changeset, "errors": exc.errors(include_url=False)},
                    cause=exc,
                ) from exc
        raise InvalidChangesetPayloadError(
            f"Unsupported cell changeset type: {type(changeset).__name__}",
            context={"payload": changeset},
        )


@dataclass(frozen=True)
class CellIdentifier:
    """Validated address of one cell."""

    grid_id: str
    field_id: str
    row_id: str


class CellIdentifierPayload(BaseModel):
    """Cell address as received from a client."""

    grid_id: str = ""
    field_id: str = ""
    row_id: str = ""

    model_config = {"extra": "ignore"}

    def try_into_identifier(self) -> CellIdentifier:
        checks = (
            ("grid_id", self.grid_id, ErrorCode.GRID_ID_IS_EMPTY),
            ("field_id", self.field_id, ErrorCode.FIELD_ID_IS_EMPTY),
            ("row_id", self.row_id, ErrorCode.ROW_ID_IS_EMPTY),
        )
        for name, value, code in checks:
            if not value.strip():
                raise InvalidCellIdentifierError(
                    f"Cell identifier is missing {name}",
                    code=code,
                    context={"field": name},
                )
        return CellIdentifier(
            grid_id=self.grid_id, field_id=self.field_id, row_id=self.row_id
        )


@dataclass(frozen=True)
class CellChangeset:
    """Generic cell update handed to the storage layer."""

    grid_id: str
    row_id: str
    field_id: str
    cell_content_changeset: Optional[str] = None


def _not_empty_option_id(value: Optional[str], name: str) -> Optional[str]:
    if value is None:
        return None
    if not value.strip():
        raise OptionIdIsEmptyError(f"{name} must not be empty", context={"field": name})
    return value


@dataclass(frozen=True)
class SelectOptionCellChangesetParams:
    """Validated cell changeset bound to its cell."""

    cell_identifier: CellIdentifier
    insert_option_id: Optional[str] = None
    delete_option_id: Optional[str] = None

    def content_changeset(self) -> SelectOptionCellChangeset:
        return SelectOptionCellChangeset(
            insert_option_id=self.insert_option_id,
            delete_option_id=self.delete_option_id,
        )

    def to_cell_changeset(self) -> CellChangeset:
        return CellChangeset(
            grid_id=self.cell_identifier.grid_id,
            row_id=self.cell_identifier.row_id,
            field_id=self.cell_identifier.field_id,
            cell_content_changeset=self.content_changeset().to_str(),
        )


class SelectOptionCellChangesetPayload(BaseModel):
    """Client request to change the selection of one cell."""

    cell_identifier: CellIdentifierPayload
    insert_option_id: Optional[str] = None
    delete_option_id: Optional[str] = None

    model_config = {"extra": "ignore"}

    def try_into_params(self) -> SelectOptionCellChangesetParams:
        return SelectOptionCellChangesetParams(
            cell_identifier=self.cell_identifier.try_into_identifier(),
            insert_option_id=_not_empty_option_id(self.insert_option_id, "insert_option_id"),
            delete_option_id=_not_empty_option_id(self.delete_option_id, "delete_option_id"),
        )


@dataclass(frozen=True)
class SelectOptionChangeset:
    """Validated change to the option registry of one field."""

    cell_identifier: CellIdentifier
    insert_option: Optional[SelectOption] = None
    update_option: Optional[SelectOption] = None
    delete_option: Optional[SelectOption] = None


class SelectOptionChangesetPayload(BaseModel):
    """Client request to insert, update or delete an option of a field."""

    cell_identifier: CellIdentifierPayload
    insert_option: Optional[SelectOption] = None
    update_option: Optional[SelectOption] = None
    delete_option: Optional[SelectOption] = None

    model_config = {"extra": "ignore"}

    def try_into_changeset(self) -> SelectOptionChangeset:
        return SelectOptionChangeset(
            cell_identifier=self.cell_identifier.try_into_identifier(),
            insert_option=self.insert_option,
            update_option=self.update_option,
            delete_option=self.delete_option,
        )
