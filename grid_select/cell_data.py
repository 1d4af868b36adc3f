"""Decoded view of a select cell."""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, Field

from .options import SelectOption, select_option_ids


class SelectOptionCellData(BaseModel):
    """Registry snapshot plus the options selected in one cell.

    ``select_options`` follows the order of ids in the persisted value.
    """

    options: list[SelectOption] = Field(default_factory=list)
    select_options: list[SelectOption] = Field(default_factory=list)


def make_selected_select_options(
    data: str, options: Sequence[SelectOption]
) -> list[SelectOption]:
    """Resolve the ids in ``data`` against ``options``, dropping unknown ids."""
    by_id: dict[str, SelectOption] = {}
    for option in options:
        by_id.setdefault(option.id, option)
    return [
        by_id[option_id].model_copy()
        for option_id in select_option_ids(data)
        if option_id in by_id
    ]
