"""Select options, their color palette and id allocation."""

from __future__ import annotations

import secrets
from enum import IntEnum

from pydantic import BaseModel, Field

from .config import SelectCodecConfig, get_config

SELECTION_IDS_SEPARATOR = ","


class SelectOptionColor(IntEnum):
    PURPLE = 0
    PINK = 1
    LIGHT_PINK = 2
    ORANGE = 3
    YELLOW = 4
    LIME = 5
    GREEN = 6
    AQUA = 7
    BLUE = 8


# Colors handed out to newly created options. Blue is kept for options whose
# color the caller assigns explicitly.
COLOR_CYCLE: tuple[SelectOptionColor, ...] = (
    SelectOptionColor.PURPLE,
    SelectOptionColor.PINK,
    SelectOptionColor.LIGHT_PINK,
    SelectOptionColor.ORANGE,
    SelectOptionColor.YELLOW,
    SelectOptionColor.LIME,
    SelectOptionColor.GREEN,
    SelectOptionColor.AQUA,
)


def select_option_color_from_index(index: int) -> SelectOptionColor:
    """Deterministic default color for the option at ``index`` in a registry."""
    return COLOR_CYCLE[index % len(COLOR_CYCLE)]


def generate_option_id(config: SelectCodecConfig | None = None) -> str:
    """Allocate a short random option id."""
    resolved = config or get_config()
    alphabet = resolved.option_id_alphabet
    return "".join(secrets.choice(alphabet) for _ in range(resolved.option_id_length))


class SelectOption(BaseModel):
    """One selectable choice of a select field."""

    id: str = Field(description="Stable option identifier")
    name: str = Field(description="Display name")
    color: SelectOptionColor = Field(
        default=SelectOptionColor.PURPLE, description="Display color"
    )

    @classmethod
    def new(cls, name: str) -> "SelectOption":
        return cls(id=generate_option_id(), name=name)

    @classmethod
    def with_color(cls, name: str, color: SelectOptionColor) -> "SelectOption":
        return cls(id=generate_option_id(), name=name, color=color)


def select_option_ids(data: str) -> list[str]:
    """Split a persisted cell value into option ids.

    Empty segments never name an option and are dropped.
    """
    return [option_id for option_id in data.split(SELECTION_IDS_SEPARATOR) if option_id]


def join_option_ids(option_ids: list[str]) -> str:
    return SELECTION_IDS_SEPARATOR.join(option_ids)
