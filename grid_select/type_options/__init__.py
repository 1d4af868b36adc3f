"""Type options of the select field kinds.

Available kinds:
- SingleSelectTypeOption: one option per cell, last write wins
- MultiSelectTypeOption: ordered options per cell, inserts toggle
- ChecklistSelectTypeOption: same cell semantics as multi select
"""

from .base import SelectTypeOption, SelectTypeOptionBuilder, apply_toggle_changeset
from .checklist_select import ChecklistSelectTypeOption, ChecklistSelectTypeOptionBuilder
from .multi_select import MultiSelectTypeOption, MultiSelectTypeOptionBuilder
from .single_select import SingleSelectTypeOption, SingleSelectTypeOptionBuilder

__all__ = [
    "SelectTypeOption",
    "SelectTypeOptionBuilder",
    "apply_toggle_changeset",
    "SingleSelectTypeOption",
    "SingleSelectTypeOptionBuilder",
    "MultiSelectTypeOption",
    "MultiSelectTypeOptionBuilder",
    "ChecklistSelectTypeOption",
    "ChecklistSelectTypeOptionBuilder",
]
