"""Public API surface for the select field codec."""

from grid_select.cell_data import SelectOptionCellData, make_selected_select_options
from grid_select.changeset import (
    CellChangeset,
    CellIdentifier,
    CellIdentifierPayload,
    SelectOptionCellChangeset,
    SelectOptionCellChangesetParams,
    SelectOptionCellChangesetPayload,
    SelectOptionChangeset,
    SelectOptionChangesetPayload,
)
from grid_select.config import (
    SelectCodecConfig,
    get_config,
    load_config_from_file,
    set_config,
)
from grid_select.dispatch import (
    select_option_operation,
    type_option_builder_for,
    type_option_cls_for,
)
from grid_select.editor import SelectOptionEditor
from grid_select.field_builder import FieldBuilder
from grid_select.field_type import SELECT_FIELD_TYPES, FieldType
from grid_select.options import (
    COLOR_CYCLE,
    SELECTION_IDS_SEPARATOR,
    SelectOption,
    SelectOptionColor,
    generate_option_id,
    join_option_ids,
    select_option_color_from_index,
    select_option_ids,
)
from grid_select.revision import CellRevision, FieldRevision, RevisionStore
from grid_select.type_options import (
    ChecklistSelectTypeOption,
    ChecklistSelectTypeOptionBuilder,
    MultiSelectTypeOption,
    MultiSelectTypeOptionBuilder,
    SelectTypeOption,
    SelectTypeOptionBuilder,
    SingleSelectTypeOption,
    SingleSelectTypeOptionBuilder,
)

__all__ = [
    "COLOR_CYCLE",
    "CellChangeset",
    "CellIdentifier",
    "CellIdentifierPayload",
    "CellRevision",
    "ChecklistSelectTypeOption",
    "ChecklistSelectTypeOptionBuilder",
    "FieldBuilder",
    "FieldRevision",
    "FieldType",
    "MultiSelectTypeOption",
    "MultiSelectTypeOptionBuilder",
    "RevisionStore",
    "SELECTION_IDS_SEPARATOR",
    "SELECT_FIELD_TYPES",
    "SelectCodecConfig",
    "SelectOption",
    "SelectOptionCellChangeset",
    "SelectOptionCellChangesetParams",
    "SelectOptionCellChangesetPayload",
    "SelectOptionCellData",
    "SelectOptionChangeset",
    "SelectOptionChangesetPayload",
    "SelectOptionColor",
    "SelectOptionEditor",
    "SelectTypeOption",
    "SelectTypeOptionBuilder",
    "SingleSelectTypeOption",
    "SingleSelectTypeOptionBuilder",
    "generate_option_id",
    "get_config",
    "join_option_ids",
    "load_config_from_file",
    "make_selected_select_options",
    "select_option_color_from_index",
    "select_option_ids",
    "select_option_operation",
    "set_config",
    "type_option_builder_for",
    "type_option_cls_for",
]
