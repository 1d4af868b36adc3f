"""Tests for applying cell changesets to persisted select values."""

from __future__ import annotations

import json

import pytest

from grid_common.errors import ErrorCode, InvalidChangesetPayloadError
from grid_common.logging import configure_logging
from grid_select.api import (
    CellRevision,
    ChecklistSelectTypeOption,
    FieldType,
    MultiSelectTypeOption,
    SelectOptionCellChangeset,
    SingleSelectTypeOption,
)

pytestmark = [pytest.mark.unit_select]

MULTI_VALUE_KINDS = [MultiSelectTypeOption, ChecklistSelectTypeOption]


def _insert(option_id: str) -> str:
    return SelectOptionCellChangeset.from_insert(option_id).to_str()


def _delete(option_id: str) -> str:
    return SelectOptionCellChangeset.from_delete(option_id).to_str()


class TestSingleSelect:
    def test_insert_overwrites_previous_value(self, platform_options) -> None:
        type_option = SingleSelectTypeOption(options=platform_options)

        first = type_option.apply_changeset(_insert("g00g"), None)
        second = type_option.apply_changeset(_insert("fb00"), CellRevision(data=first))

        assert first == "g00g"
        assert second == "fb00"

    def test_missing_insert_clears(self, platform_options) -> None:
        type_option = SingleSelectTypeOption(options=platform_options)
        assert type_option.apply_changeset("{}", CellRevision(data="g00g")) == ""

    def test_delete_is_ignored_and_clears(self, platform_options) -> None:
        type_option = SingleSelectTypeOption(options=platform_options)
        assert type_option.apply_changeset(_delete("tw00"), CellRevision(data="g00g")) == ""

    def test_multiple_ids_decode_to_first(self, platform_options, google) -> None:
        type_option = SingleSelectTypeOption(options=platform_options)

        cell_data = type_option.apply_changeset(_insert("g00g,fb00"), None)
        decoded = type_option.decode_cell_data(cell_data, FieldType.SINGLE_SELECT)

        assert decoded.select_options == [google]

    @pytest.mark.parametrize("option_id", ["", "123"])
    def test_invalid_option_ids_decode_to_nothing(self, platform_options, option_id) -> None:
        type_option = SingleSelectTypeOption(options=platform_options)

        cell_data = type_option.apply_changeset(_insert(option_id), None)
        decoded = type_option.decode_cell_data(cell_data, FieldType.SINGLE_SELECT)

        assert decoded.select_options == []


@pytest.mark.parametrize("kind", MULTI_VALUE_KINDS)
class TestToggleSelect:
    def test_insert_toggles_on_and_off(self, kind, platform_options) -> None:
        type_option = kind(options=platform_options)

        on = type_option.apply_changeset(_insert("g00g"), None)
        off = type_option.apply_changeset(_insert("g00g"), CellRevision(data=on))
        on_again = type_option.apply_changeset(_insert("g00g"), CellRevision(data=off))

        assert (on, off, on_again) == ("g00g", "", "g00g")

    def test_insert_appends_to_end(self, kind, platform_options) -> None:
        type_option = kind(options=platform_options)
        new_value = type_option.apply_changeset(_insert("g00g"), CellRevision(data="tw00,fb00"))
        assert new_value == "tw00,fb00,g00g"

    def test_toggle_off_removes_every_occurrence(self, kind, platform_options) -> None:
        type_option = kind(options=platform_options)
        new_value = type_option.apply_changeset(_insert("g00g"), CellRevision(data="g00g,fb00,g00g"))
        assert new_value == "fb00"

    def test_delete_is_unconditional(self, kind, platform_options) -> None:
        type_option = kind(options=platform_options)

        assert type_option.apply_changeset(_delete("A"), CellRevision(data="A,B,A")) == "B"
        assert type_option.apply_changeset(_delete("A"), CellRevision(data="B")) == "B"
        assert type_option.apply_changeset(_delete("A"), None) == ""

    def test_insert_runs_before_delete(self, kind, platform_options) -> None:
        type_option = kind(options=platform_options)
        changeset = SelectOptionCellChangeset(insert_option_id="C", delete_option_id="A")

        assert type_option.apply_changeset(changeset, CellRevision(data="A,B")) == "B,C"
        same_id = SelectOptionCellChangeset(insert_option_id="A", delete_option_id="A")
        assert type_option.apply_changeset(same_id, CellRevision(data="B")) == "B"

    def test_empty_changeset_keeps_value(self, kind, platform_options) -> None:
        type_option = kind(options=platform_options)
        assert type_option.apply_changeset({}, CellRevision(data="B,A")) == "B,A"

    def test_empty_insert_id_is_ignored(self, kind, platform_options) -> None:
        type_option = kind(options=platform_options)
        assert type_option.apply_changeset(_insert(""), CellRevision(data="A")) == "A"

    def test_empty_segments_in_previous_value_are_dropped(self, kind, platform_options) -> None:
        type_option = kind(options=platform_options)
        assert type_option.apply_changeset(_insert("C"), CellRevision(data=",A,,B,")) == "A,B,C"

    def test_multiple_ids_in_one_insert(self, kind, platform_options, google, facebook) -> None:
        type_option = kind(options=platform_options)

        cell_data = type_option.apply_changeset(_insert("g00g,fb00"), None)
        decoded = type_option.decode_cell_data(cell_data, kind.field_type())

        assert decoded.select_options == [google, facebook]


class TestMalformedChangeset:
    @pytest.mark.parametrize(
        "payload",
        [
            "123",
            "not json",
            "[]",
            '{"insert_option_id": 5}',
            '{"insert_option_id": "a", "extra": true}',
            {"delete_option_id": ["a"]},
            42,
            None,
        ],
    )
    @pytest.mark.parametrize(
        "kind", [SingleSelectTypeOption, MultiSelectTypeOption, ChecklistSelectTypeOption]
    )
    def test_rejected(self, kind, payload, platform_options) -> None:
        type_option = kind(options=platform_options)

        with pytest.raises(InvalidChangesetPayloadError) as excinfo:
            type_option.apply_changeset(payload, CellRevision(data="g00g"))

        assert excinfo.value.code is ErrorCode.INVALID_CHANGESET_PAYLOAD

    def test_parse_error_is_chained(self) -> None:
        with pytest.raises(InvalidChangesetPayloadError) as excinfo:
            SelectOptionCellChangeset.from_str("123")

        assert excinfo.value.__cause__ is not None
        assert excinfo.value.to_dict()["code"] == "InvalidChangesetPayload"


def test_changeset_transport_round_trip() -> None:
    changeset = SelectOptionCellChangeset(insert_option_id="a", delete_option_id=None)
    assert SelectOptionCellChangeset.from_str(changeset.to_str()) == changeset
    assert SelectOptionCellChangeset.parse(changeset) is changeset


class TestChangesetEvents:
    def test_toggle_event_fields(self, platform_options, caplog) -> None:
        caplog.set_level("DEBUG", logger="grid_select")
        type_option = MultiSelectTypeOption(options=platform_options)

        type_option.apply_changeset(
            SelectOptionCellChangeset(insert_option_id="tw00", delete_option_id="g00g"),
            CellRevision(data="g00g,fb00"),
        )

        record = caplog.records[-1]
        assert record.field_type == "MULTI_SELECT"
        assert record.insert_option_id == "tw00"
        assert record.delete_option_id == "g00g"
        assert record.previous_cell_data == "g00g,fb00"
        assert record.cell_data == "fb00,tw00"

    def test_single_select_event_in_json_log(
        self, platform_options, isolated_root_logger, tmp_path
    ) -> None:
        log_file = tmp_path / "codec.log"
        configure_logging(level="DEBUG", json=True, log_file=str(log_file), force=True)

        SingleSelectTypeOption(options=platform_options).apply_changeset(_insert("fb00"), None)
        for handler in isolated_root_logger.handlers:
            handler.flush()

        events = [json.loads(line) for line in log_file.read_text().splitlines() if line]
        event = events[-1]
        assert event["logger"] == "grid_select.type_options.single_select"
        assert event["field_type"] == "SINGLE_SELECT"
        assert event["insert_option_id"] == "fb00"
        assert event["cell_data"] == "fb00"
