"""Tests for reading and rendering ARIA response records."""

from aria_access.tools.records import Record, field, flag, joined, render_block, unwrap


def test_keys_are_case_insensitive_and_values_unwrapped() -> None:
    record = Record({"PatientId": {"Value": "123"}, "firstName": "Jane"})

    assert record["patientid"] == "123"
    assert record["PATIENTID"] == "123"
    assert record["FirstName"] == "Jane"
    assert len(record) == 2


def test_first_skips_blank_values() -> None:
    record = Record({"patientId": "", "PatientId1": {"Value": "456"}})

    assert record.first("patientId", "PatientId1") == "456"
    assert record.first("missing") is None


def test_non_mapping_is_an_empty_record() -> None:
    assert len(Record(None)) == 0
    assert len(Record([1, 2])) == 0


def test_unwrap_leaves_plain_values() -> None:
    assert unwrap({"Value": 0}) == 0
    assert unwrap({"Other": 1}) == {"Other": 1}
    assert unwrap("x") == "x"


def test_render_block_layout() -> None:
    columns = (
        field("ID", "id"),
        joined("Name", "first", "last", default=""),
        flag("Active", "active"),
        field("Dose", "dose"),
    )

    block = render_block({"Id": {"Value": 0}, "first": "Ann"}, columns)

    assert block == "\nID: 0\nName: Ann\nActive: No\nDose: N/A\n---"
