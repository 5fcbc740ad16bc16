"""
Unit tests for RawRow and ExtractedTable entities
"""
import pytest

from livestock_ledger.domain.entities.extracted_table import ExtractedTable
from livestock_ledger.domain.entities.raw_row import RawRow


class TestRawRow:
    def test_values_are_strings_and_read_only(self):
        row = RawRow(id="r1", values={"a": 1, "b": None})
        assert dict(row.values) == {"a": "1", "b": ""}
        with pytest.raises(TypeError):
            row.values["a"] = "2"  # type: ignore[index]

    def test_requires_id(self):
        with pytest.raises(ValueError):
            RawRow(id="", values={})

    def test_from_positional_pads_and_truncates(self):
        short = RawRow.from_positional(["a", "b", "c"], ["1"], row_id="r1")
        assert dict(short.values) == {"a": "1", "b": "", "c": ""}

        long = RawRow.from_positional(["a"], ["1", "2", "3"], row_id="r2")
        assert dict(long.values) == {"a": "1"}

    def test_from_positional_generates_id(self):
        row = RawRow.from_positional(["a"], ["1"])
        assert row.id.startswith("row-")

    def test_audit_dict_round_trip(self):
        row = RawRow(id="r1", values={"breed": "15", "owner": "x"})
        data = row.to_dict()
        assert data == {"id": "r1", "breed": "15", "owner": "x"}
        assert RawRow.from_dict(data) == row

    def test_from_dict_with_explicit_columns(self):
        row = RawRow.from_dict({"id": "r1", "b": "2"}, columns=["a", "b"])
        assert row.columns == ("a", "b")
        assert row.get("a") == ""

    def test_rows_are_hashable(self):
        row = RawRow(id="r1", values={"a": "1"})
        assert len({row, RawRow(id="r1", values={"a": "1"})}) == 1


class TestExtractedTable:
    def test_from_grid_assigns_unique_ids(self):
        table = ExtractedTable.from_grid(["name", "count"], [["Ali", "3"], ["Sara"]])
        ids = [row.id for row in table.rows]
        assert len(set(ids)) == 2
        assert all(row_id.startswith("row-") for row_id in ids)
        assert table.to_grid() == [["Ali", "3"], ["Sara", ""]]

    def test_custom_id_prefix(self):
        table = ExtractedTable.from_grid(["a"], [["1"]], id_prefix="row-import")
        assert table.rows[0].id.startswith("row-import-")

    def test_rejects_duplicate_columns(self):
        with pytest.raises(ValueError, match="unique"):
            ExtractedTable(columns=("a", "a"))

    def test_rejects_duplicate_row_ids(self):
        row = RawRow(id="r1", values={"a": "1"})
        with pytest.raises(ValueError, match="Duplicate row id"):
            ExtractedTable(columns=("a",), rows=(row, row))

    def test_is_empty(self):
        table = ExtractedTable.from_grid(["a"], [["1"]])
        assert not table.is_empty()
        assert ExtractedTable(columns=("a",)).is_empty()

    def test_to_dict_shape(self):
        row = RawRow(id="r1", values={"a": "1"})
        table = ExtractedTable(columns=("a",), rows=(row,))
        assert table.to_dict() == {"columns": ["a"], "rows": [{"id": "r1", "a": "1"}]}
