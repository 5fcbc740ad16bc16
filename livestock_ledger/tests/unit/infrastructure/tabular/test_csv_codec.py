"""Tests for the tabular text (CSV) codec."""
from __future__ import annotations

import pytest

from livestock_ledger.domain.entities.extracted_table import ExtractedTable
from livestock_ledger.domain.entities.raw_row import RawRow
from livestock_ledger.domain.exceptions import MalformedTabularTextError
from livestock_ledger.infrastructure.tabular.csv_codec import (
    parse_tabular_text,
    quote_field,
    serialize_tabular_text,
    split_line,
)


class TestSplitLine:
    def test_plain_fields(self):
        assert split_line("a,b,,c") == ["a", "b", "", "c"]

    def test_quoted_delimiter_and_escaped_quote(self):
        assert split_line('"x, y","say ""hi""",z') == ["x, y", 'say "hi"', "z"]

    def test_unterminated_quote_swallows_rest_of_line(self):
        assert split_line('1,"abc,def') == ["1", "abc,def"]

    def test_trailing_delimiter(self):
        assert split_line("a,") == ["a", ""]


class TestParseTabularText:
    def test_parses_header_and_rows(self):
        table = parse_tabular_text("name,count\r\nAli,3\n\nSara\n")
        assert table.columns == ("name", "count")
        assert table.to_grid() == [["Ali", "3"], ["Sara", ""]]
        assert all(row.id.startswith("row-import-") for row in table.rows)
        assert len({row.id for row in table.rows}) == 2

    def test_strips_byte_order_mark(self):
        table = parse_tabular_text('\ufeff"name","count"\n"علی","۱۲"')
        assert table.columns == ("name", "count")
        assert table.rows[0].get("count") == "۱۲"

    def test_extra_cells_are_dropped(self):
        table = parse_tabular_text("a\n1,2,3")
        assert table.to_grid() == [["1"]]

    def test_header_only(self):
        table = parse_tabular_text("a,b")
        assert table.is_empty()

    @pytest.mark.parametrize("text", ["", "\n\n", "   \r\n"])
    def test_no_header_line(self, text):
        with pytest.raises(MalformedTabularTextError):
            parse_tabular_text(text)

    def test_duplicate_headers(self):
        with pytest.raises(MalformedTabularTextError, match="duplicate"):
            parse_tabular_text("a,a\n1,2")


class TestSerializeTabularText:
    def test_every_field_is_quoted_with_bom(self):
        row = RawRow(id="r1", values={"a": 'x"y', "b": "1,2"})
        table = ExtractedTable(columns=("a", "b"), rows=(row,))
        assert serialize_tabular_text(table) == '\ufeff"a","b"\n"x""y","1,2"'

    def test_quote_field(self):
        assert quote_field("") == '""'
        assert quote_field('"') == '""""'

    def test_round_trip_preserves_grid(self):
        table = ExtractedTable.from_grid(
            ["نام", "تعداد"],
            [["علی رضا محمدی", "۱,۲۰۰"], ['say "hi"', ""]],
        )
        restored = parse_tabular_text(serialize_tabular_text(table))
        assert restored.columns == table.columns
        assert restored.to_grid() == table.to_grid()
