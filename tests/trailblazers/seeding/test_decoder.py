"""
Unit tests for the row decoder
"""
from src.trailblazers.seeding.decoder import HeaderedRow, RowDecoder, align


class TestAlign:
    """Tests for positional header alignment"""

    def test_short_row_is_padded(self):
        assert align(["a", "b", "c"], ["1"]) == {"a": "1", "b": "", "c": ""}

    def test_long_row_is_truncated(self):
        assert align(["a", "b"], ["1", "2", "3"]) == {"a": "1", "b": "2"}


class TestRowDecoder:
    """Tests for RowDecoder"""

    def test_blank_lines_are_skipped(self):
        """Header + 2 rows + blank line + 1 row yields exactly 3 rows"""
        lines = ["name,family\n", "Bobcat,Felidae\n", "Otter,Mustelidae\n", "   \n", "Mink,Mustelidae\n"]

        rows = list(RowDecoder(lines))

        assert len(rows) == 3
        assert [row.get("name") for row in rows] == ["Bobcat", "Otter", "Mink"]

    def test_header_is_first_non_blank_line(self):
        decoder = RowDecoder(["\n", "  \n", "a,b\n", "1,2\n"])

        assert decoder.headers == ["a", "b"]
        rows = list(decoder)
        assert rows[0].values == {"a": "1", "b": "2"}
        assert rows[0].line_number == 4

    def test_line_terminators_are_removed(self):
        rows = list(RowDecoder(["a,b\r\n", "1,2\r\n"]))

        assert rows[0].raw == "1,2"
        assert rows[0].get("b") == "2"

    def test_header_names_are_stripped_and_bom_removed(self):
        decoder = RowDecoder(["\ufeffScientific Name , Common Name\n"])

        assert decoder.headers == ["Scientific Name", "Common Name"]

    def test_bom_is_stripped_from_plain_utf8_file(self, tmp_path):
        path = tmp_path / "animals.csv"
        path.write_bytes(b"\xef\xbb\xbfScientific Name,Common Name\nLynx rufus,Bobcat\n")

        with path.open(encoding="utf-8", newline="") as fh:
            decoder = RowDecoder(fh)
            rows = list(decoder)

        assert decoder.headers == ["Scientific Name", "Common Name"]
        assert rows[0].get("Scientific Name") == "Lynx rufus"

    def test_values_are_not_trimmed(self):
        rows = list(RowDecoder(["a\n", "  x  \n"]))

        assert rows[0].get("a") == "  x  "

    def test_empty_input_has_no_header(self):
        decoder = RowDecoder(["", "   \n"])

        assert decoder.headers is None
        assert list(decoder) == []

    def test_missing_column_lookup_returns_none(self):
        row = HeaderedRow(line_number=2, raw="1", values={"a": "1"})

        assert row.get("b") is None
