"""Tests for CSV row parsing."""

from __future__ import annotations

import io

import pytest

from csvjson.converter.parser import has_bare_quote, parse_rows
from csvjson.core.exceptions import MalformedInputError


class TestParseRows:
    def test_reads_bytes(self):
        rows = parse_rows(io.BytesIO(b"name,age\nAlice,30\n"))
        assert rows == [["name", "age"], ["Alice", "30"]]

    def test_reads_text(self):
        rows = parse_rows(io.StringIO("name,age\r\nBob,41\r\n"))
        assert rows == [["name", "age"], ["Bob", "41"]]

    def test_strips_byte_order_mark(self):
        assert parse_rows(io.BytesIO(b"\xef\xbb\xbfid\n1\n"))[0] == ["id"]
        assert parse_rows(io.StringIO("\ufeffid\n1\n"))[0] == ["id"]

    def test_skips_blank_lines(self):
        rows = parse_rows(io.StringIO("a,b\n\n1,2\n\n"))
        assert rows == [["a", "b"], ["1", "2"]]

    def test_quoted_fields(self):
        rows = parse_rows(io.StringIO('city,note\n"Paris, FR","said ""hi""\nthen left"\n'))
        assert rows[1] == ["Paris, FR", 'said "hi"\nthen left']

    def test_ragged_rows_are_kept(self):
        rows = parse_rows(io.StringIO("a,b,c\n1\n1,2,3,4\n"))
        assert rows[1:] == [["1"], ["1", "2", "3", "4"]]

    def test_empty_stream(self):
        assert parse_rows(io.BytesIO(b"")) == []

    def test_large_cell(self):
        cell = "x" * 200_000
        rows = parse_rows(io.StringIO(f"a,b\n{cell},1\n"))
        assert rows[1] == [cell, "1"]

    def test_escaped_quotes_are_not_bare(self):
        rows = parse_rows(io.StringIO('a,b\n"say ""hi""",""""\n'))
        assert rows[1] == ['say "hi"', '"']


class TestMalformedInput:
    def test_unterminated_quote(self):
        with pytest.raises(MalformedInputError) as excinfo:
            parse_rows(io.StringIO('a,b\n"unterminated,2\n'))
        assert excinfo.value.line == 2
        assert str(excinfo.value).startswith("error reading CSV: line 2:")

    def test_text_after_closing_quote(self):
        with pytest.raises(MalformedInputError):
            parse_rows(io.StringIO('a,b\n"x"y,2\n'))

    def test_bare_quote_in_unquoted_field(self):
        with pytest.raises(MalformedInputError, match='bare " in non-quoted field') as excinfo:
            parse_rows(io.BytesIO(b'a,b\nx"y,1\n'))
        assert excinfo.value.line == 2

    def test_bare_quote_after_multiline_field(self):
        with pytest.raises(MalformedInputError):
            parse_rows(io.StringIO('a,b\n"two\nlines",end"\n'))

    def test_invalid_utf8(self):
        with pytest.raises(MalformedInputError, match="not valid UTF-8"):
            parse_rows(io.BytesIO(b"a,b\n\xff\xfe,1\n"))


class TestHasBareQuote:
    @pytest.mark.parametrize("raw", ['a,b\n', '"a,b",c\n', '"x""y",z\r\n', '"",\n', '"multi\nline",1\n'])
    def test_well_formed(self, raw):
        assert has_bare_quote(raw) is False

    @pytest.mark.parametrize("raw", ['x"y,1\n', 'a,b"\n', 'a,"b",c"d\n'])
    def test_bare(self, raw):
        assert has_bare_quote(raw) is True
