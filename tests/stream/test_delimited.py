"""Tests for take_delimited / take_delimited_any (all-or-nothing extraction)."""

import pytest

from libstream import Stream


class TestTakeDelimited:
    """Text between a delimiter and its next occurrence."""

    def test_char_delimiter(self) -> None:
        s = Stream('"quoted" rest')
        assert s.take_delimited('"') == "quoted"
        assert s == " rest"

    def test_text_delimiter(self) -> None:
        s = Stream("```code```tail")
        assert s.take_delimited("```") == "code"
        assert s == "tail"

    def test_empty_content(self) -> None:
        s = Stream('""x')
        content = s.take_delimited('"')
        assert content is not None
        assert content.empty()
        assert s == "x"

    def test_delimiter_does_not_match_itself(self) -> None:
        s = Stream("---")
        assert s.take_delimited("--") is None
        assert s == "---"

    def test_overlapping_closing_found_after_opening(self) -> None:
        s = Stream("----")
        assert s.take_delimited("--") == ""
        assert s.empty()

    def test_no_opening(self) -> None:
        s = Stream("quoted")
        assert s.take_delimited('"') is None
        assert s == "quoted"

    def test_no_closing_leaves_stream_unmodified(self) -> None:
        s = Stream('"unterminated')
        assert s.take_delimited('"') is None
        assert s == '"unterminated'
        assert s.start == 0

    def test_empty_delimiter_fails(self) -> None:
        s = Stream("abc")
        assert s.take_delimited("") is None
        assert s == "abc"

    def test_empty_stream(self) -> None:
        assert Stream("").take_delimited('"') is None

    def test_content_is_a_view(self) -> None:
        s = Stream("'abc'")
        content = s.take_delimited("'")
        assert content is not None
        assert content.buffer is s.buffer
        assert (content.start, content.end) == (1, 4)

    def test_bytes(self) -> None:
        s = Stream(b"|a|b")
        assert s.take_delimited(ord("|")) == b"a"
        assert s == b"b"


class TestTakeDelimitedAny:
    """The opening character picks the closing one."""

    @pytest.mark.parametrize("source", ["'abc'", '"abc"', "`abc`"])
    def test_each_quote(self, source: str) -> None:
        s = Stream(source + " rest")
        assert s.take_delimited_any("'\"`") == "abc"
        assert s == " rest"

    def test_no_mixing(self) -> None:
        s = Stream("'abc\" more")
        assert s.take_delimited_any("'\"") is None
        assert s == "'abc\" more"

    def test_other_delimiters_inside(self) -> None:
        s = Stream("'say \"hi\"'")
        assert s.take_delimited_any("'\"") == 'say "hi"'
        assert s.empty()

    def test_not_starting_with_delimiter(self) -> None:
        s = Stream("abc'")
        assert s.take_delimited_any("'") is None
        assert s == "abc'"

    def test_empty_stream(self) -> None:
        assert Stream("").take_delimited_any("'\"") is None
