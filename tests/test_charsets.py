"""Tests for character predicates across character widths."""

import pytest

from libstream import Stream
from libstream.charsets import (
    code_point,
    is_alnum,
    is_alpha,
    is_digit,
    is_hex_digit,
    is_identifier_char,
    is_identifier_start,
    is_newline,
    is_punctuation,
    is_space,
    negate,
    none_of,
    one_of,
)


class TestClassification:
    """Predicates accept str characters and int code units alike."""

    @pytest.mark.parametrize("char", [" ", "\t", "\n", "\r", "\v", "\f"])
    def test_space(self, char: str) -> None:
        assert is_space(char)
        assert is_space(ord(char))

    def test_not_space(self) -> None:
        assert not is_space("a")
        assert not is_space("\u00a0")

    def test_digits(self) -> None:
        assert all(is_digit(c) for c in "0123456789")
        assert not is_digit("a")
        assert not is_digit("٣")  # ARABIC-INDIC DIGIT THREE

    def test_hex_digits(self) -> None:
        assert all(is_hex_digit(c) for c in "09afAF")
        assert not is_hex_digit("g")

    def test_alpha_alnum(self) -> None:
        assert is_alpha("q") and is_alpha(ord("Q"))
        assert not is_alpha("1")
        assert is_alnum("1") and is_alnum("z")
        assert not is_alnum("_")

    def test_identifier(self) -> None:
        assert is_identifier_start("_")
        assert not is_identifier_start("1")
        assert is_identifier_char("1")

    def test_newline(self) -> None:
        assert is_newline("\n") and is_newline(13)
        assert not is_newline(" ")

    def test_punctuation(self) -> None:
        assert is_punctuation("!") and is_punctuation(ord("~"))
        assert not is_punctuation("a")

    def test_code_point(self) -> None:
        assert code_point("A") == 65
        assert code_point(65) == 65


class TestFactories:
    """one_of, none_of, negate."""

    def test_one_of(self) -> None:
        quote = one_of("'\"")
        assert quote('"') and quote(ord("'"))
        assert not quote("x")

    def test_none_of(self) -> None:
        plain = none_of(",;")
        assert plain("a")
        assert not plain(",")

    def test_negate(self) -> None:
        not_digit = negate(is_digit)
        assert not_digit("a")
        assert not not_digit("1")


class TestWithStreams:
    """Predicates drive the same scan on str and bytes streams."""

    @pytest.mark.parametrize("source", ["foo_bar1 = 2", b"foo_bar1 = 2"])
    def test_identifier_scan(self, source: str | bytes) -> None:
        s = Stream(source)
        assert s.starts_with_any("_abcdefghijklmnopqrstuvwxyz")
        assert s.take_while(is_identifier_char) == "foo_bar1"
        s.drop_while(is_space)
        assert s.consume("=")
        s.drop_while(is_space)
        assert s.take_while(is_digit) == "2"
        assert s.empty()

    def test_until_negated_predicate(self) -> None:
        s = Stream("   x")
        assert s.take_until(negate(is_space)) == "   "
