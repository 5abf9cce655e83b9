"""Tests for unconditional advancement: drop, take, consume, extract."""

import pytest

from libstream import Stream

WORD = "hello"


class TestConsume:
    """consume() removes one matching character or nothing."""

    def test_empty(self) -> None:
        assert not Stream("").consume("a")

    def test_single(self) -> None:
        s = Stream("a")
        assert s.consume("a")
        assert s.empty()

    def test_word(self) -> None:
        w = Stream(WORD)
        assert w.consume("h")
        assert w.consume("e")
        assert w.consume("l")
        assert w.consume("l")
        assert w.consume("o")
        assert not w.consume("o")

    def test_mismatch_leaves_stream(self) -> None:
        w = Stream(WORD)
        assert not w.consume("x")
        assert w == "hello"

    def test_bytes_accepts_int_and_str(self) -> None:
        s = Stream(b"ab")
        assert s.consume(ord("a"))
        assert s.consume("b")
        assert s.empty()


class TestDrop:
    """drop() clamps and chains."""

    def test_drop_sequence(self) -> None:
        w = Stream(WORD)
        w.drop()
        assert w == "ello"
        w.drop(2)
        assert w == "lo"
        w.drop(1231345)
        assert w.empty()

    def test_drop_returns_self(self) -> None:
        w = Stream(WORD)
        assert w.drop() is w

    def test_drop_zero(self) -> None:
        assert Stream(WORD).drop(0) == "hello"

    def test_drop_on_empty(self) -> None:
        assert Stream("").drop(3).empty()

    def test_drop_negative_without_assertions(self) -> None:
        assert Stream(WORD).drop(-2) == "hello"


class TestTake:
    """take() returns the removed characters."""

    def test_take_default(self) -> None:
        w = Stream(WORD)
        assert w.take() == "h"
        assert w == "ello"

    def test_take_n(self) -> None:
        w = Stream(WORD)
        assert w.take(3) == "hel"
        assert w == "lo"

    def test_take_clamps(self) -> None:
        w = Stream(WORD)
        assert w.take(100) == "hello"
        assert w.empty()
        assert w.take(5).empty()

    def test_take_is_a_view(self) -> None:
        w = Stream(WORD)
        taken = w.take(2)
        assert taken.buffer is w.buffer
        assert (taken.start, taken.end) == (0, 2)

    @pytest.mark.parametrize("n", [0, 1, 3, 5, 6, 50])
    def test_drop_matches_discarded_take(self, n: int) -> None:
        a = Stream(WORD)
        b = Stream(WORD)
        a.drop(n)
        b.take(n)
        assert a == b
        assert a.start == b.start


class TestExtract:
    """extract() is all-or-nothing."""

    def test_extract(self) -> None:
        s = Stream("abcd")
        assert s.extract(3) == ("a", "b", "c")
        assert s == "d"

    def test_extract_too_many(self) -> None:
        s = Stream("ab")
        assert s.extract(3) is None
        assert s == "ab"

    def test_extract_exact(self) -> None:
        s = Stream("ab")
        assert s.extract(2) == ("a", "b")
        assert s.empty()

    def test_extract_zero(self) -> None:
        s = Stream("ab")
        assert s.extract(0) == ()
        assert s == "ab"

    def test_extract_bytes(self) -> None:
        s = Stream(b"\x01\x02")
        assert s.extract(2) == (1, 2)

    def test_extract_unpacking(self) -> None:
        s = Stream("#ff8800")
        assert s.consume("#")
        r1, r2 = s.extract(2)
        assert (r1, r2) == ("f", "f")
