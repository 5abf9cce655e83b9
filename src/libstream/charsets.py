"""Character sets and predicates for the ``*_while`` / ``*_until`` families.

Every predicate accepts both kinds of character a stream can yield: a 1-char
``str`` (str streams) or an ``int`` code unit (bytes and array streams), so
the same predicate drives a scanner of any width.

All sets are frozensets of code points for O(1) membership testing.
Classification is ASCII-only, matching the default whitespace set.

Usage:
    from libstream import Stream
    from libstream.charsets import is_digit

    s = Stream(b"1234px")
    s.take_while(is_digit)  # Stream(b'1234', 0:4)
"""

from collections.abc import Callable
from typing import Any

# ASCII whitespace: space, tab, line feed, carriage return, vertical tab, form feed
WHITESPACE: frozenset[int] = frozenset(map(ord, " \t\n\r\v\f"))

NEWLINES: frozenset[int] = frozenset(map(ord, "\n\r"))

DIGITS: frozenset[int] = frozenset(range(ord("0"), ord("9") + 1))

HEX_DIGITS: frozenset[int] = DIGITS | frozenset(map(ord, "abcdefABCDEF"))

LETTERS: frozenset[int] = frozenset(range(ord("a"), ord("z") + 1)) | frozenset(
    range(ord("A"), ord("Z") + 1)
)

IDENTIFIER_START: frozenset[int] = LETTERS | frozenset((ord("_"),))

IDENTIFIER_CHARS: frozenset[int] = IDENTIFIER_START | DIGITS

ASCII_PUNCTUATION: frozenset[int] = frozenset(map(ord, "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"))


def code_point(char: Any) -> int:
    """Return the integer code of a stream character."""
    if isinstance(char, int):
        return char
    return ord(char)


def is_space(char: Any) -> bool:
    """Check if character is ASCII whitespace."""
    return code_point(char) in WHITESPACE


def is_newline(char: Any) -> bool:
    """Check if character is a line feed or carriage return."""
    return code_point(char) in NEWLINES


def is_digit(char: Any) -> bool:
    """Check if character is an ASCII decimal digit."""
    return code_point(char) in DIGITS


def is_hex_digit(char: Any) -> bool:
    """Check if character is an ASCII hexadecimal digit."""
    return code_point(char) in HEX_DIGITS


def is_alpha(char: Any) -> bool:
    """Check if character is an ASCII letter."""
    return code_point(char) in LETTERS


def is_alnum(char: Any) -> bool:
    """Check if character is an ASCII letter or digit."""
    code = code_point(char)
    return code in LETTERS or code in DIGITS


def is_identifier_start(char: Any) -> bool:
    """Check if character can start a C-style identifier."""
    return code_point(char) in IDENTIFIER_START


def is_identifier_char(char: Any) -> bool:
    """Check if character can continue a C-style identifier."""
    return code_point(char) in IDENTIFIER_CHARS


def is_punctuation(char: Any) -> bool:
    """Check if character is ASCII punctuation."""
    return code_point(char) in ASCII_PUNCTUATION


def one_of(chars: str) -> Callable[[Any], bool]:
    """Build a predicate matching any character of ``chars``.

    Example:
        >>> quote = one_of("'\\"")
        >>> quote('"'), quote(ord("'")), quote("x")
        (True, True, False)
    """
    codes = frozenset(map(ord, chars))

    def predicate(char: Any) -> bool:
        return code_point(char) in codes

    return predicate


def none_of(chars: str) -> Callable[[Any], bool]:
    """Build a predicate matching any character not in ``chars``."""
    codes = frozenset(map(ord, chars))

    def predicate(char: Any) -> bool:
        return code_point(char) not in codes

    return predicate


def negate(predicate: Callable[[Any], object]) -> Callable[[Any], bool]:
    """Invert a predicate, turning a ``take_while`` test into a ``take_until`` one."""

    def inverted(char: Any) -> bool:
        return not predicate(char)

    return inverted


__all__ = [
    "ASCII_PUNCTUATION",
    "DIGITS",
    "HEX_DIGITS",
    "IDENTIFIER_CHARS",
    "IDENTIFIER_START",
    "LETTERS",
    "NEWLINES",
    "WHITESPACE",
    "code_point",
    "is_alnum",
    "is_alpha",
    "is_digit",
    "is_hex_digit",
    "is_identifier_char",
    "is_identifier_start",
    "is_newline",
    "is_punctuation",
    "is_space",
    "negate",
    "none_of",
    "one_of",
]
