"""Character units: the per-width table behind every stream.

A stream's character unit is fixed by its backing buffer:

    str                          -> WIDE   (code points, 1-char str values)
    bytes, bytearray             -> NARROW (8-bit, int values)
    array / memoryview, 1 byte   -> NARROW
    array / memoryview, 2 bytes  -> UTF16
    array / memoryview, 4 bytes  -> UTF32

Literal constants (default whitespace, line separators, user-supplied
``str`` arguments) are written once as ``str`` and encoded per unit with
CharUnit.literal(). Encoded literals are cached.

Thread Safety:
CharUnit instances are frozen and the encoding caches are lru_cache-backed;
safe to share across threads.

"""

from __future__ import annotations

import sys
from array import array
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from libstream.errors import UnitError

# Unsigned integer formats accepted for array/memoryview backings
_UNSIGNED_FORMATS = frozenset("BHIL")

_BYTEORDER = "le" if sys.byteorder == "little" else "be"


@dataclass(frozen=True, slots=True)
class CharUnit:
    """Fixed-width character unit.

    Attributes:
        name: Short identifier ("wide", "narrow", "utf16", "utf32")
        width: Size of one unit in bytes
        encoding: Codec used to encode ``str`` literals (None for WIDE,
            whose units are the code points themselves)
        format: struct format of one unit in array/memoryview backings

    """

    name: str
    width: int
    encoding: str | None
    format: str

    @property
    def is_text(self) -> bool:
        """True when units are 1-char ``str`` values rather than ints."""
        return self.encoding is None

    @property
    def max_value(self) -> int:
        """Largest code unit value representable in this width."""
        if self.is_text:
            return sys.maxunicode
        return (1 << (8 * self.width)) - 1

    def literal(self, text: str) -> Any:
        """Encode a ``str`` literal in this unit.

        Returns ``str`` for WIDE, ``bytes`` for NARROW and a tuple of ints
        for UTF16/UTF32.
        """
        return _encode_literal(self, text)

    def text(self, value: Any) -> Any:
        """Coerce a text argument (or a single unit) to this unit's text form.

        Accepts ``str`` literals, ``int`` code units (non-WIDE units),
        ``bytes``-like objects (NARROW) and iterables of ints.

        Raises:
            UnitError: If the value cannot be expressed in this unit.
        """
        if isinstance(value, str):
            return _encode_literal(self, value)
        if self.is_text:
            raise UnitError(self.name, f"expected str, got {type(value).__name__}")
        if isinstance(value, int):
            self._check_code(value)
            return bytes((value,)) if self.width == 1 else (value,)
        if isinstance(value, (bytes, bytearray, memoryview)):
            if self.width != 1:
                raise UnitError(self.name, "bytes are only valid for narrow streams")
            return bytes(value)
        if isinstance(value, Iterable):
            codes = tuple(value)
            for code in codes:
                if not isinstance(code, int):
                    raise UnitError(
                        self.name, f"expected int code units, got {type(code).__name__}"
                    )
                self._check_code(code)
            return bytes(codes) if self.width == 1 else codes
        raise UnitError(self.name, f"cannot use {type(value).__name__} as text")

    def char(self, value: Any) -> Any:
        """Coerce a single character argument to one unit.

        Raises:
            UnitError: If the value does not encode to exactly one unit.
        """
        encoded = self.text(value)
        if len(encoded) != 1:
            raise UnitError(
                self.name, f"{value!r} is {len(encoded)} units, expected exactly one"
            )
        return encoded[0]

    def charset(self, value: Any) -> frozenset[Any]:
        """Coerce a character-set argument to a frozenset of units.

        Text arguments contribute each of their units; sets and other
        iterables are coerced member by member.
        """
        if isinstance(value, (str, bytes)):
            return _encode_charset(self, value)
        if isinstance(value, (set, frozenset)):
            return frozenset(self.char(member) for member in value)
        return frozenset(self.text(value))

    def _check_code(self, code: int) -> None:
        if not 0 <= code <= self.max_value:
            raise UnitError(self.name, f"code unit {code} out of range for {self.width}-byte units")


WIDE = CharUnit(name="wide", width=4, encoding=None, format="w")
NARROW = CharUnit(name="narrow", width=1, encoding="utf-8", format="B")
UTF16 = CharUnit(name="utf16", width=2, encoding=f"utf-16-{_BYTEORDER}", format="H")
UTF32 = CharUnit(name="utf32", width=4, encoding=f"utf-32-{_BYTEORDER}", format="I")

_UNITS_BY_WIDTH = {1: NARROW, 2: UTF16, 4: UTF32}


@lru_cache(maxsize=512)
def _encode_literal(unit: CharUnit, text: str) -> Any:
    if unit.encoding is None:
        return text
    try:
        data = text.encode(unit.encoding)
    except UnicodeEncodeError as e:
        raise UnitError(unit.name, f"cannot encode {text!r}: {e.reason}") from e
    if unit.width == 1:
        return data
    return tuple(memoryview(data).cast(unit.format))


@lru_cache(maxsize=256)
def _encode_charset(unit: CharUnit, value: str | bytes) -> frozenset[Any]:
    return frozenset(unit.text(value))


def unit_of(buffer: Any) -> CharUnit:
    """Return the character unit of a backing buffer.

    Args:
        buffer: str, bytes, bytearray, or a one-dimensional unsigned
            array/memoryview with 1, 2 or 4 byte items

    Raises:
        UnitError: If the buffer type is not supported.
    """
    if isinstance(buffer, str):
        return WIDE
    if isinstance(buffer, (bytes, bytearray)):
        return NARROW
    if isinstance(buffer, array):
        fmt, itemsize = buffer.typecode, buffer.itemsize
    elif isinstance(buffer, memoryview):
        if buffer.ndim != 1:
            raise UnitError("unknown", "memoryview backings must be one-dimensional")
        fmt, itemsize = buffer.format.lstrip("@="), buffer.itemsize
    else:
        raise UnitError("unknown", f"unsupported buffer type {type(buffer).__name__}")
    if fmt not in _UNSIGNED_FORMATS or itemsize not in _UNITS_BY_WIDTH:
        raise UnitError(
            "unknown", f"unsupported item format {fmt!r} ({itemsize} bytes); "
            "use an unsigned 1, 2 or 4 byte format"
        )
    return _UNITS_BY_WIDTH[itemsize]


__all__ = [
    "NARROW",
    "UTF16",
    "UTF32",
    "WIDE",
    "CharUnit",
    "unit_of",
]
