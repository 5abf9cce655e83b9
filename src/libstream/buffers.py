"""Search primitives over a ``(buffer, start, end)`` window.

Every function takes the backing buffer plus absolute bounds and returns an
absolute index (or -1). Nothing here slices the buffer, so scanning never
copies text.

``str``, ``bytes`` and ``bytearray`` have C-implemented ``find``,
``startswith`` and friends that accept bounds; those are used directly.
array and memoryview backings fall back to a linear scan with the same
results.

Complexity: O(end - start) per call, O((end - start) * len(needle)) worst
case for substring search on array/memoryview backings.
"""

from __future__ import annotations

from collections.abc import Callable, Container
from typing import Any

# Backings with bounded find/startswith/endswith/count in C
_NATIVE = (str, bytes, bytearray)


def find(buffer: Any, needle: Any, start: int, end: int) -> int:
    """Find the leftmost occurrence of ``needle`` in ``buffer[start:end]``.

    Returns:
        Absolute index of the match, or -1. An empty needle matches at start.
    """
    if isinstance(buffer, _NATIVE):
        return buffer.find(needle, start, end)
    size = len(needle)
    if size == 0:
        return start if start <= end else -1
    first = needle[0]
    for i in range(start, end - size + 1):
        if buffer[i] == first and match_at(buffer, needle, i, end):
            return i
    return -1


def find_unit(buffer: Any, unit: Any, start: int, end: int) -> int:
    """Find the first occurrence of a single unit."""
    if isinstance(buffer, _NATIVE):
        return buffer.find(unit, start, end)
    for i in range(start, end):
        if buffer[i] == unit:
            return i
    return -1


def rfind_unit(buffer: Any, unit: Any, start: int, end: int) -> int:
    """Find the last occurrence of a single unit."""
    if isinstance(buffer, _NATIVE):
        return buffer.rfind(unit, start, end)
    for i in range(end - 1, start - 1, -1):
        if buffer[i] == unit:
            return i
    return -1


def count_unit(buffer: Any, unit: Any, start: int, end: int) -> int:
    """Count occurrences of a single unit."""
    if isinstance(buffer, _NATIVE):
        return buffer.count(unit, start, end)
    return sum(1 for i in range(start, end) if buffer[i] == unit)


def find_first_of(buffer: Any, units: Container[Any], start: int, end: int) -> int:
    """Find the first unit that is a member of ``units``."""
    for i in range(start, end):
        if buffer[i] in units:
            return i
    return -1


def find_first_not_of(buffer: Any, units: Container[Any], start: int, end: int) -> int:
    """Find the first unit that is not a member of ``units``."""
    for i in range(start, end):
        if buffer[i] not in units:
            return i
    return -1


def find_last_not_of(buffer: Any, units: Container[Any], start: int, end: int) -> int:
    """Find the last unit that is not a member of ``units``."""
    for i in range(end - 1, start - 1, -1):
        if buffer[i] not in units:
            return i
    return -1


def find_where(
    buffer: Any,
    predicate: Callable[[Any], object],
    start: int,
    end: int,
    *,
    expected: bool = True,
) -> int:
    """Find the first unit for which ``bool(predicate(unit)) == expected``."""
    for i in range(start, end):
        if bool(predicate(buffer[i])) is expected:
            return i
    return -1


def match_at(buffer: Any, needle: Any, pos: int, end: int) -> bool:
    """Check whether ``buffer[pos:end]`` starts with ``needle``."""
    if isinstance(buffer, _NATIVE):
        return buffer.startswith(needle, pos, end)
    size = len(needle)
    if pos + size > end:
        return False
    for offset in range(size):
        if buffer[pos + offset] != needle[offset]:
            return False
    return True


def match_end(buffer: Any, needle: Any, start: int, end: int) -> bool:
    """Check whether ``buffer[start:end]`` ends with ``needle``."""
    if isinstance(buffer, _NATIVE):
        return buffer.endswith(needle, start, end)
    begin = end - len(needle)
    if begin < start:
        return False
    return match_at(buffer, needle, begin, end)


def repeat_end(buffer: Any, needle: Any, start: int, end: int) -> int:
    """Return the end of the run of whole ``needle`` repetitions at ``start``.

    An empty needle matches zero units, so the run ends at ``start``.
    """
    size = len(needle)
    if size == 0:
        return start
    pos = start
    while match_at(buffer, needle, pos, end):
        pos += size
    return pos


def equal(
    buffer: Any,
    start: int,
    end: int,
    other: Any,
    other_start: int,
    other_end: int,
) -> bool:
    """Compare two windows unit by unit."""
    if end - start != other_end - other_start:
        return False
    if type(buffer) is type(other) and isinstance(buffer, _NATIVE):
        return buffer.startswith(other[other_start:other_end], start, end)
    for offset in range(end - start):
        if buffer[start + offset] != other[other_start + offset]:
            return False
    return True
