"""Zero-copy text-scanning stream.

A Stream is a window ``(buffer, start, end)`` over a caller-supplied buffer.
Consuming characters narrows the window; extracted text comes back as another
Stream over the same buffer. Nothing is copied until the caller asks for it
with text() or str().

Usage:
    >>> s = Stream("key = value")
    >>> key = s.take_until("=")
    >>> key.trim() == "key"
    True
    >>> s.consume("=")
    True
    >>> str(s.trim())
    'value'

No method raises on a scanning outcome. Operations that can find nothing
return None or an empty view; counts and slice bounds are clamped.

Thread Safety:
    A Stream is a mutable cursor; do not share one instance between threads.
    Copies are independent and may scan the same (immutable) buffer from any
    number of threads.

"""

from __future__ import annotations

import sys
from array import array
from collections.abc import Callable, Iterator
from functools import total_ordering
from typing import Any, Generic, TypeVar

from libstream import buffers
from libstream.config import get_stream_config
from libstream.errors import StreamAssertionError, UnitError
from libstream.location import SourceLocation
from libstream.units import CharUnit, unit_of
from libstream.utils.logger import get_logger

logger = get_logger(__name__)

BufferT = TypeVar("BufferT", str, bytes, bytearray, memoryview, array)

#: A character value: a 1-char str for str streams, an int code unit otherwise.
Char = str | int

#: Unary predicate over one character.
Predicate = Callable[[Any], object]

# Mutable backings a stream can pin against resizing in assertion mode
_PINNABLE = (bytearray, array)


def _check(condition: bool, message: str) -> None:
    """Raise StreamAssertionError if assertions are enabled and condition fails.

    The reported location is the first frame outside libstream.
    """
    if condition or not get_stream_config().assertions:
        return
    frame = sys._getframe(1)
    while frame is not None and frame.f_globals.get("__name__", "").startswith("libstream"):
        frame = frame.f_back
    lineno = frame.f_lineno if frame is not None else None
    source_file = frame.f_code.co_filename if frame is not None else None
    logger.error(
        "%s:%s: libstream: Assertion failed: %s", source_file, lineno, message
    )
    raise StreamAssertionError(message, lineno=lineno, source_file=source_file)


@total_ordering
class Stream(Generic[BufferT]):
    """Non-owning cursor over a buffer of fixed-width characters.

    The stream keeps a reference to its buffer but never copies or mutates
    it. Callers must not mutate a mutable buffer (bytearray, array) while
    streams over it are in use.

    Usage:
            >>> s = Stream("hello world")
            >>> s.take_until(" ")
            Stream('hello', 0:5)
            >>> s.drop().front()
            'w'

    """

    __slots__ = (
        "_buf",
        "_start",
        "_end",
        "_unit",
        "_pin",  # memoryview export holding a mutable buffer's size in assertion mode
    )

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        source: BufferT | Stream[BufferT] = "",
        start: int = 0,
        end: int | None = None,
    ) -> None:
        """Initialize a stream over ``source[start:end]``.

        Args:
            source: Backing buffer, or a Stream whose window to narrow
            start: First character of the window (clamped)
            end: End of the window, exclusive (clamped; None = end of source)
        """
        if isinstance(source, Stream):
            size = source._end - source._start
            lo = min(max(start, 0), size)
            hi = size if end is None else min(max(end, lo), size)
            self._buf = source._buf
            self._unit = source._unit
            self._pin = source._pin
            self._start = source._start + lo
            self._end = source._start + hi
            return

        self._unit: CharUnit = unit_of(source)
        self._buf: Any = source
        size = len(source)
        self._start: int = min(max(start, 0), size)
        self._end: int = size if end is None else min(max(end, self._start), size)
        self._pin: memoryview | None = None
        if isinstance(source, _PINNABLE) and get_stream_config().assertions:
            self._pin = memoryview(source)

    def _view(self, start: int, end: int) -> Stream[BufferT]:
        """Create a stream over the same buffer without validation."""
        view = object.__new__(type(self))
        view._buf = self._buf
        view._unit = self._unit
        view._pin = self._pin
        view._start = start
        view._end = end
        return view

    # =========================================================================
    # Positional queries
    # =========================================================================

    @property
    def buffer(self) -> BufferT:
        """The backing buffer (never copied)."""
        return self._buf

    @property
    def start(self) -> int:
        """Absolute offset of the first character in the backing buffer."""
        return self._start

    @property
    def end(self) -> int:
        """Absolute offset one past the last character in the backing buffer."""
        return self._end

    @property
    def unit(self) -> CharUnit:
        """Character unit of the backing buffer."""
        return self._unit

    def empty(self) -> bool:
        """Check if this stream is empty."""
        return self._start == self._end

    def size(self) -> int:
        """Return the number of characters in this stream."""
        return self._end - self._start

    def size_bytes(self) -> int:
        """Return the number of bytes in this stream."""
        return (self._end - self._start) * self._unit.width

    def has(self, n: int) -> bool:
        """Return whether this stream contains at least ``n`` characters."""
        return self._end - self._start >= n

    def front(self) -> Char | None:
        """Return the first character, or None if the stream is empty."""
        if self._start == self._end:
            return None
        return self._buf[self._start]

    def back(self) -> Char | None:
        """Return the last character, or None if the stream is empty."""
        if self._start == self._end:
            return None
        return self._buf[self._end - 1]

    def at(self, index: int) -> Char | None:
        """Return the character at ``index``, or None if out of range.

        Negative indices are out of range.
        """
        if not 0 <= index < self._end - self._start:
            return None
        return self._buf[self._start + index]

    def slice(self, start: int | None = None, end: int | None = None) -> Stream[BufferT]:
        """Return the characters in ``[start, end)`` as a view.

        Both bounds are clamped between 0 and size(). If start ends up past
        end, the view is empty.

        Args:
            start: Index of the first character (None = 0)
            end: Index one past the last character (None = size())
        """
        size = self._end - self._start
        lo = 0 if start is None else min(max(start, 0), size)
        hi = size if end is None else min(max(end, 0), size)
        if lo > hi:
            hi = lo
        return self._view(self._start + lo, self._start + hi)

    def starts_with(self, prefix: Any) -> bool:
        """Return True if the stream starts with the given character or text."""
        needle = self._unit.text(prefix)
        return buffers.match_at(self._buf, needle, self._start, self._end)

    def starts_with_any(self, chars: Any) -> bool:
        """Return True if the stream starts with any of the given characters."""
        return (
            self._start != self._end
            and self._buf[self._start] in self._unit.charset(chars)
        )

    def ends_with(self, suffix: Any) -> bool:
        """Return True if the stream ends with the given character or text."""
        needle = self._unit.text(suffix)
        return buffers.match_end(self._buf, needle, self._start, self._end)

    def ends_with_any(self, chars: Any) -> bool:
        """Return True if the stream ends with any of the given characters."""
        return (
            self._start != self._end
            and self._buf[self._end - 1] in self._unit.charset(chars)
        )

    def text(self) -> BufferT:
        """Materialize the window in the backing type.

        This is the one place a stream copies: ``str`` and ``bytes`` slices
        are new objects. memoryview backings stay zero-copy.
        """
        return self._buf[self._start : self._end]

    def view(self) -> memoryview:
        """Return a zero-copy memoryview of the window.

        Raises:
            UnitError: For str backings, which do not export a buffer.
        """
        if self._unit.is_text:
            raise UnitError(self._unit.name, "str streams have no memoryview; use text()")
        return memoryview(self._buf)[self._start : self._end]

    def location(self, source_file: str | None = None) -> SourceLocation:
        """Return the line and column of the stream's front in its buffer.

        Lines are counted by line feed units; columns in character units.

        Args:
            source_file: Optional file name to attach to the location
        """
        newline = self._unit.char("\n")
        lineno = buffers.count_unit(self._buf, newline, 0, self._start) + 1
        last_newline = buffers.rfind_unit(self._buf, newline, 0, self._start)
        return SourceLocation(
            lineno=lineno,
            col_offset=self._start - last_newline,
            offset=self._start,
            source_file=source_file,
        )

    def copy(self) -> Stream[BufferT]:
        """Return an independent cursor over the same window. O(1)."""
        return self._view(self._start, self._end)

    # =========================================================================
    # Unconditional advancement
    # =========================================================================

    def drop(self, n: int = 1) -> Stream[BufferT]:
        """Discard up to ``n`` characters from the front.

        If the stream holds fewer than ``n`` characters, it is cleared.
        To skip a particular character if present, use consume().

        Returns:
            self for method chaining
        """
        _check(n >= 0, "Cannot drop a negative number of characters")
        self.take(n)
        return self

    def take(self, n: int = 1) -> Stream[BufferT]:
        """Remove up to ``n`` characters from the front and return them.

        If the stream holds fewer than ``n`` characters, returns what is left.
        """
        size = self._end - self._start
        if n > size:
            n = size
        elif n < 0:
            n = 0
        return self._advance(n)

    def consume(self, char: Any) -> bool:
        """Remove the first character if it equals ``char``.

        Returns:
            True if the character was removed.
        """
        unit = self._unit.char(char)
        if self._start == self._end or self._buf[self._start] != unit:
            return False
        self._start += 1
        return True

    def extract(self, count: int) -> tuple[Char, ...] | None:
        """Remove exactly ``count`` characters and return them as a tuple.

        If fewer than ``count`` characters remain, nothing is removed.

        Returns:
            The characters in stream order, or None.
        """
        _check(count >= 0, "Cannot extract a negative number of characters")
        if count < 0 or not self.has(count):
            return None
        start = self._start
        self._start += count
        return tuple(self._buf[i] for i in range(start, start + count))

    # =========================================================================
    # Conditional advancement
    # =========================================================================

    def take_until(self, target: Any) -> Stream[BufferT]:
        """Take characters until ``target`` matches.

        ``target`` is a character, a text (matched as a whole substring) or
        a unary predicate. Everything before the first match is removed and
        returned; the match itself stays in the stream.

        If nothing matches, the entire stream is taken. The _or_empty
        variants return an empty view instead and leave the stream as is.
        The _any variants treat their argument as a set of characters.
        """
        return self._take_to(self._find_until(target), or_empty=False)

    def take_until_or_empty(self, target: Any) -> Stream[BufferT]:
        """See take_until()."""
        return self._take_to(self._find_until(target), or_empty=True)

    def take_until_any(self, chars: Any) -> Stream[BufferT]:
        """See take_until()."""
        pos = buffers.find_first_of(
            self._buf, self._unit.charset(chars), self._start, self._end
        )
        return self._take_to(pos, or_empty=False)

    def take_until_any_or_empty(self, chars: Any) -> Stream[BufferT]:
        """See take_until()."""
        pos = buffers.find_first_of(
            self._buf, self._unit.charset(chars), self._start, self._end
        )
        return self._take_to(pos, or_empty=True)

    def take_while(self, target: Any) -> Stream[BufferT]:
        """Take characters while ``target`` matches.

        ``target`` is a character, a text or a unary predicate. A text
        consumes whole consecutive repetitions of itself.

        If every remaining character matches, the entire stream is taken.
        The _or_empty variants return an empty view instead and leave the
        stream as is.
        """
        return self._take_to(self._find_while_end(target), or_empty=False)

    def take_while_or_empty(self, target: Any) -> Stream[BufferT]:
        """See take_while()."""
        return self._take_to(self._find_while_end(target), or_empty=True)

    def take_while_any(self, chars: Any) -> Stream[BufferT]:
        """See take_while()."""
        pos = buffers.find_first_not_of(
            self._buf, self._unit.charset(chars), self._start, self._end
        )
        return self._take_to(pos, or_empty=False)

    def take_while_any_or_empty(self, chars: Any) -> Stream[BufferT]:
        """See take_while()."""
        pos = buffers.find_first_not_of(
            self._buf, self._unit.charset(chars), self._start, self._end
        )
        return self._take_to(pos, or_empty=True)

    def drop_until(self, target: Any) -> Stream[BufferT]:
        """Same as take_until(), but discards the characters and returns self."""
        self.take_until(target)
        return self

    def drop_until_or_empty(self, target: Any) -> Stream[BufferT]:
        """See drop_until()."""
        self.take_until_or_empty(target)
        return self

    def drop_until_any(self, chars: Any) -> Stream[BufferT]:
        """See drop_until()."""
        self.take_until_any(chars)
        return self

    def drop_until_any_or_empty(self, chars: Any) -> Stream[BufferT]:
        """See drop_until()."""
        self.take_until_any_or_empty(chars)
        return self

    def drop_while(self, target: Any) -> Stream[BufferT]:
        """Same as take_while(), but discards the characters and returns self."""
        self.take_while(target)
        return self

    def drop_while_or_empty(self, target: Any) -> Stream[BufferT]:
        """See drop_while()."""
        self.take_while_or_empty(target)
        return self

    def drop_while_any(self, chars: Any) -> Stream[BufferT]:
        """See drop_while()."""
        self.take_while_any(chars)
        return self

    def drop_while_any_or_empty(self, chars: Any) -> Stream[BufferT]:
        """See drop_while()."""
        self.take_while_any_or_empty(chars)
        return self

    # =========================================================================
    # Delimited extraction
    # =========================================================================

    def take_delimited(self, delimiter: Any) -> Stream[BufferT] | None:
        """Take a delimited character sequence from the stream.

        If the stream starts with ``delimiter``, characters up to the next
        occurrence of it are returned (without either delimiter) and
        everything through the closing delimiter is removed.

        If there is no opening or closing delimiter, the stream is not
        advanced at all.

        Args:
            delimiter: A character or non-empty text

        Returns:
            The delimited text (possibly empty), or None.
        """
        needle = self._unit.text(delimiter)
        size = len(needle)
        if size == 0 or not buffers.match_at(self._buf, needle, self._start, self._end):
            return None
        close = buffers.find(self._buf, needle, self._start + size, self._end)
        if close < 0:
            return None
        content = self._view(self._start + size, close)
        self._start = close + size
        return content

    def take_delimited_any(self, delimiters: Any) -> Stream[BufferT] | None:
        """Take text delimited by any one of ``delimiters``.

        Whichever character opens the sequence must also close it.

        Returns:
            The delimited text (possibly empty), or None.
        """
        if self._start == self._end:
            return None
        opening = self._buf[self._start]
        if opening not in self._unit.charset(delimiters):
            return None
        close = buffers.find_unit(self._buf, opening, self._start + 1, self._end)
        if close < 0:
            return None
        content = self._view(self._start + 1, close)
        self._start = close + 1
        return content

    # =========================================================================
    # Trimming
    # =========================================================================

    def trim(self, chars: Any = None) -> Stream[BufferT]:
        """Remove characters in ``chars`` from both ends.

        Args:
            chars: Character set to remove (None = configured whitespace)

        Returns:
            self for method chaining
        """
        return self.trim_front(chars).trim_back(chars)

    def trim_front(self, chars: Any = None) -> Stream[BufferT]:
        """See trim()."""
        units = self._trim_set(chars)
        pos = buffers.find_first_not_of(self._buf, units, self._start, self._end)
        self._start = self._end if pos < 0 else pos
        return self

    def trim_back(self, chars: Any = None) -> Stream[BufferT]:
        """See trim()."""
        units = self._trim_set(chars)
        pos = buffers.find_last_not_of(self._buf, units, self._start, self._end)
        self._end = self._start if pos < 0 else pos + 1
        return self

    # =========================================================================
    # Line iteration
    # =========================================================================

    def lines(self, separator: Any = None) -> Lines[BufferT]:
        """Iterate over all lines in the stream.

        Separators are not included in the lines. The stream is not modified;
        the returned iterable captures the current window and can be iterated
        any number of times.

        Args:
            separator: Line separator (None = configured or platform default)
        """
        if separator is None:
            separator = get_stream_config().resolved_line_separator()
        return Lines(self.copy(), self._unit.text(separator))

    # =========================================================================
    # Python protocol
    # =========================================================================

    def __len__(self) -> int:
        return self._end - self._start

    def __bool__(self) -> bool:
        return self._start != self._end

    def __iter__(self) -> Iterator[Char]:
        buf = self._buf
        for i in range(self._start, self._end):
            yield buf[i]

    def __getitem__(self, key: int | slice) -> Any:
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("Stream slices do not support a step")
            return self.slice(key.start, key.stop)
        return self.at(key)

    def __copy__(self) -> Stream[BufferT]:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Stream):
            return buffers.equal(
                self._buf, self._start, self._end, other._buf, other._start, other._end
            )
        if isinstance(other, int):
            return NotImplemented
        try:
            needle = self._unit.text(other)
        except UnitError:
            return NotImplemented
        return len(needle) == self._end - self._start and buffers.match_at(
            self._buf, needle, self._start, self._end
        )

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Stream):
            if other._unit.is_text != self._unit.is_text:
                return NotImplemented
            return self._key() < other._key()
        if isinstance(other, int):
            return NotImplemented
        try:
            needle = self._unit.text(other)
        except UnitError:
            return NotImplemented
        if self._unit.is_text:
            return self._key() < needle
        return self._key() < tuple(needle)

    def __str__(self) -> str:
        return str(self.text())

    def __repr__(self) -> str:
        content = self.text() if isinstance(self._buf, (str, bytes, bytearray)) else self._key()
        if isinstance(content, bytearray):
            content = bytes(content)
        return f"{type(self).__name__}({content!r}, {self._start}:{self._end})"

    # =========================================================================
    # Internals
    # =========================================================================

    def _key(self) -> Any:
        """Materialized content for ordering."""
        if self._unit.is_text:
            return self._buf[self._start : self._end]
        return tuple(self._buf[i] for i in range(self._start, self._end))

    def _advance(self, n: int) -> Stream[BufferT]:
        """Return the first ``n`` characters and remove them from the stream."""
        _check(0 <= n <= self._end - self._start, "n <= size()")
        start = self._start
        self._start += n
        return self._view(start, start + n)

    def _take_to(self, pos: int, *, or_empty: bool) -> Stream[BufferT]:
        """Take up to absolute position ``pos``; -1 means no termination point."""
        if pos < 0:
            if or_empty:
                return self._view(self._start, self._start)
            pos = self._end
        return self._advance(pos - self._start)

    def _find_until(self, target: Any) -> int:
        if callable(target):
            return buffers.find_where(self._buf, target, self._start, self._end)
        needle = self._unit.text(target)
        return buffers.find(self._buf, needle, self._start, self._end)

    def _find_while_end(self, target: Any) -> int:
        """Return the first position where ``target`` stops matching, or -1."""
        if callable(target):
            return buffers.find_where(
                self._buf, target, self._start, self._end, expected=False
            )
        needle = self._unit.text(target)
        if len(needle) == 1:
            return buffers.find_first_not_of(self._buf, (needle[0],), self._start, self._end)
        pos = buffers.repeat_end(self._buf, needle, self._start, self._end)
        if pos == self._end and needle:
            return -1
        return pos

    def _trim_set(self, chars: Any) -> frozenset[Any]:
        if chars is None:
            chars = get_stream_config().whitespace
        return self._unit.charset(chars)


class Lines(Generic[BufferT]):
    """Lazy, restartable sequence of the lines in a stream.

    Each iteration splits the captured window afresh and yields Stream views.
    Empty segments between consecutive separators and after a trailing
    separator are kept. An empty window has no lines; an empty separator
    yields each character as its own line.

    """

    __slots__ = ("_stream", "_separator")

    def __init__(self, stream: Stream[BufferT], separator: Any) -> None:
        self._stream = stream
        self._separator = separator

    def __iter__(self) -> Iterator[Stream[BufferT]]:
        stream = self._stream
        buf, start, end = stream._buf, stream._start, stream._end
        if start == end:
            return
        size = len(self._separator)
        if size == 0:
            for i in range(start, end):
                yield stream._view(i, i + 1)
            return
        pos = start
        while True:
            hit = buffers.find(buf, self._separator, pos, end)
            if hit < 0:
                yield stream._view(pos, end)
                return
            yield stream._view(pos, hit)
            pos = hit + size

    def __repr__(self) -> str:
        return f"Lines({self._stream!r}, separator={self._separator!r})"
