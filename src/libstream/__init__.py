"""
libstream: zero-copy text-scanning streams for lexers and ad-hoc parsers

A Stream is a non-owning cursor over text that already lives in memory. It
narrows a window over the caller's buffer as characters are consumed and
hands back extracted text as further windows over the same buffer.

Quick Start:
    >>> from libstream import Stream
    >>> s = Stream("name: 'libstream', version: 1")
    >>> key = s.take_until(":")
    >>> s.drop().trim_front()
    Stream("'libstream', version: 1", 6:29)
    >>> s.take_delimited("'")
    Stream('libstream', 7:16)

Streams work on any fixed-width character unit:
    >>> Stream(b"GET /index.html").take_until(" ")
    Stream(b'GET', 0:3)

    >>> from array import array
    >>> utf16 = array("H", "hi there".encode("utf-16-le"))  # little-endian hosts
    >>> Stream(utf16).take_until(" ") == "hi"
    True

Installation:
    pip install libstream            # zero runtime dependencies
"""

from libstream.config import (
    ASCII_WHITESPACE,
    StreamConfig,
    default_line_separator,
    get_stream_config,
    reset_stream_config,
    set_stream_config,
    stream_config_context,
)
from libstream.errors import StreamAssertionError, StreamError, UnitError
from libstream.location import SourceLocation
from libstream.stream import Char, Lines, Predicate, Stream
from libstream.units import NARROW, UTF16, UTF32, WIDE, CharUnit, unit_of

__version__ = "0.1.0"

__all__ = [
    # Core
    "Stream",
    "Lines",
    "Char",
    "Predicate",
    # Character units
    "CharUnit",
    "NARROW",
    "UTF16",
    "UTF32",
    "WIDE",
    "unit_of",
    # Configuration
    "ASCII_WHITESPACE",
    "StreamConfig",
    "default_line_separator",
    "get_stream_config",
    "reset_stream_config",
    "set_stream_config",
    "stream_config_context",
    # Location
    "SourceLocation",
    # Errors
    "StreamAssertionError",
    "StreamError",
    "UnitError",
    # Version
    "__version__",
]
