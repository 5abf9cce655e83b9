"""Exception classes for libstream.

Scanning itself never raises: absence is reported as ``None`` or an empty
view. These exceptions cover the debug-assertion path and arguments that
cannot be expressed in a stream's character unit.
"""

from __future__ import annotations


class StreamError(Exception):
    """Base exception for all libstream errors.

    Subclass this for specific error categories.
    """

    pass


class StreamAssertionError(StreamError):
    """Internal stream invariant violated.

    Only raised when debug assertions are enabled in ``StreamConfig``.
    Reaching it through documented usage is a bug in libstream.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize assertion error with the location of the failing check.

        Args:
            message: The failed condition
            lineno: Line number of the caller (1-indexed)
            source_file: File of the caller (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}libstream: Assertion failed: {message}")


class UnitError(StreamError, TypeError):
    """Argument or buffer does not fit the stream's character unit.

    Raised for unsupported backing buffers and for characters or text that
    cannot be encoded in the unit width of the stream.
    """

    def __init__(self, unit_name: str, message: str) -> None:
        """Initialize unit error.

        Args:
            unit_name: Name of the character unit (e.g., "narrow", "utf16")
            message: Description of the mismatch
        """
        self.unit_name = unit_name
        super().__init__(f"Unit '{unit_name}': {message}")
