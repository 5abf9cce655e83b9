"""ContextVar-based stream configuration for libstream.

Provides context-local configuration using Python's ContextVars (PEP 567).
Streams read the active config when an operation needs a default (line
separator, whitespace set) or checks an internal invariant.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from libstream.config import StreamConfig, stream_config_context

    with stream_config_context(StreamConfig(assertions=True)):
        stream = Stream("key = value")
        key = stream.take_until("=")

"""

import sys
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from libstream.utils.logger import get_logger

logger = get_logger(__name__)

#: ASCII whitespace: space, tab, line feed, carriage return, vertical tab, form feed.
ASCII_WHITESPACE = " \t\n\r\v\f"


def default_line_separator() -> str:
    """Return the line separator of the host platform.

    Returns:
        ``"\\r\\n"`` on Windows, ``"\\n"`` everywhere else.
    """
    return "\r\n" if sys.platform == "win32" else "\n"


@dataclass(frozen=True, slots=True)
class StreamConfig:
    """Immutable stream configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).
    Literal values are given as ``str`` and encoded per character unit when
    a stream uses them.

    Attributes:
        assertions: Check internal invariants and raise StreamAssertionError
        line_separator: Default separator for Stream.lines (None = platform)
        whitespace: Default character set for Stream.trim and friends

    """

    assertions: bool = False
    line_separator: str | None = None
    whitespace: str = ASCII_WHITESPACE

    @classmethod
    def from_dict(cls, config_dict: dict) -> "StreamConfig":
        """Create StreamConfig from dictionary.

        Only includes keys that are valid StreamConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                StreamConfig attribute names.

        Returns:
            New StreamConfig instance with values from dict.

        Example:
            >>> config = StreamConfig.from_dict({
            ...     "assertions": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.assertions
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def resolved_line_separator(self) -> str:
        """Return the configured line separator or the platform default."""
        if self.line_separator is None:
            return default_line_separator()
        return self.line_separator


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: StreamConfig = StreamConfig()

_stream_config: ContextVar[StreamConfig] = ContextVar(
    "stream_config",
    default=_DEFAULT_CONFIG,
)


def get_stream_config() -> StreamConfig:
    """Get current stream configuration (context-local).

    Returns:
        The active StreamConfig for this thread/context.

    """
    return _stream_config.get()


def set_stream_config(config: StreamConfig) -> None:
    """Set stream configuration for current context.

    Args:
        config: StreamConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    logger.debug("Stream config set: %r", config)
    _stream_config.set(config)


def reset_stream_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _stream_config.set(_DEFAULT_CONFIG)


@contextmanager
def stream_config_context(config: StreamConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: StreamConfig to use within the context.

    Yields:
        None

    Example:
        >>> with stream_config_context(StreamConfig(whitespace=" ")):
        ...     Stream("\\t x \\t").trim() == "\\t x \\t"
        True

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _stream_config.get()
    logger.debug("Stream config pushed: %r", config)
    _stream_config.set(config)
    try:
        yield
    finally:
        _stream_config.set(previous)


__all__ = [
    "ASCII_WHITESPACE",
    "StreamConfig",
    "default_line_separator",
    "get_stream_config",
    "reset_stream_config",
    "set_stream_config",
    "stream_config_context",
]
