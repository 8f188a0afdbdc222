"""Deterministic, seekable synthetic byte stream.

:class:`PatternStream` tiles a small immutable pattern out to an arbitrary
logical length, so callers get a reproducible data source of any size
without allocating or reading that many bytes. The default pattern is a
ramp where byte ``i`` is ``i % 256``, which makes the byte at any logical
offset ``k`` trivially checkable on the receiving end with
:func:`expected_bytes`.
"""

import logging
import operator
from dataclasses import dataclass
from typing import Iterator, Protocol, runtime_checkable

from .constants import (
    BUILTIN_PATTERN_SIZE,
    DEFAULT_PATTERN_SIZE,
    SEEK_CUR,
    SEEK_END,
    SEEK_SET,
)

logger = logging.getLogger(__name__)


class PatternStreamError(ValueError):
    """Base class for pattern stream argument errors."""


class InvalidPositionError(PatternStreamError):
    """Raised when a seek resolves to a negative offset."""


class InvalidWhenceError(PatternStreamError):
    """Raised when a seek anchor is not SEEK_SET, SEEK_CUR or SEEK_END."""


@dataclass(frozen=True)
class ReadResult:
    """Outcome of :meth:`PatternStream.read`.

    ``count`` bytes were written to the caller's buffer. ``eof`` is set when
    the stream is exhausted, including on the read that delivered the final
    bytes.
    """

    count: int
    eof: bool = False

    def __iter__(self) -> Iterator:
        yield self.count
        yield self.eof


@runtime_checkable
class ReadSeeker(Protocol):
    def read(self, buffer) -> ReadResult:
        """Fill ``buffer`` from the current position."""

    def seek(self, offset: int, whence: int = SEEK_SET) -> int:
        """Move the cursor and return the new position."""


def _ramp(length: int) -> bytes:
    """Return ``length`` bytes where byte ``i`` is ``i % 256``."""

    full, rest = divmod(length, 256)
    return bytes(range(256)) * full + bytes(range(rest))


class PatternStream:
    """Readable, seekable stream repeating a fixed byte pattern.

    A new stream has size 0 and yields nothing until :meth:`reset_size`
    declares a logical length. Each instance owns its pattern buffer.
    """

    def __init__(self, pattern_size: int | None = None, *, pattern=None):
        """Build the pattern buffer.

        Args:
            pattern_size: Ramp pattern length in bytes. ``None`` selects
                ``DEFAULT_PATTERN_SIZE``, which ``PATTERN_STREAM_DEFAULT_SIZE``
                may override. Values ``<= 0`` always select the built-in
                131072 byte pattern.
            pattern: Bytes-like pattern used instead of the ramp. It is
                copied; an empty pattern gives a stream that is always at
                end of stream.
        """

        if pattern is not None:
            pattern = bytes(pattern)
        else:
            if pattern_size is None:
                pattern_size = DEFAULT_PATTERN_SIZE
            elif pattern_size <= 0:
                pattern_size = BUILTIN_PATTERN_SIZE
            pattern = _ramp(pattern_size)
        self._pattern = pattern
        self._view = memoryview(pattern)
        self._size = 0
        self._pos = 0
        logger.debug("pattern stream created with %d byte pattern", len(pattern))

    @classmethod
    def from_pattern(cls, pattern) -> "PatternStream":
        """Return a stream with size 0 repeating ``pattern``."""

        return cls(pattern=pattern)

    @property
    def pattern(self) -> bytes:
        return self._pattern

    @property
    def size(self) -> int:
        return self._size

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return max(self._size - self._pos, 0)

    def __len__(self) -> int:
        return max(self._size, 0)

    def __repr__(self) -> str:
        return (
            f"PatternStream(pattern_len={len(self._pattern)}, "
            f"size={self._size}, pos={self._pos})"
        )

    def reset_size(self, size: int) -> None:
        """Declare a new logical length and rewind to the start.

        Args:
            size: Logical length in bytes. Zero or negative means no data.
        """

        self._size = size
        self._pos = 0
        logger.debug("pattern stream reset to %d bytes", size)

    def tell(self) -> int:
        return self._pos

    def read(self, buffer) -> ReadResult:
        """Fill ``buffer`` with pattern bytes from the current position.

        Args:
            buffer: Writable bytes-like object.

        Returns:
            ReadResult: Number of bytes written and whether the stream is
            now exhausted.
        """

        if self._size <= 0 or not self._pattern:
            return ReadResult(0, eof=True)
        remaining = self._size - self._pos
        if remaining <= 0:
            return ReadResult(0, eof=True)

        with memoryview(buffer) as raw, raw.cast("B") as out:
            to_read = min(len(out), remaining)
            pattern_len = len(self._pattern)
            start = self._pos % pattern_len
            written = 0
            while written < to_read:
                chunk = min(pattern_len - start, to_read - written)
                out[written : written + chunk] = self._view[start : start + chunk]
                written += chunk
                start = 0

        self._pos += to_read
        return ReadResult(to_read, eof=self._pos >= self._size)

    def read_bytes(self, n: int = -1) -> bytes:
        """Return up to ``n`` bytes, or everything remaining when ``n < 0``."""

        if n < 0:
            n = self.remaining
        buf = bytearray(min(n, self.remaining))
        count, _ = self.read(buf)
        return bytes(buf[:count])

    def seek(self, offset: int, whence: int = SEEK_SET) -> int:
        """Move the cursor relative to ``whence``.

        Positions past the end are clamped to the logical size.

        Args:
            offset: Signed offset in bytes.
            whence: ``SEEK_SET``, ``SEEK_CUR`` or ``SEEK_END``.

        Returns:
            int: The new position.

        Raises:
            InvalidPositionError: If the target is before the start.
            InvalidWhenceError: If ``whence`` is not a known anchor.
            TypeError: If ``offset`` is not an integer.
        """

        offset = operator.index(offset)
        if whence == SEEK_SET:
            new_pos = offset
        elif whence == SEEK_CUR:
            new_pos = self._pos + offset
        elif whence == SEEK_END:
            new_pos = self._size + offset
        else:
            raise InvalidWhenceError(f"invalid whence: {whence}")

        if new_pos < 0:
            raise InvalidPositionError(f"negative position: {new_pos}")
        if new_pos > self._size:
            new_pos = self._size

        self._pos = new_pos
        return self._pos


def expected_bytes(offset: int, length: int, pattern: bytes | None = None) -> bytes:
    """Return the bytes a pattern stream yields at ``[offset, offset + length)``.

    Args:
        offset: Logical start offset.
        length: Number of bytes.
        pattern: Pattern to tile. Defaults to the ramp of
            ``DEFAULT_PATTERN_SIZE`` bytes.

    Returns:
        bytes: Expected stream content.

    Raises:
        ValueError: If ``offset`` or ``length`` is negative or ``pattern``
            is empty.
    """

    if offset < 0 or length < 0:
        raise ValueError("offset and length must be non-negative")
    if pattern is None:
        pattern = _ramp(DEFAULT_PATTERN_SIZE)
    if len(pattern) == 0:
        raise ValueError("pattern must not be empty")
    start = offset % len(pattern)
    repeats = (start + length) // len(pattern) + 1
    return (bytes(pattern) * repeats)[start : start + length]
