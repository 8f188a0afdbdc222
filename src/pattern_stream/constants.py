"""Constant values used across the pattern stream."""

import io
import os

# Pattern length used when a non-positive size is requested
BUILTIN_PATTERN_SIZE = 128 << 10


def _load_default_pattern_size() -> int:
    """Return default pattern length from ``PATTERN_STREAM_DEFAULT_SIZE``.

    Raises:
        RuntimeError: When the variable is set but not a positive integer.

    Returns:
        int: Pattern length in bytes.
    """

    env = os.getenv("PATTERN_STREAM_DEFAULT_SIZE")
    if env is None:
        return BUILTIN_PATTERN_SIZE
    try:
        value = int(env)
    except ValueError as exc:
        raise RuntimeError("PATTERN_STREAM_DEFAULT_SIZE must be an integer") from exc
    if value <= 0:
        raise RuntimeError("PATTERN_STREAM_DEFAULT_SIZE must be positive")
    return value


# Pattern length used when no size is given
DEFAULT_PATTERN_SIZE = _load_default_pattern_size()

# Seek anchors, same values as the io module
SEEK_SET = io.SEEK_SET
SEEK_CUR = io.SEEK_CUR
SEEK_END = io.SEEK_END
