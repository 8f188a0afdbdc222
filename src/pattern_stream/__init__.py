"""Deterministic, seekable synthetic byte stream package."""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import re

from .constants import DEFAULT_PATTERN_SIZE, SEEK_CUR, SEEK_END, SEEK_SET
from .core import (
    InvalidPositionError,
    InvalidWhenceError,
    PatternStream,
    PatternStreamError,
    ReadResult,
    ReadSeeker,
    expected_bytes,
)
from .reader import PatternReader

_pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"


def _read_version(path: Path) -> str:
    text = path.read_text(encoding="utf-8")
    match = re.search(r'^version\s*=\s*"([^"]+)"', text, flags=re.MULTILINE)
    if not match:
        raise RuntimeError("version not found in pyproject.toml")
    return match.group(1)


try:
    __version__ = version("pattern-stream")
except PackageNotFoundError:
    __version__ = _read_version(_pyproject)

__all__ = [
    "PatternStream",
    "PatternReader",
    "ReadResult",
    "ReadSeeker",
    "PatternStreamError",
    "InvalidPositionError",
    "InvalidWhenceError",
    "expected_bytes",
    "DEFAULT_PATTERN_SIZE",
    "SEEK_SET",
    "SEEK_CUR",
    "SEEK_END",
    "__version__",
]
