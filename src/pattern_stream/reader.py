"""File-object adapter for :class:`~pattern_stream.core.PatternStream`."""

import io

from .constants import SEEK_SET
from .core import PatternStream

__all__ = ["PatternReader"]


class PatternReader(io.RawIOBase):
    """Raw binary file object reading from a pattern stream.

    Lets ``shutil.copyfileobj``, ``io.BufferedReader`` and HTTP clients
    that expect a file consume the stream without materialising it.
    """

    def __init__(self, stream: PatternStream):
        super().__init__()
        self._stream = stream

    @property
    def stream(self) -> PatternStream:
        return self._stream

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed file")

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def writable(self) -> bool:
        return False

    def readinto(self, b) -> int:
        """Fill ``b`` and return the byte count, 0 at end of stream."""

        self._check_open()
        return self._stream.read(b).count

    def seek(self, offset: int, whence: int = SEEK_SET) -> int:
        self._check_open()
        return self._stream.seek(offset, whence)

    def tell(self) -> int:
        self._check_open()
        return self._stream.tell()

    def __len__(self) -> int:
        return len(self._stream)
