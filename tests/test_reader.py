import hashlib
import io
import shutil

import pytest

from pattern_stream import PatternReader, PatternStream, expected_bytes


def _reader(pattern_size: int, size: int) -> PatternReader:
    stream = PatternStream(pattern_size)
    stream.reset_size(size)
    return PatternReader(stream)


def test_copyfileobj_transfers_whole_stream():
    reader = _reader(100, 10_000)
    dst = io.BytesIO()
    shutil.copyfileobj(reader, dst, 333)
    assert dst.getvalue() == expected_bytes(0, 10_000, reader.stream.pattern)


def test_buffered_reader_reads_and_seeks():
    raw = _reader(256, 1000)
    buffered = io.BufferedReader(raw, buffer_size=64)
    assert buffered.read(4) == bytes([0, 1, 2, 3])
    assert buffered.seek(510) == 510
    assert buffered.read(4) == bytes([254, 255, 0, 1])


def test_read_all_then_eof():
    reader = _reader(4, 6)
    assert reader.read() == bytes([0, 1, 2, 3, 0, 1])
    assert reader.read(10) == b""
    assert reader.readinto(bytearray(4)) == 0


def test_digest_matches_expected_content():
    reader = _reader(1024, 50_000)
    digest = hashlib.sha256()
    for block in iter(lambda: reader.read(4096), b""):
        digest.update(block)
    assert digest.digest() == hashlib.sha256(expected_bytes(0, 50_000)).digest()


def test_seek_and_tell():
    reader = _reader(4, 10)
    assert reader.seek(3) == 3
    assert reader.tell() == 3
    assert reader.seek(2, io.SEEK_CUR) == 5
    assert reader.seek(0, io.SEEK_END) == 10
    assert reader.seek(50) == 10


def test_seek_errors_surface_as_value_error():
    reader = _reader(4, 10)
    with pytest.raises(ValueError):
        reader.seek(-1)
    with pytest.raises(ValueError):
        reader.seek(0, 9)
    assert reader.tell() == 0


def test_capabilities_and_length():
    reader = _reader(4, 10)
    assert reader.readable()
    assert reader.seekable()
    assert not reader.writable()
    assert len(reader) == 10


def test_closed_reader_rejects_operations():
    with _reader(4, 10) as reader:
        assert reader.read(2) == bytes([0, 1])
    assert reader.closed
    with pytest.raises(ValueError):
        reader.read(1)
    with pytest.raises(ValueError):
        reader.seek(0)
    with pytest.raises(ValueError):
        reader.tell()
