import io

import pytest

import ya_md5
from ya_md5 import (
    Md5Error,
    Md5Hasher,
    ReadError,
    hash_bytes,
    hash_file,
    hash_from_reader,
    hash_text,
    md5,
)

ABC_HEX = "900150983cd24fb0d6963f7d28e17f72"
HELLO_HEX = "5eb63bbbe01eeed093cb22bb8f5acdc3"


class FailingReader:
    """Returns some data, then fails like a broken pipe."""

    def __init__(self, chunks_before_failure: int):
        self.remaining = chunks_before_failure
        self.reads = 0

    def read(self, size: int) -> bytes:
        self.reads += 1
        if self.remaining == 0:
            raise OSError("connection reset")
        self.remaining -= 1
        return b"q" * size


def test_one_shot_helpers_agree():
    assert hash_bytes(b"abc").hexdigest() == ABC_HEX
    assert hash_text("abc").hexdigest() == ABC_HEX
    assert Md5Hasher.hash_bytes(b"abc").hexdigest() == ABC_HEX
    assert Md5Hasher.hash_text("abc").hexdigest() == ABC_HEX
    assert md5(b"abc").finalize().hexdigest() == ABC_HEX


def test_hash_text_encoding():
    assert hash_text("hé", encoding="latin-1") == hash_bytes(b"h\xe9")
    assert hash_text("hé") == hash_bytes("hé".encode("utf-8"))


def test_md5_constructor_and_chaining():
    hasher = md5()
    assert hasher.name == "md5"
    assert hasher.digest_size == 16
    assert hasher.block_size == 64
    assert hasher.update(b"hello ").update(b"world").finalize().hexdigest() == HELLO_HEX


def test_hash_from_reader():
    assert hash_from_reader(io.BytesIO(b"hello world")).hexdigest() == HELLO_HEX


@pytest.mark.parametrize("chunk_size", [1, 3, 64, 65, 4096])
def test_hash_from_reader_chunk_sizes(chunk_size):
    data = bytes(range(256)) * 5
    digest = Md5Hasher.hash(io.BytesIO(data), chunk_size=chunk_size)
    assert digest == hash_bytes(data)


def test_hash_from_reader_rejects_bad_chunk_size():
    with pytest.raises(ValueError):
        hash_from_reader(io.BytesIO(b"abc"), chunk_size=0)


def test_hash_from_reader_wraps_os_error():
    reader = FailingReader(chunks_before_failure=2)
    with pytest.raises(ReadError) as excinfo:
        hash_from_reader(reader, chunk_size=10)
    assert isinstance(excinfo.value.__cause__, OSError)
    assert "connection reset" in str(excinfo.value)
    assert isinstance(excinfo.value, Md5Error)
    assert reader.reads == 3


def test_hash_file(tmp_path):
    path = tmp_path / "foo.txt"
    path.write_bytes(b"hello world")
    assert hash_file(path).hexdigest() == HELLO_HEX
    assert hash_file(str(path), chunk_size=4).hexdigest() == HELLO_HEX


def test_hash_file_missing(tmp_path):
    with pytest.raises(ReadError) as excinfo:
        hash_file(tmp_path / "missing.bin")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_hash_file_empty(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    assert hash_file(path).hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"


def test_public_exports():
    for name in ya_md5.__all__:
        assert hasattr(ya_md5, name)


class NonBlockingReader:
    """Yields one chunk, then reports that no data is ready yet."""

    def __init__(self):
        self.chunks = [b"abc", None, b"def"]

    def read(self, size: int):
        return self.chunks.pop(0) if self.chunks else b""


def test_hash_from_reader_rejects_none_read():
    with pytest.raises(ReadError) as excinfo:
        hash_from_reader(NonBlockingReader())
    assert "returned None" in str(excinfo.value)
