from __future__ import annotations

import logging
import os
from typing import BinaryIO, Union

from .config import READ_CHUNK_SIZE
from .digest import Digest
from .errors import ReadError
from .processor import ChunkProcessor

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class Md5Hasher:
    """
    Streaming MD5 hasher with a hashlib-like interface.

    Feed data with ``update`` as many times as needed, then call ``finalize``
    once to obtain the :class:`Digest`. A finalized hasher rejects further use.
    """

    name = "md5"
    digest_size = 16
    block_size = 64

    def __init__(self):
        self._processor = ChunkProcessor()

    def update(self, data: bytes) -> "Md5Hasher":
        self._processor.update(data)
        return self

    def finalize(self) -> Digest:
        return self._processor.finalize()

    @classmethod
    def hash(cls, reader: BinaryIO, chunk_size: int = READ_CHUNK_SIZE) -> Digest:
        """
        Hash everything that can be read from ``reader``.

        Args:
            reader: Object with a ``read(size)`` method returning bytes
            chunk_size: Number of bytes requested per read

        Returns:
            Digest of the full contents.

        Raises:
            ReadError: If the reader raises an OSError, or returns None because
                no data is ready on a non-blocking source
            ValueError: If chunk_size is not positive
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        hasher = cls()
        while True:
            try:
                chunk = reader.read(chunk_size)
            except OSError as exc:
                logger.debug("Read failed after %d bytes", hasher._processor.bytes_consumed)
                raise ReadError(f"Error reading input: {exc}") from exc
            if chunk is None:
                raise ReadError(
                    "Error reading input: reader returned None (non-blocking source with no data ready)"
                )
            if not chunk:
                break
            hasher.update(chunk)
        return hasher.finalize()

    @classmethod
    def hash_bytes(cls, data: bytes) -> Digest:
        return cls().update(data).finalize()

    @classmethod
    def hash_text(cls, text: str, encoding: str = "utf-8") -> Digest:
        return cls.hash_bytes(text.encode(encoding))


def md5(data: bytes = b"") -> Md5Hasher:
    """Convenience constructor matching hashlib-style usage."""
    hasher = Md5Hasher()
    if data:
        hasher.update(data)
    return hasher


def hash_bytes(data: bytes) -> Digest:
    return Md5Hasher.hash_bytes(data)


def hash_text(text: str, encoding: str = "utf-8") -> Digest:
    return Md5Hasher.hash_text(text, encoding=encoding)


def hash_from_reader(reader: BinaryIO, chunk_size: int = READ_CHUNK_SIZE) -> Digest:
    return Md5Hasher.hash(reader, chunk_size=chunk_size)


def hash_file(path: PathLike, chunk_size: int = READ_CHUNK_SIZE) -> Digest:
    """
    Hash the contents of the file at ``path``.

    Raises:
        ReadError: If the file cannot be opened or read
    """
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise ReadError(f"Error opening {path}: {exc}") from exc
    with handle:
        return hash_from_reader(handle, chunk_size=chunk_size)


__all__ = [
    "Md5Hasher",
    "md5",
    "hash_bytes",
    "hash_text",
    "hash_from_reader",
    "hash_file",
]
