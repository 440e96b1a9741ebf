from __future__ import annotations


class Md5Error(Exception):
    """Base class for every error raised by ya_md5."""


class InvalidBlockSize(Md5Error, ValueError):
    """A block was built from anything other than exactly 64 bytes."""

    def __init__(self, size: int):
        super().__init__(f"block must be exactly 64 bytes, got {size}")
        self.size = size


class AlreadyFinalized(Md5Error, RuntimeError):
    """The hasher was used after finalize()."""


class ReadError(Md5Error, OSError):
    """Reading from the input source failed."""


__all__ = ["Md5Error", "InvalidBlockSize", "AlreadyFinalized", "ReadError"]
