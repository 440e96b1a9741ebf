"""
Streaming MD5 (RFC 1321) message digest in pure Python.
"""

import logging

from .digest import Digest
from .errors import AlreadyFinalized, InvalidBlockSize, Md5Error, ReadError
from .hasher import (
    Md5Hasher,
    hash_bytes,
    hash_file,
    hash_from_reader,
    hash_text,
    md5,
)
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Digest",
    "Md5Hasher",
    "md5",
    "hash_bytes",
    "hash_text",
    "hash_from_reader",
    "hash_file",
    "Md5Error",
    "InvalidBlockSize",
    "AlreadyFinalized",
    "ReadError",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
]
