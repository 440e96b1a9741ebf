import pytest

from ya_md5 import Digest, InvalidBlockSize
from ya_md5.block import BLOCK_SIZE, Block
from ya_md5.conversions import (
    bytes_to_word,
    bytes_to_words,
    length_to_bytes,
    word_to_bytes,
)


def test_bytes_to_word_is_little_endian():
    assert bytes_to_word(b"\xff\xff\xff\xff") == 0xFFFFFFFF
    assert bytes_to_word(b"\x00\x00\xff\xff") == 0xFFFF0000
    assert bytes_to_word(b"\x67\x45\x23\x01") == 0x01234567


def test_word_to_bytes_inverts_and_masks():
    assert word_to_bytes(0x01234567) == b"\x67\x45\x23\x01"
    assert word_to_bytes(0x1_0000_0001) == b"\x01\x00\x00\x00"


def test_length_to_bytes():
    assert length_to_bytes(0xFFFFFFFFFFFFFFFF) == b"\xff" * 8
    assert length_to_bytes(0xFFFFFFFF00000000) == b"\x00\x00\x00\x00\xff\xff\xff\xff"
    assert length_to_bytes(0x0123456789ABCDEF) == bytes(
        [0xEF, 0xCD, 0xAB, 0x89, 0x67, 0x45, 0x23, 0x01]
    )
    # Truncated modulo 2**64
    assert length_to_bytes(2**64 + 8) == length_to_bytes(8)


def test_bytes_to_words_matches_per_word_unpack():
    data = bytes(range(64))
    words = bytes_to_words(data)
    assert len(words) == 16
    assert list(words) == [bytes_to_word(data[i : i + 4]) for i in range(0, 64, 4)]


def test_block_requires_exact_size():
    for size in (0, 1, 63, 65, 128):
        with pytest.raises(InvalidBlockSize) as excinfo:
            Block.from_exact_slice(b"\x00" * size)
        assert excinfo.value.size == size
    # InvalidBlockSize is also a ValueError
    with pytest.raises(ValueError):
        Block(b"short")


def test_block_rejects_non_bytes():
    with pytest.raises(TypeError):
        Block.from_exact_slice("x" * 64)  # type: ignore


def test_block_zero_and_views():
    zero = Block.zero()
    assert zero.as_bytes() == bytes(BLOCK_SIZE)
    assert zero.words() == (0,) * 16
    block = Block.from_exact_slice(bytearray(b"\x01" + b"\x00" * 63))
    assert block.as_bytes()[0] == 1
    assert block.words()[0] == 1
    assert block == Block.from_exact_slice(b"\x01" + b"\x00" * 63)


def test_digest_encodings():
    digest = Digest(bytes.fromhex("900150983cd24fb0d6963f7d28e17f72"))
    assert digest.hexdigest() == "900150983cd24fb0d6963f7d28e17f72"
    assert str(digest) == digest.hexdigest()
    assert digest.intdigest() == int("900150983cd24fb0d6963f7d28e17f72", 16)
    assert digest.digest()[0] == 0x90


def test_digest_from_hex():
    digest = Digest.from_hex("900150983CD24FB0D6963F7D28E17F72")
    assert digest == Digest(bytes.fromhex("900150983cd24fb0d6963f7d28e17f72"))
    with pytest.raises(ValueError):
        Digest.from_hex("abc")
    with pytest.raises(ValueError):
        Digest.from_hex("zz" * 16)


def test_digest_requires_sixteen_bytes():
    with pytest.raises(ValueError):
        Digest(b"\x00" * 15)
