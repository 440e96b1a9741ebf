from __future__ import annotations

from dataclasses import dataclass

DIGEST_SIZE = 16


@dataclass(frozen=True)
class Digest:
    """The finished 128-bit MD5 value."""

    _digest: bytes

    def __post_init__(self) -> None:
        if len(self._digest) != DIGEST_SIZE:
            raise ValueError(
                f"MD5 digest must be exactly {DIGEST_SIZE} bytes, got {len(self._digest)}"
            )

    @classmethod
    def from_hex(cls, text: str) -> "Digest":
        """Parse a 32-character hex digest, as printed by md5sum."""
        if len(text) != DIGEST_SIZE * 2:
            raise ValueError(f"expected {DIGEST_SIZE * 2} hex characters, got {len(text)}")
        return cls(bytes.fromhex(text))

    def __str__(self) -> str:
        return self.hexdigest()

    def digest(self) -> bytes:
        return self._digest

    def hexdigest(self) -> str:
        return self._digest.hex()

    def intdigest(self) -> int:
        return int.from_bytes(self._digest, byteorder="big", signed=False)


__all__ = ["DIGEST_SIZE", "Digest"]
