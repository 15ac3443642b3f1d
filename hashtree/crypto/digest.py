"""
Module 02 - Digest Type
Fixed-size SHA-256 digest value used by every hashing operation.

A Digest is immutable, exactly 32 bytes, and supports equality only.
Its text form is lowercase hex with no prefix.
"""
from __future__ import annotations

from dataclasses import dataclass


DIGEST_SIZE = 32


@dataclass(frozen=True)
class Digest:
    """
    An opaque 32-byte hash value.

    Attributes:
        raw: The digest bytes (exactly DIGEST_SIZE long)

    Example:
        >>> d = Digest.from_hex("00" * 32)
        >>> len(bytes(d))
        32
    """
    raw: bytes

    def __post_init__(self) -> None:
        """Validate digest bytes."""
        if not isinstance(self.raw, bytes):
            raise TypeError(
                f"Digest requires bytes, got {type(self.raw).__name__}"
            )
        if len(self.raw) != DIGEST_SIZE:
            raise ValueError(
                f"Digest must be {DIGEST_SIZE} bytes, got {len(self.raw)}"
            )

    @classmethod
    def from_hex(cls, text: str) -> Digest:
        """
        Decode a digest from its hex text form.

        Args:
            text: 64 hex characters, no prefix

        Returns:
            Decoded Digest

        Raises:
            ValueError: If text is not exactly 64 hex characters
        """
        if len(text) != DIGEST_SIZE * 2:
            raise ValueError(
                f"Digest hex must be {DIGEST_SIZE * 2} characters, got {len(text)}"
            )
        try:
            raw = bytes.fromhex(text)
        except ValueError as e:
            raise ValueError(f"Invalid hex characters in digest: {e}") from e
        return cls(raw)

    def hex(self) -> str:
        return self.raw.hex()

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.raw.hex()

    def __repr__(self) -> str:
        return f"Digest({self.raw.hex()[:16]}...)"


__all__ = [
    "DIGEST_SIZE",
    "Digest",
]
