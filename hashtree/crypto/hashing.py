"""
Module 02 - Hashing Utilities
Leaf hashing and digest combination for Merkle commitments.

This module provides:
- SHA-256 hashing for raw bytes
- hash_leaf: digest of a single text or bytes value
- combine_digests: digest of several digests concatenated in order
- Hex encoding/decoding without prefix

Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = sha256(value_bytes), str values are UTF-8 encoded
2. Combination: parent = sha256(d1 || d2 || ... || dn), order matters
3. The digest engine must consume every byte it is handed; anything else
   is reported as HashError

Security/Determinism Notes:
- No prefixing or domain separation between leaves and branches
- No auto-stripping of whitespace
- All operations are pure and safe to call from any thread
"""
from __future__ import annotations

import hashlib
from typing import Union

from hashtree.crypto.digest import DIGEST_SIZE, Digest
from hashtree.schemas.errors import HashError

LeafValue = Union[str, bytes]


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def _digest(payload: bytes, source_size: int) -> Digest:
    """Run the digest engine over payload and sanity-check what it did."""
    view = memoryview(payload)
    engine = hashlib.sha256()
    engine.update(view)
    written = view.nbytes

    if source_size > 0 and written == 0:
        raise HashError(
            "no bytes written to sha256, but also no error was returned",
            details={"source_size": source_size},
        )

    raw = engine.digest()
    if len(raw) != DIGEST_SIZE:
        raise HashError(
            f"sha256 produced {len(raw)} bytes, expected {DIGEST_SIZE}",
            details={"digest_size": len(raw)},
        )
    return Digest(raw)


def value_to_bytes(value: LeafValue) -> bytes:
    """
    Get the byte representation hashed for a leaf value.

    Raises:
        TypeError: If value is neither text nor bytes-like
    """
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(
        f"Leaf values must be str or bytes, got {type(value).__name__}"
    )


def hash_leaf(value: LeafValue) -> Digest:
    """
    Hash a single leaf value.

    Args:
        value: Text (UTF-8 encoded before hashing) or bytes

    Returns:
        Digest of the value

    Raises:
        TypeError: If value is neither text nor bytes-like
        HashError: If the digest engine fails its sanity check
    """
    data = value_to_bytes(value)
    return _digest(data, len(value))


def combine_digests(*digests: Digest) -> Digest:
    """
    Combine digests into one: sha256(d1 || d2 || ... || dn).

    Argument order is significant, so combine_digests(a, b) differs from
    combine_digests(b, a) unless a == b. Tree construction always passes
    exactly two digests.

    Args:
        digests: One or more digests, in concatenation order

    Returns:
        Digest of the concatenation

    Raises:
        ValueError: If no digests are given
        TypeError: If an argument is not a Digest
        HashError: If the digest engine fails its sanity check
    """
    if not digests:
        raise ValueError("combine_digests requires at least one digest")

    for d in digests:
        if not isinstance(d, Digest):
            raise TypeError(
                f"combine_digests expects Digest arguments, got {type(d).__name__}"
            )

    joined = b"".join(d.raw for d in digests)
    return _digest(joined, len(digests))


def to_hex(digest: Digest) -> str:
    """Render a digest as lowercase hex with no prefix."""
    return digest.raw.hex()


def from_hex(hex_string: str) -> Digest:
    """
    Decode a digest from hex text.

    Leading and trailing whitespace is ignored; a 0x prefix is not accepted.

    Raises:
        ValueError: If the string is not 64 hex characters
    """
    return Digest.from_hex(hex_string.strip())


__all__ = [
    "LeafValue",
    "sha256",
    "value_to_bytes",
    "hash_leaf",
    "combine_digests",
    "to_hex",
    "from_hex",
]
