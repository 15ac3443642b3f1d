"""
Core cryptographic utilities.

Module 02 provides the Digest type and the two hashing primitives
used by the Merkle tree: hash_leaf and combine_digests.
"""
from .digest import (
    DIGEST_SIZE,
    Digest,
)
from .hashing import (
    LeafValue,
    sha256,
    value_to_bytes,
    hash_leaf,
    combine_digests,
    to_hex,
    from_hex,
)

__all__ = [
    "DIGEST_SIZE",
    "Digest",
    "LeafValue",
    "sha256",
    "value_to_bytes",
    "hash_leaf",
    "combine_digests",
    "to_hex",
    "from_hex",
]
