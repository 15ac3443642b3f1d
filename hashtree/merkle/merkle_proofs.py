"""
Module 03 - Merkle Proof Verification
Recomputes a root from a leaf digest and its sibling path.

This module provides:
- verify_proof: walk a sibling path and compare against an expected root
- check_proof: same walk, reporting a mismatch as a ProofMismatch model
- InclusionProof: the proof tuple as one value, with a hex JSON form
- MerkleVerifier: static convenience wrappers

Nothing here needs a live MerkleTree. Proof material may come from
anywhere, for example another process or the network.

Verification Algorithm:
1. Start with result = leaf digest, idx = leaf index
2. For each sibling, lowest level first:
   - idx even: result = combine(result, sibling)   (we are the left child)
   - idx odd:  result = combine(sibling, result)   (we are the right child)
   - idx = idx // 2
3. Accept iff result == expected root
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, NamedTuple, Optional, Sequence

from hashtree.crypto.digest import Digest
from hashtree.crypto.hashing import LeafValue, combine_digests, hash_leaf
from hashtree.schemas.errors import ProofMismatch


logger = logging.getLogger(__name__)


class ProofResult(NamedTuple):
    """Outcome of a proof walk: the recomputed root and whether it matched."""
    computed_root: Digest
    ok: bool


def compute_proof_root(
    leaf_digest: Digest,
    sibling_path: Sequence[Digest],
    leaf_index: int,
) -> Digest:
    """
    Recompute the root implied by a leaf digest and its sibling path.

    Raises:
        ValueError: If leaf_index is negative
    """
    if leaf_index < 0:
        raise ValueError(f"Leaf index must be non-negative, got {leaf_index}")

    result = leaf_digest
    index = leaf_index
    for sibling in sibling_path:
        if index % 2 == 0:
            result = combine_digests(result, sibling)
        else:
            result = combine_digests(sibling, result)
        index //= 2

    return result


def verify_proof(
    expected_root: Digest,
    leaf_digest: Digest,
    sibling_path: Sequence[Digest],
    leaf_index: int,
) -> ProofResult:
    """
    Verify an inclusion proof against a known root.

    A mismatch is not an error: the result carries ok=False together with
    the digest that was computed, so callers can inspect it.

    Args:
        expected_root: Root digest the leaf should be included under
        leaf_digest: Digest of the leaf being proven
        sibling_path: Sibling digests from the leaf level up to the root
        leaf_index: 0-based position of the leaf in the padded leaf layout

    Returns:
        ProofResult(computed_root, ok)

    Raises:
        ValueError: If leaf_index is negative
    """
    computed = compute_proof_root(leaf_digest, sibling_path, leaf_index)
    ok = computed == expected_root
    if not ok:
        logger.debug(
            f"Proof mismatch at index {leaf_index}: "
            f"expected {expected_root.hex()[:16]}, computed {computed.hex()[:16]}"
        )
    return ProofResult(computed_root=computed, ok=ok)


def check_proof(
    expected_root: Digest,
    leaf_digest: Digest,
    sibling_path: Sequence[Digest],
    leaf_index: int,
) -> Optional[ProofMismatch]:
    """
    Verify a proof, describing any failure as a ProofMismatch.

    Returns:
        None if the proof holds, otherwise a ProofMismatch report
    """
    computed, ok = verify_proof(expected_root, leaf_digest, sibling_path, leaf_index)
    if ok:
        return None
    return ProofMismatch(
        expected_root=expected_root.hex(),
        computed_root=computed.hex(),
        leaf_index=leaf_index,
        path_length=len(sibling_path),
    )


@dataclass(frozen=True)
class InclusionProof:
    """
    A complete inclusion proof for one leaf.

    Attributes:
        root: The root digest this proof is against
        leaf: Digest of the leaf being proven
        siblings: Sibling digests from bottom to top of the tree
        index: 0-based position of the leaf in the padded leaf layout
    """
    root: Digest
    leaf: Digest
    siblings: tuple[Digest, ...]
    index: int

    def __post_init__(self) -> None:
        """Validate proof structure."""
        if self.index < 0:
            raise ValueError(f"Leaf index must be non-negative, got {self.index}")
        if not isinstance(self.siblings, tuple):
            object.__setattr__(self, "siblings", tuple(self.siblings))

    def verify(self) -> ProofResult:
        return verify_proof(self.root, self.leaf, self.siblings, self.index)

    def check(self) -> Optional[ProofMismatch]:
        return check_proof(self.root, self.leaf, self.siblings, self.index)

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": self.root.hex(),
            "leaf": self.leaf.hex(),
            "siblings": [s.hex() for s in self.siblings],
            "index": self.index,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InclusionProof":
        """
        Decode a proof from its hex JSON form.

        Raises:
            KeyError: If a required field is missing
            ValueError: If a digest is malformed or the index is invalid
        """
        index = data["index"]
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(f"Proof index must be an integer, got {index!r}")
        return cls(
            root=Digest.from_hex(data["root"]),
            leaf=Digest.from_hex(data["leaf"]),
            siblings=tuple(Digest.from_hex(s) for s in data.get("siblings", [])),
            index=index,
        )


class MerkleVerifier:
    """
    Convenience class for verifying inclusion proofs.

    Example:
        >>> MerkleVerifier.verify_value(root, "R1", [h_r2, right_branch], 0)
        True
    """

    @staticmethod
    def verify(proof: InclusionProof) -> bool:
        """
        Verify an InclusionProof.

        Returns:
            True if the proof is valid, False otherwise
        """
        return proof.verify().ok

    @staticmethod
    def verify_value(
        root: Digest,
        value: LeafValue,
        siblings: Sequence[Digest],
        index: int,
    ) -> bool:
        """
        Verify a raw value is included under root.

        The value is hashed with hash_leaf to produce the leaf digest.
        """
        return verify_proof(root, hash_leaf(value), siblings, index).ok


__all__ = [
    "ProofResult",
    "InclusionProof",
    "MerkleVerifier",
    "compute_proof_root",
    "verify_proof",
    "check_proof",
]
