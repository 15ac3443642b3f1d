"""
Module 03 - Merkle Tree and Inclusion Proofs
Deterministic Merkle tree construction and proof verification.

This module provides:
- MerkleTree: insert values, build once, read the root
- Leaf / Branch: nodes of a built tree
- verify_proof: recompute a root from a leaf digest and sibling path
- InclusionProof / MerkleVerifier: proof material and convenience checks
- render_tree / print_tree: indented debug printout

Usage:
    from hashtree.crypto import hash_leaf
    from hashtree.merkle import MerkleTree, verify_proof

    tree = MerkleTree().insert("R1", "R2", "R3", "R4")
    root = tree.build()

    computed, ok = verify_proof(
        root.digest,
        hash_leaf("R1"),
        [hash_leaf("R2"), root.right.digest],
        0,
    )
    assert ok
"""
from .merkle_tree import (
    Leaf,
    Branch,
    Node,
    MerkleTree,
    make_leaves,
    assemble,
    build_tree,
    compute_root,
    compute_tree_depth,
    iter_leaf_positions,
)

from .merkle_proofs import (
    ProofResult,
    InclusionProof,
    MerkleVerifier,
    compute_proof_root,
    verify_proof,
    check_proof,
)

from .render import (
    iter_tree_lines,
    render_tree,
    print_tree,
)


__all__ = [
    # Nodes and tree
    "Leaf",
    "Branch",
    "Node",
    "MerkleTree",
    # Construction helpers
    "make_leaves",
    "assemble",
    "build_tree",
    "compute_root",
    "compute_tree_depth",
    "iter_leaf_positions",
    # Proofs
    "ProofResult",
    "InclusionProof",
    "MerkleVerifier",
    "compute_proof_root",
    "verify_proof",
    "check_proof",
    # Printing
    "iter_tree_lines",
    "render_tree",
    "print_tree",
]
