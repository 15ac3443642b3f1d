"""
Module 03 - Merkle Tree Implementation
Deterministic Merkle tree construction over an ordered list of values.

This module provides:
- Leaf / Branch: the two node kinds of a built tree
- MerkleTree: accumulates values, then builds the tree exactly once
- build_tree / compute_root: one-shot helpers over a value list
- compute_tree_depth: number of levels a tree over N values will have

Canonical Commitment Rules (Hard Contracts):
1. Leaf digest: hash_leaf(value)
2. Branch digest: combine_digests(left.digest, right.digest)
3. Leaf padding: an odd value count gets a copy of the last value
   appended. The copy is a second, independent Leaf.
4. Internal padding: an odd-length node sequence gets its last node
   appended again. The duplicate is the same object, not a copy.
5. Pairing: a two-node sequence forms one branch; longer sequences are
   split at the midpoint and each half is built on its own.
6. Empty tree: no root

Determinism Notes:
- Values are never sorted; insertion order is the leaf order
- Both halves of every split have the same length, so all leaves sit
  at the same depth and the tree has a perfect binary layout
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Optional, Sequence, Union

from hashtree.config.runtime import TreeConfig, get_default_config
from hashtree.crypto.digest import Digest
from hashtree.crypto.hashing import LeafValue, combine_digests, hash_leaf
from hashtree.schemas.errors import TreeSealedError


logger = logging.getLogger(__name__)


def _label(value: LeafValue) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="backslashreplace")
    return value


@dataclass(frozen=True, eq=False)
class Leaf:
    """
    A leaf node: one input value and its digest.

    Attributes:
        value: The original input value (text or bytes)
        digest: hash_leaf(value)
        padding: True for the copy appended to even out the leaf count
    """
    value: LeafValue
    digest: Digest
    padding: bool = False

    @classmethod
    def from_value(cls, value: LeafValue) -> "Leaf":
        return cls(value=value, digest=hash_leaf(value))

    def padded_copy(self) -> "Leaf":
        """A second, independent leaf for the same value."""
        return Leaf(value=self.value, digest=self.digest, padding=True)

    @property
    def is_leaf(self) -> bool:
        return True

    @property
    def label(self) -> str:
        return _label(self.value)

    @property
    def children(self) -> tuple:
        return ()


@dataclass(frozen=True, eq=False)
class Branch:
    """
    An internal node with exactly two children.

    The informational value is the children's labels joined by the tree's
    value separator. It is only for printing and debugging.

    Attributes:
        left: Left child
        right: Right child (may be the very same object as left)
        digest: combine_digests(left.digest, right.digest)
        value: Informational label
        duplicated: True when right repeats left to pad an odd count
    """
    left: "Node"
    right: "Node"
    digest: Digest
    value: str
    duplicated: bool = False

    @classmethod
    def from_children(
        cls,
        left: "Node",
        right: "Node",
        separator: str = ";",
    ) -> "Branch":
        duplicated = right is left or (isinstance(right, Leaf) and right.padding)
        return cls(
            left=left,
            right=right,
            digest=combine_digests(left.digest, right.digest),
            value=f"{left.label}{separator}{right.label}",
            duplicated=duplicated,
        )

    @property
    def is_leaf(self) -> bool:
        return False

    @property
    def label(self) -> str:
        return self.value

    @property
    def children(self) -> tuple["Node", "Node"]:
        return (self.left, self.right)


Node = Union[Leaf, Branch]


def make_leaves(values: Sequence[LeafValue]) -> list[Leaf]:
    """
    Create the leaf level for a value list, padding odd counts.

    The input sequence is not modified.
    """
    leaves = [Leaf.from_value(v) for v in values]
    if len(leaves) % 2 == 1:
        leaves.append(leaves[-1].padded_copy())
    return leaves


_EXPAND = 0
_COMBINE = 1


def assemble(nodes: Sequence[Node], separator: str = ";") -> Node:
    """
    Pair nodes into branches until a single root remains.

    Equivalent to the recursive definition (pad odd, pair two, otherwise
    split at the midpoint and recurse on each half) but driven by an
    explicit work stack, so the Python call depth stays constant.

    Raises:
        ValueError: If nodes is empty
    """
    if not nodes:
        raise ValueError("Cannot assemble a tree from zero nodes")

    results: list[Node] = []
    work: list[tuple[int, list[Node]]] = [(_EXPAND, list(nodes))]

    while work:
        op, seq = work.pop()

        if op == _COMBINE:
            right = results.pop()
            left = results.pop()
            results.append(Branch.from_children(left, right, separator))
            continue

        if len(seq) % 2 == 1:
            seq = seq + [seq[-1]]

        if len(seq) == 2:
            results.append(Branch.from_children(seq[0], seq[1], separator))
            continue

        # Left half is pushed last so it completes first.
        mid = len(seq) // 2
        work.append((_COMBINE, []))
        work.append((_EXPAND, seq[mid:]))
        work.append((_EXPAND, seq[:mid]))

    return results[0]


def build_tree(
    values: Sequence[LeafValue],
    separator: str = ";",
) -> Optional[Node]:
    """
    Build a tree over values and return its root.

    Args:
        values: Ordered input values
        separator: Joiner for branch informational values

    Returns:
        Root node, or None for an empty value list
    """
    if len(values) == 0:
        return None
    return assemble(make_leaves(values), separator)


def compute_root(values: Sequence[LeafValue]) -> Optional[Digest]:
    """Root digest of a tree over values, or None if there are none."""
    root = build_tree(values)
    return root.digest if root is not None else None


def compute_tree_depth(num_values: int) -> int:
    """
    Compute the number of levels a tree over num_values will have.

    Levels are counted from the leaf level to the root inclusive. A single
    value is padded to two leaves, so it already yields two levels.

    Args:
        num_values: Number of inserted values

    Returns:
        Tree depth (0 for empty tree)
    """
    if num_values == 0:
        return 0

    depth = 1
    n = num_values + (num_values % 2)
    while n > 1:
        if n % 2 == 1:
            n += 1
        n = n // 2
        depth += 1

    return depth


def iter_leaf_positions(root: Node) -> Iterator[tuple[int, Leaf]]:
    """
    Walk a tree depth-first, left to right, yielding (position, leaf).

    The position of a leaf is read off its path from the root: each step
    to a left child appends a 0 bit and each step right appends a 1. That
    is the index an inclusion proof for the leaf is verified with. A
    subtree that appears twice through internal padding is visited twice,
    once per position.
    """
    stack: list[tuple[Node, int]] = [(root, 0)]
    while stack:
        node, position = stack.pop()
        if isinstance(node, Leaf):
            yield position, node
            continue
        stack.append((node.right, position * 2 + 1))
        stack.append((node.left, position * 2))


class _Snapshot(NamedTuple):
    root: Node
    leaves: tuple[Leaf, ...]


class MerkleTree:
    """
    Accumulates values and builds a Merkle tree over them once.

    Lifecycle: create -> insert() any number of times -> build().
    A build that produces a root seals the tree: later insert() calls
    raise TreeSealedError and later build() calls return the same root.

    insert() and build() are serialized by one lock. The finished root is
    published in a single assignment, so readers see either no tree or a
    complete one.

    Example:
        >>> tree = MerkleTree().insert("R1", "R2", "R3", "R4")
        >>> root = tree.build()
        >>> root.digest == tree.root_digest
        True
    """

    def __init__(self, config: Optional[TreeConfig] = None) -> None:
        self.config = config or get_default_config().tree
        self._lock = threading.Lock()
        self._values: list[LeafValue] = []
        self._snapshot: Optional[_Snapshot] = None

    def insert(self, *values: LeafValue) -> "MerkleTree":
        """
        Append values to the pending list.

        Returns:
            self, so calls can be chained

        Raises:
            TypeError: If a value is neither text nor bytes-like
            TreeSealedError: If the tree was already built
        """
        checked: list[LeafValue] = []
        for value in values:
            if isinstance(value, str):
                checked.append(value)
            elif isinstance(value, (bytes, bytearray, memoryview)):
                checked.append(bytes(value))
            else:
                raise TypeError(
                    f"Tree values must be str or bytes, got {type(value).__name__}"
                )

        with self._lock:
            if self._snapshot is not None:
                logger.warning(
                    f"Rejected insert of {len(checked)} value(s) into a built tree"
                )
                raise TreeSealedError(details={"value_count": len(self._values)})
            self._values.extend(checked)

        return self

    def build(self) -> Optional[Node]:
        """
        Build the tree from the pending values.

        Returns:
            The root node, or None if no values were inserted

        Raises:
            HashError: If hashing fails; the tree is left unbuilt
        """
        with self._lock:
            if self._snapshot is not None:
                logger.debug("Tree already built, returning existing root")
                return self._snapshot.root

            count = len(self._values)
            if count == 0:
                logger.debug("No values inserted, nothing to build")
                return None

            leaves = make_leaves(self._values)
            root = assemble(leaves, self.config.value_separator)

            self._snapshot = _Snapshot(root=root, leaves=tuple(leaves))

        logger.debug(
            f"Built tree over {count} value(s), {len(leaves)} leaves "
            f"(padded={len(leaves) != count}), root={root.digest.hex()[:16]}"
        )
        return root

    @property
    def is_built(self) -> bool:
        return self._snapshot is not None

    @property
    def root(self) -> Optional[Node]:
        snapshot = self._snapshot
        return snapshot.root if snapshot is not None else None

    @property
    def root_digest(self) -> Optional[Digest]:
        snapshot = self._snapshot
        return snapshot.root.digest if snapshot is not None else None

    @property
    def leaves(self) -> tuple[Leaf, ...]:
        """Leaf level of the built tree (post-padding); empty before build."""
        snapshot = self._snapshot
        return snapshot.leaves if snapshot is not None else ()

    @property
    def values(self) -> list[LeafValue]:
        """Copy of the inserted values, without padding."""
        with self._lock:
            return list(self._values)

    @property
    def depth(self) -> int:
        """Levels from leaves to root inclusive; 0 before build."""
        node = self.root
        if node is None:
            return 0
        depth = 1
        while isinstance(node, Branch):
            node = node.left
            depth += 1
        return depth

    def iter_leaves(self) -> Iterator[tuple[int, Leaf]]:
        """Yield (position, leaf) for every leaf slot of the built tree."""
        root = self.root
        if root is None:
            return iter(())
        return iter_leaf_positions(root)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        digest = self.root_digest
        state = f"root={digest.hex()[:16]}" if digest is not None else "unbuilt"
        return f"MerkleTree(values={len(self._values)}, {state})"


__all__ = [
    "Leaf",
    "Branch",
    "Node",
    "MerkleTree",
    "make_leaves",
    "assemble",
    "build_tree",
    "compute_root",
    "compute_tree_depth",
    "iter_leaf_positions",
]
