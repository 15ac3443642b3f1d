"""
Test fixtures package for hashtree tests.

This package provides helpers for building trees and collecting the
sibling paths their inclusion proofs are verified with.

Usage:
    from fixtures import make_built_tree, collect_sibling_path

    def test_something():
        tree = make_built_tree(["a", "b", "c"])
        path = collect_sibling_path(tree.root, position=2)
"""

from .trees import (
    make_values,
    make_built_tree,
    collect_sibling_path,
    reference_root,
    flip_byte,
)

__all__ = [
    "make_values",
    "make_built_tree",
    "collect_sibling_path",
    "reference_root",
    "flip_byte",
]
