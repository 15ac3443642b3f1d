"""
Module 03 - Tree Printing
Depth-first, indented text rendering of a built tree for debugging.

Each node is one line: "<pad> <digest hex> [<informational value>]",
where pad grows by one indent unit per level. Proof verification never
depends on this output.
"""
from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

from hashtree.config.runtime import RenderConfig, get_default_config
from hashtree.merkle.merkle_tree import Branch, MerkleTree, Node


def iter_tree_lines(
    root: Optional[Node],
    config: Optional[RenderConfig] = None,
) -> Iterator[str]:
    """Yield one formatted line per node, root first, left before right."""
    if root is None:
        return
    config = config or get_default_config().render

    stack: list[tuple[Node, str]] = [(root, "")]
    while stack:
        node, pad = stack.pop()
        line = f"{pad} {node.digest.hex()}"
        if config.show_values:
            line += f" [{node.label}]"
        yield line

        if isinstance(node, Branch):
            child_pad = pad + config.indent
            stack.append((node.right, child_pad))
            stack.append((node.left, child_pad))


def render_tree(
    root: Optional[Node],
    config: Optional[RenderConfig] = None,
) -> str:
    """Render a tree to a string; an empty tree renders as ""."""
    return "\n".join(iter_tree_lines(root, config))


def print_tree(
    tree: MerkleTree,
    file: Optional[TextIO] = None,
    config: Optional[RenderConfig] = None,
) -> None:
    """Print a built tree with indentation. Prints nothing if unbuilt."""
    out = file or sys.stdout
    for line in iter_tree_lines(tree.root, config):
        print(line, file=out)


__all__ = [
    "iter_tree_lines",
    "render_tree",
    "print_tree",
]
