"""
CLI Build Command

Collect values, build a Merkle tree over them, and print the root.

Values are gathered in this order:
- positional arguments
- lines of --file (one value per line)
- lines of stdin when --stdin is given

Blank lines in files and on stdin are skipped.

Usage:
    hashtree build R1 R2 R3 [--print] [--json]
    hashtree build --file values.txt
    cat values.txt | hashtree build --stdin
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Iterable, TextIO

from hashtree.merkle import MerkleTree, render_tree


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


@dataclass
class BuildSummary:
    """Summary of a tree build for CLI output."""
    root: str = ""
    value_count: int = 0
    leaf_count: int = 0
    depth: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _read_lines(stream: TextIO) -> list[str]:
    return [line.rstrip("\r\n") for line in stream if line.strip()]


def collect_values(
    values: Iterable[str] | None = None,
    file: str | None = None,
    stdin: TextIO | None = None,
) -> list[str]:
    """Gather input values from arguments, a file, and stdin."""
    collected = list(values or [])

    if file:
        path = Path(file)
        if not path.exists():
            raise FileNotFoundError(f"Values file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            collected.extend(_read_lines(f))

    if stdin is not None:
        collected.extend(_read_lines(stdin))

    return collected


def build_cmd(args: Namespace) -> int:
    """Handle build command."""
    config = args.cli_config

    values = collect_values(
        values=args.values,
        file=args.file,
        stdin=sys.stdin if args.stdin else None,
    )
    if not values:
        print("Error: no values to build a tree from", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    logger.info(f"Building tree over {len(values)} value(s)")
    tree = MerkleTree(config.tree).insert(*values)
    root = tree.build()

    summary = BuildSummary(
        root=root.digest.hex(),
        value_count=len(tree),
        leaf_count=len(tree.leaves),
        depth=tree.depth,
    )

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        if args.print:
            print(render_tree(root, config.render))
        print(summary.root)

    return EXIT_SUCCESS
