"""
CLI Hash Command

Print the leaf digest of a single value.

Usage:
    hashtree hash R1 [--json]
"""

from __future__ import annotations

import json
from argparse import Namespace

from hashtree.crypto.hashing import hash_leaf


EXIT_SUCCESS = 0


def hash_cmd(args: Namespace) -> int:
    """Handle hash command."""
    digest = hash_leaf(args.value)
    if args.json:
        print(json.dumps({"value": args.value, "digest": digest.hex()}, indent=2))
    else:
        print(digest.hex())
    return EXIT_SUCCESS
