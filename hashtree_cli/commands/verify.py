"""
CLI Verify Command

Verify an inclusion proof offline against a known root digest.

The proof is given either as a JSON file:
    {"root": "<hex>", "leaf": "<hex>", "siblings": ["<hex>", ...], "index": 0}
or piecewise on the command line.

Usage:
    hashtree verify --proof proof.json [--json]
    hashtree verify --root HEX --leaf HEX --sibling HEX --sibling HEX --index 0
    hashtree verify --root HEX --leaf-value R1 --sibling HEX --index 0
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any

from hashtree.crypto.hashing import from_hex, hash_leaf
from hashtree.merkle import InclusionProof


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class VerifySummary:
    """Summary of proof verification for CLI output."""
    ok: bool = False
    expected_root: str = ""
    computed_root: str = ""
    leaf: str = ""
    index: int = 0
    path_length: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_proof_file(path: Path) -> InclusionProof:
    """Load an InclusionProof from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Proof file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return InclusionProof.from_dict(data)


def proof_from_args(args: Namespace) -> InclusionProof:
    """Assemble an InclusionProof from command-line arguments."""
    if args.proof:
        return load_proof_file(Path(args.proof))

    if not args.root:
        raise ValueError("--root is required when --proof is not given")
    if args.index is None:
        raise ValueError("--index is required when --proof is not given")
    if args.leaf:
        leaf = from_hex(args.leaf)
    elif args.leaf_value is not None:
        leaf = hash_leaf(args.leaf_value)
    else:
        raise ValueError("one of --leaf or --leaf-value is required")

    return InclusionProof(
        root=from_hex(args.root),
        leaf=leaf,
        siblings=tuple(from_hex(s) for s in args.sibling or []),
        index=args.index,
    )


def verify_cmd(args: Namespace) -> int:
    """Handle verify command."""
    try:
        proof = proof_from_args(args)
    except (ValueError, KeyError, FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Error: invalid proof: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    logger.info(f"Verifying proof for leaf index {proof.index} ({len(proof.siblings)} siblings)")
    computed, ok = proof.verify()

    summary = VerifySummary(
        ok=ok,
        expected_root=proof.root.hex(),
        computed_root=computed.hex(),
        leaf=proof.leaf.hex(),
        index=proof.index,
        path_length=len(proof.siblings),
    )

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    elif ok:
        print(f"OK: proof verified against root {summary.expected_root}")
    else:
        print("FAILED: hashes do not match, verification of the proof failed")
        print(f"  expected: {summary.expected_root}")
        print(f"  computed: {summary.computed_root}")

    return EXIT_SUCCESS if ok else EXIT_VERIFICATION_FAILED
