"""
hashtree CLI

Command-line interface for building Merkle trees and verifying proofs.

Usage:
    python -m hashtree_cli build R1 R2 R3 --print
    python -m hashtree_cli hash R1
    python -m hashtree_cli verify --proof proof.json
"""

__version__ = "0.1.0"
