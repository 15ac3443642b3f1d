"""
hashtree - binary Merkle trees over ordered values.

Builds a Merkle tree over a batch of text or bytes values and verifies
inclusion proofs against a known root digest.
"""

__version__ = "0.1.0"
