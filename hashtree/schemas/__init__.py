"""
Shared schemas for hashtree.

Currently holds the error taxonomy: Pydantic error models for reporting
and exceptions for control flow.
"""

from .errors import (
    ErrorCodes,
    ErrorReport,
    ProofMismatch,
    HashtreeException,
    HashError,
    TreeSealedError,
    ProofVerificationError,
)

__all__ = [
    "ErrorCodes",
    "ErrorReport",
    "ProofMismatch",
    "HashtreeException",
    "HashError",
    "TreeSealedError",
    "ProofVerificationError",
]
