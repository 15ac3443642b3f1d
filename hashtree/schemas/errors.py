"""
Module 01 - Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy for hashtree.
Defines both Pydantic models for structured error reporting
and Python exceptions for control flow.

A proof that does not verify is ordinary data (ProofMismatch), not an
exception. Only digest engine faults and misuse of a sealed tree raise.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across hashtree."""

    # Hashing Errors
    HASH_FAILURE = "HASH_FAILURE"
    INVALID_DIGEST = "INVALID_DIGEST"

    # Tree Lifecycle Errors
    TREE_SEALED = "TREE_SEALED"

    # Proof Errors
    ROOT_MISMATCH = "ROOT_MISMATCH"
    PROOF_INVALID = "PROOF_INVALID"


# =============================================================================
# Pydantic Error Models (Structured Reporting)
# =============================================================================

class ErrorReport(BaseModel):
    """
    Base error model for structured error reporting.

    Used to hand failures back to callers without raising, so they can
    be inspected, logged, or serialized.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.ROOT_MISMATCH],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "HashtreeException":
        """Convert this error model to a raisable exception."""
        return HashtreeException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


class ProofMismatch(ErrorReport):
    """Error model for an inclusion proof whose recomputed root differs."""

    code: str = Field(default=ErrorCodes.ROOT_MISMATCH)
    message: str = Field(
        default="hashes do not match, verification of the proof failed",
    )
    expected_root: str = Field(
        ...,
        description="Root digest the proof was checked against (hex)",
    )
    computed_root: str = Field(
        ...,
        description="Root digest recomputed from the proof (hex)",
    )
    leaf_index: int = Field(
        ...,
        ge=0,
        description="Leaf index the proof was walked with",
    )
    path_length: int = Field(
        default=0,
        ge=0,
        description="Number of sibling digests in the proof path",
    )

    def to_exception(self) -> "ProofVerificationError":
        """Convert this mismatch into a raisable ProofVerificationError."""
        return ProofVerificationError(
            message=self.message,
            leaf_index=self.leaf_index,
            details={
                "expected_root": self.expected_root,
                "computed_root": self.computed_root,
                "path_length": self.path_length,
                **self.details,
            },
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class HashtreeException(Exception):
    """
    Base exception for all hashtree errors.

    This exception carries structured error information and can be
    converted to/from ErrorReport models.
    """

    def __init__(
        self,
        message: str,
        code: str = "HASHTREE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> ErrorReport:
        """Convert this exception to an ErrorReport model."""
        return ErrorReport(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class HashError(HashtreeException):
    """
    Raised when the digest engine misbehaves.

    Signals a corrupted environment rather than bad input, so it is
    never retryable.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.HASH_FAILURE,
            details=details,
            retryable=False,
        )


class TreeSealedError(HashtreeException):
    """Raised when values are inserted into a tree that was already built."""

    def __init__(
        self,
        message: str = "tree is already built; create a new tree for new values",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.TREE_SEALED,
            details=details,
            retryable=False,
        )


class ProofVerificationError(HashtreeException):
    """Exception raised when a caller chooses to treat a mismatch as fatal."""

    def __init__(
        self,
        message: str,
        leaf_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if leaf_index is not None:
            full_details["leaf_index"] = leaf_index
        super().__init__(
            message=message,
            code=ErrorCodes.PROOF_INVALID,
            details=full_details,
            retryable=False,
        )
