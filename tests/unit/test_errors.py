"""
Tests for hashtree/schemas/errors.py
"""
from hashtree.schemas.errors import (
    ErrorCodes,
    ErrorReport,
    HashError,
    HashtreeException,
    ProofVerificationError,
    TreeSealedError,
)


class TestExceptions:
    """Exceptions carry structured error information."""

    def test_hash_error(self):
        exc = HashError("engine fault", details={"source_size": 2})

        assert isinstance(exc, HashtreeException)
        assert exc.code == ErrorCodes.HASH_FAILURE
        assert exc.details == {"source_size": 2}
        assert str(exc) == "engine fault"

    def test_tree_sealed_default_message(self):
        exc = TreeSealedError()

        assert exc.code == ErrorCodes.TREE_SEALED
        assert "already built" in exc.message

    def test_proof_verification_error_details(self):
        exc = ProofVerificationError("bad proof", leaf_index=3)

        assert exc.details["leaf_index"] == 3
        assert exc.code == ErrorCodes.PROOF_INVALID

    def test_to_error_model(self):
        """Exceptions convert to ErrorReport models."""
        model = HashError("engine fault").to_error_model()

        assert isinstance(model, ErrorReport)
        assert model.code == ErrorCodes.HASH_FAILURE
        assert model.retryable is False

    def test_repr(self):
        assert repr(TreeSealedError("sealed")) == (
            "TreeSealedError(code='TREE_SEALED', message='sealed')"
        )


class TestErrorReport:
    """ErrorReport round trip to exceptions."""

    def test_to_exception(self):
        report = ErrorReport(code="X", message="boom", details={"k": 1})
        exc = report.to_exception()

        assert isinstance(exc, HashtreeException)
        assert exc.code == "X"
        assert exc.details == {"k": 1}

    def test_serializes(self):
        report = ErrorReport(code=ErrorCodes.HASH_FAILURE, message="boom")

        assert report.model_dump()["code"] == "HASH_FAILURE"
