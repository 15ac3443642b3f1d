"""
Module 02 - Hashing Unit Tests
Tests for hashtree/crypto/digest.py and hashtree/crypto/hashing.py

Tests:
- Digest validation, equality, no ordering, hex form
- hash_leaf over text and bytes
- combine_digests order sensitivity and variadic form
- HashError when the digest engine misbehaves
"""
import hashlib

import pytest

from hashtree.crypto import hashing
from hashtree.crypto.digest import DIGEST_SIZE, Digest
from hashtree.crypto.hashing import (
    sha256,
    value_to_bytes,
    hash_leaf,
    combine_digests,
    to_hex,
    from_hex,
)
from hashtree.schemas.errors import ErrorCodes, HashError


class TestDigest:
    """Tests for the Digest value type."""

    def test_requires_32_bytes(self):
        """Digests of the wrong size are rejected."""
        with pytest.raises(ValueError, match="32 bytes"):
            Digest(b"\x00" * 31)

        with pytest.raises(ValueError):
            Digest(b"\x00" * 33)

    def test_requires_bytes(self):
        """Non-bytes input is rejected."""
        with pytest.raises(TypeError):
            Digest("00" * 32)

    def test_equality_is_bytewise(self):
        """Digests compare equal iff their bytes are equal."""
        a = Digest(b"\x01" * DIGEST_SIZE)
        b = Digest(b"\x01" * DIGEST_SIZE)
        c = Digest(b"\x02" * DIGEST_SIZE)

        assert a == b
        assert a != c
        assert hash(a) == hash(b)

    def test_no_ordering(self):
        """Digests have equality only, no ordering."""
        a = Digest(b"\x01" * DIGEST_SIZE)
        b = Digest(b"\x02" * DIGEST_SIZE)

        with pytest.raises(TypeError):
            a < b  # noqa: B015

    def test_immutable(self):
        """Digest bytes cannot be reassigned."""
        d = Digest(b"\x00" * DIGEST_SIZE)

        with pytest.raises(AttributeError):
            d.raw = b"\x01" * DIGEST_SIZE

    def test_text_form_is_lowercase_hex(self):
        """str() and hex() give lowercase hex without a prefix."""
        d = Digest(bytes(range(32)))

        assert str(d) == bytes(range(32)).hex()
        assert d.hex() == str(d)
        assert bytes(d) == bytes(range(32))
        assert not str(d).startswith("0x")

    def test_from_hex(self):
        """from_hex decodes 64 hex characters."""
        d = Digest.from_hex("ab" * 32)

        assert d.raw == b"\xab" * 32

    def test_from_hex_rejects_bad_input(self):
        """Wrong length or non-hex characters are rejected."""
        with pytest.raises(ValueError):
            Digest.from_hex("ab" * 31)

        with pytest.raises(ValueError):
            Digest.from_hex("zz" * 32)

        with pytest.raises(ValueError):
            Digest.from_hex("0x" + "ab" * 32)


class TestSha256:
    """Tests for sha256() helper."""

    def test_sha256_known_value(self):
        """sha256 produces the known digest of "hello"."""
        result = sha256(b"hello")

        assert result.hex() == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )
        assert len(result) == 32


class TestHashLeaf:
    """Tests for hash_leaf()."""

    def test_hash_leaf_is_sha256_of_value(self):
        """Leaf digest is plain SHA-256 of the UTF-8 bytes."""
        result = hash_leaf("R1")

        assert isinstance(result, Digest)
        assert result.raw == hashlib.sha256(b"R1").digest()

    def test_text_and_bytes_agree(self):
        """Text is hashed as its UTF-8 encoding."""
        assert hash_leaf("héllo") == hash_leaf("héllo".encode("utf-8"))
        assert hash_leaf(bytearray(b"abc")) == hash_leaf(b"abc")

    def test_empty_value(self):
        """Empty input hashes normally."""
        assert hash_leaf("").raw == hashlib.sha256(b"").digest()

    def test_deterministic(self):
        """Same value, same digest."""
        assert hash_leaf("data") == hash_leaf("data")
        assert hash_leaf("data") != hash_leaf("date")

    def test_rejects_other_types(self):
        """Only text and bytes-like values are accepted."""
        with pytest.raises(TypeError):
            hash_leaf(42)

        with pytest.raises(TypeError):
            value_to_bytes(None)


class TestCombineDigests:
    """Tests for combine_digests()."""

    def test_combine_is_sha256_of_concatenation(self):
        """combine(a, b) == sha256(a || b)."""
        a = hash_leaf("a")
        b = hash_leaf("b")

        assert combine_digests(a, b).raw == sha256(a.raw + b.raw)

    def test_order_matters(self):
        """combine(a, b) != combine(b, a) for a != b."""
        a = hash_leaf("a")
        b = hash_leaf("b")

        assert combine_digests(a, b) != combine_digests(b, a)

    def test_equal_inputs_commute(self):
        """The degenerate case a == b is symmetric."""
        a = hash_leaf("same")

        assert combine_digests(a, a) == combine_digests(a, a)

    def test_variadic(self):
        """More than two digests are concatenated in argument order."""
        a, b, c = hash_leaf("a"), hash_leaf("b"), hash_leaf("c")

        assert combine_digests(a, b, c).raw == sha256(a.raw + b.raw + c.raw)
        assert combine_digests(a).raw == sha256(a.raw)

    def test_requires_at_least_one(self):
        """Zero digests cannot be combined."""
        with pytest.raises(ValueError):
            combine_digests()

    def test_rejects_raw_bytes(self):
        """Arguments must be Digest values."""
        with pytest.raises(TypeError):
            combine_digests(hash_leaf("a"), b"\x00" * 32)


class TestHashError:
    """Tests for the digest engine sanity check."""

    class _ShortEngine:
        def update(self, data):
            pass

        def digest(self):
            return b"\x00" * 16

    def test_short_digest_raises_hash_error(self, monkeypatch):
        """A digest of the wrong size is reported as HashError."""
        monkeypatch.setattr(hashing.hashlib, "sha256", lambda: self._ShortEngine())

        with pytest.raises(HashError) as exc_info:
            hash_leaf("R1")

        assert exc_info.value.code == ErrorCodes.HASH_FAILURE
        assert exc_info.value.retryable is False

    def test_combine_raises_hash_error(self, monkeypatch):
        """combine_digests surfaces the same fault."""
        a = hash_leaf("a")
        monkeypatch.setattr(hashing.hashlib, "sha256", lambda: self._ShortEngine())

        with pytest.raises(HashError):
            combine_digests(a, a)


class TestHex:
    """Tests for to_hex() / from_hex()."""

    def test_to_hex(self):
        """to_hex gives 64 lowercase hex characters."""
        text = to_hex(hash_leaf("R1"))

        assert len(text) == 64
        assert text == text.lower()

    def test_from_hex_strips_whitespace(self):
        """Surrounding whitespace is ignored."""
        d = hash_leaf("R1")

        assert from_hex(f"  {d.hex()}\n") == d
