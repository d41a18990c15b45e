"""
Unit tests for the Algorithm selector.

Tests verify:
- Every algorithm matches hashlib on the same input, in all three views
- bytes, bytearray and str inputs give the same digest
- Digest sizes per algorithm, including empty input
- Name parsing and verification helpers
"""

import hashlib

import pytest

from hashkit import Algorithm, Digest, HashContext, UnknownAlgorithmError

DATA_TO_DIGEST = b"Hello, World!"

EXPECTED_SIZES = {
    Algorithm.SHA1: 20,
    Algorithm.SHA256: 32,
    Algorithm.SHA384: 48,
    Algorithm.SHA512: 64,
    Algorithm.SHA512_256: 32,
}


class TestAgainstHashlib:
    """Each algorithm must reproduce hashlib bit for bit."""

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_hash_matches_reference(self, algorithm):
        expected = hashlib.new(algorithm.value, DATA_TO_DIGEST)

        result = algorithm.hash(DATA_TO_DIGEST)

        assert result.as_bytes() == expected.digest()
        assert result.to_vec() == bytearray(expected.digest())
        assert result.to_hex() == expected.hexdigest()

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_context_matches_reference(self, algorithm):
        expected = hashlib.new(algorithm.value, DATA_TO_DIGEST)

        ctx = algorithm.new_context()
        ctx.update(DATA_TO_DIGEST)
        result = ctx.finish()

        assert result.as_bytes() == expected.digest()
        assert result.to_hex() == expected.hexdigest()

    def test_sha256_known_vector(self):
        """SHA-256 of 'Hello, World!' is a well-known value."""
        assert Algorithm.SHA256.hash(DATA_TO_DIGEST).to_hex() == (
            "dffd6021bb2bd5b0af676290809ec3a53191dd81c7f70a4b28688a362182986f"
        )

    def test_sha512_256_is_not_truncated_sha512(self):
        """SHA-512/256 uses its own initial values, not a SHA-512 prefix."""
        full = Algorithm.SHA512.hash(DATA_TO_DIGEST).as_bytes()
        assert Algorithm.SHA512_256.hash(DATA_TO_DIGEST).as_bytes() != full[:32]


class TestInputForms:
    """bytes, owned buffers and strings hash identically."""

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_bytes_vec_and_str_agree(self, algorithm):
        from_bytes = algorithm.hash(DATA_TO_DIGEST)
        from_vec = algorithm.hash_vec(bytearray(DATA_TO_DIGEST))
        from_str = algorithm.hash_str(DATA_TO_DIGEST.decode("utf-8"))

        assert from_bytes == from_vec == from_str

    def test_memoryview_input(self):
        view = memoryview(DATA_TO_DIGEST)
        assert Algorithm.SHA256.hash(view) == Algorithm.SHA256.hash(DATA_TO_DIGEST)

    def test_str_is_utf8_encoded(self):
        text = "héllo ☃"
        assert Algorithm.SHA256.hash_str(text) == Algorithm.SHA256.hash(text.encode("utf-8"))

    def test_hash_is_deterministic(self):
        assert Algorithm.SHA384.hash(b"abc") == Algorithm.SHA384.hash(b"abc")


class TestDigestSizes:
    """Digest length depends only on the algorithm."""

    @pytest.mark.parametrize("algorithm,size", list(EXPECTED_SIZES.items()))
    def test_digest_size_property(self, algorithm, size):
        assert algorithm.digest_size == size
        assert algorithm.hex_length == 2 * size

    @pytest.mark.parametrize("algorithm,size", list(EXPECTED_SIZES.items()))
    @pytest.mark.parametrize("data", [b"", DATA_TO_DIGEST, b"x" * 10_000])
    def test_digest_length(self, algorithm, size, data):
        result = algorithm.hash(data)

        assert len(result.as_bytes()) == size
        assert len(result.to_vec()) == size
        assert len(result.to_hex()) == 2 * size


class TestFactory:
    """Algorithm as a factory for contexts."""

    def test_new_context_is_bound_to_algorithm(self):
        ctx = Algorithm.SHA384.new_context()

        assert isinstance(ctx, HashContext)
        assert ctx.algorithm is Algorithm.SHA384
        assert not ctx.finished

    def test_each_context_is_independent(self):
        first = Algorithm.SHA256.new_context()
        second = Algorithm.SHA256.new_context()

        first.update(b"only in first")

        assert second.finish() == Algorithm.SHA256.hash(b"")
        assert first.finish() == Algorithm.SHA256.hash(b"only in first")

    def test_hash_returns_digest_tagged_with_algorithm(self):
        result = Algorithm.SHA1.hash(b"abc")

        assert isinstance(result, Digest)
        assert result.algorithm is Algorithm.SHA1


class TestFromName:
    """Tests for Algorithm.from_name."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("sha1", Algorithm.SHA1),
            ("SHA-1", Algorithm.SHA1),
            ("sha256", Algorithm.SHA256),
            ("SHA-256", Algorithm.SHA256),
            ("  sha384 ", Algorithm.SHA384),
            ("Sha512", Algorithm.SHA512),
            ("sha512_256", Algorithm.SHA512_256),
            ("sha512/256", Algorithm.SHA512_256),
            ("SHA-512/256", Algorithm.SHA512_256),
            ("sha512-256", Algorithm.SHA512_256),
        ],
    )
    def test_known_names(self, name, expected):
        assert Algorithm.from_name(name) is expected

    @pytest.mark.parametrize("name", ["md5", "blake3", "sha3_256", ""])
    def test_unknown_name_raises(self, name):
        with pytest.raises(UnknownAlgorithmError) as exc_info:
            Algorithm.from_name(name)

        assert exc_info.value.context["name"] == name

    def test_unknown_name_is_value_error(self):
        with pytest.raises(ValueError):
            Algorithm.from_name("whirlpool")

    def test_names_in_declaration_order(self):
        assert Algorithm.names() == ["sha1", "sha256", "sha384", "sha512", "sha512_256"]


class TestVerify:
    """Tests for Algorithm.verify."""

    def test_matching_hex(self):
        expected = hashlib.sha256(DATA_TO_DIGEST).hexdigest()
        assert Algorithm.SHA256.verify(DATA_TO_DIGEST, expected) is True

    def test_uppercase_and_whitespace_ignored(self):
        expected = hashlib.sha1(DATA_TO_DIGEST).hexdigest().upper()
        assert Algorithm.SHA1.verify(DATA_TO_DIGEST, f" {expected}\n") is True

    def test_str_data(self):
        expected = hashlib.sha512(DATA_TO_DIGEST).hexdigest()
        assert Algorithm.SHA512.verify("Hello, World!", expected) is True

    def test_mismatch(self):
        expected = hashlib.sha256(b"something else").hexdigest()
        assert Algorithm.SHA256.verify(DATA_TO_DIGEST, expected) is False

    def test_wrong_algorithm_does_not_match(self):
        expected = hashlib.sha256(DATA_TO_DIGEST).hexdigest()
        assert Algorithm.SHA512_256.verify(DATA_TO_DIGEST, expected) is False
