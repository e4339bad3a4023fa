"""Tests for SHA-2 digests."""
import pytest

from playground.analyzers.digest import DigestCalculator
from playground.core.models import DigestAlgorithm

ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
ABC_SHA512 = (
    "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
    "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
)


class TestDigestCalculator:

    def test_sha256_known_vector(self):
        result = DigestCalculator().compute("abc")
        assert result.algorithm is DigestAlgorithm.SHA256
        assert result.hex_digest == ABC_SHA256
        assert result.bit_length == 256

    def test_sha512_by_name(self):
        result = DigestCalculator().compute("abc", "SHA-512")
        assert result.hex_digest == ABC_SHA512
        assert result.bit_length == 512

    def test_unicode_is_utf8_encoded(self):
        result = DigestCalculator().compute("héllo")
        assert len(result.hex_digest) == 64
        assert result.hex_digest == result.hex_digest.lower()

    def test_unsupported_algorithm(self):
        with pytest.raises(ValueError):
            DigestCalculator().compute("abc", "MD5")
