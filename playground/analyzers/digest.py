"""
Digest Calculator
==================

SHA-256 / SHA-512 digests of text, computed over its UTF-8 encoding and
rendered as lowercase hexadecimal.

References:
    - NIST FIPS 180-4 (2015). Secure Hash Standard (SHS).
"""

from __future__ import annotations

import hashlib

from playground.core.models import DigestAlgorithm, DigestResult

_HASHLIB_NAMES: dict[DigestAlgorithm, str] = {
    DigestAlgorithm.SHA256: "sha256",
    DigestAlgorithm.SHA512: "sha512",
}


class DigestCalculator:
    """Thin wrapper over :mod:`hashlib`."""

    def compute(
        self,
        message: str,
        algorithm: DigestAlgorithm | str = DigestAlgorithm.SHA256,
    ) -> DigestResult:
        """Hash *message* with *algorithm* (``"SHA-256"`` or ``"SHA-512"``).

        Raises:
            ValueError: If *algorithm* is not a supported name.
        """
        algorithm = DigestAlgorithm(algorithm)
        hasher = hashlib.new(_HASHLIB_NAMES[algorithm])
        hasher.update(message.encode("utf-8"))
        return DigestResult(
            algorithm=algorithm,
            hex_digest=hasher.hexdigest(),
            bit_length=hasher.digest_size * 8,
        )
