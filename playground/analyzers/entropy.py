"""
Entropy Calculator
===================

Combinatorial password entropy: the password is modelled as ``length``
independent draws from an alphabet whose size (the "pool") is inferred
from the character classes that actually occur.

    H = length x log2(pool_size)

Pool contributions:
    - lowercase ``[a-z]``:             26
    - uppercase ``[A-Z]``:             26
    - digits ``[0-9]``:                10
    - anything outside ``[A-Za-z0-9]``: 32

References:
    - NIST SP 800-63 Appendix A (2004). Estimating Password Entropy.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import math
import re
from typing import NamedTuple

_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[^a-zA-Z0-9]")


class CharacterClasses(NamedTuple):
    """Which character classes occur in a password."""

    lowercase: bool
    uppercase: bool
    digit: bool
    symbol: bool


def character_classes(password: str) -> CharacterClasses:
    """Detect the character classes present in *password*."""
    return CharacterClasses(
        lowercase=_LOWER.search(password) is not None,
        uppercase=_UPPER.search(password) is not None,
        digit=_DIGIT.search(password) is not None,
        symbol=_SYMBOL.search(password) is not None,
    )


class EntropyCalculator:
    """Derives pool size and entropy bits from a password.

    Usage::

        calc = EntropyCalculator()
        calc.pool_size("abc123")       # 36
        calc.entropy_bits("abc123")    # 6 * log2(36) ~= 31.02
    """

    LOWERCASE_POOL = 26
    UPPERCASE_POOL = 26
    DIGIT_POOL = 10
    SYMBOL_POOL = 32

    def pool_size(self, password: str) -> int:
        """Effective alphabet size; 1 for the empty string.

        Never 0, so log2 of the pool is always defined.
        """
        classes = character_classes(password)
        pool = 0
        if classes.lowercase:
            pool += self.LOWERCASE_POOL
        if classes.uppercase:
            pool += self.UPPERCASE_POOL
        if classes.digit:
            pool += self.DIGIT_POOL
        if classes.symbol:
            pool += self.SYMBOL_POOL
        return pool or 1

    def entropy_bits(self, password: str) -> float:
        """Combinatorial entropy in bits; 0.0 for the empty string."""
        if not password:
            return 0.0
        return len(password) * math.log2(self.pool_size(password))
