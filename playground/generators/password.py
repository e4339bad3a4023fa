"""
Password Generator
===================

Random passwords drawn from a configurable charset using the operating
system CSPRNG (:mod:`secrets`).

Each character is chosen by drawing a 32-bit value and reducing it modulo
the charset size.  Unless the charset size divides 2^32 this is slightly
biased towards the first ``2^32 mod n`` characters; the bias is below
1e-8 for any realistic charset.  ``uniform=True`` switches to rejection
sampling, which removes it.

References:
    - NIST SP 800-90A Rev. 1 (2015). Recommendation for Random Number
      Generation Using Deterministic Random Bit Generators.
    - Lemire, D. (2019). Fast Random Integer Generation in an Interval.
      ACM TOMACS 29(1).
"""

from __future__ import annotations

import secrets
from typing import Optional

from shared.config import GeneratorConfig

from playground.core.exceptions import InvalidConfigurationError
from playground.core.models import GenerationOptions

_DRAW_BITS = 32
_DRAW_RANGE = 1 << _DRAW_BITS


class PasswordGenerator:
    """Builds a charset from :class:`GenerationOptions` and samples from it.

    Usage::

        gen = PasswordGenerator()
        gen.generate(16, GenerationOptions(exclude_ambiguous=True))
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        *,
        uniform: Optional[bool] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.uniform = self.config.uniform_sampling if uniform is None else uniform

    def build_charset(self, options: GenerationOptions) -> str:
        """Lowercase base plus the enabled classes, minus ambiguous characters."""
        cfg = self.config
        charset = cfg.lowercase
        if options.uppercase:
            charset += cfg.uppercase
        if options.numbers:
            charset += cfg.digits
        if options.symbols:
            charset += cfg.symbols
        if options.exclude_ambiguous:
            charset = "".join(c for c in charset if c not in cfg.ambiguous)
        return charset

    def generate(
        self,
        length: int,
        options: Optional[GenerationOptions] = None,
    ) -> str:
        """Return a password of exactly *length* characters.

        Raises:
            InvalidConfigurationError: If *length* is negative or the
                assembled charset is empty.
        """
        if length < 0:
            raise InvalidConfigurationError(
                f"Password length must be non-negative, got {length}"
            )
        charset = self.build_charset(options or GenerationOptions())
        if not charset:
            raise InvalidConfigurationError(
                "Character set is empty after applying generation options"
            )

        draw = self._uniform_index if self.uniform else self._modulo_index
        return "".join(charset[draw(len(charset))] for _ in range(length))

    @staticmethod
    def _modulo_index(size: int) -> int:
        return secrets.randbits(_DRAW_BITS) % size

    @staticmethod
    def _uniform_index(size: int) -> int:
        # Reject draws from the incomplete final block of width 2^32 mod size
        limit = _DRAW_RANGE - (_DRAW_RANGE % size)
        while True:
            value = secrets.randbits(_DRAW_BITS)
            if value < limit:
                return value % size
