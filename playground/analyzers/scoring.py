"""
Password Score Engine
======================

Weighted heuristic producing a single 0-100 strength score.

Additive weights reward length tiers (stacking), character-class
diversity and entropy; subtractive penalties apply when the lowercased
password contains a common password or keyboard pattern, has a run of
three or more identical characters, or starts with a well-known weak
prefix.  Bonuses and penalties are independent and combine freely.

All weights and dictionaries come from :class:`shared.config.ScoringConfig`
and :class:`shared.config.PasswordConfig`.

References:
    - Komanduri, S. et al. (2011). Of Passwords and People: Measuring the
      Effect of Password-Composition Policies. CHI.
"""

from __future__ import annotations

import re
from typing import Optional

from shared.config import PasswordConfig, ScoringConfig

from playground.analyzers.crack_time import round_half_up
from playground.analyzers.entropy import character_classes

REPEATED_CHARS = re.compile(r"(.)\1{2,}")


class ScoreEngine:
    """Combines length, diversity, entropy and weakness penalties.

    Usage::

        engine = ScoreEngine()
        engine.score("password", entropy=37.6)   # 3
    """

    def __init__(
        self,
        weights: Optional[ScoringConfig] = None,
        dictionaries: Optional[PasswordConfig] = None,
    ) -> None:
        self.weights = weights or ScoringConfig()
        dictionaries = dictionaries or PasswordConfig()
        self._common = tuple(p.lower() for p in dictionaries.common_passwords)
        self._keyboard = tuple(p.lower() for p in dictionaries.keyboard_patterns)
        self._weak_prefixes = tuple(p.lower() for p in dictionaries.weak_prefixes)

    # ------------------------------------------------------------------ #
    #  Weakness predicates (shared with the suggestion builder)
    # ------------------------------------------------------------------ #

    def contains_common_password(self, password: str) -> bool:
        lower = password.lower()
        return any(word in lower for word in self._common)

    def contains_keyboard_pattern(self, password: str) -> bool:
        lower = password.lower()
        return any(pattern in lower for pattern in self._keyboard)

    @staticmethod
    def has_repeated_chars(password: str) -> bool:
        return REPEATED_CHARS.search(password) is not None

    def has_weak_prefix(self, password: str) -> bool:
        return password.lower().startswith(self._weak_prefixes)

    # ------------------------------------------------------------------ #
    #  Scoring
    # ------------------------------------------------------------------ #

    def raw_score(self, password: str, entropy: float) -> float:
        """Unclamped, unrounded sum of bonuses and penalties."""
        w = self.weights
        total = 0.0

        length = len(password)
        for min_length, bonus in w.length_tiers:
            if length >= min_length:
                total += bonus

        classes = character_classes(password)
        if classes.lowercase:
            total += w.lowercase_bonus
        if classes.uppercase:
            total += w.uppercase_bonus
        if classes.digit:
            total += w.digit_bonus
        if classes.symbol:
            total += w.symbol_bonus

        total += min(w.entropy_bonus_cap, entropy / w.entropy_divisor)

        if self.contains_common_password(password):
            total -= w.common_password_penalty
        if self.contains_keyboard_pattern(password):
            total -= w.keyboard_pattern_penalty
        if self.has_repeated_chars(password):
            total -= w.repeated_chars_penalty
        if self.has_weak_prefix(password):
            total -= w.weak_prefix_penalty

        return total

    def score(self, password: str, entropy: float) -> int:
        """Final score: rounded sum clamped to [0, 100]."""
        return max(0, min(100, round_half_up(self.raw_score(password, entropy))))
