"""
Password Strength Analyzer
===========================

Runs the password pipeline -- EntropyCalculator, ScoreEngine and
CrackTimeEstimator -- and assembles a :class:`PasswordAnalysis` with
weak-pattern flags and improvement suggestions.

Crack times are reported for three attacker models:
    - single CPU:           10^7 guesses/second
    - single GPU:           10^11 guesses/second
    - distributed cluster:  10^13 guesses/second
"""

from __future__ import annotations

from typing import Optional

from shared.config import PasswordConfig, ScoringConfig

from playground.analyzers.crack_time import CrackTimeEstimator
from playground.analyzers.entropy import EntropyCalculator, character_classes
from playground.analyzers.scoring import ScoreEngine
from playground.core.models import PasswordAnalysis

MIN_LENGTH = 8
RECOMMENDED_LENGTH = 16
RECOMMENDED_POOL = 60


class PasswordStrengthAnalyzer:
    """Analyses a password into a :class:`PasswordAnalysis`.

    Instances hold only read-only configuration and can be shared between
    threads.

    Usage::

        analyzer = PasswordStrengthAnalyzer()
        result = analyzer.analyze("Tr0ub4dor&3xyz!Q")
        print(result.score, result.crack_time_gpu)
    """

    def __init__(
        self,
        config: Optional[PasswordConfig] = None,
        scoring: Optional[ScoringConfig] = None,
    ) -> None:
        self.config = config or PasswordConfig()
        self.entropy = EntropyCalculator()
        self.scorer = ScoreEngine(scoring, self.config)
        self.crack_time = CrackTimeEstimator()
        self._sequential_prefixes = tuple(
            p.lower() for p in self.config.sequential_prefixes
        )

    def analyze(self, password: str) -> PasswordAnalysis:
        """Compute entropy, score, crack times, flags and suggestions."""
        pool_size = self.entropy.pool_size(password)
        entropy = self.entropy.entropy_bits(password)

        return PasswordAnalysis(
            length=len(password),
            pool_size=pool_size,
            entropy=round(entropy, 2),
            score=self.scorer.score(password, entropy),
            crack_time_cpu=self.crack_time.estimate(
                entropy, self.config.cpu_guesses_per_second
            ),
            crack_time_gpu=self.crack_time.estimate(
                entropy, self.config.gpu_guesses_per_second
            ),
            crack_time_distributed=self.crack_time.estimate(
                entropy, self.config.distributed_guesses_per_second
            ),
            vulnerabilities=self._detect_weaknesses(password),
            suggestions=self._generate_suggestions(password, pool_size),
        )

    def _detect_weaknesses(self, password: str) -> tuple[str, ...]:
        flags: list[str] = []
        classes = character_classes(password)

        if self.scorer.contains_common_password(password):
            flags.append("Contains common password pattern")
        if self.scorer.contains_keyboard_pattern(password):
            flags.append("Contains keyboard pattern")
        if self.scorer.has_repeated_chars(password):
            flags.append("Contains repeated characters")
        if password.lower().startswith(self._sequential_prefixes):
            flags.append("Contains sequential characters")
        if len(password) < MIN_LENGTH:
            flags.append(f"Too short (less than {MIN_LENGTH} characters)")
        if not classes.uppercase:
            flags.append("Missing uppercase letters")
        if not classes.digit:
            flags.append("Missing numbers")
        if not classes.symbol:
            flags.append("Missing special characters")

        return tuple(flags)

    @staticmethod
    def _generate_suggestions(password: str, pool_size: int) -> tuple[str, ...]:
        suggestions: list[str] = []
        classes = character_classes(password)

        if len(password) < RECOMMENDED_LENGTH:
            suggestions.append(f"Use at least {RECOMMENDED_LENGTH} characters")
        if not classes.uppercase:
            suggestions.append("Add uppercase letters")
        if not classes.digit:
            suggestions.append("Add numbers")
        if not classes.symbol:
            suggestions.append("Add special characters")
        if pool_size < RECOMMENDED_POOL:
            suggestions.append("Use a larger character set")

        return tuple(suggestions)
