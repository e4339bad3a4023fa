"""Unit tests for the weighted password score."""
import pytest

from shared.config import PasswordConfig, ScoringConfig
from playground.analyzers.entropy import EntropyCalculator
from playground.analyzers.scoring import ScoreEngine


def _score(engine, password):
    return engine.score(password, EntropyCalculator().entropy_bits(password))


class TestWeaknessPredicates:

    def setup_method(self):
        self.engine = ScoreEngine()

    def test_common_password_is_case_insensitive_substring(self):
        assert self.engine.contains_common_password("MyPassWord99")
        assert not self.engine.contains_common_password("correct horse")

    def test_keyboard_pattern(self):
        assert self.engine.contains_keyboard_pattern("xxASDFGHxx")
        assert not self.engine.contains_keyboard_pattern("asdfg")

    def test_repeated_chars_needs_three(self):
        assert ScoreEngine.has_repeated_chars("abccc")
        assert not ScoreEngine.has_repeated_chars("aabbcc")

    def test_weak_prefix(self):
        assert self.engine.has_weak_prefix("QWErty!")
        assert not self.engine.has_weak_prefix("xqwe")


class TestScoreEngine:

    def setup_method(self):
        self.engine = ScoreEngine()

    def test_common_password_scores_three(self):
        """10 (length) + 10 (lower) + 12.53 (entropy) - 30 (common) = 2.53."""
        assert _score(self.engine, "password") == 3

    def test_strong_password_clamps_to_hundred(self):
        assert _score(self.engine, "Tr0ub4dor&3xyz!Q") == 100

    def test_empty_password_scores_zero(self):
        assert self.engine.score("", 0.0) == 0

    @pytest.mark.parametrize("password", [
        "", "a", "aaa", "123", "qwerty123456", "x" * 1500, "Zz9!" * 300,
    ])
    def test_score_within_bounds(self, password):
        assert 0 <= _score(self.engine, password) <= 100

    def test_penalties_stack(self):
        """A common password that is also a keyboard pattern takes both hits."""
        raw_both = self.engine.raw_score("qwerty", 0.0)
        raw_clean = self.engine.raw_score("qzxjvk", 0.0)
        assert raw_clean - raw_both == pytest.approx(30 + 20 + 15)

    def test_custom_weights(self):
        weights = ScoringConfig(length_tiers=(), lowercase_bonus=50, entropy_bonus_cap=0.0)
        engine = ScoreEngine(weights, PasswordConfig(common_passwords=()))
        assert engine.score("password", 40.0) == 50
