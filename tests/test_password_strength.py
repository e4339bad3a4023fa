"""Tests for the password analysis pipeline."""
import pytest

from shared.config import PasswordConfig
from playground.analyzers.password_strength import PasswordStrengthAnalyzer
from playground.core.models import PasswordAnalysis


@pytest.fixture
def analyzer():
    return PasswordStrengthAnalyzer()


class TestPasswordScenarios:

    def test_common_password(self, analyzer):
        result = analyzer.analyze("password")
        assert result.length == 8
        assert result.pool_size == 26
        assert result.entropy == pytest.approx(37.6, abs=0.01)
        assert result.score == 3
        assert result.vulnerabilities == (
            "Contains common password pattern",
            "Missing uppercase letters",
            "Missing numbers",
            "Missing special characters",
        )
        assert result.suggestions == (
            "Use at least 16 characters",
            "Add uppercase letters",
            "Add numbers",
            "Add special characters",
            "Use a larger character set",
        )
        assert result.crack_time_cpu == "3 hours"
        assert result.crack_time_gpu == "1 seconds"
        assert result.crack_time_distributed == "Instant"

    def test_strong_password(self, analyzer):
        result = analyzer.analyze("Tr0ub4dor&3xyz!Q")
        assert result.pool_size == 94
        assert result.entropy == pytest.approx(104.87, abs=0.01)
        assert result.score == 100
        assert result.vulnerabilities == ()
        assert result.suggestions == ()
        assert result.crack_time_cpu == "Millions of years"
        assert result.crack_time_distributed == "Millions of years"

    def test_empty_password(self, analyzer):
        result = analyzer.analyze("")
        assert result.length == 0
        assert result.pool_size == 1
        assert result.entropy == 0.0
        assert result.score == 0
        assert result.crack_time_cpu == "Instant"
        assert "Too short (less than 8 characters)" in result.vulnerabilities

    def test_sequential_prefix_flags(self, analyzer):
        result = analyzer.analyze("111Abc!!")
        assert "Contains sequential characters" in result.vulnerabilities
        assert "Contains repeated characters" in result.vulnerabilities

    def test_very_long_password(self, analyzer):
        result = analyzer.analyze("Ab1!" * 400)
        assert 0 <= result.score <= 100
        assert result.crack_time_gpu == "Millions of years"


class TestAnalyzerProperties:

    def test_result_is_frozen(self, analyzer):
        result = analyzer.analyze("abc")
        assert isinstance(result, PasswordAnalysis)
        with pytest.raises(Exception):
            result.score = 99

    def test_flag_collections_are_immutable(self, analyzer):
        result = analyzer.analyze("abc")
        assert isinstance(result.vulnerabilities, tuple)
        assert isinstance(result.suggestions, tuple)
        with pytest.raises(AttributeError):
            result.vulnerabilities.append("Contains keyboard pattern")

    def test_deterministic(self, analyzer):
        assert analyzer.analyze("S0me-Pass") == analyzer.analyze("S0me-Pass")

    def test_guess_rates_come_from_config(self):
        slow = PasswordStrengthAnalyzer(PasswordConfig(cpu_guesses_per_second=1.0))
        # 26^8 / 2 seconds is about 3311 years
        assert slow.analyze("password").crack_time_cpu == "3 thousand years"
