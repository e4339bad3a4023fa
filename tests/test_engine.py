"""Tests for the PlaygroundEngine facade and module-level functions."""
import pytest

from shared.models import Severity
from playground.core.engine import PlaygroundEngine, mask_secret
from playground.core.exceptions import InvalidConfigurationError
from playground.core.models import GenerationOptions


@pytest.fixture
def engine(quiet_config):
    return PlaygroundEngine(quiet_config)


class TestMaskSecret:

    def test_masks_middle(self):
        assert mask_secret("password") == "p******d"

    def test_short_secrets_fully_masked(self):
        assert mask_secret("ab") == "**"
        assert mask_secret("") == ""


class TestPasswordAnalysis:

    def test_wraps_analysis(self, engine):
        result = engine.analyze_password("password")
        assert result.tool_name == "playground.password"
        assert result.target == "p******d"
        assert result.metadata["score"] == 3
        assert result.findings[0].title == "Password Score: 3/100"
        assert result.findings[0].severity is Severity.CRITICAL
        assert result.end_time is not None
        assert "score=3/100" in result.summary

    def test_raw_password_not_stored(self, engine):
        result = engine.analyze_password("Sup3rSecret!")
        assert "Sup3rSecret!" not in result.model_dump_json()

    def test_empty_password_target(self, engine):
        assert engine.analyze_password("").target == "[empty password]"

    def test_analyzer_failure_becomes_finding(self, engine, monkeypatch):
        def boom(password):
            raise RuntimeError("kaput")

        monkeypatch.setattr(engine.password_analyzer, "analyze", boom)
        result = engine.analyze_password("anything")
        assert result.findings[-1].title == "Password Analysis Error"
        assert result.summary == "Error: kaput"


class TestInjectionDetection:

    def test_high_risk_finding(self, engine):
        result = engine.detect_injection("' OR '1'='1")
        assert len(result.findings) == 1
        assert result.findings[0].severity is Severity.HIGH
        assert result.metadata["vulnerabilities"][0]["type"] == "SQL Injection"
        assert result.summary == "Detected: SQL Injection (High)"

    def test_clean_input(self, engine):
        result = engine.detect_injection("good morning")
        assert result.findings == []
        assert result.summary == "No injection patterns detected."


class TestCollaborators:

    def test_generate_uses_configured_default_length(self, engine):
        assert len(engine.generate_password()) == 16

    def test_generate_errors_propagate(self, engine):
        with pytest.raises(InvalidConfigurationError):
            engine.generate_password(-3)

    def test_generate_with_options(self, engine):
        options = GenerationOptions(uppercase=False, numbers=False, symbols=False)
        assert engine.generate_password(32, options).islower()

    def test_digest(self, engine):
        assert engine.compute_digest("abc", "SHA-512").bit_length == 512

    def test_unsigned_token_is_high(self, engine, make_token):
        result = engine.decode_token(make_token({"alg": "none"}, {}))
        severities = [f.severity for f in result.findings]
        assert Severity.HIGH in severities
        assert result.metadata["expiration"] == "none"

    def test_malformed_token(self, engine):
        result = engine.decode_token("nope")
        assert result.findings[0].title == "Token Format Error"
        assert result.summary.startswith("Token could not be decoded")

    def test_headers(self, engine):
        result = engine.check_headers("X-Frame-Options: DENY")
        assert result.metadata["score"] == 14
        assert len(result.findings) == 6
        assert result.summary == "Security headers: 1/7 present, score=14/100"


class TestModuleFunctions:

    def test_exported_from_core(self):
        from playground.core import (
            analyze_password,
            check_headers,
            compute_digest,
            decode_token,
            detect_vulnerabilities,
            generate_password,
        )

        assert analyze_password("password").score == 3
        assert detect_vulnerabilities("<script>")[0].type.value == "XSS"
        assert len(generate_password(10)) == 10
        assert compute_digest("").hex_digest.startswith("e3b0c442")
        assert decode_token("").errors == ["Token is empty or invalid"]
        assert check_headers("").score == 0

    def test_unknown_attribute(self):
        import playground.core

        with pytest.raises(AttributeError):
            playground.core.does_not_exist
