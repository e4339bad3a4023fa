"""Unit tests for the injection rule table."""
import re

import pytest

from playground.analyzers.rules import (
    CATEGORY_INFO,
    COMMAND_INJECTION_RULES,
    RULE_TABLE,
    SQL_INJECTION_RULES,
    XSS_RULES,
)
from playground.core.engine import detect_vulnerabilities
from playground.core.models import RiskTier, VulnerabilityType


class TestRuleTable:

    def test_category_order(self):
        assert list(RULE_TABLE) == [
            VulnerabilityType.SQL_INJECTION,
            VulnerabilityType.XSS,
            VulnerabilityType.COMMAND_INJECTION,
        ]

    def test_rule_counts(self):
        assert len(SQL_INJECTION_RULES) == 9
        assert len(XSS_RULES) == 10
        assert len(COMMAND_INJECTION_RULES) == 8

    def test_rules_belong_to_their_category(self):
        for category, rules in RULE_TABLE.items():
            assert all(rule.category is category for rule in rules)

    def test_every_category_has_text(self):
        assert set(CATEGORY_INFO) == set(RULE_TABLE)
        for info in CATEGORY_INFO.values():
            assert info.explanation and info.remediation

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            RULE_TABLE[VulnerabilityType.XSS] = ()

    def test_trailing_comment_rule_is_case_sensitive_multiline(self):
        rule = SQL_INJECTION_RULES[4]
        assert rule.source == "--$"
        assert rule.regex.flags & re.MULTILINE
        assert not rule.regex.flags & re.IGNORECASE
        assert rule.regex.flags & re.ASCII
        assert rule.matches("admin --\nnext line")

    def test_bare_pipe_rule_is_low_and_last(self):
        rule = COMMAND_INJECTION_RULES[-1]
        assert rule.risk is RiskTier.LOW
        assert rule.matches("a|b")


class TestAsciiCharacterClasses:

    def test_every_rule_is_ascii_only(self):
        for rules in RULE_TABLE.values():
            assert all(rule.regex.flags & re.ASCII for rule in rules)

    def test_accented_letter_is_a_word_boundary(self):
        vulns = detect_vulnerabilities("caféselect * from t")
        assert [(v.type, v.risk) for v in vulns] == [
            (VulnerabilityType.SQL_INJECTION, RiskTier.HIGH),
        ]

    def test_non_ascii_letter_is_not_a_word_character(self):
        assert detect_vulnerabilities("onü=1") == []
        assert XSS_RULES[2].matches("onclick=1")
