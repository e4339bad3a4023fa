"""
Injection Pattern Detector
===========================

Evaluates the rule table against an arbitrary string and reports which
injection categories it resembles.

For every category the rules are scanned in authored order and the scan
stops at the first match, so a call yields at most one finding per
category (0-3 in total), in the order SQL Injection, XSS, Command
Injection.  Categories are independent: one payload may register in all
three.

This is pattern resemblance, not exploitability: there is no SQL, HTML
or shell parsing and no false-positive suppression.
"""

from __future__ import annotations

from typing import Mapping, Optional

from playground.analyzers.rules import (
    CATEGORY_INFO,
    RULE_TABLE,
    CategoryInfo,
    InjectionRule,
)
from playground.core.models import Vulnerability, VulnerabilityType


class VulnerabilityDetector:
    """Pure, deterministic first-match-wins scanner over a rule table.

    Usage::

        detector = VulnerabilityDetector()
        for vuln in detector.detect("' OR '1'='1"):
            print(vuln.type.value, vuln.risk.value)
    """

    def __init__(
        self,
        rule_table: Optional[Mapping[VulnerabilityType, tuple[InjectionRule, ...]]] = None,
        category_info: Optional[Mapping[VulnerabilityType, CategoryInfo]] = None,
    ) -> None:
        self.rule_table = rule_table if rule_table is not None else RULE_TABLE
        self.category_info = category_info if category_info is not None else CATEGORY_INFO

    @staticmethod
    def first_match(
        rules: tuple[InjectionRule, ...], text: str
    ) -> Optional[InjectionRule]:
        """Return the earliest rule matching *text*, or ``None``."""
        for rule in rules:
            if rule.matches(text):
                return rule
        return None

    def detect(self, text: str) -> list[Vulnerability]:
        """Scan *text*; an empty list means nothing matched."""
        findings: list[Vulnerability] = []

        for category, rules in self.rule_table.items():
            rule = self.first_match(rules, text)
            if rule is None:
                continue
            info = self.category_info[category]
            findings.append(Vulnerability(
                type=category,
                risk=rule.risk,
                pattern=rule.source,
                explanation=info.explanation,
                remediation=info.remediation,
            ))

        return findings
