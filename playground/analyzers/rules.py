"""
Injection Rule Table
=====================

Static, ordered signatures for the three injection categories.  Within a
category, earlier rules take precedence: the detector reports the first
rule that matches, so rules run from most to least specific.

Case-insensitivity is encoded per rule through its regex flags.  Every
rule is compiled with ``re.ASCII`` so that ``\b``, ``\w``, ``\d`` and ``\s``
only know ASCII word and space characters.  The bare-pipe command rule is
broad and matches nearly any pipe.

References:
    - OWASP Testing Guide v4.2, WSTG-INPV-05 (SQL Injection).
    - OWASP XSS Filter Evasion Cheat Sheet.
    - CWE-78: Improper Neutralization of Special Elements used in an
      OS Command.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from playground.core.models import RiskTier, VulnerabilityType

_I = re.IGNORECASE


@dataclass(frozen=True, slots=True)
class InjectionRule:
    """A single detection signature.

    Attributes:
        category: Injection category the rule belongs to.
        regex: Compiled pattern searched anywhere in the raw input.
        risk: Risk tier reported when this rule is the first match.
    """

    category: VulnerabilityType
    regex: re.Pattern[str]
    risk: RiskTier

    @property
    def source(self) -> str:
        """Textual form of the pattern, used for display."""
        return self.regex.pattern

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


@dataclass(frozen=True, slots=True)
class CategoryInfo:
    """Category-level explanation and remediation text."""

    explanation: str
    remediation: str


def _rules(
    category: VulnerabilityType,
    *specs: tuple[str, int, RiskTier],
) -> tuple[InjectionRule, ...]:
    return tuple(
        InjectionRule(category, re.compile(pattern, flags | re.ASCII), risk)
        for pattern, flags, risk in specs
    )


SQL_INJECTION_RULES = _rules(
    VulnerabilityType.SQL_INJECTION,
    (r"(\b|--|;)(select|insert|update|delete|drop|create|alter|exec|execute|union)\b", _I, RiskTier.HIGH),
    (r"""'(\s*or\s*|\s*and\s*)['"=]""", _I, RiskTier.HIGH),
    (r"""(\bor\b|\band\b).*=.*['"]""", _I, RiskTier.MEDIUM),
    (r"""['"](?:\s*(?:or|and)\s*['"]?\d|\s*=\s*['"]?\d)""", _I, RiskTier.HIGH),
    (r"--$", re.MULTILINE, RiskTier.HIGH),
    (r";\s*(drop|delete|truncate)", _I, RiskTier.HIGH),
    (r"union\s+select", _I, RiskTier.HIGH),
    (r"'\s*or\s+'1'\s*=\s*'1", _I, RiskTier.HIGH),
    (r"1\s*=\s*1", _I, RiskTier.HIGH),
)

XSS_RULES = _rules(
    VulnerabilityType.XSS,
    (r"<script\b", _I, RiskTier.HIGH),
    (r"javascript:", _I, RiskTier.HIGH),
    (r"on\w+\s*=", _I, RiskTier.HIGH),
    (r"<img[^>]+onerror", _I, RiskTier.HIGH),
    (r"<svg[^>]+onload", _I, RiskTier.HIGH),
    (r"<iframe", _I, RiskTier.MEDIUM),
    (r"<object", _I, RiskTier.MEDIUM),
    (r"<embed", _I, RiskTier.MEDIUM),
    (r"eval\s*\(", _I, RiskTier.HIGH),
    (r"innerHTML\s*=", _I, RiskTier.MEDIUM),
)

COMMAND_INJECTION_RULES = _rules(
    VulnerabilityType.COMMAND_INJECTION,
    (r";\s*(ls|dir|cat|rm|mkdir|chmod|chown)", _I, RiskTier.HIGH),
    (r"\|\s*(cat|ls|grep|awk|head)", _I, RiskTier.HIGH),
    (r"\$\([^)]+\)", _I, RiskTier.HIGH),
    (r"`[^`]+`", _I, RiskTier.HIGH),
    (r"\b(whoami|id|uname|hostname)\b", _I, RiskTier.MEDIUM),
    (r"\b(nc|netcat|wget|curl)\b", _I, RiskTier.HIGH),
    (r"&\s*&\s*", _I, RiskTier.MEDIUM),
    (r"\|\s*", _I, RiskTier.LOW),
)

# Category order is the order findings are reported in.
RULE_TABLE: Mapping[VulnerabilityType, tuple[InjectionRule, ...]] = MappingProxyType({
    VulnerabilityType.SQL_INJECTION: SQL_INJECTION_RULES,
    VulnerabilityType.XSS: XSS_RULES,
    VulnerabilityType.COMMAND_INJECTION: COMMAND_INJECTION_RULES,
})

CATEGORY_INFO: Mapping[VulnerabilityType, CategoryInfo] = MappingProxyType({
    VulnerabilityType.SQL_INJECTION: CategoryInfo(
        explanation="SQL Injection allows attackers to interfere with database queries.",
        remediation=(
            "Use parameterized queries or prepared statements instead of "
            "concatenating user input."
        ),
    ),
    VulnerabilityType.XSS: CategoryInfo(
        explanation="Cross-Site Scripting (XSS) allows attackers to inject malicious scripts.",
        remediation="Escape output and use Content Security Policy (CSP) headers.",
    ),
    VulnerabilityType.COMMAND_INJECTION: CategoryInfo(
        explanation="Command Injection allows execution of arbitrary system commands.",
        remediation="Never use user input in system calls. Use allowlists and input validation.",
    ),
})
