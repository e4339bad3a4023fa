"""
Playground Analyzers
====================

Password entropy, scoring and crack-time estimation, the injection rule
table and detector, digests, and the security-header checklist.
"""

from playground.analyzers.crack_time import CrackTimeEstimator
from playground.analyzers.digest import DigestCalculator
from playground.analyzers.entropy import EntropyCalculator
from playground.analyzers.headers import SecurityHeaderChecklist
from playground.analyzers.injection import VulnerabilityDetector
from playground.analyzers.password_strength import PasswordStrengthAnalyzer
from playground.analyzers.rules import RULE_TABLE, InjectionRule
from playground.analyzers.scoring import ScoreEngine

__all__ = [
    "CrackTimeEstimator",
    "DigestCalculator",
    "EntropyCalculator",
    "InjectionRule",
    "PasswordStrengthAnalyzer",
    "RULE_TABLE",
    "ScoreEngine",
    "SecurityHeaderChecklist",
    "VulnerabilityDetector",
]
