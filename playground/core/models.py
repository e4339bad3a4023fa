"""
Playground Core Data Models
============================

Pydantic models for the playground analyzers: password strength results,
injection findings, generation options, digests, decoded tokens and
security-header checklists.

Analysis results are frozen: each call builds a fresh object and nothing
mutates it afterwards.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - OWASP Top 10 (2021), A03 Injection.
    - RFC 7519 (2015). JSON Web Token (JWT).
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class RiskTier(str, enum.Enum):
    """Qualitative severity attached to an injection rule."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class VulnerabilityType(str, enum.Enum):
    """Injection categories, in detection order."""

    SQL_INJECTION = "SQL Injection"
    XSS = "XSS"
    COMMAND_INJECTION = "Command Injection"


class DigestAlgorithm(str, enum.Enum):
    SHA256 = "SHA-256"
    SHA512 = "SHA-512"


class ExpirationStatus(str, enum.Enum):
    VALID = "valid"
    EXPIRED = "expired"
    NONE = "none"


# ===================================================================== #
#  Password Models
# ===================================================================== #


class PasswordAnalysis(BaseModel):
    """Complete password strength analysis result.

    Attributes:
        length: Character count of the input.
        pool_size: Effective alphabet size inferred from character classes.
        entropy: length x log2(pool_size), in bits.
        score: Heuristic strength score in [0, 100].
        crack_time_cpu: Estimate at 10^7 guesses/second.
        crack_time_gpu: Estimate at 10^11 guesses/second.
        crack_time_distributed: Estimate at 10^13 guesses/second.
        vulnerabilities: Weak-pattern flags, e.g. "Contains keyboard pattern".
        suggestions: Improvement hints.
    """

    model_config = ConfigDict(frozen=True)

    length: int = 0
    pool_size: int = Field(default=1, ge=1)
    entropy: float = 0.0
    score: int = Field(default=0, ge=0, le=100)
    crack_time_cpu: str = "Instant"
    crack_time_gpu: str = "Instant"
    crack_time_distributed: str = "Instant"
    vulnerabilities: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()


class GenerationOptions(BaseModel):
    """Character classes added to the lowercase base alphabet."""

    model_config = ConfigDict(frozen=True)

    uppercase: bool = True
    numbers: bool = True
    symbols: bool = True
    exclude_ambiguous: bool = False


# ===================================================================== #
#  Injection Models
# ===================================================================== #


class Vulnerability(BaseModel):
    """One injection finding; at most one per category per detection call.

    Attributes:
        type: Injection category.
        risk: Risk tier of the rule that matched.
        pattern: Source text of the matching rule's regex.
        explanation: Category-level description.
        remediation: Category-level remediation advice.
    """

    model_config = ConfigDict(frozen=True)

    type: VulnerabilityType
    risk: RiskTier
    pattern: str
    explanation: str
    remediation: str


# ===================================================================== #
#  Collaborator Models
# ===================================================================== #


class DigestResult(BaseModel):
    """Hex digest of a UTF-8 encoded message."""

    model_config = ConfigDict(frozen=True)

    algorithm: DigestAlgorithm
    hex_digest: str
    bit_length: int


class TokenAnalysis(BaseModel):
    """Structural decoding of a three-part dot-separated token.

    Attributes:
        valid: ``True`` when no errors were recorded. Signatures are
            never verified.
        header: Decoded header object, if decodable.
        payload: Decoded payload object, if decodable.
        algorithm: ``alg`` header value or ``"unknown"``.
        expiration: Classification of the ``exp`` claim.
        expiration_time: Human-readable distance to/from ``exp``.
        warnings: Security observations.
        errors: Format and decoding errors.
    """

    valid: bool = False
    header: Optional[dict[str, Any]] = None
    payload: Optional[dict[str, Any]] = None
    algorithm: str = "unknown"
    expiration: ExpirationStatus = ExpirationStatus.NONE
    expiration_time: Optional[str] = None
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)


class PresentHeader(BaseModel):
    name: str
    value: str


class MissingHeader(BaseModel):
    name: str
    recommendation: str


class HeaderAnalysis(BaseModel):
    """Security-header checklist result.

    Attributes:
        headers: Parsed headers keyed by lowercased name.
        present: Recommended headers found, in checklist order.
        missing: Recommended headers absent, with advice.
        score: round(present / total x 100).
    """

    headers: dict[str, str] = Field(default_factory=dict)
    present: list[PresentHeader] = Field(default_factory=list)
    missing: list[MissingHeader] = Field(default_factory=list)
    score: int = Field(default=0, ge=0, le=100)
