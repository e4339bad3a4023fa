"""
Playground Analysis Engine
===========================

Central orchestrator for the playground analyzers.  :class:`PlaygroundEngine`
wires the analyzers from a :class:`PlaygroundConfig` and wraps each result
in a :class:`ScanResult` of :class:`Finding` objects for the CLI and report
layers.

The module-level functions at the bottom (``analyze_password``,
``generate_password``, ``detect_vulnerabilities``, ...) return the raw
analyzer models and share one default set of analyzers; every analyzer is
stateless after construction, so concurrent calls need no coordination.

Architecture follows the Facade pattern (Gamma et al., 1994).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from shared.config import PlaygroundConfig
from shared.logger import PlaygroundLogger
from shared.models import Finding, ScanResult, Severity

from playground.analyzers.digest import DigestCalculator
from playground.analyzers.headers import SecurityHeaderChecklist
from playground.analyzers.injection import VulnerabilityDetector
from playground.analyzers.password_strength import PasswordStrengthAnalyzer
from playground.core.models import (
    DigestAlgorithm,
    DigestResult,
    ExpirationStatus,
    GenerationOptions,
    HeaderAnalysis,
    PasswordAnalysis,
    RiskTier,
    TokenAnalysis,
    Vulnerability,
)
from playground.generators.password import PasswordGenerator
from playground.parsers.token_parser import TokenParser

_RISK_SEVERITY: dict[RiskTier, Severity] = {
    RiskTier.HIGH: Severity.HIGH,
    RiskTier.MEDIUM: Severity.MEDIUM,
    RiskTier.LOW: Severity.LOW,
}


def mask_secret(secret: str) -> str:
    """First and last character with asterisks in between."""
    if len(secret) <= 2:
        return "*" * len(secret)
    return secret[0] + "*" * (len(secret) - 2) + secret[-1]


class PlaygroundEngine:
    """Orchestrates every playground analysis.

    Usage::

        engine = PlaygroundEngine()
        result = engine.analyze_password("P@ssw0rd!")
        result = engine.detect_injection("<script>alert(1)</script>")
        password = engine.generate_password(20)

    Attributes:
        config: Playground configuration instance.
        logger: Logger for the engine.
    """

    def __init__(self, config: Optional[PlaygroundConfig] = None) -> None:
        self.config = config or PlaygroundConfig()
        settings = self.config.global_settings
        self.logger = PlaygroundLogger(
            "engine",
            log_level=settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
            console_output=settings.console_logging,
        )

        self.password_analyzer = PasswordStrengthAnalyzer(
            self.config.password, self.config.scoring
        )
        self.detector = VulnerabilityDetector()
        self.generator = PasswordGenerator(self.config.generator)
        self.digests = DigestCalculator()
        self.token_parser = TokenParser(self.config.token.max_lifetime_seconds)
        self.header_checklist = SecurityHeaderChecklist()

    # ------------------------------------------------------------------ #
    #  Password Analysis
    # ------------------------------------------------------------------ #

    def analyze_password(self, password: str) -> ScanResult:
        """Analyse password strength and wrap the result in findings.

        Args:
            password: The password to analyse. Only its masked form is
                stored on the result.

        Returns:
            ScanResult whose metadata is the :class:`PasswordAnalysis`.
        """
        result = ScanResult(
            tool_name="playground.password",
            target=mask_secret(password) or "[empty password]",
            start_time=datetime.now(timezone.utc),
        )

        with self.logger.operation("password_analysis"):
            self.logger.info("Starting password analysis", length=len(password))
            try:
                analysis = self.password_analyzer.analyze(password)
            except Exception as exc:
                self.logger.exception("Password analysis failed: %s", exc)
                return self._error_result(result, "Password Analysis Error", exc)

            result.metadata = analysis.model_dump()
            result.add_finding(Finding(
                title=f"Password Score: {analysis.score}/100",
                description=(
                    f"Entropy: {analysis.entropy:.2f} bits. "
                    f"Character pool: {analysis.pool_size}. "
                    f"Length: {analysis.length}. "
                    f"GPU crack time: {analysis.crack_time_gpu}."
                ),
                severity=self._score_severity(analysis.score),
                evidence={
                    "entropy_bits": analysis.entropy,
                    "pool_size": analysis.pool_size,
                    "length": analysis.length,
                    "score": analysis.score,
                },
                references=["NIST SP 800-63B (2017). Digital Identity Guidelines."],
            ))
            for flag in analysis.vulnerabilities:
                result.add_finding(Finding(
                    title="Weak Password Pattern",
                    description=flag,
                    severity=Severity.LOW,
                ))
            for suggestion in analysis.suggestions:
                result.add_finding(Finding(
                    title="Password Improvement Suggestion",
                    description=suggestion,
                    severity=Severity.INFO,
                ))

            self.logger.debug(
                "Password analysed", score=analysis.score, entropy=analysis.entropy
            )

        return result.finalize(
            f"Password analysis: score={analysis.score}/100, "
            f"entropy={analysis.entropy:.1f} bits"
        )

    # ------------------------------------------------------------------ #
    #  Injection Detection
    # ------------------------------------------------------------------ #

    def detect_injection(self, text: str) -> ScanResult:
        """Scan *text* for SQL injection, XSS and command injection patterns.

        Returns:
            ScanResult whose metadata holds the ``vulnerabilities`` list.
        """
        result = ScanResult(
            tool_name="playground.detector",
            target=f"[input: {len(text)} chars]",
            start_time=datetime.now(timezone.utc),
        )

        with self.logger.operation("injection_detection"):
            self.logger.info("Scanning input", length=len(text))
            try:
                with self.logger.timed("rule table scan"):
                    vulns = self.detector.detect(text)
            except Exception as exc:
                self.logger.exception("Injection detection failed: %s", exc)
                return self._error_result(result, "Detection Error", exc)

            result.metadata = {"vulnerabilities": [v.model_dump(mode="json") for v in vulns]}
            for vuln in vulns:
                result.add_finding(Finding(
                    title=f"{vuln.type.value} Pattern ({vuln.risk.value} risk)",
                    description=vuln.explanation,
                    severity=_RISK_SEVERITY[vuln.risk],
                    evidence={"pattern": vuln.pattern},
                    recommendation=vuln.remediation,
                    references=["OWASP Top 10 (2021): A03 Injection."],
                ))

            self.logger.info("Detection complete", findings=len(vulns))

        if not vulns:
            return result.finalize("No injection patterns detected.")
        return result.finalize(
            "Detected: " + ", ".join(f"{v.type.value} ({v.risk.value})" for v in vulns)
        )

    # ------------------------------------------------------------------ #
    #  Generation and Collaborators
    # ------------------------------------------------------------------ #

    def generate_password(
        self,
        length: Optional[int] = None,
        options: Optional[GenerationOptions] = None,
    ) -> str:
        """Generate a password; *length* defaults to the configured length.

        Raises:
            InvalidConfigurationError: For a negative length or an empty
                charset.
        """
        length = self.config.generator.default_length if length is None else length
        with self.logger.operation("password_generation"):
            password = self.generator.generate(length, options)
            self.logger.info("Generated password", length=length)
        return password

    def compute_digest(
        self,
        message: str,
        algorithm: DigestAlgorithm | str = DigestAlgorithm.SHA256,
    ) -> DigestResult:
        """Hex digest of *message*; unsupported algorithms raise ``ValueError``."""
        with self.logger.operation("digest"):
            digest = self.digests.compute(message, algorithm)
            self.logger.debug("Digest computed", algorithm=digest.algorithm.value)
        return digest

    def decode_token(self, token: str, now: Optional[float] = None) -> ScanResult:
        """Decode a JWT and report format errors and security warnings."""
        result = ScanResult(
            tool_name="playground.token",
            target=f"[token: {len(token or '')} chars]",
            start_time=datetime.now(timezone.utc),
        )

        with self.logger.operation("token_decode"):
            analysis = self.token_parser.decode(token, now=now)
            result.metadata = analysis.model_dump(mode="json")

            for error in analysis.errors:
                result.add_finding(Finding(
                    title="Token Format Error",
                    description=error,
                    severity=Severity.MEDIUM,
                ))
            for warning in analysis.warnings:
                result.add_finding(Finding(
                    title="Token Security Warning",
                    description=warning,
                    severity=Severity.HIGH if warning.startswith("INSECURE") else Severity.LOW,
                ))
            if analysis.expiration is ExpirationStatus.EXPIRED:
                result.add_finding(Finding(
                    title="Token Expired",
                    description=analysis.expiration_time or "Token is expired",
                    severity=Severity.INFO,
                ))

            self.logger.info(
                "Token decoded",
                valid=analysis.valid,
                warnings=len(analysis.warnings),
                errors=len(analysis.errors),
            )

        return result.finalize(self._token_summary(analysis))

    def check_headers(self, raw_headers: str) -> ScanResult:
        """Score raw response headers against the security-header checklist."""
        result = ScanResult(
            tool_name="playground.headers",
            target="[response headers]",
            start_time=datetime.now(timezone.utc),
        )

        with self.logger.operation("header_checklist"):
            analysis = self.header_checklist.analyze(raw_headers)
            result.metadata = analysis.model_dump()
            for missing in analysis.missing:
                result.add_finding(Finding(
                    title=f"Missing Header: {missing.name}",
                    description=f"{missing.name} is not set.",
                    severity=Severity.LOW,
                    recommendation=missing.recommendation,
                    references=["OWASP Secure Headers Project."],
                ))
            self.logger.info("Header checklist scored", score=analysis.score)

        return result.finalize(
            f"Security headers: {len(analysis.present)}/"
            f"{len(self.header_checklist.recommended)} present, "
            f"score={analysis.score}/100"
        )

    # ------------------------------------------------------------------ #
    #  Private Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _error_result(result: ScanResult, title: str, exc: Exception) -> ScanResult:
        result.add_finding(Finding(
            title=title,
            description=f"Error during analysis: {exc}",
            severity=Severity.MEDIUM,
        ))
        return result.finalize(f"Error: {exc}")

    @staticmethod
    def _score_severity(score: int) -> Severity:
        """Map a 0-100 password score to a severity level."""
        if score < 20:
            return Severity.CRITICAL
        if score < 40:
            return Severity.HIGH
        if score < 60:
            return Severity.MEDIUM
        if score < 80:
            return Severity.LOW
        return Severity.INFO

    @staticmethod
    def _token_summary(analysis: TokenAnalysis) -> str:
        if analysis.errors:
            return f"Token could not be decoded: {'; '.join(analysis.errors)}"
        return (
            f"Token decoded: alg={analysis.algorithm}, "
            f"expiration={analysis.expiration.value}, "
            f"{len(analysis.warnings)} warning(s)"
        )


# ========================= Module-level convenience ========================

_password_analyzer = PasswordStrengthAnalyzer()
_detector = VulnerabilityDetector()
_generator = PasswordGenerator()
_digests = DigestCalculator()
_token_parser = TokenParser()
_header_checklist = SecurityHeaderChecklist()


def analyze_password(password: str) -> PasswordAnalysis:
    """Analyse *password* with the default weights."""
    return _password_analyzer.analyze(password)


def generate_password(length: int, options: Optional[GenerationOptions] = None) -> str:
    """Generate a password of *length* characters from the default alphabets."""
    return _generator.generate(length, options)


def detect_vulnerabilities(text: str) -> list[Vulnerability]:
    """Scan *text* against the default rule table."""
    return _detector.detect(text)


def compute_digest(
    message: str, algorithm: DigestAlgorithm | str = DigestAlgorithm.SHA256
) -> DigestResult:
    return _digests.compute(message, algorithm)


def decode_token(token: str, now: Optional[float] = None) -> TokenAnalysis:
    return _token_parser.decode(token, now=now)


def check_headers(raw_headers: str) -> HeaderAnalysis:
    return _header_checklist.analyze(raw_headers)
