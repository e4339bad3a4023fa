"""
Security Header Checklist
==========================

Compares a set of HTTP response headers against seven recommended
security headers and scores coverage as ``round(present / 7 x 100)``.

References:
    - OWASP Secure Headers Project.
      https://owasp.org/www-project-secure-headers/
    - MDN Web Docs, HTTP security headers.
"""

from __future__ import annotations

from dataclasses import dataclass

from playground.core.models import HeaderAnalysis, MissingHeader, PresentHeader
from playground.parsers.header_parser import HeaderParser


@dataclass(frozen=True, slots=True)
class RecommendedHeader:
    """A header on the checklist, with advice shown when it is missing."""

    name: str
    recommendation: str

    @property
    def key(self) -> str:
        return self.name.lower()


RECOMMENDED_HEADERS: tuple[RecommendedHeader, ...] = (
    RecommendedHeader(
        "Content-Security-Policy",
        "Implement CSP to prevent XSS and data injection attacks. "
        "Example: \"default-src 'self'; script-src 'self'\"",
    ),
    RecommendedHeader(
        "X-Frame-Options",
        "Add X-Frame-Options to prevent clickjacking. Use DENY or SAMEORIGIN.",
    ),
    RecommendedHeader(
        "Strict-Transport-Security",
        "Enable HSTS to enforce HTTPS. "
        'Example: "max-age=31536000; includeSubDomains"',
    ),
    RecommendedHeader(
        "X-Content-Type-Options",
        'Set to "nosniff" to prevent MIME type sniffing.',
    ),
    RecommendedHeader(
        "Referrer-Policy",
        "Set a referrer policy to control information leakage. "
        'Use "strict-origin-when-cross-origin".',
    ),
    RecommendedHeader(
        "Permissions-Policy",
        "Restrict browser features like geolocation, camera, microphone.",
    ),
    RecommendedHeader(
        "X-XSS-Protection",
        'Enable XSS filter (note: deprecated, CSP is preferred). Use "1; mode=block".',
    ),
)


class SecurityHeaderChecklist:
    """Scores raw header text against :data:`RECOMMENDED_HEADERS`.

    Usage::

        checklist = SecurityHeaderChecklist()
        result = checklist.analyze("X-Frame-Options: DENY\\nServer: nginx")
        result.score   # 14
    """

    def __init__(
        self,
        recommended: tuple[RecommendedHeader, ...] = RECOMMENDED_HEADERS,
        parser: HeaderParser | None = None,
    ) -> None:
        self.recommended = recommended
        self.parser = parser or HeaderParser()

    def analyze(self, raw_headers: str) -> HeaderAnalysis:
        headers = self.parser.parse(raw_headers)
        present: list[PresentHeader] = []
        missing: list[MissingHeader] = []

        for header in self.recommended:
            value = headers.get(header.key)
            if value:
                present.append(PresentHeader(name=header.name, value=value))
            else:
                missing.append(MissingHeader(
                    name=header.name, recommendation=header.recommendation
                ))

        score = round(len(present) / len(self.recommended) * 100) if self.recommended else 0
        return HeaderAnalysis(
            headers=headers,
            present=present,
            missing=missing,
            score=score,
        )
