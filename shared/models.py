"""
Security Playground Shared Models
==================================

Pydantic v2 models wrapping every analysis the playground performs into a
uniform :class:`ScanResult` made of :class:`Finding` objects, so console
and report output can treat all analyzers the same way.

References:
    - OWASP Risk Rating Methodology.
      https://owasp.org/www-community/OWASP_Risk_Rating_Methodology
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


class Severity(str, Enum):
    """Finding severity, ordered from most to least severe."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"

    @property
    def css_class(self) -> str:
        """CSS class name used by the HTML report."""
        return f"severity-{self.value.lower()}"


class Finding(BaseModel):
    """A single observation produced by a playground analyzer.

    Attributes:
        severity:       Qualitative severity rating.
        title:          Short, descriptive finding title.
        description:    Detailed explanation of the finding.
        evidence:       Supporting data (dicts and lists are stored as JSON).
        recommendation: Suggested remediation action.
        references:     External references.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="ignore",
    )

    severity: Severity = Field(..., description="Severity level of this finding")
    title: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1)
    evidence: str = Field(default="")
    recommendation: str = Field(default="")
    references: list[str] = Field(default_factory=list)

    @field_validator("evidence", mode="before")
    @classmethod
    def _coerce_evidence(cls, v: Any) -> str:
        """Auto-convert non-string evidence (dict, list) to JSON string."""
        if isinstance(v, str):
            return v
        if isinstance(v, (dict, list)):
            return _json.dumps(v, ensure_ascii=False, default=str)
        return str(v)


class ScanResult(BaseModel):
    """Aggregated result of a single analysis run.

    Attributes:
        tool_name:  Component that produced the result.
        target:     What was analysed (masked for secrets).
        start_time: UTC timestamp when the analysis started.
        end_time:   UTC timestamp when the analysis ended.
        findings:   Individual findings.
        summary:    Human-readable summary.
        metadata:   Raw analyzer output (``model_dump()`` of the result).
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    tool_name: str = Field(..., min_length=1)
    target: str = Field(..., min_length=1)
    start_time: _dt.datetime = Field(default_factory=_utcnow)
    end_time: Optional[_dt.datetime] = None
    findings: list[Finding] = Field(default_factory=list)
    summary: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time in seconds, or ``None`` if *end_time* is unset."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def severity_counts(self) -> dict[str, int]:
        """Count of findings grouped by severity name."""
        counts: dict[str, int] = {s.value: 0 for s in Severity}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    @property
    def highest_severity(self) -> Severity | None:
        if not self.findings:
            return None
        order = list(Severity)
        return min((f.severity for f in self.findings), key=order.index)

    @property
    def finding_count(self) -> int:
        return len(self.findings)

    def add_finding(self, finding: Finding) -> None:
        """Append a finding to the result."""
        self.findings.append(finding)

    def finalize(self, summary: str | None = None) -> ScanResult:
        """Set *end_time* and *summary*; returns ``self`` for chaining.

        Without an explicit *summary* one is built from severity counts.
        """
        self.end_time = _utcnow()
        if summary is not None:
            self.summary = summary
        else:
            parts = [f"{sev}: {cnt}" for sev, cnt in self.severity_counts.items() if cnt]
            self.summary = (
                f"Analysis complete. Findings: {len(self.findings)} "
                f"({', '.join(parts) if parts else 'none'})"
            )
        return self
