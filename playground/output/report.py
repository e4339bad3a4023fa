"""
Playground Report Generator
============================

Generates HTML and JSON reports from playground :class:`ScanResult`
objects.  The HTML report uses inline CSS so a single file can be opened
anywhere; the JSON report is machine-readable and carries the raw
analyzer output under ``analysis``.

Secrets never reach a report: the engine stores masked targets only.

References:
    - OWASP Reporting Guidelines. https://owasp.org/www-community/
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from shared.models import ScanResult

from playground import __version__


# ===================================================================== #
#  HTML Template
# ===================================================================== #

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Security Playground Report - {title}</title>
    <style>
        :root {{
            --bg-primary: #0d1117;
            --bg-secondary: #161b22;
            --bg-tertiary: #21262d;
            --text-primary: #c9d1d9;
            --text-secondary: #8b949e;
            --accent-cyan: #58a6ff;
            --accent-green: #3fb950;
            --accent-yellow: #d29922;
            --accent-red: #f85149;
            --accent-purple: #bc8cff;
            --border: #30363d;
        }}
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg-primary);
            color: var(--text-primary);
            line-height: 1.6;
            padding: 2rem;
        }}
        .container {{ max-width: 1100px; margin: 0 auto; }}
        .header, .section {{
            background: var(--bg-secondary);
            border: 1px solid var(--border);
            border-radius: 8px;
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }}
        .header {{ text-align: center; border-color: var(--accent-cyan); }}
        .header h1 {{ color: var(--accent-cyan); }}
        .subtitle, .footer {{ color: var(--text-secondary); font-size: 0.85rem; }}
        .section h2 {{
            color: var(--accent-purple);
            margin-bottom: 1rem;
            border-bottom: 1px solid var(--border);
        }}
        table {{ width: 100%; border-collapse: collapse; }}
        th, td {{ padding: 0.5rem 1rem; text-align: left; border: 1px solid var(--border); }}
        th {{ background: var(--bg-tertiary); color: var(--accent-cyan); }}
        .finding {{
            padding: 1rem;
            margin: 0.5rem 0;
            border-left: 4px solid var(--border);
            background: var(--bg-tertiary);
        }}
        .finding p {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .severity-critical {{ border-left-color: var(--accent-red); }}
        .severity-high {{ border-left-color: #ff7b72; }}
        .severity-medium {{ border-left-color: var(--accent-yellow); }}
        .severity-low {{ border-left-color: var(--accent-cyan); }}
        .severity-info {{ border-left-color: var(--accent-green); }}
        pre {{ background: var(--bg-tertiary); padding: 1rem; overflow-x: auto; font-size: 0.85rem; }}
        .footer {{ text-align: center; margin-top: 2rem; }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>Security Playground</h1>
            <div class="subtitle">{tool} | {target}<br>Generated: {timestamp}</div>
        </div>

        <div class="section">
            <h2>Summary</h2>
            <p>{summary}</p>
            <table>
                <tr><th>Tool</th><td>{tool}</td><th>Target</th><td>{target}</td></tr>
                <tr><th>Duration</th><td>{duration}</td><th>Findings</th><td>{finding_count}</td></tr>
            </table>
        </div>

        <div class="section">
            <h2>Findings</h2>
            {findings_html}
        </div>

        {analysis_section}

        <div class="footer">Security Playground v{version} | heuristic feedback only</div>
    </div>
</body>
</html>
"""


class PlaygroundReportGenerator:
    """Writes :class:`ScanResult` objects as HTML or JSON reports.

    Usage::

        generator = PlaygroundReportGenerator()
        generator.generate_html(result, Path("report.html"))
        generator.generate_json(result, Path("report.json"))
    """

    def generate_html(
        self,
        result: ScanResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Render *result* as a standalone HTML page at *output_path*."""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        duration = result.duration_seconds

        content = _HTML_TEMPLATE.format(
            title=html.escape(title or result.target),
            tool=html.escape(result.tool_name),
            target=html.escape(result.target),
            timestamp=timestamp,
            summary=html.escape(result.summary),
            duration=f"{duration:.3f}s" if duration is not None else "n/a",
            finding_count=result.finding_count,
            findings_html=self._build_findings_html(result),
            analysis_section=self._build_analysis_section(result),
            version=__version__,
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        return output_path

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write :meth:`build_json` output to *output_path*."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(result), encoding="utf-8")
        return output_path

    def to_json(self, result: ScanResult) -> str:
        return json.dumps(self.build_json(result), indent=2, ensure_ascii=False, default=str)

    @staticmethod
    def build_json(result: ScanResult) -> dict[str, Any]:
        """Structured report body: metadata, summary, findings, analysis."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": __version__,
            },
            "summary": {
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "highest_severity": (
                    result.highest_severity.value if result.highest_severity else None
                ),
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [f.model_dump(mode="json") for f in result.findings],
            "analysis": result.metadata,
        }

    # ------------------------------------------------------------------ #
    #  Private HTML Builders
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_findings_html(result: ScanResult) -> str:
        if not result.findings:
            return "<p>No findings.</p>"

        parts: list[str] = []
        for finding in result.findings:
            parts.append(
                f'<div class="finding {finding.severity.css_class}">'
                f"<h3>[{finding.severity.value}] {html.escape(finding.title)}</h3>"
                f"<p>{html.escape(finding.description)}</p>"
            )
            if finding.recommendation:
                parts.append(
                    f"<p><strong>Recommendation:</strong> "
                    f"{html.escape(finding.recommendation)}</p>"
                )
            if finding.references:
                refs = ", ".join(html.escape(r) for r in finding.references)
                parts.append(f"<p>References: {refs}</p>")
            parts.append("</div>")
        return "\n".join(parts)

    @staticmethod
    def _build_analysis_section(result: ScanResult) -> str:
        if not result.metadata:
            return ""
        dumped = json.dumps(result.metadata, indent=2, ensure_ascii=False, default=str)
        return (
            '<div class="section"><h2>Analysis Data</h2>'
            f"<pre>{html.escape(dumped)}</pre></div>"
        )
