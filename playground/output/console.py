"""
Playground Console Output
==========================

Rich-based console output formatters for the Security Playground.
Provides a colour-coded password strength meter, detector findings,
generated passwords, digests, decoded tokens and the security-header
checklist.

Uses the shared console infrastructure for consistent styling across all
playground commands.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

import json
from typing import Optional

from rich.panel import Panel
from rich.text import Text

from shared.console import PlaygroundConsole

from playground.core.models import (
    DigestResult,
    ExpirationStatus,
    HeaderAnalysis,
    PasswordAnalysis,
    RiskTier,
    TokenAnalysis,
    Vulnerability,
)


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_RISK_COLOURS: dict[RiskTier, str] = {
    RiskTier.HIGH: "bold red",
    RiskTier.MEDIUM: "bold yellow",
    RiskTier.LOW: "bold bright_cyan",
}

_EXPIRATION_COLOURS: dict[ExpirationStatus, str] = {
    ExpirationStatus.VALID: "green",
    ExpirationStatus.EXPIRED: "bold red",
    ExpirationStatus.NONE: "yellow",
}

# (upper bound exclusive, label, colour)
_STRENGTH_TIERS: tuple[tuple[int, str, str], ...] = (
    (20, "VERY WEAK", "bold white on red"),
    (40, "WEAK", "bold red"),
    (60, "FAIR", "bold yellow"),
    (80, "STRONG", "bold green"),
    (101, "VERY STRONG", "bold bright_green"),
)


def strength_label(score: int) -> tuple[str, str]:
    """Label and Rich style for a 0-100 password score."""
    for upper, label, colour in _STRENGTH_TIERS:
        if score < upper:
            return label, colour
    return _STRENGTH_TIERS[-1][1], _STRENGTH_TIERS[-1][2]


class PlaygroundConsoleOutput:
    """Console output formatters for playground results.

    Usage::

        output = PlaygroundConsoleOutput(PlaygroundConsole())
        output.display_password(analysis)
        output.display_vulnerabilities(vulns)
    """

    def __init__(self, console: Optional[PlaygroundConsole] = None) -> None:
        self.console = console or PlaygroundConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Password Display
    # ------------------------------------------------------------------ #

    def display_password(self, result: PasswordAnalysis) -> None:
        """Display password analysis with a visual strength meter.

        Args:
            result: PasswordAnalysis from the strength analyzer.
        """
        self.console.section("Password Analysis")

        label, colour = strength_label(result.score)
        meter_width = 40
        filled = max(0, min(meter_width, int(result.score / 100 * meter_width)))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{result.score}/100  ")
        meter.append("[", style="dim")
        for i in range(meter_width):
            if i >= filled:
                meter.append("░", style="dim")
            elif i < meter_width * 0.25:
                meter.append("█", style="red")
            elif i < meter_width * 0.50:
                meter.append("█", style="yellow")
            elif i < meter_width * 0.75:
                meter.append("█", style="green")
            else:
                meter.append("█", style="bright_green")
        meter.append("]", style="dim")
        meter.append("  ")
        meter.append(label, style=colour)

        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))

        tbl = self.console.new_table()
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")
        tbl.add_row("Length", str(result.length))
        tbl.add_row("Character Pool", str(result.pool_size))
        tbl.add_row("Entropy", f"{result.entropy:.2f} bits")
        self._rich.print(tbl)

        crack_tbl = self.console.new_table("Crack Time Estimates")
        crack_tbl.add_column("Attack Scenario", style="bold")
        crack_tbl.add_column("Speed", justify="right")
        crack_tbl.add_column("Estimated Time", justify="right")
        crack_tbl.add_row("Single CPU", "1e+07 g/s", result.crack_time_cpu)
        crack_tbl.add_row("GPU", "1e+11 g/s", result.crack_time_gpu)
        crack_tbl.add_row("Distributed", "1e+13 g/s", result.crack_time_distributed)
        self._rich.print(crack_tbl)

        if result.vulnerabilities:
            self._rich.print()
            self._rich.print("[bold]Weaknesses:[/bold]")
            for flag in result.vulnerabilities:
                self._rich.print(Text.assemble(("  ⚠ ", "yellow"), flag))

        if result.suggestions:
            self._rich.print()
            self._rich.print("[bold]Suggestions:[/bold]")
            for suggestion in result.suggestions:
                self._rich.print(Text.assemble(("  • ", "bright_cyan"), suggestion))

    # ------------------------------------------------------------------ #
    #  Detector Display
    # ------------------------------------------------------------------ #

    def display_vulnerabilities(self, vulns: list[Vulnerability]) -> None:
        """Display detector findings, one row per category."""
        self.console.section("Injection Pattern Detection")

        if not vulns:
            self.console.success("No injection patterns detected.")
            return

        tbl = self.console.new_table("Detected Patterns")
        tbl.add_column("Category", style="bold")
        tbl.add_column("Risk", justify="center")
        tbl.add_column("Pattern")
        tbl.add_column("Explanation", ratio=2)
        for vuln in vulns:
            tbl.add_row(
                vuln.type.value,
                Text(vuln.risk.value, style=_RISK_COLOURS[vuln.risk]),
                Text(vuln.pattern, style="dim"),
                Text(vuln.explanation),
            )
        self._rich.print(tbl)

        self._rich.print()
        self._rich.print("[bold]Remediation:[/bold]")
        for vuln in vulns:
            self._rich.print(Text.assemble(
                ("  • ", "bright_cyan"),
                (f"{vuln.type.value}: ", "bold"),
                vuln.remediation,
            ))

    # ------------------------------------------------------------------ #
    #  Generator / Digest Display
    # ------------------------------------------------------------------ #

    def display_generated(self, password: str, analysis: Optional[PasswordAnalysis] = None) -> None:
        self.console.section("Generated Password")
        body = Text(password, style="bold bright_green")
        if analysis is not None:
            label, colour = strength_label(analysis.score)
            body.append("\n")
            body.append(f"{analysis.entropy:.2f} bits  ", style="dim")
            body.append(label, style=colour)
        self._rich.print(Panel(body, title=f"{len(password)} characters", border_style="cyan"))

    def display_digest(self, result: DigestResult) -> None:
        self.console.section("Digest")
        tbl = self.console.new_table()
        tbl.add_column("Algorithm", style="bold")
        tbl.add_column("Bits", justify="right")
        tbl.add_column("Hex Digest", overflow="fold")
        tbl.add_row(result.algorithm.value, str(result.bit_length), result.hex_digest)
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Token Display
    # ------------------------------------------------------------------ #

    def display_token(self, result: TokenAnalysis) -> None:
        """Display a decoded JWT: claims, expiry and warnings."""
        self.console.section("JWT Decode")

        if result.errors:
            for error in result.errors:
                self.console.error(error)

        summary = Text()
        summary.append("Algorithm: ", style="bold")
        summary.append(f"{result.algorithm}\n")
        summary.append("Expiration: ", style="bold")
        summary.append(
            result.expiration.value.upper(),
            style=_EXPIRATION_COLOURS[result.expiration],
        )
        if result.expiration_time:
            summary.append(f" ({result.expiration_time})")
        self._rich.print(Panel(summary, title="Overview", border_style="cyan"))

        for title, part in (("Header", result.header), ("Payload", result.payload)):
            if part is not None:
                self._rich.print(Panel(
                    Text(json.dumps(part, indent=2, sort_keys=True)),
                    title=title,
                    border_style="bright_cyan",
                ))

        for warning in result.warnings:
            self.console.warning(warning)

    # ------------------------------------------------------------------ #
    #  Header Checklist Display
    # ------------------------------------------------------------------ #

    def display_headers(self, result: HeaderAnalysis) -> None:
        """Display the security-header checklist and coverage score."""
        self.console.section("Security Headers")

        _, colour = strength_label(result.score)
        score = Text()
        score.append("Score: ", style="bold")
        score.append(f"{result.score}/100", style=colour)
        self._rich.print(Panel(score, title="Coverage", border_style="cyan"))

        tbl = self.console.new_table("Checklist")
        tbl.add_column("Header", style="bold")
        tbl.add_column("Status", justify="center")
        tbl.add_column("Value / Recommendation", ratio=2)
        for present in result.present:
            tbl.add_row(present.name, Text("PRESENT", style="green"), Text(present.value))
        for missing in result.missing:
            tbl.add_row(
                missing.name,
                Text("MISSING", style="bold red"),
                Text(missing.recommendation, style="dim"),
            )
        self._rich.print(tbl)
