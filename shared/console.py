"""
Security Playground Console Interface
======================================

Rich-powered console abstraction giving every playground command the same
banner, section headers, severity-coloured messages and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_PLAYGROUND_THEME = Theme(
    {
        "pg.banner": "bold bright_cyan",
        "pg.section": "bold bright_magenta",
        "pg.success": "bold green",
        "pg.warning": "bold yellow",
        "pg.error": "bold red",
        "pg.dim": "dim white",
        "pg.critical": "bold white on red",
        "pg.high": "bold red",
        "pg.medium": "bold yellow",
        "pg.low": "bold bright_cyan",
        "pg.informational": "bold bright_blue",
    }
)

_TAGLINE = "Security Playground -- heuristic password & payload analyzers"
_DISCLAIMER = "Educational feedback only. Not a production defence layer."

SEVERITY_STYLES: dict[str, str] = {
    "CRITICAL": "pg.critical",
    "HIGH": "pg.high",
    "MEDIUM": "pg.medium",
    "LOW": "pg.low",
    "INFO": "pg.informational",
}


class PlaygroundConsole:
    """Unified console interface for all playground commands.

    Usage::

        con = PlaygroundConsole()
        con.banner()
        con.section("Password Analysis")
        con.success("Done")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (library / test mode).
            record: Keep rendered output for ``export_text``.
        """
        self._console = Console(
            theme=_PLAYGROUND_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    def banner(self, version: str = "1.0.0") -> None:
        """Display the title panel."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        body = Text.from_markup(
            f"[pg.banner]SECURITY PLAYGROUND[/pg.banner]\n"
            f"{_TAGLINE}\n"
            f"[pg.dim]{_DISCLAIMER}[/pg.dim]\n"
            f"[pg.dim]Version: {version}  |  {now}[/pg.dim]"
        )
        self._console.print(
            Panel(Align.center(body), border_style="bright_cyan", padding=(1, 2))
        )

    def section(self, title: str) -> None:
        """Print a section rule."""
        self._console.rule(f"  {title}  ", style="pg.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[pg.success][✔] SUCCESS:[/pg.success] {message}")

    def warning(self, message: str) -> None:
        self._console.print(f"[pg.warning][⚠] WARNING:[/pg.warning] {message}")

    def error(self, message: str) -> None:
        self._console.print(f"[pg.error][✘] ERROR:[/pg.error] {message}")

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    @staticmethod
    def new_table(title: str | None = None) -> Table:
        """Create a table in the house style."""
        return Table(
            title=title,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render findings with severity colouring.

        Expects objects with ``severity``, ``title`` and ``description``
        attributes (e.g. :class:`shared.models.Finding`).
        """
        tbl = self.new_table("Findings")
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev_name = finding.severity.value
            style = SEVERITY_STYLES.get(sev_name)
            sev_cell = f"[{style}]{sev_name}[/{style}]" if style else sev_name
            tbl.add_row(
                str(idx),
                sev_cell,
                Text(finding.title),
                Text(finding.description),
            )

        self._console.print(tbl)

