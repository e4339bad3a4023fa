"""
Playground Output Module
========================

Console display and report generation for playground results.
"""

from playground.output.console import PlaygroundConsoleOutput
from playground.output.report import PlaygroundReportGenerator

__all__ = [
    "PlaygroundConsoleOutput",
    "PlaygroundReportGenerator",
]
