"""
Security Playground
===================

Client-side heuristic analyzers for security experiments: password
strength and entropy scoring, injection payload detection, secure
password generation, digests, token inspection and a security-header
checklist.  Results are quick, non-authoritative feedback.

Modules:
    - playground.core.engine: Facade returning ScanResult objects
    - playground.core.models: Pydantic data models
    - playground.analyzers: Individual analyzers and the rule table
    - playground.generators: CSPRNG-backed password generation
    - playground.parsers: Token and header parsing
    - playground.output: Console and report output
    - playground.cli: Click-based command-line interface
"""

__version__ = "1.0.0"
__tool_name__ = "playground"
