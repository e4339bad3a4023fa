"""
Playground Core Module
======================

Data models, exceptions and the analysis engine.

The engine and the module-level analysis functions are resolved lazily:
the analyzers import ``playground.core.models``, so importing the engine
eagerly here would be circular.
"""

from __future__ import annotations

import importlib
from typing import Any

from playground.core.exceptions import InvalidConfigurationError, PlaygroundError
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
    VulnerabilityType,
)

_ENGINE_EXPORTS = frozenset({
    "PlaygroundEngine",
    "analyze_password",
    "check_headers",
    "compute_digest",
    "decode_token",
    "detect_vulnerabilities",
    "generate_password",
})


def __getattr__(name: str) -> Any:
    if name in _ENGINE_EXPORTS:
        engine = importlib.import_module("playground.core.engine")
        return getattr(engine, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "DigestAlgorithm",
    "DigestResult",
    "ExpirationStatus",
    "GenerationOptions",
    "HeaderAnalysis",
    "InvalidConfigurationError",
    "PasswordAnalysis",
    "PlaygroundEngine",
    "PlaygroundError",
    "RiskTier",
    "TokenAnalysis",
    "Vulnerability",
    "VulnerabilityType",
    "analyze_password",
    "check_headers",
    "compute_digest",
    "decode_token",
    "detect_vulnerabilities",
    "generate_password",
]
