"""
Token Parser
=============

Structural decoding of JSON Web Tokens.  The header and payload segments
are base64url-decoded (padding restored to a multiple of four) and parsed
as JSON objects, then inspected for common security problems:

    - ``alg: none``  -- unsigned token
    - ``exp``        -- expired / valid / missing
    - ``exp - iat``  -- lifetimes longer than a day

Signatures are never verified.  Problems are reported through the
``errors`` and ``warnings`` lists of :class:`TokenAnalysis`; decoding never
raises.

References:
    - RFC 7519 (2015). JSON Web Token (JWT).
    - RFC 4648 (2006), Section 5. Base 64 Encoding with URL and Filename
      Safe Alphabet.
    - OWASP JSON Web Token Cheat Sheet.
"""

from __future__ import annotations

import base64
import binascii
import json
import math
import time
from typing import Any, Optional

from playground.core.models import ExpirationStatus, TokenAnalysis

_UNITS: tuple[tuple[str, int], ...] = (
    ("day", 86_400),
    ("hour", 3_600),
    ("minute", 60),
)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def _finite_number(value: Any) -> Optional[float]:
    """*value* as a finite float, or ``None`` for anything else."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def decode_base64url_json(segment: str) -> Optional[dict[str, Any]]:
    """Decode one base64url JSON segment; ``None`` if it is not an object.

    ``NaN``, ``Infinity`` and ``-Infinity`` are not JSON and fail the decode.
    """
    padded = segment + "=" * (-len(segment) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        decoded = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (binascii.Error, UnicodeError, ValueError):
        return None
    return decoded if isinstance(decoded, dict) else None


def format_time_difference(seconds: float) -> str:
    """Largest whole unit of an absolute difference, e.g. ``"3 hours"``."""
    remaining = int(abs(seconds))
    for unit, size in _UNITS:
        count = remaining // size
        if count > 0:
            return f"{count} {unit}{'s' if count > 1 else ''}"
    return f"{remaining} second{'s' if remaining > 1 else ''}"


class TokenParser:
    """Decodes and inspects a JWT without verifying it.

    Usage::

        parser = TokenParser()
        result = parser.decode(token)
        if result.warnings:
            ...
    """

    def __init__(self, max_lifetime_seconds: int = 86_400) -> None:
        self.max_lifetime_seconds = max_lifetime_seconds

    def decode(self, token: str, now: Optional[float] = None) -> TokenAnalysis:
        """Decode *token*, classifying ``exp`` against *now* (epoch seconds).

        *now* defaults to the current time.
        """
        now = time.time() if now is None else now
        errors: list[str] = []
        warnings: list[str] = []

        if not token or not isinstance(token, str):
            return TokenAnalysis(errors=["Token is empty or invalid"])

        parts = token.strip().split(".")
        if len(parts) != 3:
            return TokenAnalysis(errors=["Invalid JWT format (must have 3 parts)"])

        header = decode_base64url_json(parts[0])
        algorithm = "unknown"
        if header is None:
            errors.append("Failed to decode header")
        else:
            algorithm = str(header.get("alg") or "unknown")
            if algorithm.lower() == "none":
                warnings.append(
                    'INSECURE: Algorithm "none" detected - token is not signed!'
                )

        payload = decode_base64url_json(parts[1])
        if payload is None:
            errors.append("Failed to decode payload")

        expiration = ExpirationStatus.NONE
        expiration_time: Optional[str] = None
        if payload is not None:
            expiration, expiration_time = self._inspect_expiry(payload, now, warnings)

        return TokenAnalysis(
            valid=not errors,
            header=header,
            payload=payload,
            algorithm=algorithm,
            expiration=expiration,
            expiration_time=expiration_time,
            warnings=warnings,
            errors=errors,
        )

    def _inspect_expiry(
        self,
        payload: dict[str, Any],
        now: float,
        warnings: list[str],
    ) -> tuple[ExpirationStatus, Optional[str]]:
        # Non-numeric, non-finite and overflowing values count as absent.
        exp = _finite_number(payload.get("exp"))
        if exp is None:
            warnings.append("No expiration claim (exp) - token never expires")
            return ExpirationStatus.NONE, None

        diff = format_time_difference(exp - now)
        if exp < now:
            status, label = ExpirationStatus.EXPIRED, f"Expired {diff}"
        else:
            status, label = ExpirationStatus.VALID, f"Expires in {diff}"

        issued = _finite_number(payload.get("iat")) or int(now)
        if exp - issued > self.max_lifetime_seconds:
            hours = self.max_lifetime_seconds // 3600
            warnings.append(
                "Token has long expiration "
                f"(more than {hours} hour{'s' if hours != 1 else ''})"
            )

        return status, label
