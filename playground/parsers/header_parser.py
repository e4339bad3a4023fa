"""
HTTP Header Parser
===================

Parses raw ``Name: Value`` header text (one header per line, as copied
from browser developer tools or ``curl -I``) into a mapping keyed by the
lowercased header name.
"""

from __future__ import annotations


class HeaderParser:
    """Lenient line-oriented header parser.

    Lines without a colon, with a colon in first position, or with an empty
    name or value are skipped.  Later duplicates replace earlier ones.
    """

    @staticmethod
    def parse(raw_headers: str) -> dict[str, str]:
        headers: dict[str, str] = {}
        for line in raw_headers.split("\n"):
            colon = line.find(":")
            if colon <= 0:
                continue
            key = line[:colon].strip().lower()
            value = line[colon + 1:].strip()
            if key and value:
                headers[key] = value
        return headers
