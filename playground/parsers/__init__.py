"""
Playground Parsers
==================

Input parsing for token inspection and the header checklist.
"""

from playground.parsers.header_parser import HeaderParser
from playground.parsers.token_parser import TokenParser

__all__ = [
    "HeaderParser",
    "TokenParser",
]
