"""
Playground Generators
=====================

Secure random password generation.
"""

from playground.generators.password import PasswordGenerator

__all__ = ["PasswordGenerator"]
