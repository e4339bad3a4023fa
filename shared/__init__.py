"""
Security Playground Shared Module
=================================

Configuration, structured logging, console presentation and result
models shared by the playground analyzers.
"""

from shared.config import PlaygroundConfig, get_config

__all__ = ["PlaygroundConfig", "get_config"]
