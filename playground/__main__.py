"""
Playground Module Entry Point
=============================

Allows running the CLI via: python -m playground
"""

from playground.cli import main

if __name__ == "__main__":
    main()
