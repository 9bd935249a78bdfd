"""Command-line interface for KON parsing.

Provides the ``kon`` tool for parsing, validating and inspecting KON files.
"""

from .main import main

__all__ = ["main"]
