"""
aoc-session CLI module.

This module provides a Click-based command-line interface for aoc-session.
"""

from .commands import cli


__all__ = ["cli"]
