"""Data models for aoc-session."""

from .config import AOC_DOMAIN, DEFAULT_BROWSERS, AocSessionConfig
from .cookie import CookieRecord
from .session import SESSION_COOKIE_NAME, AocSession


__all__ = [
    "AOC_DOMAIN",
    "DEFAULT_BROWSERS",
    "SESSION_COOKIE_NAME",
    "AocSession",
    "AocSessionConfig",
    "CookieRecord",
]
