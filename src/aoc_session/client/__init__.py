"""Browser cookie access for aoc-session."""

from .acquirer import SessionAcquirer, aoc_session
from .reader import BrowserCookieReader, CookieReader


__all__ = ["BrowserCookieReader", "CookieReader", "SessionAcquirer", "aoc_session"]
