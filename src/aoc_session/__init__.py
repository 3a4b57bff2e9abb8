"""Read the Advent of Code session cookie from the browsers on this machine."""

__version__ = "0.1.0"

from .client import BrowserCookieReader, CookieReader, SessionAcquirer, aoc_session
from .models import AocSession, AocSessionConfig, CookieRecord
from .utils.exceptions import (
    AcquireError,
    AocSessionError,
    CookieReaderError,
    InvalidSessionError,
    ReaderFailedError,
    SessionNotFoundError,
)


__all__ = [
    "AcquireError",
    "AocSession",
    "AocSessionConfig",
    "AocSessionError",
    "BrowserCookieReader",
    "CookieReader",
    "CookieReaderError",
    "CookieRecord",
    "InvalidSessionError",
    "ReaderFailedError",
    "SessionAcquirer",
    "SessionNotFoundError",
    "aoc_session",
]
