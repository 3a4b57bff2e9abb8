"""Custom exception hierarchy for aoc-session."""


class AocSessionError(Exception):
    """Base exception for all aoc-session errors."""


class AcquireError(AocSessionError):
    """Raised when the session cookie could not be acquired."""


class ReaderFailedError(AcquireError):
    """Raised when the browser cookie reader itself failed.

    The underlying exception is kept in ``cause`` for diagnostics.
    """

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Cookie reader failed: {cause}")


class SessionNotFoundError(AcquireError):
    """Raised when no session cookie exists in any readable browser store."""

    def __init__(self, message: str = "No session cookie found"):
        super().__init__(message)
        self.hint = "If you haven't logged in to Advent of Code yet, please do so now."


class CookieReaderError(AocSessionError):
    """Raised when no browser cookie store could be read."""

    def __init__(self, message: str, causes: dict[str, Exception] | None = None):
        super().__init__(message)
        self.causes: dict[str, Exception] = causes or {}


class InvalidSessionError(AocSessionError, ValueError):
    """Raised when a session value is not a lowercase base-16 string."""
