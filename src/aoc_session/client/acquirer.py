"""Acquire the Advent of Code session cookie from local browsers."""

from collections.abc import Sequence

from ..models import AOC_DOMAIN, SESSION_COOKIE_NAME, AocSession, AocSessionConfig, CookieRecord
from ..utils.exceptions import ReaderFailedError, SessionNotFoundError
from .reader import BrowserCookieReader, CookieReader


class SessionAcquirer:
    """Find the session cookie for a domain in the browsers' cookie stores.

    Every call to ``acquire()`` reads the stores again; nothing is cached
    and nothing is retried. After logging in, or after granting access to
    a browser profile, just call it again.

    Example:
        acquirer = SessionAcquirer()
        session = acquirer.acquire()
        print(session.render_full())  # session=53616c7465...
    """

    def __init__(
        self,
        reader: CookieReader | None = None,
        domains: Sequence[str] = (AOC_DOMAIN,),
        cookie_name: str = SESSION_COOKIE_NAME,
    ):
        self.reader = reader if reader is not None else BrowserCookieReader()
        self.domains = list(domains)
        self.cookie_name = cookie_name

    @classmethod
    def from_config(cls, config: AocSessionConfig) -> "SessionAcquirer":
        return cls(
            reader=BrowserCookieReader(config.browsers),
            domains=config.domains,
            cookie_name=config.cookie_name,
        )

    def locate(self) -> CookieRecord:
        """Return the first cookie record named ``cookie_name``.

        Raises:
            ReaderFailedError: If the cookie reader failed
            SessionNotFoundError: If no browser holds a session cookie
        """
        try:
            cookies = self.reader.load(self.domains)
        except Exception as e:
            raise ReaderFailedError(e) from e

        for cookie in cookies:
            if cookie.name == self.cookie_name:
                return cookie

        raise SessionNotFoundError()

    def acquire(self) -> AocSession:
        """Return the session found in the first browser that holds one.

        Returns:
            The session, unvalidated, exactly as stored by the browser

        Raises:
            ReaderFailedError: If the cookie reader failed
            SessionNotFoundError: If no browser holds a session cookie
        """
        return AocSession.trusted(self.locate().value)


def aoc_session() -> AocSession:
    """Get the session cookie for Advent of Code.

    Works for every browser supported by browser_cookie3, but reading all
    of them is slow.

    Raises:
        ReaderFailedError: If the cookie reader failed
        SessionNotFoundError: If no browser holds a session cookie
    """
    return SessionAcquirer().acquire()
