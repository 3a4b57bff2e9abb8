"""Browser cookie store reader backed by browser_cookie3."""

import logging
import sqlite3
from collections.abc import Iterable, Sequence
from typing import Protocol

import browser_cookie3

from ..models import DEFAULT_BROWSERS, CookieRecord
from ..utils.exceptions import CookieReaderError


logger = logging.getLogger(__name__)

# Failures that only mean "this browser's store is unavailable";
# browser_cookie3 raises RuntimeError when DPAPI decryption fails
READ_ERRORS = (browser_cookie3.BrowserCookieError, OSError, RuntimeError, sqlite3.Error)


class CookieReader(Protocol):
    """Anything that can return the cookies stored for a set of domains."""

    def load(self, domains: Sequence[str] | None = None) -> list[CookieRecord]: ...


class BrowserCookieReader:
    """Read cookies from every installed browser, in priority order.

    Each browser is a separate ``browser_cookie3`` loader. Records come back
    grouped by browser following ``browsers``; inside one browser, cookies
    with the latest expiry come first.

    Example:
        reader = BrowserCookieReader(["firefox", "chrome"])
        for record in reader.load(["adventofcode.com"]):
            print(record.browser, record.name)
    """

    def __init__(self, browsers: Iterable[str] | None = None):
        """Initialize the reader.

        Args:
            browsers: Browser names in priority order (default: all supported)

        Raises:
            ValueError: If a browser name is not supported
        """
        self.browsers = list(DEFAULT_BROWSERS if browsers is None else browsers)
        unknown = [name for name in self.browsers if name not in DEFAULT_BROWSERS]
        if unknown:
            raise ValueError(f"Unsupported browser(s): {', '.join(unknown)}")

    def load(self, domains: Sequence[str] | None = None) -> list[CookieRecord]:
        """Load cookies for ``domains`` (every domain when None).

        Raises:
            CookieReaderError: If no browser store could be read at all
        """
        if not self.browsers:
            raise CookieReaderError("no supported browser configured")

        targets = [""] if domains is None else list(domains)
        records: list[CookieRecord] = []
        failures: dict[str, Exception] = {}

        for browser in self.browsers:
            try:
                found = self._load_browser(browser, targets)
            except READ_ERRORS as e:
                logger.debug(f"Skipping {browser}: {e}")
                failures[browser] = e
                continue
            logger.debug(f"Read {len(found)} cookie(s) from {browser}")
            records.extend(found)

        if len(failures) == len(self.browsers):
            summary = "; ".join(f"{name}: {err}" for name, err in failures.items())
            raise CookieReaderError(f"Could not read cookies from any browser ({summary})", failures)

        return records

    def _load_browser(self, browser: str, domains: list[str]) -> list[CookieRecord]:
        loader = getattr(browser_cookie3, browser)
        found = [
            CookieRecord.from_cookie(cookie, browser)
            for domain in domains
            for cookie in loader(domain_name=domain)
        ]
        # Stable sort keeps the store order among equal expiries
        return sorted(found, key=lambda record: -(record.expires or 0))
