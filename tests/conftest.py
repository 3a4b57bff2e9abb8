"""Shared pytest fixtures and configuration for aoc-session tests."""

from http.cookiejar import Cookie
from typing import Any

import pytest

from aoc_session.models import CookieRecord


SESSION_VALUE = (
    "25a16c7465645f5f286128b604b18e3d5a906611b3eac6740672d5e471a7ab0d"
    "3af049fb7363eadb2e07edfe51b600927ddd29b2311ea418ce366e8b9cf98dcc"
)


class FakeReader:
    """Cookie reader that returns canned records or raises a canned error."""

    def __init__(self, records: Any = None, error: Exception | None = None):
        self.records = [] if records is None else records
        self.error = error
        self.calls: list[Any] = []

    def load(self, domains=None):
        self.calls.append(domains)
        if self.error is not None:
            raise self.error
        return self.records


def make_cookie(
    name: str,
    value: str,
    domain: str = ".adventofcode.com",
    expires: int | None = None,
) -> Cookie:
    """Build an http.cookiejar.Cookie like the ones browser_cookie3 returns."""
    return Cookie(
        version=0,
        name=name,
        value=value,
        port=None,
        port_specified=False,
        domain=domain,
        domain_specified=True,
        domain_initial_dot=domain.startswith("."),
        path="/",
        path_specified=True,
        secure=True,
        expires=expires,
        discard=False,
        comment=None,
        comment_url=None,
        rest={},
    )


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep user settings and .env files out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("DOMAINS", "COOKIE_NAME", "BROWSERS", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"AOC_SESSION_{name}", raising=False)


@pytest.fixture
def session_value() -> str:
    """A realistic session cookie value."""
    return SESSION_VALUE


@pytest.fixture
def session_records(session_value) -> list[CookieRecord]:
    """Records as read for adventofcode.com, with the session cookie second."""
    return [
        CookieRecord(name="theme", value="dark", domain=".adventofcode.com", browser="firefox"),
        CookieRecord(
            name="session", value=session_value, domain=".adventofcode.com", browser="firefox"
        ),
    ]


@pytest.fixture
def cookie_factory():
    """Factory for browser_cookie3 style cookies."""
    return make_cookie


@pytest.fixture
def reader_factory():
    """Factory for fake cookie readers."""
    return FakeReader
