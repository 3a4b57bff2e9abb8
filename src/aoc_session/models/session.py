"""Pydantic model for the Advent of Code session cookie value."""

import string

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..utils.exceptions import InvalidSessionError


SESSION_COOKIE_NAME = "session"
SESSION_ALPHABET = frozenset(string.digits + string.ascii_lowercase)


class AocSession(BaseModel):
    """Value of the session cookie for Advent of Code.

    The value can be used to get access to the puzzle input. ``str()`` gives
    the bare value, ``repr()`` gives the ``session=<value>`` cookie form.

    Example:
        session = aoc_session()
        httpx.get(url, headers={"Cookie": session.render_full()})
        print(f"My session ID: {session}")
    """

    model_config = ConfigDict(frozen=True, strict=True)

    value: str = Field(..., description="Raw cookie value, without the cookie name")

    @field_validator("value")
    @classmethod
    def check_alphabet(cls, value: str) -> str:
        """Reject anything but a lowercase base-16 style string."""
        for symbol in value:
            if symbol not in SESSION_ALPHABET:
                raise ValueError(
                    "Session cookie value must be a lowercase string "
                    "that represents a base-16 number"
                )
        return value

    @classmethod
    def new(cls, raw: str) -> "AocSession":
        """Build a validated session, for fixtures and debugging only.

        Raises:
            InvalidSessionError: If ``raw`` has a character outside 0-9, a-z
        """
        try:
            return cls(value=raw)
        except ValidationError as e:
            raise InvalidSessionError(str(e.errors()[0]["msg"])) from e

    @classmethod
    def trusted(cls, raw: str) -> "AocSession":
        """Wrap a value read from a browser store as is."""
        return cls.model_construct(value=raw)

    def render_full(self) -> str:
        """Return the value as a `session=<value>` cookie pair.

        The name is always `session`, whatever cookie name the value was
        acquired under.
        """
        return f"{SESSION_COOKIE_NAME}={self.value}"

    def render_bare(self) -> str:
        return self.value

    def as_cookies(self) -> dict[str, str]:
        """Return the cookie mapping expected by ``cookies=`` of HTTP clients."""
        return {SESSION_COOKIE_NAME: self.value}

    def __str__(self) -> str:
        return self.render_bare()

    def __repr__(self) -> str:
        return self.render_full()
