"""Pydantic model for cookies read from a browser store."""

from http.cookiejar import Cookie

from pydantic import BaseModel, ConfigDict


class CookieRecord(BaseModel):
    """A single cookie as read from one browser's cookie store."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    domain: str = ""
    browser: str = ""
    expires: int | None = None

    @classmethod
    def from_cookie(cls, cookie: Cookie, browser: str) -> "CookieRecord":
        return cls(
            name=cookie.name,
            value=cookie.value or "",
            domain=cookie.domain,
            browser=browser,
            expires=cookie.expires,
        )
