"""Tests for AocSessionConfig and CookieRecord."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from aoc_session.models import DEFAULT_BROWSERS, AocSessionConfig, CookieRecord


class TestConfigDefaults:
    """Tests for default configuration."""

    def test_defaults(self):
        """Defaults target the Advent of Code session cookie."""
        config = AocSessionConfig()
        assert config.domains == ["adventofcode.com"]
        assert config.cookie_name == "session"
        assert config.browsers == DEFAULT_BROWSERS
        assert config.log_level == "WARNING"
        assert config.log_file is None

    def test_default_browsers_not_shared(self):
        """Each config gets its own browser list."""
        config = AocSessionConfig()
        config.browsers.append("chrome")
        assert AocSessionConfig().browsers == DEFAULT_BROWSERS


class TestConfigEnvironment:
    """Tests for environment variable support."""

    def test_browsers_from_env(self, monkeypatch):
        """Browser priority can be set with a JSON list."""
        monkeypatch.setenv("AOC_SESSION_BROWSERS", '["Chrome", "firefox"]')
        assert AocSessionConfig().browsers == ["chrome", "firefox"]

    def test_log_settings_from_env(self, monkeypatch):
        """Logging settings come from the environment."""
        monkeypatch.setenv("AOC_SESSION_LOG_LEVEL", "debug")
        monkeypatch.setenv("AOC_SESSION_LOG_FILE", "aoc.log")
        config = AocSessionConfig()
        assert config.log_level == "DEBUG"
        assert config.log_file == Path("aoc.log")

    def test_env_file(self, tmp_path):
        """A .env file in the working directory is read."""
        (tmp_path / ".env").write_text('AOC_SESSION_DOMAINS=["example.com"]\n')
        assert AocSessionConfig().domains == ["example.com"]


class TestConfigValidation:
    """Tests for configuration validation."""

    def test_unknown_browser(self):
        """Unsupported browsers are rejected."""
        with pytest.raises(ValidationError, match="Unsupported browser"):
            AocSessionConfig(browsers=["mosaic"])

    def test_invalid_log_level(self):
        """Unknown log levels are rejected."""
        with pytest.raises(ValidationError, match="Invalid log level"):
            AocSessionConfig(log_level="LOUD")

    def test_empty_domains(self, monkeypatch):
        """At least one domain must be read."""
        with pytest.raises(ValidationError):
            AocSessionConfig(domains=[])

        monkeypatch.setenv("AOC_SESSION_DOMAINS", "[]")
        with pytest.raises(ValidationError):
            AocSessionConfig()

    def test_empty_cookie_name(self):
        """The cookie name cannot be empty."""
        with pytest.raises(ValidationError):
            AocSessionConfig(cookie_name="")


class TestCookieRecord:
    """Tests for CookieRecord."""

    def test_from_cookie(self, cookie_factory):
        """Cookie jar entries keep name, value, domain and expiry."""
        cookie = cookie_factory("session", "abc", expires=1_800_000_000)
        record = CookieRecord.from_cookie(cookie, "chrome")
        assert record == CookieRecord(
            name="session",
            value="abc",
            domain=".adventofcode.com",
            browser="chrome",
            expires=1_800_000_000,
        )

    def test_from_cookie_without_value(self, cookie_factory):
        """A valueless cookie becomes an empty string."""
        cookie = cookie_factory("flag", None)
        assert CookieRecord.from_cookie(cookie, "firefox").value == ""

    def test_records_are_frozen(self):
        """Records cannot be modified."""
        record = CookieRecord(name="session", value="abc")
        with pytest.raises(ValidationError):
            record.value = "def"  # type: ignore[misc]
