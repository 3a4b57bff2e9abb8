"""
Click-based CLI commands for aoc-session.

The session value is written to stdout with nothing else on the line, so
it can be captured by scripts; every other message goes to stderr.
"""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError
from rich.console import Console

from .. import __version__
from ..client import SessionAcquirer
from ..logger import get_logger, get_valid_log_levels, setup_logger
from ..models import (
    DEFAULT_BROWSERS,
    SESSION_COOKIE_NAME,
    AocSession,
    AocSessionConfig,
    CookieRecord,
)
from ..utils.exceptions import AcquireError, ReaderFailedError, SessionNotFoundError


console = Console()
err_console = Console(stderr=True)


def lookup_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by the commands that read the browsers."""
    options = [
        click.option(
            "--browser",
            "-b",
            "browsers",
            type=click.Choice(DEFAULT_BROWSERS, case_sensitive=False),
            multiple=True,
            help="Browser to read. Repeat to set a priority order (default: all supported).",
        ),
        click.option(
            "--domain",
            "-d",
            "domains",
            multiple=True,
            help="Cookie domain to read (default: adventofcode.com).",
        ),
        click.option(
            "--log-level",
            type=click.Choice(get_valid_log_levels(), case_sensitive=False),
            default=None,
            help="Set the logging level for detailed output.",
        ),
        click.option(
            "--log-file",
            type=click.Path(dir_okay=False, path_type=Path),
            default=None,
            help="Write log records to this file instead of stderr.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_config(
    browsers: tuple[str, ...],
    domains: tuple[str, ...],
    log_level: str | None,
    log_file: Path | None,
) -> AocSessionConfig:
    """Merge command-line overrides into the environment configuration."""
    overrides: dict[str, Any] = {}
    if browsers:
        overrides["browsers"] = list(browsers)
    if domains:
        overrides["domains"] = list(domains)
    if log_level:
        overrides["log_level"] = log_level
    if log_file:
        overrides["log_file"] = log_file

    try:
        config = AocSessionConfig(**overrides)
    except ValidationError as e:
        err_console.print(f"[bold red]✗ Invalid configuration:[/bold red]\n{e}")
        sys.exit(1)

    setup_logger(
        "aoc_session",
        config.log_level,
        log_file=str(config.log_file) if config.log_file else None,
    )
    return config


def locate_session(config: AocSessionConfig) -> CookieRecord:
    """Find the session cookie or exit with a readable error."""
    logger = get_logger("aoc_session.cli")
    logger.debug(f"Looking up {config.cookie_name!r} for {', '.join(config.domains)}")

    try:
        return SessionAcquirer.from_config(config).locate()
    except SessionNotFoundError as e:
        err_console.print(f"[bold red]✗ {e}[/bold red]\n  {e.hint}")
    except ReaderFailedError as e:
        logger.debug("Cookie reader failure", exc_info=e.cause)
        err_console.print(f"[bold red]✗ {e}[/bold red]")
    except AcquireError as e:
        err_console.print(f"[bold red]✗ {e}[/bold red]")
    sys.exit(1)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """
    aoc-session - Read your Advent of Code session cookie from local browsers.

    \b
    Configuration:
    - Environment variables prefixed with AOC_SESSION_ (or a .env file)
    - e.g. AOC_SESSION_BROWSERS='["firefox", "chrome"]'

    \b
    Examples:
      # Print the bare session value
      aoc-session show

      # Print it as a cookie header value
      aoc-session show --full

      # Only look in Firefox, then Chrome
      aoc-session show -b firefox -b chrome
    """
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


@cli.command()
@click.option(
    "--full",
    is_flag=True,
    default=False,
    help="Print the value as 'session=<value>', ready for a Cookie header.",
)
@lookup_options
def show(
    full: bool,
    browsers: tuple[str, ...],
    domains: tuple[str, ...],
    log_level: str | None,
    log_file: Path | None,
) -> None:
    """Print the session cookie value found in the local browsers."""
    config = build_config(browsers, domains, log_level, log_file)
    record = locate_session(config)
    if not full:
        click.echo(record.value)
    elif record.name == SESSION_COOKIE_NAME:
        click.echo(AocSession.trusted(record.value).render_full())
    else:
        # AocSession only renders the session cookie name
        click.echo(f"{record.name}={record.value}")


@cli.command()
@lookup_options
def check(
    browsers: tuple[str, ...],
    domains: tuple[str, ...],
    log_level: str | None,
    log_file: Path | None,
) -> None:
    """Verify that a session cookie can be read, without printing it."""
    config = build_config(browsers, domains, log_level, log_file)
    record = locate_session(config)
    err_console.print(
        f"[bold green]✓ Session cookie found![/bold green]\n"
        f"  Browser: {record.browser or 'unknown'}\n"
        f"  Domain: {record.domain or 'unknown'}\n"
        f"  Length: {len(record.value)} characters"
    )


@cli.command(name="browsers")
def list_browsers() -> None:
    """List supported browsers in default priority order."""
    for name in DEFAULT_BROWSERS:
        console.print(name)


@cli.command()
def version() -> None:
    """Display the version of aoc-session."""
    console.print(f"[bold cyan]aoc-session[/bold cyan] version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
