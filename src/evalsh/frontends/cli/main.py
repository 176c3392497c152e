"""CLI entry point."""

from __future__ import annotations

import asyncio
import sys

import rich_click as click

from evalsh.config import load_config
from evalsh.core.errors import ConfigError
from evalsh.core.logging_config import configure_logging

# Configure rich-click styling
click.rich_click.USE_RICH_MARKUP = True
click.rich_click.USE_MARKDOWN = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running '--help' for more information."
click.rich_click.ERRORS_EPILOGUE = ""
click.rich_click.MAX_WIDTH = 100

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _common_options(f):
    f = click.option(
        "--log-level",
        type=click.Choice(LOG_LEVELS, case_sensitive=False),
        default=None,
        help="Log level (default: EVALSH_LOG_LEVEL or WARNING)",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_file",
        default=None,
        help="YAML config file (default: EVALSH_CONFIG)",
    )(f)
    f = click.option("--url", "-u", default=None, help="Server base URL (default: EVALSH_URL)")(f)
    return f


def _resolve_config(config_file: str | None, url: str | None, log_level: str | None):
    configure_logging(level=log_level)
    try:
        return load_config(config_file, server_url=url)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="evalsh")
def cli() -> None:
    """evalsh - interactive Python shell for HTTP document databases.

    **Commands:**

        evalsh repl     Interactive read-eval-print loop

        evalsh run      Run a script file with the same helpers
    """
    pass


@cli.command()
@_common_options
def repl(url: str | None, config_file: str | None, log_level: str | None) -> None:
    """Interactive read-eval-print loop.

    Lines are buffered until they form a complete statement, then evaluated
    in a persistent namespace preloaded with `http`, `db(name)` and friends.
    Top-level `await` works. An empty line exits.

    **Examples:**

        evalsh repl

        evalsh repl --url http://127.0.0.1:5984

        EVALSH_URL=http://db:5984 evalsh repl --log-level debug
    """
    from evalsh.frontends.cli.repl import run_interactive

    config = _resolve_config(config_file, url, log_level)
    asyncio.run(run_interactive(config=config))


@cli.command()
@click.argument("file")
@_common_options
def run(file: str, url: str | None, config_file: str | None, log_level: str | None) -> None:
    """Run a script file with the shell's preloaded helpers.

    **Examples:**

        evalsh run purge_check.py

        evalsh run setup.py --url http://127.0.0.1:5984
    """
    from evalsh.frontends.cli.repl import run_from_file

    config = _resolve_config(config_file, url, log_level)
    sys.exit(asyncio.run(run_from_file(file, config=config)))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
