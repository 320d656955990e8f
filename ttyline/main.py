"""
ttyline command line interface.

Usage:
    ttyline config
    ttyline size
    ttyline get rows
    ttyline sane
    ttyline stty -a
"""

import logging
from typing import Optional, Tuple

import click

from . import __version__
from .config import LineSettingsConfig, Settings
from .core import TerminalLineSettings, UnixTerminal
from .utils import setup_logging, validate_stty_installed
from .utils.validators import has_controlling_terminal

logger = logging.getLogger(__name__)


def open_settings(ctx: click.Context) -> TerminalLineSettings:
    """Capture the terminal settings, exiting with status 1 if that fails."""
    line_config: LineSettingsConfig = ctx.obj["line_config"]

    if not validate_stty_installed(line_config.stty):
        click.echo(f"Error: {line_config.stty} not found", err=True)
        raise SystemExit(1)
    if not has_controlling_terminal():
        click.echo("Error: no controlling terminal", err=True)
        raise SystemExit(1)

    try:
        return TerminalLineSettings(line_config)
    except OSError as e:
        logger.debug("stty failed", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
@click.option("--log-file", is_flag=True, help="Also write a debug log file")
@click.version_option(version=__version__, prog_name="ttyline")
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str], log_file: bool) -> None:
    """Query and change terminal line settings via stty."""
    user_settings = Settings()
    setup_logging(
        log_level=str(log_level or user_settings.get("log_level") or "WARNING"),
        log_file=log_file,
    )

    ctx.ensure_object(dict)
    ctx.obj["line_config"] = LineSettingsConfig.load(user_settings)


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Print the stty -g settings string."""
    click.echo(open_settings(ctx).get_config())


@main.command()
@click.pass_context
def size(ctx: click.Context) -> None:
    """Print terminal size as COLUMNSxROWS."""
    terminal = UnixTerminal(open_settings(ctx))
    click.echo(f"{terminal.get_width()}x{terminal.get_height()}")


@main.command()
@click.argument("name")
@click.pass_context
def get(ctx: click.Context, name: str) -> None:
    """Print a numeric property such as rows or columns (-1 if unknown)."""
    click.echo(open_settings(ctx).get_property(name))


@main.command()
@click.pass_context
def sane(ctx: click.Context) -> None:
    """Reset the terminal to sane defaults."""
    settings = open_settings(ctx)
    try:
        settings.restore()
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def stty(ctx: click.Context, args: Tuple[str, ...]) -> None:
    """Run stty with ARGS against the terminal and print its output."""
    settings = open_settings(ctx)
    try:
        output = settings.get(" ".join(args))
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    click.echo(output, nl=False)


if __name__ == "__main__":
    main()
