"""
xsway command line.

Usage:
    xsway [--debug] show WSNAME
    xsway bind NUM
    xsway merge DIRECTION ORIENTATION LAYOUT
    echo web | xsway show

When standard input is a pipe, one line is read from it and its words are
appended to the command line, so launcher menus can feed arguments.
"""

import logging
import os
import stat
import sys
from typing import List, Optional, TextIO

import click
from pydantic import ValidationError

from . import __version__
from . import operations
from .config import DEFAULT_SWAYMSG, DEFAULT_TIMEOUT, SWAYMSG_ENV, TIMEOUT_ENV, Settings
from .models import Direction, Layout, OperationResult, SplitOrientation

LOGGER_NAME = "xsway"
_HANDLER_NAME = "xsway-stderr"


def configure_logging(debug: bool) -> None:
    """Send debug logs to stderr when ``debug`` is set; stay silent otherwise."""
    log = logging.getLogger(LOGGER_NAME)
    if not debug:
        return
    for handler in list(log.handlers):
        if handler.get_name() == _HANDLER_NAME:
            log.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    log.addHandler(handler)
    log.setLevel(logging.DEBUG)


def _is_pipe(stream: TextIO) -> bool:
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (OSError, ValueError):
        return False
    return stat.S_ISFIFO(mode)


def stdin_args(args: List[str], stream: Optional[TextIO] = None) -> List[str]:
    """Append the words of one line of piped stdin to ``args``."""
    stream = sys.stdin if stream is None else stream
    if not _is_pipe(stream):
        return args
    return args + stream.readline().split()


def _report(result: OperationResult) -> None:
    if result.output:
        click.echo(result.output, nl=False)
    for notice in result.notices:
        click.echo(notice)
    if result.error:
        click.echo(f"xsway: {result.error}", err=True)
        click.get_current_context().exit(1)


def _run(op, *args) -> None:
    settings = click.get_current_context().find_object(Settings)
    ctx = operations.Context.create(settings, log=logging.getLogger(LOGGER_NAME))
    _report(op(ctx, *args))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-v", "--version", prog_name="xsway")
@click.option("--debug", is_flag=True, help="Enable debug logs")
@click.option(
    "--swaymsg",
    default=DEFAULT_SWAYMSG,
    envvar=SWAYMSG_ENV,
    show_default=True,
    help="IPC client binary (use i3-msg under i3)"
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_TIMEOUT,
    envvar=TIMEOUT_ENV,
    show_default=True,
    help="Seconds to wait for each IPC call"
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, swaymsg: str, timeout: float):
    """XMonad workspace handling and more for sway-wm."""
    try:
        ctx.obj = Settings(swaymsg=swaymsg, timeout=timeout, debug=debug)
    except ValidationError as e:
        raise click.UsageError(str(e))
    configure_logging(debug)


@cli.command("focus-output-horizontal-position")
@click.argument("position")
def focus_output_horizontal_position(position: str):
    """Change focused output by horizontal position."""
    _run(operations.focus_output_at_position, position)


@cli.command()
@click.argument("wsname")
def show(wsname: str):
    """Show or create workspace on focused screen."""
    _run(operations.show, wsname)


@cli.command()
@click.argument("wsname")
def rename(wsname: str):
    """Rename current workspace."""
    _run(operations.rename, wsname)


@cli.command()
@click.argument("num")
def bind(num: str):
    """Bind current workspace to num."""
    _run(operations.bind, num)


@cli.command()
def swap():
    """Swap visible workspaces when there are 2 screens."""
    _run(operations.swap)


@cli.command("list")
def list_command():
    """List all workspace names."""
    _run(operations.list_workspaces)


@cli.command()
def current():
    """Current workspace name."""
    _run(operations.current)


@cli.command()
@click.argument("num_or_name")
def move(num_or_name: str):
    """Move current container to workspace."""
    _run(operations.move, num_or_name)


@cli.command()
@click.argument("direction", type=click.Choice([d.value for d in Direction]))
@click.argument("orientation", type=click.Choice([o.value for o in SplitOrientation]))
@click.argument("layout", type=click.Choice([lay.value for lay in Layout]))
def merge(direction: str, orientation: str, layout: str):
    """Merge current container into other container.

    DIRECTION is where to merge, ORIENTATION the split mode and LAYOUT the
    layout of the merged container.
    """
    _run(operations.merge, direction, orientation, layout)


def main(argv: Optional[List[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    cli.main(args=stdin_args(args), prog_name="xsway")
