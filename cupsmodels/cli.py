"""cupsmodels CLI using Click."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import version

import click

from .cli_types import CompareArgs, ModelsArgs, PrintersArgs, SortArgs
from .commands import cmd_compare, cmd_models, cmd_printers, cmd_sort
from .constants import DEFAULT_TOOL_TIMEOUT_S
from .exceptions import CupsModelsError, UserError

# Module logger
logger = logging.getLogger("cupsmodels")


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)
    if any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    ):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)


# Options for commands that talk to a CUPS server
def server_options(func):
    """Decorator to add server connection options to a command."""
    func = click.option(
        "--server",
        help="CUPS server, host[:port] or socket path (default: $CUPS_SERVER, client.conf).",
    )(func)
    func = click.option(
        "--user",
        help="User to connect as (default: $CUPS_USER, client.conf).",
    )(func)
    func = click.option(
        "--encryption",
        type=click.Choice(["IfRequested", "Never", "Required", "Always"], case_sensitive=False),
        help="Encryption policy (default: $CUPS_ENCRYPTION, client.conf, IfRequested).",
    )(func)
    func = click.option(
        "--timeout",
        type=int,
        default=DEFAULT_TOOL_TIMEOUT_S,
        show_default=True,
        help="Timeout in seconds for each CUPS command.",
    )(func)
    func = click.option(
        "--json",
        "json_output",
        is_flag=True,
        help="Emit machine-readable JSON to stdout.",
    )(func)
    return func


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=version("cupsmodels"), prog_name="cupsmodels")
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    help="Enable debug logging to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    """cupsmodels: natural-order printer and model listings for CUPS."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    setup_logging(debug=debug)


@cli.command("compare")
@click.argument("a")
@click.argument("b")
def compare(a: str, b: str):
    """Compare two model names; prints -1, 0 or 1."""
    cmd_compare(CompareArgs(a=a, b=b))


@cli.command("sort")
@click.argument("file", required=False, type=click.Path())
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Sort in descending order.",
)
@click.option(
    "--unique",
    "-u",
    is_flag=True,
    help="Drop repeated lines.",
)
def sort(file: str | None, reverse: bool, unique: bool):
    """Sort lines in natural model order.

    Reads FILE, or stdin when FILE is not given. Blank lines are dropped.
    """
    cmd_sort(SortArgs(file=file, reverse=reverse, unique=unique))


@cli.command("printers")
@server_options
def printers(
    server: str | None,
    user: str | None,
    encryption: str | None,
    timeout: int,
    json_output: bool,
):
    """List printers in natural order; the default printer is marked '*'."""
    args = PrintersArgs(
        server=server,
        user=user,
        encryption=encryption,
        timeout=timeout,
        json=json_output,
    )
    cmd_printers(args)


@cli.command("models")
@server_options
@click.option(
    "--make",
    help="Only models matching this make-and-model (e.g. 'HP').",
)
@click.option(
    "--makes",
    is_flag=True,
    help="List manufacturers instead of models.",
)
def models(
    server: str | None,
    user: str | None,
    encryption: str | None,
    timeout: int,
    json_output: bool,
    make: str | None,
    makes: bool,
):
    """List available printer models (drivers) in natural order."""
    if make and makes:
        raise click.UsageError("--make and --makes are mutually exclusive")

    args = ModelsArgs(
        server=server,
        user=user,
        encryption=encryption,
        timeout=timeout,
        json=json_output,
        make=make,
        makes=makes,
    )
    cmd_models(args)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except UserError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(e.rc)
    except CupsModelsError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(2)
    except KeyboardInterrupt:
        click.echo("ERROR: Interrupted", err=True)
        sys.exit(130)
