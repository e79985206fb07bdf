from collections.abc import Callable

import typer
from hotlog import configure_logging, get_logger, resolve_verbosity
from rich.console import Console
from rich.markup import escape

from plane_cli.api import PlaneClient
from plane_cli.cli import exit_codes
from plane_cli.commands import Command, execute, progress_message, require_workspace
from plane_cli.config import CliOverrides, load_settings
from plane_cli.exceptions import PlaneCliError, UsageError, log_exception
from plane_cli.output import OutputMode, progress_indicator, render

logger = get_logger(__name__)


def setup_logging(verbose: int) -> None:
    """Set up logging configuration for CLI commands.

    Args:
        verbose: Verbosity level (0=normal, 1=verbose, 2=debug)
    """
    verbosity = resolve_verbosity(verbose=verbose)
    configure_logging(verbosity=verbosity)


def report_error(err: PlaneCliError) -> None:
    """Print an error (and its hint, if any) to stderr."""
    console = Console(stderr=True)
    console.print(f'[bold red]error:[/bold red] {escape(str(err))}', highlight=False, soft_wrap=True)
    if err.hint:
        console.print(f'[yellow]hint:[/yellow] {escape(err.hint)}', highlight=False, soft_wrap=True)


def run_cli_command(ctx: typer.Context, build_command: Callable[[], Command]) -> None:
    """Build, execute and render one command with consistent error handling.

    The command is built before settings are read so bad input never causes
    any I/O. Known errors are reported on stderr and turned into typer.Exit
    with a non-zero code.

    Args:
        ctx: Typer context; ``ctx.obj`` holds the global CliOverrides
        build_command: Callable returning the command variant to run
    """
    overrides = ctx.obj if isinstance(ctx.obj, CliOverrides) else CliOverrides()
    try:
        command = build_command()
        settings = load_settings(overrides)
        require_workspace(settings)
        mode = OutputMode.from_json_flag(settings.json_mode)
        with PlaneClient(settings) as client, progress_indicator(
            progress_message(command),
            enabled=mode is OutputMode.HUMAN,
        ):
            resource = execute(command, settings, client)
        render(resource, mode=mode)
    except UsageError as err:
        log_exception(logger, err)
        report_error(err)
        raise typer.Exit(exit_codes.USAGE_ERROR) from err
    except PlaneCliError as err:
        log_exception(logger, err)
        report_error(err)
        raise typer.Exit(exit_codes.GENERAL_ERROR) from err
    except KeyboardInterrupt as err:
        Console(stderr=True).print('\n[yellow]Aborted by user.[/yellow]')
        raise typer.Exit(exit_codes.KEYBOARD_INTERRUPT) from err
