import json
from enum import Enum

import typer
from rich.console import Console
from rich.markup import escape

from plane_cli.commands.resources import ApiResource, ResourceView
from plane_cli.output.views import build_table, created_issue, issue_detail

EMPTY_MESSAGE = 'No results found.'


class OutputMode(str, Enum):
    """How a result is written to stdout."""

    HUMAN = 'human'
    JSON = 'json'

    @classmethod
    def from_json_flag(cls, json_mode: bool) -> 'OutputMode':  # noqa: FBT001
        """Map the --json flag to a mode."""
        return cls.JSON if json_mode else cls.HUMAN


def render(
    resource: ApiResource,
    *,
    mode: OutputMode,
    console: Console | None = None,
    err_console: Console | None = None,
) -> None:
    """Write a command result to stdout.

    JSON mode prints the payload exactly as received, pretty-printed and
    uncolored. Human mode prints a table, issue detail or confirmation,
    colored only when stdout is a terminal. Hints go to stderr.

    Args:
        resource: The command result
        mode: Output mode
        console: Console for the data (defaults to stdout)
        err_console: Console for hints (defaults to stderr)
    """
    if mode is OutputMode.JSON:
        typer.echo(json.dumps(resource.payload, indent=2, ensure_ascii=False))
        return

    out = console or Console()

    if resource.view is ResourceView.DETAIL:
        out.print(issue_detail(resource.item()))
        return

    if resource.view is ResourceView.CREATED:
        out.print(created_issue(resource.item()))
        return

    results = resource.results()
    if not results:
        out.print(EMPTY_MESSAGE)
        return

    out.print(build_table(resource.kind, results))

    cursor = resource.next_cursor
    if cursor:
        err = err_console or Console(stderr=True)
        err.print(
            f'[dim]More results available: use --cursor {escape(cursor)}[/dim]',
            highlight=False,
            soft_wrap=True,
        )
