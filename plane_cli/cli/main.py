import typer
from hotlog import get_logger, verbosity_option

from plane_cli.cli import exit_codes, issues, labels, members, projects, states
from plane_cli.cli.utils import setup_logging
from plane_cli.config import CliOverrides
from plane_cli.version import __version__

logger = get_logger(__name__)

app = typer.Typer(help='CLI for Plane project management.')

# Module-level constants for Typer options to avoid B008
API_KEY_OPTION = typer.Option(
    None,
    '--api-key',
    help='Plane API key',
)
BASE_URL_OPTION = typer.Option(
    None,
    '--base-url',
    help='Plane API base URL',
)
WORKSPACE_OPTION = typer.Option(
    None,
    '--workspace',
    help='Workspace slug',
)
TIMEOUT_OPTION = typer.Option(
    None,
    '--timeout',
    min=1,
    help='Request timeout in seconds',
)
JSON_OPTION = typer.Option(
    default=False,
    help='Output in JSON format',
)
VERSION_OPTION = typer.Option(
    default=False,
    help='Show version and exit',
)


@app.callback(invoke_without_command=True)
def main_callback(  # noqa: PLR0913
    ctx: typer.Context,
    *,
    api_key: str | None = API_KEY_OPTION,
    base_url: str | None = BASE_URL_OPTION,
    workspace: str | None = WORKSPACE_OPTION,
    timeout: int | None = TIMEOUT_OPTION,
    json: bool = JSON_OPTION,
    verbose: int = verbosity_option,
    version: bool = VERSION_OPTION,
) -> None:
    """Plane - list, fetch and create projects, issues, states, labels and members."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(exit_codes.SUCCESS)

    setup_logging(verbose)

    if ctx.invoked_subcommand is None:
        ctx.fail('Missing command.')

    ctx.obj = CliOverrides(
        api_key=api_key,
        base_url=base_url,
        workspace=workspace,
        timeout=timeout,
        json_mode=True if json else None,
    )


app.add_typer(projects.app, name='projects')
app.add_typer(issues.app, name='issues')
app.add_typer(states.app, name='states')
app.add_typer(labels.app, name='labels')
app.add_typer(members.app, name='members')
