import typer

from plane_cli.cli.options import PROJECT_OPTION
from plane_cli.cli.utils import run_cli_command
from plane_cli.commands import StatesList

app = typer.Typer(no_args_is_help=True, help='Manage states.')


@app.command('list')
def list_states(ctx: typer.Context, project: str = PROJECT_OPTION) -> None:
    """List states in a project."""
    run_cli_command(ctx, lambda: StatesList(project=project))
