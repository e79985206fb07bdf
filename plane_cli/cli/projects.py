import typer

from plane_cli.cli.utils import run_cli_command
from plane_cli.commands import ProjectsList

app = typer.Typer(no_args_is_help=True, help='Manage projects.')


@app.command('list')
def list_projects(ctx: typer.Context) -> None:
    """List projects in the workspace."""
    run_cli_command(ctx, ProjectsList)
