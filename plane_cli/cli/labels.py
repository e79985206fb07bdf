import typer

from plane_cli.cli.options import PROJECT_OPTION
from plane_cli.cli.utils import run_cli_command
from plane_cli.commands import LabelsList

app = typer.Typer(no_args_is_help=True, help='Manage labels.')


@app.command('list')
def list_labels(ctx: typer.Context, project: str = PROJECT_OPTION) -> None:
    """List labels in a project."""
    run_cli_command(ctx, lambda: LabelsList(project=project))
