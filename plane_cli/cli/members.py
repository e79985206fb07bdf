import typer

from plane_cli.cli.options import PROJECT_OPTION
from plane_cli.cli.utils import run_cli_command
from plane_cli.commands import MembersList

app = typer.Typer(no_args_is_help=True, help='Manage members.')


@app.command('list')
def list_members(ctx: typer.Context, project: str = PROJECT_OPTION) -> None:
    """List members of a project."""
    run_cli_command(ctx, lambda: MembersList(project=project))
