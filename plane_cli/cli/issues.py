import typer

from plane_cli.cli.options import PROJECT_OPTION
from plane_cli.cli.utils import run_cli_command
from plane_cli.commands import DEFAULT_PER_PAGE, IssuesCreate, IssuesGet, IssuesList, Priority

app = typer.Typer(no_args_is_help=True, help='Manage issues.')

# Module-level constants for Typer options to avoid B008
ISSUE_OPTION = typer.Option(
    ...,
    '--issue',
    '-i',
    '--id',
    help='Issue ID',
)
STATE_FILTER_OPTION = typer.Option(
    None,
    '--state',
    help='Filter by state ID',
)
ASSIGNEE_FILTER_OPTION = typer.Option(
    None,
    '--assignee',
    help='Filter by assignee ID',
)
PER_PAGE_OPTION = typer.Option(
    DEFAULT_PER_PAGE,
    '--per-page',
    help='Results per page',
)
CURSOR_OPTION = typer.Option(
    None,
    '--cursor',
    help='Cursor for pagination (from a previous response)',
)
TITLE_OPTION = typer.Option(
    ...,
    '--title',
    help='Issue title',
)
DESCRIPTION_OPTION = typer.Option(
    None,
    '--description',
    help='Issue description (HTML)',
)
STATE_OPTION = typer.Option(
    None,
    '--state',
    help='State ID',
)
PRIORITY_OPTION = typer.Option(
    None,
    '--priority',
    help=f'Priority level: {"|".join(p.value for p in Priority)}',
)
ASSIGNEE_OPTION = typer.Option(
    None,
    '--assignee',
    help='Assignee member ID (can be repeated)',
)
LABEL_OPTION = typer.Option(
    None,
    '--label',
    help='Label ID (can be repeated)',
)


@app.command('list')
def list_issues(  # noqa: PLR0913
    ctx: typer.Context,
    project: str = PROJECT_OPTION,
    state: str | None = STATE_FILTER_OPTION,
    assignee: str | None = ASSIGNEE_FILTER_OPTION,
    per_page: int = PER_PAGE_OPTION,
    cursor: str | None = CURSOR_OPTION,
) -> None:
    """List issues in a project (one page)."""
    run_cli_command(
        ctx,
        lambda: IssuesList(
            project=project,
            state=state,
            assignee=assignee,
            per_page=per_page,
            cursor=cursor,
        ),
    )


@app.command('get')
def get_issue(
    ctx: typer.Context,
    project: str = PROJECT_OPTION,
    issue: str = ISSUE_OPTION,
) -> None:
    """Get a single issue by ID."""
    run_cli_command(ctx, lambda: IssuesGet(project=project, issue=issue))


@app.command('create')
def create_issue(  # noqa: PLR0913
    ctx: typer.Context,
    project: str = PROJECT_OPTION,
    title: str = TITLE_OPTION,
    description: str | None = DESCRIPTION_OPTION,
    state: str | None = STATE_OPTION,
    priority: str | None = PRIORITY_OPTION,
    assignee: list[str] | None = ASSIGNEE_OPTION,
    label: list[str] | None = LABEL_OPTION,
) -> None:
    """Create a new issue."""
    run_cli_command(
        ctx,
        lambda: IssuesCreate(
            project=project,
            title=title,
            description=description,
            state=state,
            priority=Priority.parse(priority) if priority is not None else None,
            assignees=tuple(assignee or ()),
            labels=tuple(label or ()),
        ),
    )
