from typing import Any

from hotlog import get_logger

from plane_cli.api import PlaneClient
from plane_cli.commands.models import (
    Command,
    IssuesCreate,
    IssuesGet,
    IssuesList,
    LabelsList,
    MembersList,
    ProjectsList,
    StatesList,
)
from plane_cli.commands.resources import ApiResource, ResourceKind, ResourceView
from plane_cli.config.models import Settings
from plane_cli.exceptions import MissingSettingError

logger = get_logger(__name__)


def require_workspace(settings: Settings) -> str:
    """Return the configured workspace slug or fail with a usable message."""
    if not settings.workspace:
        msg = 'workspace is required: set it via --workspace, PLANE_CLI_WORKSPACE, or config file'
        raise MissingSettingError(msg)
    return settings.workspace


def project_path(workspace: str, project: str, *parts: str) -> str:
    """Build ``workspaces/<ws>/projects/<project>/<parts...>/``."""
    segments = ['workspaces', workspace, 'projects', project, *parts]
    return '/'.join(segments) + '/'


def issues_list_params(command: IssuesList) -> dict[str, str | int]:
    """Query parameters for an issue listing; filters only when given."""
    params: dict[str, str | int] = {'per_page': command.per_page}
    if command.state is not None:
        params['state'] = command.state
    if command.assignee is not None:
        params['assignee'] = command.assignee
    if command.cursor is not None:
        params['cursor'] = command.cursor
    return params


def issue_create_body(command: IssuesCreate) -> dict[str, Any]:
    """Build the JSON body for issue creation.

    Optional fields are omitted when not given; assignees and labels are
    omitted when empty and otherwise sent in the order they were given.
    """
    body: dict[str, Any] = {'name': command.title}
    if command.description is not None:
        body['description_html'] = command.description
    if command.state is not None:
        body['state'] = command.state
    if command.priority is not None:
        body['priority'] = command.priority.value
    if command.assignees:
        body['assignees'] = list(command.assignees)
    if command.labels:
        body['labels'] = list(command.labels)
    return body


def progress_message(command: Command) -> str:
    """Text shown next to the spinner while the command's request runs."""
    return 'Sending...' if isinstance(command, IssuesCreate) else 'Fetching...'


def execute(command: Command, settings: Settings, client: PlaneClient) -> ApiResource:  # noqa: PLR0911
    """Run one command: exactly one API call, wrapped in an ApiResource.

    Args:
        command: The parsed command variant
        settings: Effective settings (workspace is taken from here)
        client: Client to issue the request with

    Returns:
        The response tagged with its resource kind and view

    Raises:
        MissingSettingError: If no workspace is configured
        ApiError: If the request fails
    """
    workspace = require_workspace(settings)
    logger.debug('executing_command', command=type(command).__name__, workspace=workspace)

    if isinstance(command, ProjectsList):
        data = client.get(f'workspaces/{workspace}/projects/')
        return ApiResource(ResourceKind.PROJECT, ResourceView.LIST, data)

    if isinstance(command, IssuesList):
        data = client.get(
            project_path(workspace, command.project, 'issues'),
            params=issues_list_params(command),
        )
        return ApiResource(ResourceKind.ISSUE, ResourceView.LIST, data)

    if isinstance(command, IssuesGet):
        data = client.get(project_path(workspace, command.project, 'issues', command.issue))
        return ApiResource(ResourceKind.ISSUE, ResourceView.DETAIL, data)

    if isinstance(command, IssuesCreate):
        data = client.post(
            project_path(workspace, command.project, 'issues'),
            issue_create_body(command),
        )
        return ApiResource(ResourceKind.ISSUE, ResourceView.CREATED, data)

    if isinstance(command, StatesList):
        data = client.get(project_path(workspace, command.project, 'states'))
        return ApiResource(ResourceKind.STATE, ResourceView.LIST, data)

    if isinstance(command, LabelsList):
        data = client.get(project_path(workspace, command.project, 'labels'))
        return ApiResource(ResourceKind.LABEL, ResourceView.LIST, data)

    if isinstance(command, MembersList):
        data = client.get(project_path(workspace, command.project, 'members'))
        return ApiResource(ResourceKind.MEMBER, ResourceView.LIST, data)

    msg = f'unsupported command: {command!r}'
    raise TypeError(msg)
