from .dispatch import execute, issue_create_body, issues_list_params, progress_message, require_workspace
from .models import (
    DEFAULT_PER_PAGE,
    Command,
    IssuesCreate,
    IssuesGet,
    IssuesList,
    LabelsList,
    MembersList,
    Priority,
    ProjectsList,
    StatesList,
)
from .resources import ApiResource, ResourceKind, ResourceView

__all__ = [
    'DEFAULT_PER_PAGE',
    'ApiResource',
    'Command',
    'IssuesCreate',
    'IssuesGet',
    'IssuesList',
    'LabelsList',
    'MembersList',
    'Priority',
    'ProjectsList',
    'ResourceKind',
    'ResourceView',
    'StatesList',
    'execute',
    'issue_create_body',
    'issues_list_params',
    'progress_message',
    'require_workspace',
]
