from .commands.models import (
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
from .config.models import Settings

__all__ = [
    'Command',
    'IssuesCreate',
    'IssuesGet',
    'IssuesList',
    'LabelsList',
    'MembersList',
    'Priority',
    'ProjectsList',
    'Settings',
    'StatesList',
]
