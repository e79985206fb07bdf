from .progress import progress_indicator
from .renderer import EMPTY_MESSAGE, OutputMode, render
from .views import COLUMNS, PRIORITY_STYLES, build_table, created_issue, issue_detail

__all__ = [
    'COLUMNS',
    'EMPTY_MESSAGE',
    'PRIORITY_STYLES',
    'OutputMode',
    'build_table',
    'created_issue',
    'issue_detail',
    'progress_indicator',
    'render',
]
