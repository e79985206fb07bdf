"""Command variants produced by the CLI layer.

Each variant carries the identifiers and options one resource operation
needs. Construction validates the input, so an invalid command never reaches
the network.
"""

from dataclasses import dataclass, field
from enum import Enum

from plane_cli.exceptions import UsageError

DEFAULT_PER_PAGE = 50


class Priority(str, Enum):
    """Issue priority levels accepted by the API."""

    NONE = 'none'
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'
    URGENT = 'urgent'

    @classmethod
    def parse(cls, value: str) -> 'Priority':
        """Parse a priority name, raising UsageError for anything else."""
        try:
            return cls(value)
        except ValueError:
            choices = ', '.join(p.value for p in cls)
            msg = f"invalid value '{value}' for --priority (expected one of: {choices})"
            raise UsageError(msg) from None


def _require(value: str, flag: str) -> None:
    if not value.strip():
        msg = f'{flag} must not be empty'
        raise UsageError(msg)


@dataclass(frozen=True)
class ProjectsList:
    """List projects in the workspace."""


@dataclass(frozen=True)
class IssuesList:
    """List one page of issues in a project."""

    project: str
    state: str | None = None
    assignee: str | None = None
    per_page: int = DEFAULT_PER_PAGE
    cursor: str | None = None

    def __post_init__(self) -> None:
        _require(self.project, '--project')
        if self.per_page < 1:
            msg = '--per-page must be at least 1'
            raise UsageError(msg)


@dataclass(frozen=True)
class IssuesGet:
    """Fetch a single issue."""

    project: str
    issue: str

    def __post_init__(self) -> None:
        _require(self.project, '--project')
        _require(self.issue, '--issue')


@dataclass(frozen=True)
class IssuesCreate:
    """Create an issue.

    Assignees and labels keep the order they were given in; duplicates are
    kept as well.
    """

    project: str
    title: str
    description: str | None = None
    state: str | None = None
    priority: Priority | None = None
    assignees: tuple[str, ...] = field(default_factory=tuple)
    labels: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _require(self.project, '--project')
        _require(self.title, '--title')


@dataclass(frozen=True)
class StatesList:
    """List workflow states of a project."""

    project: str

    def __post_init__(self) -> None:
        _require(self.project, '--project')


@dataclass(frozen=True)
class LabelsList:
    """List labels of a project."""

    project: str

    def __post_init__(self) -> None:
        _require(self.project, '--project')


@dataclass(frozen=True)
class MembersList:
    """List members of a project."""

    project: str

    def __post_init__(self) -> None:
        _require(self.project, '--project')


Command = ProjectsList | IssuesList | IssuesGet | IssuesCreate | StatesList | LabelsList | MembersList
