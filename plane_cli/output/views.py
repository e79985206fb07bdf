"""Rich renderables for human-readable output."""

from dataclasses import dataclass
from typing import Any

from rich.console import Group
from rich.table import Table
from rich.text import Text

from plane_cli.commands.resources import ResourceKind

UNNAMED = '(unnamed)'

PRIORITY_STYLES = {
    'urgent': 'red',
    'high': 'yellow',
    'medium': 'blue',
    'low': 'bright_black',
}


@dataclass(frozen=True)
class Column:
    """One table column: header text and the payload field it shows."""

    header: str
    key: str
    style: str | None = None
    fallback: str = ''


COLUMNS: dict[ResourceKind, tuple[Column, ...]] = {
    ResourceKind.PROJECT: (
        Column('Name', 'name', style='white', fallback=UNNAMED),
        Column('Identifier', 'identifier'),
        Column('ID', 'id', style='bright_black'),
    ),
    ResourceKind.ISSUE: (
        Column('#', 'sequence_id', style='white'),
        Column('Name', 'name', fallback=UNNAMED),
        Column('Priority', 'priority', fallback='none'),
        Column('ID', 'id', style='bright_black'),
    ),
    ResourceKind.STATE: (
        Column('Name', 'name', style='white', fallback=UNNAMED),
        Column('Group', 'group'),
        Column('ID', 'id', style='bright_black'),
    ),
    ResourceKind.LABEL: (
        Column('Name', 'name', style='white', fallback=UNNAMED),
        Column('ID', 'id', style='bright_black'),
    ),
    ResourceKind.MEMBER: (
        Column('Name', 'display_name', style='white', fallback=UNNAMED),
        Column('ID', 'id', style='bright_black'),
    ),
}


def field_text(item: dict[str, Any], key: str, fallback: str = '') -> str:
    """Return a payload field as display text."""
    value = item.get(key)
    if value is None or value == '':
        return fallback
    return value if isinstance(value, str) else str(value)


def _cell(item: dict[str, Any], column: Column) -> Text:
    value = field_text(item, column.key, column.fallback)
    style = column.style
    if column.key == 'priority':
        style = PRIORITY_STYLES.get(value)
    return Text(value, style=style or '')


def build_table(kind: ResourceKind, results: list[dict[str, Any]]) -> Table:
    """Create a table for a page of *kind* objects."""
    columns = COLUMNS[kind]
    table = Table(header_style='cyan')
    for column in columns:
        table.add_column(column.header, no_wrap=column.key == 'id')
    for item in results:
        table.add_row(*(_cell(item, column) for column in columns))
    return table


def _labelled(label: str, value: str) -> Text:
    return Text.assemble('  ', (label, 'cyan'), ' ', value)


def _id_list(data: dict[str, Any], key: str) -> str:
    values = data.get(key)
    if not isinstance(values, list):
        return ''
    return ', '.join(v for v in values if isinstance(v, str))


def issue_detail(data: dict[str, Any]) -> Group:
    """Header line, key fields and description of a single issue."""
    lines: list[Text] = [
        Text.assemble(
            (field_text(data, 'sequence_id'), 'bold'),
            ' ',
            (field_text(data, 'name', UNNAMED), 'bold'),
        ),
        _labelled('priority:', field_text(data, 'priority', 'none')),
        _labelled('state:   ', field_text(data, 'state')),
        _labelled('created: ', field_text(data, 'created_at')),
    ]

    assignees = _id_list(data, 'assignees')
    if assignees:
        lines.append(_labelled('assignees:', assignees))
    labels = _id_list(data, 'labels')
    if labels:
        lines.append(_labelled('labels:  ', labels))

    description = field_text(data, 'description_html')
    if description:
        lines.append(Text())
        lines.append(Text.assemble('  ', (description, 'dim')))
    return Group(*lines)


def created_issue(data: dict[str, Any]) -> Group:
    """Confirmation for a newly created issue."""
    return Group(
        Text.assemble(
            ('Created', 'bold green'),
            f' #{field_text(data, "sequence_id")} {field_text(data, "name")}',
        ),
        Text.assemble('  ', (field_text(data, 'id'), 'dim')),
    )
