from dataclasses import dataclass
from enum import Enum
from typing import Any

from plane_cli.exceptions import InvalidResponseError


class ResourceKind(str, Enum):
    """Type of object an API response describes."""

    PROJECT = 'project'
    ISSUE = 'issue'
    STATE = 'state'
    LABEL = 'label'
    MEMBER = 'member'


class ResourceView(str, Enum):
    """Shape of the response: a page of objects, one object, or a new object."""

    LIST = 'list'
    DETAIL = 'detail'
    CREATED = 'created'


@dataclass(frozen=True)
class ApiResource:
    """A decoded API response plus what the command knows about its shape.

    The payload is kept exactly as decoded so JSON output reproduces it
    unchanged; only human output looks inside it.
    """

    kind: ResourceKind
    view: ResourceView
    payload: Any

    def results(self) -> list[dict[str, Any]]:
        """Return the objects of a listing.

        Accepts either a ``{"results": [...]}`` envelope or a bare array.

        Raises:
            InvalidResponseError: If the payload holds no results array.
        """
        if isinstance(self.payload, list):
            return self.payload
        results = self.payload.get('results') if isinstance(self.payload, dict) else None
        if not isinstance(results, list):
            msg = "unexpected response format: missing 'results' array"
            raise InvalidResponseError(msg)
        return results

    @property
    def next_cursor(self) -> str | None:
        """Cursor for the next page, or None when this is the last page."""
        if not isinstance(self.payload, dict):
            return None
        if self.payload.get('next_page_results') is False:
            return None
        cursor = self.payload.get('next_cursor')
        return cursor if isinstance(cursor, str) and cursor else None

    def item(self) -> dict[str, Any]:
        """Return the single object of a detail or created response.

        Raises:
            InvalidResponseError: If the payload is not a JSON object.
        """
        if not isinstance(self.payload, dict):
            msg = 'unexpected response format: expected a JSON object'
            raise InvalidResponseError(msg)
        return self.payload
