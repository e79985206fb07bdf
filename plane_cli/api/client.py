"""HTTP client for the Plane REST API.

Every request is scoped under ``<base_url>/api/v1/`` and carries the API key
in the ``X-API-Key`` header. Responses are decoded to plain JSON values;
non-2xx statuses and transport failures are raised as typed ApiError
subclasses. There is no retry and no automatic pagination.
"""

from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx
from hotlog import get_logger

from plane_cli.api.errors import error_for_status
from plane_cli.config.models import Settings
from plane_cli.exceptions import ConfigValidationError, InvalidResponseError, MissingSettingError, TransportError

logger = get_logger(__name__)

API_PREFIX = 'api/v1'


class PlaneClient:
    """Thin synchronous wrapper around ``httpx.Client``.

    Usage:
        with PlaneClient(settings) as client:
            data = client.get('workspaces/acme/projects/')
    """

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client from resolved settings.

        Args:
            settings: Effective settings; api_key must be set.
            transport: Optional httpx transport (tests use httpx.MockTransport).

        Raises:
            MissingSettingError: If no API key was configured.
            ConfigValidationError: If the API key is not ASCII.
        """
        if settings.api_key is None:
            msg = 'API key is required: set it via --api-key, PLANE_CLI_API_KEY, or config file'
            raise MissingSettingError(msg)

        self.base_url = f'{settings.base_url.rstrip("/")}/{API_PREFIX}/'
        self.timeout = settings.timeout
        try:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=httpx.Timeout(settings.timeout),
                headers={
                    'X-API-Key': settings.api_key,
                    'Accept': 'application/json',
                },
                transport=transport,
            )
        except httpx.InvalidURL as e:
            msg = f'invalid base URL {settings.base_url!r}: {e}'
            raise TransportError(msg) from e
        except UnicodeEncodeError:
            # the encode error repeats the header value, so it is not chained
            msg = 'invalid API key value: must be ASCII'
            raise ConfigValidationError(msg) from None

    def __enter__(self) -> 'PlaneClient':
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str | int] | None = None,
        body: Any = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Args:
            method: HTTP method (GET, POST, ...)
            path: Path relative to ``/api/v1/`` (leading slash optional)
            params: Query parameters, passed through as-is
            body: JSON-serializable request body, if any

        Returns:
            The decoded JSON value (an empty dict for an empty body)

        Raises:
            ApiError: A subclass matching the failure
        """
        relative = path.lstrip('/')
        logger.debug(
            'api_request',
            method=method,
            path=relative,
            params=dict(params) if params else None,
        )

        try:
            response = self._client.request(
                method,
                relative,
                params=params,
                json=body,
            )
        except httpx.TimeoutException as e:
            msg = f'{method} request timed out after {self.timeout}s'
            raise TransportError(msg) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            msg = f'{method} request failed: {e}'
            raise TransportError(msg) from e

        logger.debug(
            'api_response',
            method=method,
            path=relative,
            status_code=response.status_code,
        )

        if not response.is_success:
            raise error_for_status(response)

        if not response.content.strip():
            return {}
        try:
            return response.json()
        except ValueError as e:
            msg = 'failed to parse response JSON'
            raise InvalidResponseError(msg) from e

    def get(self, path: str, *, params: Mapping[str, str | int] | None = None) -> Any:
        """Make a GET request."""
        return self.request('GET', path, params=params)

    def post(self, path: str, body: Any) -> Any:
        """Make a POST request with a JSON body."""
        return self.request('POST', path, body=body)
