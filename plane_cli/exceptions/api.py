from plane_cli.exceptions.core import PlaneCliError


class ApiError(PlaneCliError):
    """Base class for errors returned by, or on the way to, the remote API."""

    log_category = 'api_error'


class UnauthorizedError(ApiError):
    """The API rejected the credentials (HTTP 401)."""

    log_category = 'api_unauthorized'


class NotFoundError(ApiError):
    """The requested resource does not exist (HTTP 404)."""

    log_category = 'api_not_found'


class RateLimitedError(ApiError):
    """Too many requests (HTTP 429)."""

    log_category = 'api_rate_limited'


class ServerError(ApiError):
    """The API failed with a 5xx status."""

    log_category = 'api_server_error'

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f'server error ({status_code}): {body}')
        self.status_code = status_code
        self.body = body


class UnexpectedStatusError(ApiError):
    """Any other non-2xx status."""

    log_category = 'api_unexpected_status'

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f'request failed ({status_code}): {body}')
        self.status_code = status_code
        self.body = body


class TransportError(ApiError):
    """The request never produced a response (connection failure, timeout)."""

    log_category = 'api_transport_failed'


class InvalidResponseError(ApiError):
    """A successful response had a body we could not interpret."""

    log_category = 'api_invalid_response'
