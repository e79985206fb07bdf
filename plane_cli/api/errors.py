import httpx

from plane_cli.exceptions import (
    ApiError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    UnauthorizedError,
    UnexpectedStatusError,
)

BODY_SNIPPET_LENGTH = 200


def body_snippet(response: httpx.Response) -> str:
    """Return the start of a response body for use in error messages."""
    text = response.text.strip()
    if len(text) > BODY_SNIPPET_LENGTH:
        return text[:BODY_SNIPPET_LENGTH] + '...'
    return text


def error_for_status(response: httpx.Response) -> ApiError:
    """Map a non-2xx response to the matching ApiError subclass."""
    status = response.status_code
    body = body_snippet(response)
    if status == httpx.codes.UNAUTHORIZED:
        return UnauthorizedError(
            'unauthorized: authentication failed',
            hint='check your API key (--api-key, PLANE_CLI_API_KEY or config file)',
        )
    if status == httpx.codes.NOT_FOUND:
        return NotFoundError(f'not found: {body}' if body else 'not found')
    if status == httpx.codes.TOO_MANY_REQUESTS:
        return RateLimitedError('rate limited: try again later')
    if httpx.codes.is_server_error(status):
        return ServerError(status, body)
    return UnexpectedStatusError(status, body)
