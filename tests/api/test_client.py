import json
from dataclasses import dataclass

import httpx
import pytest

from plane_cli.api import PlaneClient, body_snippet
from plane_cli.config import Settings
from plane_cli.exceptions import (
    ApiError,
    ConfigValidationError,
    InvalidResponseError,
    MissingSettingError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnexpectedStatusError,
)

from tests.conftest import MockApi


def test_requires_api_key(settings: Settings) -> None:
    with pytest.raises(MissingSettingError, match='API key is required'):
        PlaneClient(settings.model_copy(update={'api_key': None}))


def test_get_sends_api_key_header(mock_api: MockApi, settings: Settings) -> None:
    mock_api.add('GET', 'test-path', json_body={'ok': True})

    with mock_api.client(settings) as client:
        result = client.get('test-path')

    assert result == {'ok': True}
    request = mock_api.last_request
    assert request.headers['X-API-Key'] == 'test-key'
    assert request.headers['Accept'] == 'application/json'
    assert str(request.url) == 'https://plane.test/api/v1/test-path'


def test_configured_timeout_reaches_request(mock_api: MockApi, settings: Settings) -> None:
    mock_api.add('GET', 'thing', json_body={})

    with mock_api.client(settings) as client:
        client.get('thing')

    assert mock_api.last_request.extensions['timeout'] == {'connect': 5, 'read': 5, 'write': 5, 'pool': 5}


def test_non_ascii_api_key_is_rejected_without_echo(settings: Settings) -> None:
    with pytest.raises(ConfigValidationError, match='must be ASCII') as exc_info:
        PlaneClient(settings.model_copy(update={'api_key': 'k\u00e9y'}))

    assert 'k\u00e9y' not in str(exc_info.value)
    assert exc_info.value.__cause__ is None


def test_base_url_trailing_slash_and_leading_path_slash(mock_api: MockApi, settings: Settings) -> None:
    mock_api.add('GET', 'workspaces/ws/projects/', json_body={'results': []})

    with mock_api.client(settings.model_copy(update={'base_url': 'https://plane.test/'})) as client:
        client.get('/workspaces/ws/projects/')

    assert mock_api.last_request.url.path == '/api/v1/workspaces/ws/projects/'


def test_query_params_are_passed_through(mock_api: MockApi, settings: Settings) -> None:
    mock_api.add('GET', 'items', json_body={'results': []})

    with mock_api.client(settings) as client:
        result = client.get('items', params={'per_page': 10, 'state': 'active'})

    assert result == {'results': []}
    params = mock_api.last_request.url.params
    assert params['per_page'] == '10'
    assert params['state'] == 'active'


def test_post_sends_json_body(mock_api: MockApi, settings: Settings) -> None:
    mock_api.add('POST', 'issues', json_body={'id': '123'})

    with mock_api.client(settings) as client:
        result = client.post('issues', {'name': 'Test Issue'})

    assert result == {'id': '123'}
    request = mock_api.last_request
    assert request.method == 'POST'
    assert json.loads(request.content) == {'name': 'Test Issue'}


def test_empty_success_body_decodes_to_empty_dict(mock_api: MockApi, settings: Settings) -> None:
    mock_api.add('POST', 'noop', status=204)

    with mock_api.client(settings) as client:
        assert client.post('noop', {}) == {}


def test_invalid_json_body(mock_api: MockApi, settings: Settings) -> None:
    mock_api.add('GET', 'broken', text='<html>oops</html>')

    with mock_api.client(settings) as client, pytest.raises(InvalidResponseError, match='parse response JSON'):
        client.get('broken')


@dataclass
class StatusCase:
    """A non-2xx status and the error it must map to."""

    name: str
    status: int
    body: str
    error_type: type[ApiError]
    error_has: str


@pytest.mark.parametrize(
    'case',
    [
        StatusCase('unauthorized', 401, '', UnauthorizedError, 'unauthorized'),
        StatusCase('not_found', 404, 'no such issue', NotFoundError, 'not found: no such issue'),
        StatusCase('rate_limited', 429, '', RateLimitedError, 'rate limited'),
        StatusCase('server_error', 500, 'internal', ServerError, 'server error (500): internal'),
        StatusCase('bad_gateway', 502, '', ServerError, 'server error (502)'),
        StatusCase('teapot', 418, 'short and stout', UnexpectedStatusError, 'request failed (418): short and stout'),
        StatusCase('bad_request', 400, '{"name": ["required"]}', UnexpectedStatusError, 'request failed (400)'),
    ],
    ids=lambda case: case.name,
)
def test_status_codes_map_to_typed_errors(mock_api: MockApi, settings: Settings, case: StatusCase) -> None:
    mock_api.add('GET', 'thing', status=case.status, text=case.body)

    with mock_api.client(settings) as client, pytest.raises(case.error_type) as exc_info:
        client.get('thing')

    assert case.error_has in str(exc_info.value)


def test_unauthorized_has_hint(mock_api: MockApi, settings: Settings) -> None:
    mock_api.add('GET', 'thing', status=401)

    with mock_api.client(settings) as client, pytest.raises(UnauthorizedError) as exc_info:
        client.get('thing')

    assert exc_info.value.hint is not None
    assert 'API key' in exc_info.value.hint
    assert 'test-key' not in str(exc_info.value)


def test_unexpected_status_keeps_code(mock_api: MockApi, settings: Settings) -> None:
    mock_api.add('GET', 'thing', status=409, text='conflict')

    with mock_api.client(settings) as client, pytest.raises(UnexpectedStatusError) as exc_info:
        client.get('thing')

    assert exc_info.value.status_code == 409
    assert exc_info.value.body == 'conflict'


def test_timeout_is_transport_error(mock_api: MockApi, settings: Settings) -> None:
    mock_api.fail('GET', 'slow', lambda request: httpx.ReadTimeout('timed out', request=request))

    with mock_api.client(settings) as client, pytest.raises(TransportError, match='timed out after 5s'):
        client.get('slow')


def test_connection_failure_is_transport_error(mock_api: MockApi, settings: Settings) -> None:
    mock_api.fail('GET', 'down', lambda request: httpx.ConnectError('connection refused', request=request))

    with mock_api.client(settings) as client, pytest.raises(TransportError, match='connection refused'):
        client.get('down')


def test_each_call_sends_exactly_one_request(mock_api: MockApi, settings: Settings) -> None:
    mock_api.add('GET', 'thing', status=500)

    with mock_api.client(settings) as client, pytest.raises(ServerError):
        client.get('thing')

    assert len(mock_api.requests) == 1


def test_body_snippet_truncates_long_bodies() -> None:
    response = httpx.Response(500, text='x' * 500)
    snippet = body_snippet(response)
    assert snippet == 'x' * 200 + '...'
