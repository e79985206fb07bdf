import json
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Any

import httpx
import pytest
from pytest_mock import MockerFixture
from typer.testing import CliRunner

from plane_cli.api import PlaneClient
from plane_cli.config import ENV_FIELDS, HOME_ENV_VAR, Settings

API_ROOT = '/api/v1/'


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point PLANE_CLI_HOME at an empty directory and clear PLANE_CLI_* vars."""
    for var in ENV_FIELDS:
        monkeypatch.delenv(var, raising=False)
    home = tmp_path / 'home'
    home.mkdir()
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    return home


@pytest.fixture
def write_settings(isolated_env: Path) -> Callable[[str, Any], Path]:
    """Write config/<name> under the isolated home; dicts are JSON-encoded."""

    def _write(name: str, content: Any) -> Path:
        path = isolated_env / 'config' / name
        path.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding='utf-8')
        return path

    return _write


@dataclass
class MockApi:
    """In-memory stand-in for the Plane API, served through httpx.MockTransport."""

    routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def add(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json_body: Any = None,
        text: str | None = None,
    ) -> None:
        """Register a canned response for METHOD /api/v1/<path>."""

        def _respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text, request=request)
            if json_body is not None:
                return httpx.Response(status, json=json_body, request=request)
            return httpx.Response(status, request=request)

        self.routes[(method, API_ROOT + path)] = _respond

    def fail(self, method: str, path: str, exc: Callable[[httpx.Request], Exception]) -> None:
        """Register a transport failure for METHOD /api/v1/<path>."""

        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc(request)

        self.routes[(method, API_ROOT + path)] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(418, text=f'no route for {request.method} {request.url.path}')
        return route(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, 'no request was sent'
        return self.requests[-1]

    def client(self, settings: Settings) -> PlaneClient:
        return PlaneClient(settings, transport=self.transport)


@pytest.fixture
def mock_api() -> MockApi:
    return MockApi()


@pytest.fixture
def cli_api(mock_api: MockApi, mocker: MockerFixture) -> MockApi:
    """Route every PlaneClient the CLI creates through the mock API."""
    mocker.patch(
        'plane_cli.cli.utils.PlaneClient',
        side_effect=partial(PlaneClient, transport=mock_api.transport),
    )
    return mock_api


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_key='test-key',
        base_url='https://plane.test',
        workspace='test-ws',
        timeout=5,
    )
