"""Shared fixtures: a fake musclesworked API served through httpx.MockTransport."""

import pathlib
import sys

import httpx
import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from musclesworked_mcp_server.api import client as client_module  # pylint: disable=wrong-import-position
from musclesworked_mcp_server.api.client import MusclesWorkedClient, create_http_client  # pylint: disable=wrong-import-position
from musclesworked_mcp_server.config import Config  # pylint: disable=wrong-import-position


class FakeApi:
    """Records outgoing requests and answers them with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.response: httpx.Response | Exception = httpx.Response(200, json={})

    def reply(self, status_code=200, **kwargs):
        self.response = httpx.Response(status_code, **kwargs)

    def fail(self, exc: Exception):
        self.response = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    def client(self, base_url="https://musclesworked.com", api_key="mw_test_key") -> MusclesWorkedClient:
        config = Config(api_key=api_key, base_url=base_url)
        http_client = create_http_client(config, transport=httpx.MockTransport(self.handler))
        return MusclesWorkedClient(config, http_client=http_client)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def shared_client(fake_api, monkeypatch):
    """Install a client backed by the fake API as the one the tools use."""
    client = fake_api.client()
    monkeypatch.setattr(client_module, "_api_client", client)
    return client
