"""
Shared fixtures for the Clawsfund MCP tests.

No test touches the network: every ClawsfundClient is built on an
httpx.MockTransport that routes requests to a small in-memory fake API.
"""

import json

import httpx
import pytest

from core.client import ClawsfundClient

TEST_BASE = "http://localhost:3000"


class FakeApi:
    """Route table keyed by (method, path); records every request it sees.

    A route value may be a (status, body) tuple, where a dict/list body is
    JSON-encoded, or an exception instance to raise from the transport.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(route, Exception):
            raise route
        status, body = route
        if isinstance(body, (dict, list)):
            return httpx.Response(status, json=body)
        return httpx.Response(status, text=body)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def client(fake_api):
    return ClawsfundClient(base_url=TEST_BASE, transport=httpx.MockTransport(fake_api))
