from __future__ import annotations

import httpx
import pytest

from woc_client import AsyncWhatsOnChainClient, ClientConfig, WhatsOnChainClient


class Recorder:
    """MockTransport handler that records requests and replies from a route table."""

    def __init__(self, routes=None, default=None):
        self.routes = dict(routes or {})
        self.default = default
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.routes.get(request.url.path, self.default)
        if reply is None:
            return httpx.Response(404, text="Not Found")
        if callable(reply):
            return reply(request)
        # fresh response per request, httpx binds a response to one request
        return httpx.Response(reply.status_code, headers=reply.headers, content=reply.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder(default=httpx.Response(200, json={}))


@pytest.fixture
def make_client(recorder):
    clients = []

    def _make(**cfg) -> WhatsOnChainClient:
        # keyed by default so tests do not pay the unauthenticated spacing
        cfg.setdefault("api_key", "k")
        client = WhatsOnChainClient(ClientConfig(**cfg), http_transport=httpx.MockTransport(recorder))
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.close()


@pytest.fixture
def make_async_client(recorder):
    def _make(**cfg) -> AsyncWhatsOnChainClient:
        cfg.setdefault("api_key", "k")
        return AsyncWhatsOnChainClient(ClientConfig(**cfg), http_transport=httpx.MockTransport(recorder))

    return _make
