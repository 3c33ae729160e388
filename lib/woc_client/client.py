from __future__ import annotations

import httpx

from .config_types import ClientConfig
from .endpoints import STATUS_SENTINEL, Endpoints
from .transport import AsyncTransport, Transport


class WhatsOnChainClient(Endpoints):
    def __init__(self, cfg: ClientConfig | None = None, *, http_transport: httpx.BaseTransport | None = None):
        self._t = Transport(cfg or ClientConfig(), http_transport=http_transport)

    @property
    def config(self) -> ClientConfig:
        return self._t.config

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "WhatsOnChainClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def status(self) -> bool:
        return self._t.get("woc") == STATUS_SENTINEL


class AsyncWhatsOnChainClient(Endpoints):
    """Same endpoints as :class:`WhatsOnChainClient`, each returning an awaitable."""

    def __init__(self, cfg: ClientConfig | None = None, *,
                 http_transport: httpx.AsyncBaseTransport | None = None):
        self._t = AsyncTransport(cfg or ClientConfig(), http_transport=http_transport)

    @property
    def config(self) -> ClientConfig:
        return self._t.config

    async def close(self) -> None:
        await self._t.close()

    async def __aenter__(self) -> "AsyncWhatsOnChainClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    async def status(self) -> bool:
        return await self._t.get("woc") == STATUS_SENTINEL
