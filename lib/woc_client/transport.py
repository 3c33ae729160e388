from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from .cache import ResponseCache, cache_key
from .config_types import ClientConfig
from .errors import NetworkError, RequestSetupError, ServerError
from .throttle import Throttle

logger = logging.getLogger(__name__)

_BINARY_TYPES = {"application/pdf", "application/octet-stream"}


def build_headers(cfg: ClientConfig) -> dict[str, str]:
    headers = {"Cache-Control": "no-cache"}
    if cfg.user_agent:
        headers["User-Agent"] = cfg.user_agent
    auth = cfg.auth_header
    if auth is not None:
        name, value = auth
        headers[name] = value
    return headers


def clean_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    return {k: v for k, v in (params or {}).items() if v is not None}


def decode_body(r: httpx.Response) -> Any:
    ctype = r.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    if ctype in _BINARY_TYPES:
        return r.content
    # hex payloads come back as text/plain and must not be read as JSON numbers
    if ctype.startswith("text/"):
        return r.text
    try:
        return r.json()
    except ValueError:
        return r.text


def server_error(method: str, path: str, r: httpx.Response, payload: Any) -> ServerError:
    msg = f"{method} {path} failed with {r.status_code}"
    if isinstance(payload, dict):
        detail = payload.get("error") or payload.get("message")
        if detail:
            msg = str(detail)
    elif isinstance(payload, str) and payload.strip():
        msg = payload.strip()[:1000]
    return ServerError(r.status_code, msg, payload)


class _TransportBase:
    def __init__(self, cfg: ClientConfig):
        self._cfg = cfg
        self.headers = build_headers(cfg)
        self.throttle = Throttle(cfg.throttle_interval_s)
        self.cache = ResponseCache(cfg.cache_maxsize, enabled=cfg.enable_cache)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def _build(self, client: httpx.Client | httpx.AsyncClient, method: str, path: str, *,
               params: dict[str, Any] | None = None, json_body: Any | None = None) -> httpx.Request:
        try:
            if method == "GET":
                return client.build_request(method, path, params=params)
            return client.build_request(method, path, params=params, json=json_body)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise RequestSetupError(f"cannot build {method} {path}: {e}", cause=e) from e

    def _finish(self, method: str, path: str, r: httpx.Response) -> Any:
        data = decode_body(r)
        if r.status_code >= 400:
            logger.debug("%s %s -> %s", method, path, r.status_code)
            raise server_error(method, path, r, data)
        return data

    @staticmethod
    def _key(request: httpx.Request, params: dict[str, Any]):
        return cache_key(str(request.url).split("?", 1)[0], params)


class Transport(_TransportBase):
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.BaseTransport | None = None):
        super().__init__(cfg)
        self._client = httpx.Client(
            base_url=cfg.base_url,
            timeout=cfg.timeout_s,
            headers=self.headers,
            follow_redirects=True,
            transport=http_transport,
        )

    def close(self) -> None:
        self._client.close()

    def request(self, method: str, path: str, *, params: Mapping[str, Any] | None = None,
                json_body: Any | None = None) -> Any:
        query = clean_params(params)
        request = self._build(self._client, method, path, params=query, json_body=json_body)

        key = None
        if method == "GET":
            key = self._key(request, query)
            cached = self.cache.get(key)
            if not self.cache.is_miss(cached):
                logger.debug("cache hit %s", request.url)
                return cached

        self.throttle.wait()
        logger.debug("%s %s", method, request.url)
        try:
            r = self._client.send(request)
        except httpx.UnsupportedProtocol as e:
            raise RequestSetupError(str(e), cause=e) from e
        except httpx.RequestError as e:
            raise NetworkError(str(e) or type(e).__name__) from e

        data = self._finish(method, path, r)
        if key is not None:
            self.cache.put(key, data)
        return data

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Any, params: Mapping[str, Any] | None = None) -> Any:
        return self.request("POST", path, params=params, json_body=body)


class AsyncTransport(_TransportBase):
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.AsyncBaseTransport | None = None):
        super().__init__(cfg)
        self._client = httpx.AsyncClient(
            base_url=cfg.base_url,
            timeout=cfg.timeout_s,
            headers=self.headers,
            follow_redirects=True,
            transport=http_transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def request(self, method: str, path: str, *, params: Mapping[str, Any] | None = None,
                      json_body: Any | None = None) -> Any:
        query = clean_params(params)
        request = self._build(self._client, method, path, params=query, json_body=json_body)

        key = None
        if method == "GET":
            key = self._key(request, query)
            cached = self.cache.get(key)
            if not self.cache.is_miss(cached):
                logger.debug("cache hit %s", request.url)
                return cached

        await self.throttle.wait_async()
        logger.debug("%s %s", method, request.url)
        try:
            r = await self._client.send(request)
        except httpx.UnsupportedProtocol as e:
            raise RequestSetupError(str(e), cause=e) from e
        except httpx.RequestError as e:
            raise NetworkError(str(e) or type(e).__name__) from e

        data = self._finish(method, path, r)
        if key is not None:
            self.cache.put(key, data)
        return data

    def get(self, path: str, params: Mapping[str, Any] | None = None):
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Any, params: Mapping[str, Any] | None = None):
        return self.request("POST", path, params=params, json_body=body)
