from __future__ import annotations

from typing import Any


class WocClientError(Exception):
    """Base client error."""


class NetworkError(WocClientError):
    """Request was sent but no response came back (timeout, connection failure)."""


class ServerError(WocClientError):
    def __init__(self, status_code: int, message: str, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class RequestSetupError(WocClientError):
    """Request could not be built or dispatched."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
