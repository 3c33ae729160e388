"""Result values for callers that prefer ``match`` over ``try``/``except``.

    match capture(client.tx_hash, txid):
        case Ok(tx):
            ...
        case Err(ServerError(status_code=404)):
            ...
        case Err(NetworkError() as exc):
            ...
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar

from .errors import WocClientError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: WocClientError


Result = Ok[T] | Err


def capture(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Ok[T] | Err:
    try:
        return Ok(fn(*args, **kwargs))
    except WocClientError as exc:
        return Err(exc)


async def acapture(fn: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> Ok[T] | Err:
    try:
        return Ok(await fn(*args, **kwargs))
    except WocClientError as exc:
        return Err(exc)
