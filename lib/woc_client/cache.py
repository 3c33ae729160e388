from __future__ import annotations

import copy
import threading
from typing import Any, Hashable, Mapping

from cachetools import LRUCache

_MISSING = object()


def cache_key(url: str, params: Mapping[str, Any] | None = None) -> Hashable:
    items = tuple(sorted((str(k), str(v)) for k, v in (params or {}).items()))
    return url, items


class ResponseCache:
    """GET response cache living as long as the client that owns it.

    Bodies are copied on the way in and on the way out, so callers may
    mutate what they get back without touching later hits.
    """

    def __init__(self, maxsize: int = 1024, *, enabled: bool = True):
        self.enabled = enabled
        self._data: LRUCache = LRUCache(maxsize=max(1, int(maxsize)))
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Any:
        if not self.enabled:
            return _MISSING
        with self._lock:
            value = self._data.get(key, _MISSING)
        if value is _MISSING:
            return value
        return copy.deepcopy(value)

    def put(self, key: Hashable, value: Any) -> None:
        if not self.enabled:
            return
        value = copy.deepcopy(value)
        with self._lock:
            self._data[key] = value

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    @staticmethod
    def is_miss(value: Any) -> bool:
        return value is _MISSING
