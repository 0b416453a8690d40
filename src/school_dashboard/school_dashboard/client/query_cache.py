from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .api_client import ApiError

logger = logging.getLogger(__name__)


class QueryStatus(str, Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class QueryState:
    status: QueryStatus
    data: Any = None
    error: Optional[ApiError] = None

    @property
    def is_loading(self) -> bool:
        return self.status == QueryStatus.LOADING

    @property
    def is_success(self) -> bool:
        return self.status == QueryStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status == QueryStatus.ERROR


class QueryCache:
    """Fetched data keyed by resource path (e.g. "/api/students").

    A failed fetch is stored as an error state and stays there until the key is
    invalidated or refetched; nothing is retried automatically.
    """

    def __init__(self, fetcher: Callable[[str], Any]):
        self._fetcher = fetcher
        self._entries: dict[str, QueryState] = {}

    def peek(self, key: str) -> Optional[QueryState]:
        return self._entries.get(key)

    def fetch(self, key: str) -> QueryState:
        state = self._entries.get(key)
        if state is not None and not state.is_loading:
            return state
        return self._load(key)

    def refetch(self, key: str) -> QueryState:
        return self._load(key)

    def invalidate(self, key: str) -> None:
        """Drop `key` and everything below it (`/api/students` also drops `/api/students/3`)."""
        prefix = key.rstrip("/") + "/"
        for k in [k for k in self._entries if k == key or k.startswith(prefix)]:
            del self._entries[k]

    def _load(self, key: str) -> QueryState:
        self._entries[key] = QueryState(QueryStatus.LOADING)
        try:
            data = self._fetcher(key)
        except ApiError as e:
            logger.warning("Fetching %s failed: %s", key, e)
            state = QueryState(QueryStatus.ERROR, error=e)
        except Exception as e:
            logger.exception("Fetching %s failed unexpectedly", key)
            state = QueryState(QueryStatus.ERROR, error=ApiError(None, str(e)))
        else:
            state = QueryState(QueryStatus.SUCCESS, data=data)
        self._entries[key] = state
        return state
