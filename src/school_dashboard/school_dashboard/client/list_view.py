from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from .api_client import ApiClient, ApiError
from .filters import Predicate, apply_filters, display_name, text_search
from .notifications import LoggingNotifier, Notifier, Variant
from .query_cache import QueryCache, QueryState

logger = logging.getLogger(__name__)


class ResourceListView:
    """Fetch-all list screen for one resource path with filtering and row actions.

    Rows are fetched once through the cache; `update` and `delete` invalidate the
    path so the next `visible()` call re-fetches.
    """

    def __init__(
        self,
        api: ApiClient,
        cache: QueryCache,
        resource_path: str,
        *,
        label: Optional[str] = None,
        search_fields: Iterable = (display_name,),
        notifier: Optional[Notifier] = None,
    ):
        self._api = api
        self._cache = cache
        self.resource_path = resource_path.rstrip("/")
        self.label = label or self.resource_path.rsplit("/", 1)[-1]
        self._search_fields = tuple(search_fields)
        self._notifier = notifier or LoggingNotifier()

    def load(self) -> QueryState:
        return self._cache.fetch(self.resource_path)

    def retry(self) -> QueryState:
        return self._cache.refetch(self.resource_path)

    @property
    def error_message(self) -> Optional[str]:
        state = self._cache.peek(self.resource_path)
        if state is not None and state.is_error:
            return f"Failed to load {self.label}"
        return None

    def visible(self, filters: Iterable[Predicate] = (), search: str = "") -> list:
        state = self.load()
        if not state.is_success:
            return []
        return apply_filters(state.data or [], *filters, text_search(search, *self._search_fields))

    def update(self, item_id: int, changes: dict) -> Optional[Any]:
        try:
            updated = self._api.patch(f"{self.resource_path}/{item_id}", changes)
        except ApiError as e:
            self._notifier.notify("Error", f"Failed to update: {e.message}", Variant.DESTRUCTIVE)
            return None
        self._cache.invalidate(self.resource_path)
        self._notifier.notify("Updated", f"{self.label.capitalize()} record updated")
        return updated

    def delete(self, item_id: int, confirm: Callable[[], bool]) -> bool:
        """Delete a row after `confirm()` agrees. There is no undo."""
        if not confirm():
            return False
        try:
            self._api.delete(f"{self.resource_path}/{item_id}")
        except ApiError as e:
            self._notifier.notify("Error", f"Failed to delete: {e.message}", Variant.DESTRUCTIVE)
            return False
        self._cache.invalidate(self.resource_path)
        logger.info("Deleted %s/%s", self.resource_path, item_id)
        self._notifier.notify("Deleted", f"{self.label.capitalize()} record deleted")
        return True
