from __future__ import annotations
import asyncio
from typing import Awaitable, Callable, Dict, List, Optional, Tuple

from catalog_studio.utils.errors import CatalogFetchError
from catalog_studio.utils.logging import logger
from catalog_studio.utils.typing import Category, Item

ItemFetcher = Callable[[Category], Awaitable[List[Item]]]

class CatalogStore:
    """
    Session cache of catalog items, one list per category.

    Items are fetched on first access and never evicted. Callers that ask for
    a category while its fetch is still pending await the same task instead of
    issuing another request. A failed fetch leaves the category uncached so
    the next call retries.
    """

    def __init__(self, fetch: ItemFetcher):
        self._fetch = fetch
        self._items: Dict[Category, Tuple[Item, ...]] = {}
        self._pending: Dict[Category, asyncio.Task] = {}

    def cached(self, category: Category) -> Optional[Tuple[Item, ...]]:
        return self._items.get(category)

    def is_loading(self, category: Category) -> bool:
        return category in self._pending

    async def ensure_loaded(self, category: Category) -> Tuple[Item, ...]:
        if category in self._items:
            return self._items[category]

        task = self._pending.get(category)
        if task is None:
            task = asyncio.ensure_future(self._load(category))
            self._pending[category] = task
        else:
            logger.debug("catalog: joining pending %s fetch", category.value)
        # shield: one caller going away must not cancel the shared fetch
        return await asyncio.shield(task)

    async def _load(self, category: Category) -> Tuple[Item, ...]:
        try:
            items = tuple(await self._fetch(category))
        except CatalogFetchError:
            logger.warning("catalog: %s fetch failed", category.value)
            raise
        except Exception as e:
            logger.warning("catalog: %s fetch failed: %s", category.value, e)
            raise CatalogFetchError(category.value, str(e)) from e
        finally:
            self._pending.pop(category, None)
        self._items[category] = items
        logger.info("catalog: loaded %d %s", len(items), category.value)
        return items
