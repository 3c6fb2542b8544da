"""
Root controller: wires the router, catalog store, ranking engine and request
orchestrator into one application state the UI renders.
"""
from __future__ import annotations
import asyncio
from typing import Any, List, Optional

from catalog_studio.core.catalog_store import CatalogStore
from catalog_studio.core.orchestrator import RequestOrchestrator, RequestState, RequestStatus
from catalog_studio.core.ranking import rank
from catalog_studio.core.router import ViewRouter
from catalog_studio.services import clipboard
from catalog_studio.services.notifications import ERROR, SUCCESS, Notifier
from catalog_studio.services.storage import PreferenceStore
from catalog_studio.utils.errors import CatalogFetchError
from catalog_studio.utils.logging import logger
from catalog_studio.utils.security import sanitize_name
from catalog_studio.utils.typing import AppState, Category, Item, Page, Preferences

class CatalogController:
    def __init__(
        self,
        store: CatalogStore,
        orchestrator: RequestOrchestrator,
        notifier: Notifier,
        preferences: PreferenceStore,
        router: Optional[ViewRouter] = None,
        copy=clipboard.copy,
    ):
        self.store = store
        self.orchestrator = orchestrator
        self.notifier = notifier
        self.preferences_store = preferences
        self.router = router or ViewRouter()
        self._copy = copy
        self.state = AppState(page=self.router.active_page)
        self.preferences = Preferences()
        self.router.subscribe(self._on_view_changed)

    # --- derived data ---

    @property
    def active_category(self) -> Optional[Category]:
        return self.router.active_category

    @property
    def request(self) -> RequestState:
        return self.orchestrator.state

    @property
    def selection(self) -> Optional[Item]:
        return self.orchestrator.selection

    def category_items(self) -> List[Item]:
        category = self.active_category
        if category is None:
            return []
        return list(self.store.cached(category) or ())

    def _recompute(self) -> None:
        self.state.ranked = rank(self.category_items(), self.state.query, self.active_category)

    # --- lifecycle ---

    async def start(self, signal: Any = None, preload: bool = True) -> None:
        """Load preferences, resolve the initial view and load its catalog."""
        self.load_preferences()
        if preload:
            await self.preload()
        self.router.navigate(signal)
        await self.refresh()

    async def preload(self) -> None:
        await asyncio.gather(*(self._ensure(c) for c in Category))

    async def _ensure(self, category: Category) -> bool:
        try:
            await self.store.ensure_loaded(category)
        except CatalogFetchError as e:
            logger.error("controller: loading %s failed: %s", category.value, e)
            self.notifier.notify(f"Failed to load {category.value}", ERROR)
            return False
        return True

    # --- navigation ---

    async def navigate(self, signal: Any) -> None:
        """Switch to the view named by ``signal`` and load its catalog."""
        if self.router.navigate(signal):
            await self.refresh()

    def _on_view_changed(self, previous: Page, page: Page) -> None:
        self.state.page = page
        self.state.view_token += 1
        self.state.query = ""
        self.orchestrator.reset()
        self._recompute()

    async def refresh(self) -> None:
        """
        Make sure the active category is loaded and recompute the result list.

        The fetch is tagged with the view token current at request time; if
        the view changed before it resolved, the result is left in the store
        but not applied.
        """
        category = self.active_category
        if category is None:
            self.state.loading = False
            return
        token = self.state.view_token
        if self.store.cached(category) is None:
            self.state.loading = True
        ok = await self._ensure(category)
        if token != self.state.view_token or category != self.active_category:
            logger.debug("controller: discarding stale %s result", category.value)
            return
        self.state.loading = False
        if ok:
            self._recompute()

    # --- search ---

    def set_query(self, query: str) -> List[Item]:
        self.state.query = query or ""
        self._recompute()
        return self.state.ranked

    # --- preferences ---

    def load_preferences(self) -> Preferences:
        self.preferences = self.preferences_store.get()
        self.state.needs_configuration = not self.preferences.is_configured
        return self.preferences

    def save_preferences(self, licensee_name: str, assignee_name: str) -> bool:
        licensee = sanitize_name(licensee_name)
        assignee = sanitize_name(assignee_name)
        if not (licensee and assignee):
            return False
        self.preferences_store.set(licensee, assignee)
        self.preferences = Preferences(licensee, assignee)
        self.state.needs_configuration = False
        self.notifier.notify("Configuration saved", SUCCESS)
        return True

    def clear_preferences(self) -> None:
        self.preferences_store.clear()
        self.preferences = Preferences()
        self.state.needs_configuration = True

    # --- selection & generation ---

    def select_item(self, item: Item) -> bool:
        if item not in self.category_items():
            logger.warning("controller: ignoring selection outside active catalog: %s", item.key)
            return False
        return self.orchestrator.select(item)

    def close_generation(self) -> None:
        self.orchestrator.reset()

    def can_generate(self) -> bool:
        prefs = self.preferences
        return self.orchestrator.can_submit(prefs.licensee_name, prefs.assignee_name)

    async def generate(self) -> bool:
        """Submit the generation request. Returns False when the guard refuses it."""
        prefs = self.preferences
        submitted = await self.orchestrator.submit(prefs.licensee_name, prefs.assignee_name)
        if submitted and self.request.status is RequestStatus.FAILED:
            self.notifier.notify("Generation failed, please try again", ERROR)
        return submitted

    def acknowledge_result(self) -> None:
        self.orchestrator.acknowledge()

    def copy_result(self) -> bool:
        payload = self.request.payload
        if self.request.status is not RequestStatus.SUCCESS or payload is None:
            return False
        ok, error = self._copy(payload)
        if ok:
            self.notifier.notify("Copied to clipboard", SUCCESS)
        else:
            self.notifier.notify("Copy failed, please copy manually", ERROR)
            logger.debug("controller: %s", error)
        return ok
