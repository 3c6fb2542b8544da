from __future__ import annotations
from typing import Any, Callable, List, Optional

from catalog_studio.utils.logging import logger
from catalog_studio.utils.typing import Category, Page

DEFAULT_PAGE = Page.HOME

ViewListener = Callable[[Page, Page], None]

def resolve_page(signal: Any) -> Page:
    """Map a navigation signal (``#plugins``, ``products``, ...) to a page.

    Anything unrecognized resolves to the default page.
    """
    if not isinstance(signal, str):
        return DEFAULT_PAGE
    name = signal.strip().lstrip("#").strip().lower()
    try:
        return Page(name)
    except ValueError:
        return DEFAULT_PAGE

class ViewRouter:
    """Tracks the active page and notifies listeners when it changes."""

    def __init__(self, initial: Page = DEFAULT_PAGE):
        self._page = initial
        self._listeners: List[ViewListener] = []

    @property
    def active_page(self) -> Page:
        return self._page

    @property
    def active_category(self) -> Optional[Category]:
        return self._page.category

    def subscribe(self, listener: ViewListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ViewListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def navigate(self, signal: Any) -> bool:
        """Resolve ``signal`` and switch to it. Returns True if the page changed."""
        page = resolve_page(signal)
        if page == self._page:
            return False
        previous, self._page = self._page, page
        logger.info("router: %s -> %s", previous.value, page.value)
        for listener in list(self._listeners):
            listener(previous, page)
        return True
