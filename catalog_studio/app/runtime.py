"""
Background asyncio loop for the Streamlit script thread.

Streamlit reruns the script on every interaction; the controller's tasks and
HTTP client must outlive a single rerun, so all coroutines are scheduled onto
one long-lived loop running in a daemon thread.
"""
from __future__ import annotations
import asyncio
import threading
from typing import Any, Coroutine, Optional, TypeVar

from catalog_studio.utils.logging import logger

T = TypeVar("T")

_loop: Optional[asyncio.AbstractEventLoop] = None
_lock = threading.Lock()

def get_loop() -> asyncio.AbstractEventLoop:
    global _loop
    with _lock:
        if _loop is None or _loop.is_closed():
            _loop = asyncio.new_event_loop()
            thread = threading.Thread(target=_loop.run_forever, name="catalog-studio-loop", daemon=True)
            thread.start()
            logger.info("runtime: event loop started")
        return _loop

def run(coro: Coroutine[Any, Any, T], timeout: Optional[float] = None) -> T:
    """Run ``coro`` on the background loop and block until it finishes."""
    future = asyncio.run_coroutine_threadsafe(coro, get_loop())
    return future.result(timeout=timeout)
