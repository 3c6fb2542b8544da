"""
Transient notification sink.

At most one notification is visible. Each one dismisses itself after a fixed
interval; posting a new one replaces the current one and cancels its timer.
"""
from __future__ import annotations
import threading
from typing import Callable, Optional

from catalog_studio.utils.logging import logger
from catalog_studio.utils.typing import Notification

SUCCESS = "success"
ERROR = "error"
DEFAULT_DISMISS_SECONDS = 3.0

TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]

class Notifier:
    def __init__(
        self,
        dismiss_after: float = DEFAULT_DISMISS_SECONDS,
        timer_factory: TimerFactory = threading.Timer,
    ):
        self.dismiss_after = dismiss_after
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._current: Optional[Notification] = None
        self._timer: Optional[threading.Timer] = None
        self._seq = 0

    @property
    def current(self) -> Optional[Notification]:
        with self._lock:
            return self._current

    def notify(self, message: str, kind: str = SUCCESS) -> Notification:
        if kind not in (SUCCESS, ERROR):
            raise ValueError(f"Unknown notification kind: {kind}")
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._seq += 1
            note = Notification(message=message, kind=kind, seq=self._seq)
            self._current = note
            timer = self._timer_factory(self.dismiss_after, lambda: self._expire(note.seq))
            timer.daemon = True
            self._timer = timer
        timer.start()
        log = logger.warning if kind == ERROR else logger.info
        log("notify[%s]: %s", kind, message)
        return note

    def _expire(self, seq: int) -> None:
        with self._lock:
            if self._current is not None and self._current.seq == seq:
                self._current = None
                self._timer = None

    def dismiss(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._current = None
            self._timer = None
