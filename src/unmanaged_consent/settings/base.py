"""Shared settings store collaborator interface."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from typing import Any, Protocol, runtime_checkable

SettingsCallback = Callable[[str], None]


class Subscription:
    """Cancellable handle returned by :meth:`SharedSettingsStore.subscribe`.

    ``cancel`` may be called any number of times, from any thread.
    """

    def __init__(self, on_cancel: Callable[[], None] | None = None) -> None:
        self._lock = threading.Lock()
        self._on_cancel = on_cancel
        self._active = True

    @property
    def is_active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        with self._lock:
            if not self._active:
                return
            self._active = False
            on_cancel = self._on_cancel
            self._on_cancel = None
        if on_cancel is not None:
            on_cancel()


@runtime_checkable
class SharedSettingsStore(Protocol):
    """Process-wide key/value store not owned by the adapter.

    ``subscribe`` must call *callback* with the changed setting key, and
    only for keys listed in *keys*.
    """

    def get(self, key: str) -> Any: ...

    def subscribe(self, keys: Iterable[str], callback: SettingsCallback) -> Subscription: ...
