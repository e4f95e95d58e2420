"""Thread-safe in-memory settings store."""

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from unmanaged_consent.exceptions import SettingsStoreError
from unmanaged_consent.settings.base import SettingsCallback, Subscription

_logger = logging.getLogger(__name__)

_ALLOWED_VALUE_TYPES = (str, int, float, bool)


@dataclass(frozen=True, slots=True)
class _Subscriber:
    keys: frozenset[str]
    callback: SettingsCallback


def _check_value(key: str, value: Any) -> None:
    if value is not None and not isinstance(value, _ALLOWED_VALUE_TYPES):
        raise SettingsStoreError(
            f"Unsupported value type for setting {key!r}: {type(value).__name__}",
            key=key,
        )


class InMemorySettingsStore:
    """Process-local settings store with per-key change notifications.

    Subscribers are called outside the internal lock, on the thread that
    performed the write.
    """

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._lock = threading.Lock()
        self._values: dict[str, Any] = {}
        self._subscribers: dict[int, _Subscriber] = {}
        self._ids = itertools.count()
        if initial:
            for key, value in initial.items():
                _check_value(key, value)
                self._values[key] = value

    def get(self, key: str) -> Any:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key*; ``None`` removes the key."""
        self.update({key: value})

    def remove(self, key: str) -> None:
        self.update({key: None})

    def update(self, values: Mapping[str, Any]) -> None:
        """Apply several writes, then notify once per changed key."""
        for key, value in values.items():
            _check_value(key, value)

        changed: list[str] = []
        with self._lock:
            for key, value in values.items():
                if value is None:
                    if key in self._values:
                        del self._values[key]
                        changed.append(key)
                    continue
                if key in self._values and self._values[key] == value:
                    continue
                self._values[key] = value
                changed.append(key)
            subscribers = list(self._subscribers.values())

        for key in changed:
            self._notify(subscribers, key)

    def subscribe(self, keys: Iterable[str], callback: SettingsCallback) -> Subscription:
        watched = frozenset(keys)
        if not watched:
            raise SettingsStoreError("Cannot subscribe to an empty set of keys")

        with self._lock:
            token = next(self._ids)
            self._subscribers[token] = _Subscriber(keys=watched, callback=callback)
        _logger.debug("Settings subscription %s registered keys=%s", token, sorted(watched))

        def _unsubscribe() -> None:
            with self._lock:
                self._subscribers.pop(token, None)
            _logger.debug("Settings subscription %s cancelled", token)

        return Subscription(_unsubscribe)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    @staticmethod
    def _notify(subscribers: list[_Subscriber], key: str) -> None:
        for subscriber in subscribers:
            if key not in subscriber.keys:
                continue
            try:
                subscriber.callback(key)
            except Exception:
                _logger.debug("Settings subscriber failed for key=%s", key, exc_info=True)


_default_store: InMemorySettingsStore | None = None
_default_store_lock = threading.Lock()


def default_settings_store() -> InMemorySettingsStore:
    """Return the lazily created process-wide settings store."""
    global _default_store
    with _default_store_lock:
        if _default_store is None:
            _default_store = InMemorySettingsStore()
        return _default_store
