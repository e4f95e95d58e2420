"""In-memory store for publisher-provided consents.

This is the only component allowed to mutate the custom consents map.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping

from unmanaged_consent.models.consent import ConsentKey, ConsentValue


def changed_keys(
    old: Mapping[ConsentKey, ConsentValue],
    new: Mapping[ConsentKey, ConsentValue],
) -> list[ConsentKey]:
    """Return the keys whose value differs between *old* and *new*.

    Added and modified keys come first (in *new* order), removed keys
    after them (in *old* order).  Each key appears at most once.
    """
    changed = [key for key, value in new.items() if key not in old or old[key] != value]
    changed.extend(key for key in old if key not in new)
    return changed


class ConsentStateStore:
    """Holds the custom consents and resolves the merged view.

    Reads never cache the merged result: every call to :meth:`resolve`
    builds a fresh dict from the current custom consents.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._custom: dict[ConsentKey, ConsentValue] = {}

    def get(self, key: ConsentKey) -> ConsentValue | None:
        with self._lock:
            return self._custom.get(key)

    def resolve(
        self,
        external: Mapping[ConsentKey, ConsentValue] | None = None,
    ) -> dict[ConsentKey, ConsentValue]:
        """Merge *external* values under the custom consents.

        Custom values always win for keys they supply.
        """
        result: dict[ConsentKey, ConsentValue] = dict(external) if external else {}
        with self._lock:
            result.update(self._custom)
        return result

    def replace(self, new: Mapping[ConsentKey, ConsentValue]) -> list[ConsentKey]:
        """Swap in *new* as the custom consents and return the changed keys."""
        incoming = dict(new)
        with self._lock:
            old = self._custom
            self._custom = incoming
        return changed_keys(old, incoming)
