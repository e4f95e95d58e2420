"""State/store layer.

This package is the single source of truth for the publisher-provided
consents and for how they are merged with externally observed IAB strings.
"""

from unmanaged_consent.state.store import ConsentStateStore, changed_keys

__all__ = ["ConsentStateStore", "changed_keys"]
