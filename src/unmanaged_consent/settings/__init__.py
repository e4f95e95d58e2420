"""Shared settings store access.

The adapter never writes to the settings store; it only reads the
standard IAB keys and subscribes to their changes.
"""

from unmanaged_consent.settings.base import SettingsCallback, SharedSettingsStore, Subscription
from unmanaged_consent.settings.iab import IAB_SETTING_KEYS, read_iab_strings
from unmanaged_consent.settings.memory import InMemorySettingsStore, default_settings_store

__all__ = [
    "IAB_SETTING_KEYS",
    "InMemorySettingsStore",
    "SettingsCallback",
    "SharedSettingsStore",
    "Subscription",
    "default_settings_store",
    "read_iab_strings",
]
