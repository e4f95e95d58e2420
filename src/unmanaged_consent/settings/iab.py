"""Standard IAB privacy strings stored in the shared settings store."""

from __future__ import annotations

from types import MappingProxyType

from unmanaged_consent._constants import IAB_TCF_TC_STRING_SETTING_KEY, IAB_US_PRIVACY_SETTING_KEY
from unmanaged_consent.models.consent import ConsentKey, ConsentKeys
from unmanaged_consent.settings.base import SharedSettingsStore

#: Setting key -> consent key reported to the runtime.
IAB_SETTING_KEYS: MappingProxyType[str, ConsentKey] = MappingProxyType(
    {
        IAB_US_PRIVACY_SETTING_KEY: ConsentKeys.USP,
        IAB_TCF_TC_STRING_SETTING_KEY: ConsentKeys.TCF,
    }
)


def read_iab_strings(store: SharedSettingsStore) -> dict[ConsentKey, str]:
    """Read the IAB strings currently present in *store*.

    Missing, empty and non-string values are left out.
    """
    result: dict[ConsentKey, str] = {}
    for setting_key, consent_key in IAB_SETTING_KEYS.items():
        value = store.get(setting_key)
        if isinstance(value, str) and value:
            result[consent_key] = value
    return result
