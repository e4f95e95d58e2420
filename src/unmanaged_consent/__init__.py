"""unmanaged_consent - Consent adapter for publishers that manage their own CMP."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("unmanaged-consent")
except PackageNotFoundError:
    __version__ = "0+local"
from unmanaged_consent.adapter import UnmanagedConsentAdapter
from unmanaged_consent.config import UnmanagedConsentConfig
from unmanaged_consent.exceptions import (
    ConsentConfigError,
    SettingsStoreError,
    UnmanagedConsentError,
)
from unmanaged_consent.models import (
    ConsentDialogType,
    ConsentKey,
    ConsentKeys,
    ConsentSource,
    ConsentValue,
    ConsentValues,
)
from unmanaged_consent.module import ConsentAdapter, ConsentAdapterDelegate, ModuleConfiguration
from unmanaged_consent.settings import (
    InMemorySettingsStore,
    SharedSettingsStore,
    Subscription,
    default_settings_store,
)

__all__ = [
    "__version__",
    "ConsentAdapter",
    "ConsentAdapterDelegate",
    "ConsentConfigError",
    "ConsentDialogType",
    "ConsentKey",
    "ConsentKeys",
    "ConsentSource",
    "ConsentValue",
    "ConsentValues",
    "InMemorySettingsStore",
    "ModuleConfiguration",
    "SettingsStoreError",
    "SharedSettingsStore",
    "Subscription",
    "UnmanagedConsentAdapter",
    "UnmanagedConsentConfig",
    "UnmanagedConsentError",
    "default_settings_store",
]
