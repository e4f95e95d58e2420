"""Custom exception hierarchy for unmanaged_consent."""

from __future__ import annotations


class UnmanagedConsentError(Exception):
    """Base exception for all unmanaged_consent errors."""


class ConsentConfigError(UnmanagedConsentError):
    """Invalid configuration passed to the typed constructor."""


class SettingsStoreError(UnmanagedConsentError):
    """Shared settings store misuse (bad value type, empty subscription, ...)."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)
