"""Consent adapter for publishers that manage their own CMP integration."""

from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Iterable, Mapping
from typing import Any

from unmanaged_consent._constants import MODULE_ID, MODULE_VERSION
from unmanaged_consent._redact import redact_consents_for_log
from unmanaged_consent.config import UnmanagedConsentConfig
from unmanaged_consent.models.consent import ConsentDialogType, ConsentKey, ConsentSource, ConsentValue
from unmanaged_consent.module import ConsentAdapterDelegate, ModuleConfiguration
from unmanaged_consent.settings.base import SharedSettingsStore, Subscription
from unmanaged_consent.settings.iab import IAB_SETTING_KEYS, read_iab_strings
from unmanaged_consent.settings.memory import default_settings_store
from unmanaged_consent.state.store import ConsentStateStore, changed_keys

_logger = logging.getLogger(__name__)

_UNSUPPORTED_ACTION = "%s is a no-op on the unmanaged consent adapter; call your CMP SDK directly"


class UnmanagedConsentAdapter:
    """Consent adapter whose consent info is set directly by the publisher.

    Prefer one of the managed consent adapters where possible.  With this
    adapter the publisher is responsible for:

    * setting new consent info on :attr:`consents` every time their CMP
      reports a change, otherwise consumers of the runtime see stale info;
    * normalizing that info to :class:`~unmanaged_consent.models.ConsentKeys`
      and :class:`~unmanaged_consent.models.ConsentValues` where a constant
      exists.

    When *uses_iab_strings_from_settings* is enabled, the standard IAB
    strings found in the shared settings store are merged into
    :attr:`consents` and their changes are reported automatically.  If the
    CMP only reports standard IAB strings, nothing else is needed.

    The consent dialog and consent action APIs are no-ops.

    Usage::

        adapter = UnmanagedConsentAdapter(uses_iab_strings_from_settings=True)
        await adapter.initialize()
        adapter.consents = {ConsentKeys.CCPA_OPT_IN: ConsentValues.GRANTED}
    """

    module_id: str = MODULE_ID
    module_version: str = MODULE_VERSION

    def __init__(
        self,
        uses_iab_strings_from_settings: bool = False,
        *,
        settings_store: SharedSettingsStore | None = None,
    ) -> None:
        config = UnmanagedConsentConfig(uses_iab_strings_from_settings=uses_iab_strings_from_settings)
        self._uses_iab_strings = config.uses_iab_strings_from_settings
        self._settings_store: SharedSettingsStore = (
            settings_store if settings_store is not None else default_settings_store()
        )
        self._state = ConsentStateStore()
        self._delegate_ref: weakref.ref[ConsentAdapterDelegate] | None = None
        self._lock = threading.RLock()
        self._initialized = False
        self._closed = False
        self._starting = False
        self._subscription: Subscription | None = None
        self._finalizer: weakref.finalize | None = None
        self._iab_snapshot: dict[ConsentKey, str] = {}
        self.should_collect_consent = False

    @classmethod
    def from_config(
        cls,
        config: UnmanagedConsentConfig,
        *,
        settings_store: SharedSettingsStore | None = None,
    ) -> UnmanagedConsentAdapter:
        return cls(config.uses_iab_strings_from_settings, settings_store=settings_store)

    @classmethod
    def from_credentials(
        cls,
        credentials: Mapping[str, Any] | None,
        *,
        settings_store: SharedSettingsStore | None = None,
    ) -> UnmanagedConsentAdapter:
        """Build the adapter from the runtime's free-form credentials map.

        The runtime may build and discard several instances this way, so
        nothing beyond parsing happens here.
        """
        return cls.from_config(UnmanagedConsentConfig.from_credentials(credentials), settings_store=settings_store)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def uses_iab_strings_from_settings(self) -> bool:
        return self._uses_iab_strings

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def is_observing(self) -> bool:
        """Whether a settings store subscription is currently active."""
        subscription = self._subscription
        return subscription is not None and subscription.is_active

    @property
    def delegate(self) -> ConsentAdapterDelegate | None:
        """The runtime's consent change delegate.

        Installed by the runtime; adapters and publishers should not set it.
        Only a weak reference is kept.
        """
        ref = self._delegate_ref
        return ref() if ref is not None else None

    @delegate.setter
    def delegate(self, value: ConsentAdapterDelegate | None) -> None:
        self._delegate_ref = weakref.ref(value) if value is not None else None

    @property
    def consents(self) -> dict[ConsentKey, ConsentValue]:
        """Current consent info.

        Publisher-provided values merged over the IAB strings from the
        settings store when that is enabled, the publisher-provided values
        alone otherwise.  Built fresh on every read.
        """
        if self._uses_iab_strings:
            return self._state.resolve(read_iab_strings(self._settings_store))
        return self._state.resolve()

    @consents.setter
    def consents(self, value: Mapping[ConsentKey, ConsentValue]) -> None:
        changed = self._state.replace(value)
        _logger.debug(
            "Custom consents replaced consents=%s changed=%s",
            redact_consents_for_log(value),
            changed,
        )
        self._notify(changed)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def initialize(self, configuration: ModuleConfiguration | None = None) -> None:
        """Make the adapter ready to be used.

        There is no CMP to set up, so this always succeeds.  Calling it
        again is a no-op, except that it retries observing the settings
        store if an earlier attempt failed.
        """
        with self._lock:
            first_call = not self._initialized
            self._initialized = True
            start = (
                self._uses_iab_strings
                and not self._closed
                and not self._starting
                and self._subscription is None
            )
            if start:
                self._starting = True
        if not first_call and not start:
            _logger.debug("Adapter already initialized")
            return
        if start:
            try:
                self._start_observing_iab_strings()
            finally:
                with self._lock:
                    self._starting = False
        _logger.debug(
            "Adapter initialized module=%s version=%s iab=%s app_id=%s",
            self.module_id,
            self.module_version,
            self._uses_iab_strings,
            configuration.app_id if configuration is not None else None,
        )

    def close(self) -> None:
        """Stop observing the settings store.  Safe to call repeatedly."""
        with self._lock:
            self._closed = True
            subscription = self._subscription
            finalizer = self._finalizer
            self._subscription = None
            self._finalizer = None
        if finalizer is not None:
            finalizer.detach()
        if subscription is not None:
            subscription.cancel()
            _logger.debug("Stopped observing IAB strings")

    async def __aenter__(self) -> UnmanagedConsentAdapter:
        await self.initialize()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Consent actions
    # ------------------------------------------------------------------

    async def grant_consent(self, source: ConsentSource) -> bool:
        _logger.debug(_UNSUPPORTED_ACTION, "grant_consent")
        return False

    async def deny_consent(self, source: ConsentSource) -> bool:
        _logger.debug(_UNSUPPORTED_ACTION, "deny_consent")
        return False

    async def reset_consent(self) -> bool:
        _logger.debug(_UNSUPPORTED_ACTION, "reset_consent")
        return False

    async def show_consent_dialog(self, dialog_type: ConsentDialogType, view: Any = None) -> bool:
        _logger.debug(_UNSUPPORTED_ACTION, "show_consent_dialog")
        return False

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _start_observing_iab_strings(self) -> None:
        # The store must not keep the adapter alive: route through a weak ref.
        weak_self = weakref.ref(self)

        def _on_setting_change(setting_key: str) -> None:
            adapter = weak_self()
            if adapter is not None:
                adapter._on_setting_change(setting_key)

        # Store calls happen outside self._lock; results are published under it.
        try:
            subscription = self._settings_store.subscribe(IAB_SETTING_KEYS.keys(), _on_setting_change)
        except Exception:
            _logger.warning("Could not observe IAB strings in the settings store", exc_info=True)
            return
        try:
            snapshot = read_iab_strings(self._settings_store)
        except Exception:
            subscription.cancel()
            _logger.warning("Could not read IAB strings from the settings store", exc_info=True)
            return

        with self._lock:
            closed = self._closed
            if not closed:
                self._subscription = subscription
                self._finalizer = weakref.finalize(self, subscription.cancel)
                self._iab_snapshot = snapshot
        if closed:
            subscription.cancel()
            return
        _logger.debug("Observing IAB strings snapshot=%s", redact_consents_for_log(snapshot))

    def _on_setting_change(self, setting_key: str) -> None:
        if self._subscription is None:
            return
        current = read_iab_strings(self._settings_store)
        with self._lock:
            if self._subscription is None:
                return
            previous = self._iab_snapshot
            self._iab_snapshot = current

        # Keys overridden by a custom consent keep their resolved value.
        changed = [key for key in changed_keys(previous, current) if self._state.get(key) is None]
        _logger.debug("IAB setting changed setting=%s changed=%s", setting_key, changed)
        self._notify(changed)

    def _notify(self, keys: Iterable[ConsentKey]) -> None:
        keys = list(keys)
        if not keys:
            return
        delegate = self.delegate
        if delegate is None:
            _logger.debug("No delegate set, dropping consent changes keys=%s", keys)
            return
        for key in keys:
            try:
                delegate.on_consent_change(key)
            except Exception:
                _logger.debug("on_consent_change callback failed key=%s", key, exc_info=True)
