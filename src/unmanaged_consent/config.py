"""Adapter configuration for unmanaged_consent."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from unmanaged_consent._constants import CREDENTIALS_USES_IAB_STRINGS_KEY, ENV_USES_IAB_STRINGS
from unmanaged_consent.exceptions import ConsentConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class UnmanagedConsentConfig:
    """Adapter configuration.

    Parameters
    ----------
    uses_iab_strings_from_settings : bool
        Read the standard IAB privacy strings (US Privacy and TCF) from the
        shared settings store, report changes to them automatically, and merge
        them with the publisher-provided consents.  Publisher values win on
        key collision.  Leave disabled to set every consent explicitly.
    """

    uses_iab_strings_from_settings: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.uses_iab_strings_from_settings, bool):
            raise ConsentConfigError(
                "uses_iab_strings_from_settings must be a bool, "
                f"got {type(self.uses_iab_strings_from_settings).__name__}"
            )

    @classmethod
    def from_credentials(cls, credentials: Mapping[str, Any] | None) -> UnmanagedConsentConfig:
        """Parse the loosely-typed credentials map handed over by the runtime.

        Only a real ``bool`` under ``usesIABStringsFromUserDefaults`` is
        honoured.  Missing keys, ``None`` credentials and values of any
        other type (``"yes"``, ``1``) fall back to ``False``.
        """
        if not credentials:
            return cls()
        value = credentials.get(CREDENTIALS_USES_IAB_STRINGS_KEY)
        return cls(uses_iab_strings_from_settings=value if isinstance(value, bool) else False)

    @classmethod
    def from_env(cls, **overrides: Any) -> UnmanagedConsentConfig:
        """Create configuration from environment variables.

        Reads ``UNMANAGED_CONSENT_USES_IAB_STRINGS``.  Explicit keyword
        arguments override environment values.
        """
        config_kwargs: dict[str, Any] = {}
        if "uses_iab_strings_from_settings" not in overrides:
            config_kwargs["uses_iab_strings_from_settings"] = _env_bool(
                os.environ.get(ENV_USES_IAB_STRINGS),
                False,
            )
        config_kwargs.update(overrides)
        return cls(**config_kwargs)
