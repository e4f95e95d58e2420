"""Helpers for safe debug logging.

Consent maps carry raw IAB privacy strings, which are personal data and
can run to hundreds of characters.  This module renders them in a form
suitable for DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_DEFAULT_MAX_VALUE = 16


def redact_value_for_log(value: Any, *, max_string: int = _DEFAULT_MAX_VALUE) -> Any:
    """Return a log-safe form of a single consent value."""
    if value is None:
        return None
    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated:{len(value)}>"
        return value
    if isinstance(value, (int, float, bool)):
        return value
    # Fallback: represent unknown objects without dumping internals.
    return f"<{type(value).__name__}>"


def redact_consents_for_log(
    consents: Mapping[Any, Any],
    *,
    max_string: int = _DEFAULT_MAX_VALUE,
) -> dict[str, Any]:
    """Return a redacted copy of *consents* suitable for debug logs."""
    return {str(key): redact_value_for_log(value, max_string=max_string) for key, value in consents.items()}
