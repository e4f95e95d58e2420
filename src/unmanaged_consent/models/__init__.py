"""Data models for consent keys, values and plugin enums."""

from unmanaged_consent.models.consent import (
    ConsentDialogType,
    ConsentKey,
    ConsentKeys,
    ConsentSource,
    ConsentValue,
    ConsentValues,
)

__all__ = [
    "ConsentDialogType",
    "ConsentKey",
    "ConsentKeys",
    "ConsentSource",
    "ConsentValue",
    "ConsentValues",
]
