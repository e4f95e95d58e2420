"""Consent keys, values and the enums used by the consent plugin contract.

Keys and values travel through the adapter as plain strings.  The
:class:`ConsentKeys` and :class:`ConsentValues` enums are ``StrEnum``
members, so they compare equal to (and hash like) the raw strings the
publisher's CMP reports.  Publishers should normalize their CMP output
to these constants whenever one exists and fall back to custom keys
only for partner-specific signals.
"""

from __future__ import annotations

import enum
from typing import TypeAlias

ConsentKey: TypeAlias = str
ConsentValue: TypeAlias = str


class ConsentKeys(enum.StrEnum):
    """Predefined consent keys understood by the mediation runtime."""

    TCF = "tcf"
    USP = "usp"
    GPP = "gpp"
    CCPA_OPT_IN = "ccpa_opt_in"
    GDPR_CONSENT_GIVEN = "gdpr_consent_given"


class ConsentValues(enum.StrEnum):
    """Predefined values for boolean-like keys such as ``ccpa_opt_in``.

    Not applicable to IAB string keys, whose values are the raw strings.
    """

    GRANTED = "granted"
    DENIED = "denied"
    DOES_NOT_APPLY = "doesNotApply"


class ConsentSource(enum.StrEnum):
    """Origin of a consent change requested through the runtime."""

    USER = "user"
    DEVELOPER = "developer"


class ConsentDialogType(enum.StrEnum):
    """Consent dialog flavour the runtime may ask a CMP to present."""

    CONCISE = "concise"
    DETAILED = "detailed"
