"""Internal constants shared across the library."""

MODULE_ID = "unmanaged_consent_adapter"
MODULE_VERSION = "1.1.0.0.0"

#: Credentials key read when the adapter is built through the reflective path.
CREDENTIALS_USES_IAB_STRINGS_KEY = "usesIABStringsFromUserDefaults"

#: Environment variable read by ``UnmanagedConsentConfig.from_env``.
ENV_USES_IAB_STRINGS = "UNMANAGED_CONSENT_USES_IAB_STRINGS"

# ------------------------------------------------------------------
# Standard IAB setting keys in the shared settings store
# ------------------------------------------------------------------

IAB_US_PRIVACY_SETTING_KEY = "IABUSPrivacy_String"
IAB_TCF_TC_STRING_SETTING_KEY = "IABTCF_TCString"
