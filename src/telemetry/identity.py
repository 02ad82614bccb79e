"""Redaction of the user identity used for telemetry correlation."""

from typing import Final

from constants import RESERVED_IDENTITY_CHARACTERS

_RESERVED_CHARACTERS_TABLE: Final = str.maketrans(
    "", "", RESERVED_IDENTITY_CHARACTERS
)


def redact_identity(raw_identity: str | None, enabled: bool) -> str | None:
    """Build the correlation token for the authenticated user context.

    The SDK uses ``|``, ``:``, ``;`` and ``=`` as field separators in the
    authenticated user context, so every occurrence is removed.

    Parameters:
        raw_identity: Raw identity, typically the login name.
        enabled: Whether user tracking is enabled.

    Returns:
        The sanitized token, or None when tracking is disabled or no
        identity is available.
    """
    if not enabled or raw_identity is None:
        return None
    return raw_identity.translate(_RESERVED_CHARACTERS_TABLE)
