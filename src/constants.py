"""Constants used in the page telemetry bootstrap."""

from typing import Final

# Logging
PAGE_TELEMETRY_LOG_LEVEL_ENV_VAR: Final[str] = "PAGE_TELEMETRY_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"

# Name used in log records emitted by the bootstrapper
LOG_SOURCE: Final[str] = "ApplicationInsightsApplicationCustomizer"

# Telemetry item tag keys
CLOUD_ROLE_TAG: Final[str] = "ai.cloud.role"
CLOUD_ROLE_INSTANCE_TAG: Final[str] = "ai.cloud.roleInstance"

# Characters the SDK uses as field separators in the authenticated user context
RESERVED_IDENTITY_CHARACTERS: Final[str] = "|:;="

# Shorter exclusion entries are treated as accidental input
MIN_EXCLUDED_TARGET_LENGTH: Final[int] = 6
EXCLUDED_TARGETS_SEPARATOR: Final[str] = "\n"

# Name of the custom properties block attached to the page view
PAGE_VIEW_CUSTOM_PROPERTIES_KEY: Final[str] = "CustomProps"

# Default telemetry settings
DEFAULT_ENABLED: Final[bool] = True
DEFAULT_INSTRUMENTATION_KEY: Final[str] = "1a3f9226-224a-4802-9793-ba64f10437ec"
DEFAULT_TRACK_USER_ID: Final[bool] = True
DEFAULT_TRACK_EXCEPTIONS: Final[bool] = True
DEFAULT_CLOUD_ROLE: Final[str] = "sharepoint-page"
DEFAULT_CLOUD_ROLE_INSTANCE: Final[str] = ""
DEFAULT_EXCLUDED_DEPENDENCY_TARGETS: Final[tuple[str, ...]] = (
    "browser.pipe.aria.microsoft.com",
    "business.bing.com",
    "measure.office.com",
    "officeapps.live.com",
    "outlook.office365.com",
    "outlook.office.com",
)
