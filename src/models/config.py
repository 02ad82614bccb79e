"""Model with telemetry configuration and SDK client options."""

from enum import IntEnum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

import constants


class ConfigurationBase(BaseModel):
    """Base class for all configuration models.

    Field names are snake_case; the camelCase alias of every field is
    accepted on input and used when dumping with ``by_alias=True``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class TelemetryConfiguration(ConfigurationBase):
    """Effective telemetry configuration for one page session.

    The record is immutable once resolved so it can be shared between the
    enrichment hook and any other callback without copying.

    Attributes:
        enabled: When false no telemetry client is constructed at all.
        instrumentation_key: Key of the collection backend; passed to the SDK
            unchanged.
        track_user_id: Whether the redacted login name is used as the
            authenticated user correlation token.
        track_exceptions: Whether the SDK auto-collects exceptions.
        cloud_role: Value of the ``ai.cloud.role`` tag; empty means unset.
        cloud_role_instance: Value of the ``ai.cloud.roleInstance`` tag;
            empty means unset.
        excluded_dependency_targets: Newline-delimited host names whose
            dependency calls are not tracked.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = constants.DEFAULT_ENABLED
    instrumentation_key: str = constants.DEFAULT_INSTRUMENTATION_KEY
    track_user_id: bool = constants.DEFAULT_TRACK_USER_ID
    track_exceptions: bool = constants.DEFAULT_TRACK_EXCEPTIONS
    cloud_role: str = constants.DEFAULT_CLOUD_ROLE
    cloud_role_instance: str = constants.DEFAULT_CLOUD_ROLE_INSTANCE
    excluded_dependency_targets: str = constants.EXCLUDED_TARGETS_SEPARATOR.join(
        constants.DEFAULT_EXCLUDED_DEPENDENCY_TARGETS
    )


DEFAULT_CONFIGURATION: Final[TelemetryConfiguration] = TelemetryConfiguration()


class DistributedTracingMode(IntEnum):
    """Trace-context header format attached to outgoing requests.

    Values match the ones used by the Application Insights SDK.
    """

    AI = 0
    AI_AND_W3C = 1
    W3C = 2


class TelemetryClientOptions(ConfigurationBase):  # pylint: disable=too-many-instance-attributes
    """Options the telemetry SDK client is constructed with."""

    model_config = ConfigDict(frozen=True)

    instrumentation_key: str
    # No spaces, commas, semicolons, equals or vertical bars
    account_id: str | None = None
    disable_fetch_tracking: bool = False
    enable_request_header_tracking: bool = True
    enable_response_header_tracking: bool = True
    enable_ajax_error_status_text: bool = True
    enable_ajax_perf_tracking: bool = True
    # Ignored by the SDK when exception tracking is disabled
    enable_unhandled_promise_rejection_tracking: bool = True
    enable_cors_correlation: bool = True
    disable_exception_tracking: bool = False
    distributed_tracing_mode: DistributedTracingMode = (
        DistributedTracingMode.AI_AND_W3C
    )
    excluded_dependency_targets: tuple[str, ...] = Field(default_factory=tuple)
