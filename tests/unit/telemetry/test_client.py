"""Unit tests for the telemetry client options."""

from models.config import (
    DEFAULT_CONFIGURATION,
    DistributedTracingMode,
    TelemetryConfiguration,
)
from telemetry.client import build_client_options


def test_build_client_options_defaults() -> None:
    """Test the options built from the default configuration."""
    options = build_client_options(DEFAULT_CONFIGURATION, "johndoe")

    assert options.instrumentation_key == DEFAULT_CONFIGURATION.instrumentation_key
    assert options.account_id == "johndoe"
    assert options.disable_fetch_tracking is False
    assert options.enable_request_header_tracking is True
    assert options.enable_response_header_tracking is True
    assert options.enable_ajax_error_status_text is True
    assert options.enable_ajax_perf_tracking is True
    assert options.enable_unhandled_promise_rejection_tracking is True
    assert options.enable_cors_correlation is True
    assert options.disable_exception_tracking is False
    assert options.distributed_tracing_mode is DistributedTracingMode.AI_AND_W3C
    assert options.excluded_dependency_targets == ()


def test_build_client_options_exception_tracking_disabled() -> None:
    """Test that exception tracking follows the configuration."""
    config = TelemetryConfiguration(track_exceptions=False)
    options = build_client_options(config, None)
    assert options.disable_exception_tracking is True
    assert options.account_id is None


def test_build_client_options_excluded_targets() -> None:
    """Test that excluded targets are handed to the client in order."""
    options = build_client_options(
        DEFAULT_CONFIGURATION, None, ["business.bing.com", "measure.office.com"]
    )
    assert options.excluded_dependency_targets == (
        "business.bing.com",
        "measure.office.com",
    )


def test_client_options_serialized_names() -> None:
    """Test that options dump with the SDK's camelCase names."""
    options = build_client_options(DEFAULT_CONFIGURATION, "johndoe")
    dumped = options.model_dump(by_alias=True)

    assert dumped["instrumentationKey"] == DEFAULT_CONFIGURATION.instrumentation_key
    assert dumped["accountId"] == "johndoe"
    assert dumped["disableExceptionTracking"] is False
    assert dumped["enableCorsCorrelation"] is True
    assert dumped["distributedTracingMode"] == 1
