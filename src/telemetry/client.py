"""Interface of the telemetry SDK client and its construction options."""

from collections.abc import Callable, Sequence
from typing import Any, Protocol

from models.config import TelemetryClientOptions, TelemetryConfiguration


class TelemetryClient(Protocol):
    """Telemetry SDK client used by the bootstrapper.

    Transport, batching and retry are entirely the client's concern.
    """

    def load(self) -> None:
        """Start the client."""

    def add_telemetry_initializer(
        self, initializer: Callable[[Any], Any]
    ) -> None:
        """Register a hook invoked for every outgoing telemetry item."""

    def set_authenticated_user_context(
        self,
        authenticated_user_id: str,
        account_id: str | None = None,
        store_in_cookie: bool = False,
    ) -> None:
        """Correlate subsequent telemetry with an authenticated user."""

    def track_page_view(self, page_view: dict[str, Any]) -> None:
        """Send a page view telemetry item."""


TelemetryClientFactory = Callable[[TelemetryClientOptions], TelemetryClient]


def build_client_options(
    config: TelemetryConfiguration,
    account_id: str | None,
    excluded_targets: Sequence[str] = (),
) -> TelemetryClientOptions:
    """Build the options the telemetry client is constructed with.

    Fetch, header, AJAX and unhandled rejection tracking together with CORS
    correlation are always on, and W3C trace context headers are emitted
    alongside the legacy ones. Exception auto-collection follows
    ``config.track_exceptions``.

    Parameters:
        config: Effective telemetry configuration.
        account_id: Redacted correlation token, or None.
        excluded_targets: Host names whose dependency calls are not tracked.

    Returns:
        TelemetryClientOptions: The client options.
    """
    return TelemetryClientOptions(
        instrumentation_key=config.instrumentation_key,
        account_id=account_id,
        disable_exception_tracking=not config.track_exceptions,
        excluded_dependency_targets=tuple(excluded_targets),
    )
