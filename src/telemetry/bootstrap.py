"""Activation of page telemetry.

The bootstrapper resolves the effective configuration and, unless tracking
is disabled, constructs the telemetry client, registers the enrichment hook
and sends a single page view. Missing or invalid properties never break
the host page: ``on_init`` completes in both the disabled and active case,
and errors raised by the telemetry client are logged, not propagated.
"""

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from constants import LOG_SOURCE
from log import get_logger
from models.config import DEFAULT_CONFIGURATION, TelemetryConfiguration
from models.context import HostPageContext
from telemetry.client import (
    TelemetryClient,
    TelemetryClientFactory,
    build_client_options,
)
from telemetry.config_resolver import load_overrides, resolve
from telemetry.enricher import make_telemetry_initializer
from telemetry.exclusions import parse_excluded_targets
from telemetry.identity import redact_identity
from telemetry.page_view import build_page_view

logger = get_logger(__name__)


class PipelineState(Enum):
    """State of the telemetry pipeline for one page session."""

    DISABLED = "disabled"
    ACTIVE = "active"


class TelemetryBootstrapper:  # pylint: disable=too-many-instance-attributes
    """Wire configuration, enrichment and page view into the telemetry client.

    Attributes:
        configuration: Effective configuration, None until resolved.
        excluded_targets: Host names excluded from dependency tracking.
        correlation_token: Redacted identity of the signed-in user.
        client: Telemetry client, None while the pipeline is disabled.
        state: Current pipeline state.
    """

    def __init__(
        self,
        properties: Mapping[str, Any] | None,
        page_context: HostPageContext,
        client_factory: TelemetryClientFactory,
        defaults: TelemetryConfiguration = DEFAULT_CONFIGURATION,
    ) -> None:
        """
        Initialize the bootstrapper without starting anything.

        Parameters:
            properties: Component properties supplied by the host page.
            page_context: Page, site and user context of the host page.
            client_factory: Callable constructing the telemetry client from
                its options.
            defaults: Default configuration the properties are merged onto.
        """
        self._properties = properties
        self._page_context = page_context
        self._client_factory = client_factory
        self._defaults = defaults

        self.configuration: TelemetryConfiguration | None = None
        self.excluded_targets: list[str] = []
        self.correlation_token: str | None = None
        self.client: TelemetryClient | None = None
        self.state = PipelineState.DISABLED

    @classmethod
    def from_properties_file(
        cls,
        path: str | Path,
        page_context: HostPageContext,
        client_factory: TelemetryClientFactory,
        defaults: TelemetryConfiguration = DEFAULT_CONFIGURATION,
    ) -> "TelemetryBootstrapper":
        """
        Create a bootstrapper with component properties read from a file.

        Parameters:
            path: Path to a YAML or JSON file with component properties.
            page_context: Page, site and user context of the host page.
            client_factory: Callable constructing the telemetry client.
            defaults: Default configuration the properties are merged onto.

        Returns:
            TelemetryBootstrapper: The bootstrapper, not yet initialized.
        """
        return cls(load_overrides(path), page_context, client_factory, defaults)

    async def on_init(self) -> None:
        """
        Activate telemetry for the page session.

        Completes without a value whether the pipeline ends up active or
        disabled; the host page must not wait on telemetry setup.
        """
        logger.info("[%s] Initializing page telemetry", LOG_SOURCE)

        if self.state is PipelineState.ACTIVE:
            logger.debug("[%s] Telemetry already active", LOG_SOURCE)
            return

        try:
            self.configuration = resolve(self._defaults, self._properties)
        except ValidationError as e:
            logger.error(
                "[%s] Invalid telemetry properties, tracking disabled: %s",
                LOG_SOURCE,
                e,
            )
            return

        if not self.configuration.enabled:
            logger.info(
                "[%s] Tracking disabled. No analytics will be logged.", LOG_SOURCE
            )
            return

        self._activate(self.configuration)

    def _activate(self, config: TelemetryConfiguration) -> None:
        """
        Construct the telemetry client and send the initial page view.

        The pipeline becomes active as soon as the client is loaded; a
        failure in any later step is logged and does not reach the host
        page.

        Parameters:
            config: Effective configuration with tracking enabled.
        """
        self.excluded_targets = parse_excluded_targets(
            config.excluded_dependency_targets
        )
        user = self._page_context.user
        self.correlation_token = redact_identity(
            user.login_name, config.track_user_id
        )

        options = build_client_options(
            config, self.correlation_token, self.excluded_targets
        )
        try:
            client = self._client_factory(options)
            client.load()
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception(
                "[%s] Failed to start telemetry client, tracking disabled",
                LOG_SOURCE,
            )
            return

        self.client = client
        self.state = PipelineState.ACTIVE

        try:
            client.add_telemetry_initializer(make_telemetry_initializer(config))
            if self.correlation_token is not None:
                client.set_authenticated_user_context(
                    self.correlation_token, self.correlation_token, True
                )

            page_view = build_page_view(
                self._page_context.title,
                self._page_context.uri,
                self._page_context.web,
                user,
            )
            client.track_page_view(page_view.to_telemetry())
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("[%s] Failed to complete telemetry setup", LOG_SOURCE)
            return

        logger.info(
            "[%s] Telemetry active, %d dependency targets excluded",
            LOG_SOURCE,
            len(self.excluded_targets),
        )
