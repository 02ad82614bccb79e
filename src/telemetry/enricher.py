"""Enrichment of outgoing telemetry items with deployment role tags."""

from collections.abc import Callable, Mapping, MutableMapping
from functools import partial
from typing import Any, TypeVar

from constants import CLOUD_ROLE_INSTANCE_TAG, CLOUD_ROLE_TAG
from models.config import TelemetryConfiguration

TelemetryItem = TypeVar("TelemetryItem")


def _get_tags(event: Any) -> MutableMapping[str, Any] | None:
    """Return the writable tags mapping of a telemetry item, if it has one.

    Parameters:
        event: Telemetry item as a mapping or as an object with ``tags``.

    Returns:
        The tags mapping, or None when it is missing or not writable.
    """
    if isinstance(event, Mapping):
        tags = event.get("tags")
    else:
        tags = getattr(event, "tags", None)
    if isinstance(tags, MutableMapping):
        return tags
    return None


def enrich(event: TelemetryItem, config: TelemetryConfiguration) -> TelemetryItem:
    """Stamp the cloud role tags onto a telemetry item.

    The item is updated in place and returned. Only the ``ai.cloud.role``
    and ``ai.cloud.roleInstance`` tags are written, each only when the
    corresponding configuration value is non-empty. Items without a tags
    mapping are returned untouched; this function never raises, as it runs
    inside the SDK send pipeline.

    Parameters:
        event: Telemetry item owned by the SDK, may be None.
        config: Effective telemetry configuration.

    Returns:
        The same telemetry item.
    """
    if event is None:
        return event

    tags = _get_tags(event)
    if tags is None:
        return event

    if config.cloud_role:
        tags[CLOUD_ROLE_TAG] = config.cloud_role
    if config.cloud_role_instance:
        tags[CLOUD_ROLE_INSTANCE_TAG] = config.cloud_role_instance
    return event


def make_telemetry_initializer(
    config: TelemetryConfiguration,
) -> Callable[[TelemetryItem], TelemetryItem]:
    """Bind the effective configuration to the enrichment function.

    Parameters:
        config: Effective telemetry configuration.

    Returns:
        A single-argument hook suitable for registration with the SDK.
    """
    return partial(enrich, config=config)
