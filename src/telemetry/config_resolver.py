"""Resolution of the effective telemetry configuration.

The effective configuration is built from an explicit default record and
the (possibly partial) component properties supplied by the host page.
Every field present in the properties overrides the corresponding default
as a whole; absent fields keep their default value.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from models.config import TelemetryConfiguration

logger = logging.getLogger(__name__)


def _field_name(key: str) -> str | None:
    """Map a property key to a configuration field name.

    Both the snake_case field name and its camelCase alias are accepted.

    Parameters:
        key: Property key as supplied by the caller.

    Returns:
        The field name, or None if the key is not a configuration field.
    """
    for name, field_info in TelemetryConfiguration.model_fields.items():
        if key in (name, field_info.alias):
            return name
    return None


def resolve(
    defaults: TelemetryConfiguration,
    overrides: Mapping[str, Any] | None = None,
) -> TelemetryConfiguration:
    """Merge default settings with caller-supplied overrides.

    Parameters:
        defaults: Known-good default configuration.
        overrides: Partial component properties. Keys may use either the
            camelCase or the snake_case spelling. Keys with a None value are
            treated as absent and unknown keys are ignored, so
            ``{"enabled": None}`` keeps the default and tracking stays on.

    Returns:
        The effective configuration.

    Raises:
        pydantic.ValidationError: If an override value has the wrong type.
    """
    if not overrides:
        return defaults

    merged = defaults.model_dump()
    for key, value in overrides.items():
        name = _field_name(key)
        if name is None:
            logger.debug("Ignoring unknown telemetry property '%s'", key)
            continue
        if value is None:
            continue
        merged[name] = value

    return TelemetryConfiguration.model_validate(merged)


def load_overrides(path: str | Path) -> dict[str, Any]:
    """Read component properties from a YAML or JSON file.

    Parameters:
        path: Path to the properties file.

    Returns:
        The parsed properties, or an empty dict if the file cannot be read
        or does not contain a mapping.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to read telemetry properties from %s: %s", path, e)
        return {}

    if content is None:
        return {}
    if not isinstance(content, dict):
        logger.warning(
            "Telemetry properties in %s are not a mapping, ignoring them", path
        )
        return {}
    return content
