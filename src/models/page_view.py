"""Page view telemetry payload."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from constants import PAGE_VIEW_CUSTOM_PROPERTIES_KEY


class PageCustomProperties(BaseModel):
    """Page and user details attached to the page view."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    web_absolute_url: str
    web_server_relative_url: str
    web_id: str
    user_display_name: str | None
    user_email: str | None
    user_login_name: str | None


class PageViewProperties(BaseModel):
    """Custom properties block of the page view."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    custom_props: PageCustomProperties = Field(
        alias=PAGE_VIEW_CUSTOM_PROPERTIES_KEY
    )


class PageViewPayload(BaseModel):
    """Page view sent once when telemetry is activated.

    Attributes:
        name: Page title.
        uri: Page URL.
        properties: Custom properties describing the site and the user.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    uri: str
    properties: PageViewProperties

    def to_telemetry(self) -> dict[str, Any]:
        """
        Serialize the payload to the shape expected by the telemetry SDK.

        Returns:
            dict[str, Any]: The payload with aliased (camelCase) keys.
        """
        return self.model_dump(by_alias=True)
