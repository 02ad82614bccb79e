"""Assembly of the initial page view telemetry payload."""

from models.context import UserContext, WebContext
from models.page_view import (
    PageCustomProperties,
    PageViewPayload,
    PageViewProperties,
)


def build_page_view(
    page_title: str, page_uri: str, web: WebContext, user: UserContext
) -> PageViewPayload:
    """Build the page view sent once at startup.

    Context values are copied verbatim. The user's display name, e-mail and
    login name are sent as-is; only the authenticated user correlation
    token is redacted.

    Parameters:
        page_title: Document title of the page.
        page_uri: Full URL of the page.
        web: Site the page belongs to.
        user: Signed-in user.

    Returns:
        PageViewPayload: The assembled payload.
    """
    return PageViewPayload(
        name=page_title,
        uri=page_uri,
        properties=PageViewProperties(
            custom_props=PageCustomProperties(
                web_absolute_url=web.absolute_url,
                web_server_relative_url=web.server_relative_url,
                web_id=web.id,
                user_display_name=user.display_name,
                user_email=user.email,
                user_login_name=user.login_name,
            )
        ),
    )
