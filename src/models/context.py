"""Context objects supplied by the hosting page."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WebContext:
    """
    Site the page belongs to.

    Attributes:
        absolute_url: Absolute URL of the site.
        server_relative_url: Site URL relative to the server root.
        id: Site identifier (GUID).
    """

    absolute_url: str
    server_relative_url: str
    id: str  # pylint: disable=invalid-name


@dataclass(frozen=True)
class UserContext:
    """
    Signed-in user.

    Attributes:
        display_name: Name shown in the user interface.
        email: E-mail address.
        login_name: Login name; may contain claim separators such as ``|``.
    """

    display_name: str | None
    email: str | None
    login_name: str | None


@dataclass(frozen=True)
class HostPageContext:
    """
    Read-only page context available synchronously at startup.

    Attributes:
        title: Document title of the page.
        uri: Full URL of the page.
        web: Site the page belongs to.
        user: Signed-in user.
    """

    title: str
    uri: str
    web: WebContext
    user: UserContext
