"""Shared fixtures for telemetry unit tests."""

from pathlib import Path
from typing import Any

import pytest
from pytest_mock import MockerFixture

from models.context import HostPageContext, UserContext, WebContext
from telemetry.client import TelemetryClient

PAGE_TITLE = "Team Site - Home"
PAGE_URI = "https://contoso.sharepoint.com/sites/team/SitePages/Home.aspx"
WEB_ABSOLUTE_URL = "https://contoso.sharepoint.com/sites/team"
WEB_SERVER_RELATIVE_URL = "/sites/team"
WEB_ID = "8c1f1a6e-4b7d-4f3a-9e2b-1d5c7a9b3e41"
USER_DISPLAY_NAME = "John Doe"
USER_EMAIL = "john.doe@contoso.com"
USER_LOGIN_NAME = "i:0#.f|membership|john.doe@contoso.com"
REDACTED_LOGIN_NAME = "i0#.fmembershipjohn.doe@contoso.com"


@pytest.fixture(name="web_context")
def web_context_fixture() -> WebContext:
    """Site of the test page."""
    return WebContext(
        absolute_url=WEB_ABSOLUTE_URL,
        server_relative_url=WEB_SERVER_RELATIVE_URL,
        id=WEB_ID,
    )


@pytest.fixture(name="user_context")
def user_context_fixture() -> UserContext:
    """Signed-in user of the test page."""
    return UserContext(
        display_name=USER_DISPLAY_NAME,
        email=USER_EMAIL,
        login_name=USER_LOGIN_NAME,
    )


@pytest.fixture(name="page_context")
def page_context_fixture(
    web_context: WebContext, user_context: UserContext
) -> HostPageContext:
    """Complete host page context."""
    return HostPageContext(
        title=PAGE_TITLE, uri=PAGE_URI, web=web_context, user=user_context
    )


@pytest.fixture(name="telemetry_client")
def telemetry_client_fixture(mocker: MockerFixture) -> Any:
    """Mocked telemetry SDK client."""
    return mocker.Mock(spec=TelemetryClient)


@pytest.fixture(name="client_factory")
def client_factory_fixture(mocker: MockerFixture, telemetry_client: Any) -> Any:
    """Factory returning the mocked telemetry client."""
    return mocker.Mock(return_value=telemetry_client)


@pytest.fixture(name="properties_file")
def properties_file_fixture(tmp_path: Path) -> Path:
    """Write component properties to a temporary YAML file."""
    path = tmp_path / "properties.yaml"
    path.write_text(
        "cloudRole: intranet-portal\n"
        "cloudRoleInstance: westeurope-1\n"
        "trackExceptions: false\n",
        encoding="utf-8",
    )
    return path
