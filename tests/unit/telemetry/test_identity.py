"""Unit tests for redaction of the user identity."""

import pytest

from telemetry.identity import redact_identity


def test_redact_identity_example() -> None:
    """Test redaction of a login name with separators."""
    assert redact_identity("john|doe:smith", True) == "johndoesmith"


def test_redact_identity_claims_login_name() -> None:
    """Test redaction of a claims-encoded login name."""
    assert (
        redact_identity("i:0#.f|membership|john.doe@contoso.com", True)
        == "i0#.fmembershipjohn.doe@contoso.com"
    )


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("|", ""),
        (":;=|", ""),
        ("a=b;c", "abc"),
        ("||a||", "a"),
        ("no-separators@example.com", "no-separators@example.com"),
        ("", ""),
        ("spaces stay, commas too", "spaces stay, commas too"),
    ],
)
def test_redact_identity_strips_reserved_characters(raw: str, expected: str) -> None:
    """Test that only the reserved characters are removed, in order."""
    result = redact_identity(raw, True)
    assert result == expected
    assert not set(result or "") & set("|:;=")


@pytest.mark.parametrize("raw", ["john|doe:smith", "", None])
def test_redact_identity_disabled(raw: str | None) -> None:
    """Test that no identity is computed when tracking is disabled."""
    assert redact_identity(raw, False) is None


def test_redact_identity_absent() -> None:
    """Test that an absent identity is propagated as None."""
    assert redact_identity(None, True) is None
