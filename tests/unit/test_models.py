"""Unit tests for transient domain models."""

import pytest

from bestnotes.models import ComposerState, Credentials, OnboardingPage, ScreenKind


def test_screen_kinds_are_string_values() -> None:
    assert [kind.value for kind in ScreenKind] == ["title", "onboarding", "login", "home"]
    assert ScreenKind("login") is ScreenKind.LOGIN


def test_credentials_validity_is_derived() -> None:
    creds = Credentials(email="a@b.com", password="12345")
    assert creds.is_valid is False
    creds.password = "123456"
    assert creds.is_valid is True


def test_composer_state_defaults_hidden() -> None:
    assert ComposerState() == ComposerState(visible=False, draft_text="")


def test_onboarding_page_is_immutable() -> None:
    page = OnboardingPage("t", "s", "e")
    with pytest.raises(AttributeError):
        page.title = "changed"  # type: ignore[misc]
