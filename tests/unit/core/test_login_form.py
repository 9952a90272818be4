"""Unit tests for login form state."""

import logging

import pytest

from bestnotes.core.login import LOGIN_ERROR_MESSAGE, LoginForm


def test_form_starts_empty_and_invalid(login_form: LoginForm) -> None:
    assert login_form.email == ""
    assert login_form.password == ""
    assert login_form.is_valid is False
    assert login_form.show_error is False


def test_invalid_submit_sets_error_flag(login_form: LoginForm) -> None:
    login_form.set_email("abc")
    login_form.set_password("123456")

    assert login_form.submit() is False
    assert login_form.show_error is True


def test_valid_submit_clears_error_flag(login_form: LoginForm) -> None:
    login_form.submit()
    assert login_form.show_error is True

    login_form.set_email("a@b.com")
    login_form.set_password("123456")

    assert login_form.submit() is True
    assert login_form.show_error is False


def test_validity_is_recomputed_on_each_read(login_form: LoginForm) -> None:
    login_form.set_email("a@b.com")
    login_form.set_password("123456")
    assert login_form.is_valid is True

    login_form.set_password("12345")
    assert login_form.is_valid is False


def test_retry_is_unlimited(login_form: LoginForm) -> None:
    for _ in range(10):
        assert login_form.submit() is False
    assert login_form.show_error is True


def test_rejected_login_log_omits_password(
    login_form: LoginForm, caplog: pytest.LogCaptureFixture
) -> None:
    login_form.set_email("abc")
    login_form.set_password("s3cret-pass")

    with caplog.at_level(logging.INFO, logger="bestnotes.core.login"):
        login_form.submit()

    assert "Login rejected" in caplog.text
    assert "s3cret-pass" not in caplog.text


def test_forgot_password_is_inert(login_form: LoginForm) -> None:
    login_form.set_email("a@b.com")
    assert login_form.forgot_password() is None
    assert login_form.email == "a@b.com"
    assert login_form.show_error is False


def test_error_message_copy() -> None:
    assert LOGIN_ERROR_MESSAGE == (
        "Please enter a valid email and a password with 6+ characters."
    )
