"""Login form state and submission guard."""

from __future__ import annotations

import logging

from bestnotes.core.validation import EMAIL_MARKER
from bestnotes.models import Credentials

logger = logging.getLogger(__name__)

LOGIN_ERROR_MESSAGE = "Please enter a valid email and a password with 6+ characters."


class LoginForm:
    """Credentials being typed plus the visible error flag."""

    def __init__(self) -> None:
        self.credentials = Credentials()
        self.show_error: bool = False

    @property
    def email(self) -> str:
        return self.credentials.email

    @property
    def password(self) -> str:
        return self.credentials.password

    @property
    def is_valid(self) -> bool:
        return self.credentials.is_valid

    def set_email(self, value: str) -> None:
        self.credentials.email = value

    def set_password(self, value: str) -> None:
        self.credentials.password = value

    def submit(self) -> bool:
        """Attempt to log in.

        Sets the error flag to the negation of validity and returns validity.
        Rejected attempts may be retried any number of times.
        """
        valid = self.is_valid
        self.show_error = not valid
        if not valid:
            # Never log the password itself
            logger.info(
                "Login rejected (email has marker: %s, password length: %d)",
                EMAIL_MARKER in self.email,
                len(self.password),
            )
        return valid

    def forgot_password(self) -> None:
        """Present but inert: there is no account recovery flow."""
        return None
