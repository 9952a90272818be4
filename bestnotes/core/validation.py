"""Client-side credential validation for the login form."""

from __future__ import annotations

EMAIL_MARKER = "@"
MIN_PASSWORD_LENGTH = 6


def validate_credentials(email: str, password: str) -> bool:
    """Return True when the login form may proceed to Home.

    Rules:
    - email contains "@"
    - password is at least 6 characters long (code points, not bytes)

    Total over all strings; empty input is simply invalid.
    """
    return EMAIL_MARKER in email and len(password) >= MIN_PASSWORD_LENGTH
