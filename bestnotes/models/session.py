"""Transient per-screen state: login credentials and the note draft."""

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Email/password pair typed into the login form.

    Lives only as long as the login screen that owns it; never persisted
    or transmitted.
    """

    model_config = {"validate_assignment": True}

    email: str = Field(default="", description="Email as typed, untrimmed")
    password: str = Field(default="", description="Password as typed")

    @property
    def is_valid(self) -> bool:
        """Derived validity flag, recomputed on every read."""
        # Lazy import: bestnotes.core imports this module
        from bestnotes.core.validation import validate_credentials

        return validate_credentials(self.email, self.password)


class ComposerState(BaseModel):
    """Visibility and draft text of the note composer modal."""

    model_config = {"validate_assignment": True}

    visible: bool = False
    draft_text: str = ""
