"""Login screen: email/password form gated by client-side validation."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Input, Static

from bestnotes.core.login import LOGIN_ERROR_MESSAGE, LoginForm
from bestnotes.core.navigation import Action
from bestnotes.tui.common.base_screen import NotesScreen
from bestnotes.tui.common.keybindings import SUBMIT_ENTER_BINDING, with_global_bindings
from bestnotes.tui.common.widgets import SpriteButton

logger = logging.getLogger(__name__)


class LoginScreen(NotesScreen):
    """Collect credentials and move to Home once they validate."""

    CSS_PATH = "login.tcss"

    BINDINGS = with_global_bindings(SUBMIT_ENTER_BINDING)

    HELP_TEXT = "Email must contain @ and the password needs 6+ characters."

    def __init__(self, form: LoginForm | None = None) -> None:
        super().__init__()
        self.form = form or LoginForm()

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="login-body", classes="screen-body"):
            yield Static("☺ ✔", id="login-icon", classes="hero-icon")
            yield Static("Welcome back", id="login-title", classes="screen-title")
            with Vertical(id="login-form"):
                yield Input(
                    value=self.form.email,
                    placeholder="Email",
                    id="email-input",
                )
                yield Input(
                    value=self.form.password,
                    placeholder="Password",
                    password=True,
                    id="password-input",
                )
            yield Static(LOGIN_ERROR_MESSAGE, id="login-error")
            with Horizontal(id="login-actions", classes="actions"):
                yield SpriteButton("Log In", "🔓", id="submit-btn")
            yield Button("Forgot password?", id="forgot-btn", classes="link")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = "Log In"
        self._sync_validity()
        self.query_one("#email-input", Input).focus()

    def _sync_validity(self) -> None:
        """Reflect the form's error flag and validity in the widgets."""
        self.query_one("#login-error", Static).display = self.form.show_error
        self.query_one("#submit-btn", Button).set_class(
            not self.form.is_valid, "-invalid"
        )

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "email-input":
            self.form.set_email(event.value)
        elif event.input.id == "password-input":
            self.form.set_password(event.value)
        else:
            return
        self._sync_validity()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter inside either field submits the form."""
        self.action_submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "submit-btn":
            self.action_submit()
        elif event.button.id == "forgot-btn":
            self.form.forgot_password()

    def action_submit(self) -> None:
        """Try to log in; on rejection show the error and stay here."""
        self.notes_app.navigate(Action.SUBMIT)
        self._sync_validity()
