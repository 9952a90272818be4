"""Title screen: entry point with onboarding and login choices."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Static

from bestnotes.core.navigation import Action
from bestnotes.tui.common.base_screen import NotesScreen
from bestnotes.tui.common.keybindings import (
    LOG_IN_L_BINDING,
    START_ONBOARDING_O_BINDING,
    with_global_bindings,
)
from bestnotes.tui.common.widgets import SpriteButton


class TitleScreen(NotesScreen):
    """Root of the navigation stack."""

    CSS_PATH = "title.tcss"

    BINDINGS = with_global_bindings(
        START_ONBOARDING_O_BINDING,
        LOG_IN_L_BINDING,
    )

    HELP_TEXT = "[O] Start onboarding  |  [L] Log in  |  [Q] Quit"

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="title-body", classes="screen-body"):
            yield Static("✦", id="title-icon", classes="hero-icon")
            yield Static("The Best Notes App", id="title-heading", classes="screen-title")
            yield Static(
                "Capture ideas. Grow streaks. ✨",
                id="title-tagline",
                classes="screen-subtitle",
            )
            with Horizontal(id="title-actions", classes="actions"):
                yield SpriteButton("Start Onboarding", "➜", id="start-onboarding-btn")
                yield SpriteButton("Log In", "☺", id="log-in-btn")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "start-onboarding-btn":
            self.action_start_onboarding()
        elif event.button.id == "log-in-btn":
            self.action_log_in()

    def action_start_onboarding(self) -> None:
        self.notes_app.navigate(Action.START_ONBOARDING)

    def action_log_in(self) -> None:
        self.notes_app.navigate(Action.LOG_IN)
