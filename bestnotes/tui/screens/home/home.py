"""Home screen: landing page after login, opens the note composer."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Static

from bestnotes.core.composer import Composer
from bestnotes.core.navigation import Action
from bestnotes.tui.common.base_screen import NotesScreen
from bestnotes.tui.common.keybindings import NEW_NOTE_N_BINDING, with_global_bindings
from bestnotes.tui.common.widgets import SpriteButton
from bestnotes.tui.screens.home.composer import ComposerResult, NoteComposerScreen

logger = logging.getLogger(__name__)


class HomeScreen(NotesScreen):
    """Deepest screen of the flow. The composer is a modal over it."""

    CSS_PATH = "home.tcss"

    BINDINGS = with_global_bindings(NEW_NOTE_N_BINDING)

    HELP_TEXT = "[N] New note  |  [Esc] Back to login"

    def __init__(self, composer: Composer | None = None) -> None:
        super().__init__()
        self.composer = composer or Composer()

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="home-body", classes="screen-body"):
            yield Static("Home", id="home-title", classes="screen-title")
            yield Static(
                "You're logged in. Press Esc to go back, or start a note.",
                id="home-hint",
                classes="screen-subtitle",
            )
            with Horizontal(id="home-actions", classes="actions"):
                yield SpriteButton("New Note", "✎", id="new-note-btn")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = "Home"

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "new-note-btn":
            self.action_new_note()

    def action_new_note(self) -> None:
        """Open the composer modal over Home."""
        if self.composer.is_visible():
            return
        self.notes_app.navigate(Action.OPEN_COMPOSER)
        self.app.push_screen(
            NoteComposerScreen(self.composer), callback=self._on_composer_closed
        )

    def _on_composer_closed(self, result: ComposerResult | None) -> None:
        logger.debug("Composer closed: %s", result)
