"""New Note composer modal."""

from __future__ import annotations

from typing import Literal

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static, TextArea

from bestnotes.core.composer import Composer
from bestnotes.tui.common.base_screen import NotesModalScreen
from bestnotes.tui.common.keybindings import MODAL_SAVE_CTRL_S_BINDING, with_modal_bindings

ComposerResult = Literal["cancel", "save"]


class NoteComposerScreen(NotesModalScreen[ComposerResult]):
    """Modal text editor. Cancel and Save both close without storing the note."""

    BINDINGS = with_modal_bindings(MODAL_SAVE_CTRL_S_BINDING)

    DEFAULT_CSS = """
    NoteComposerScreen {
        align: center middle;
    }

    #composer-dialog {
        width: 72;
        height: 20;
        border: round $primary;
        background: $surface;
        padding: 1 2;
    }

    #composer-toolbar {
        height: auto;
        margin-bottom: 1;
    }

    #composer-title {
        width: 1fr;
        content-align: center middle;
        text-style: bold;
    }

    #composer-text {
        height: 1fr;
    }
    """

    def __init__(self, composer: Composer) -> None:
        super().__init__()
        self.composer = composer

    def compose(self) -> ComposeResult:
        with Vertical(id="composer-dialog"):
            with Horizontal(id="composer-toolbar"):
                yield Button("Cancel", id="cancel-btn")
                yield Static("New Note", id="composer-title")
                yield Button("Save", id="save-btn", variant="primary")
            yield TextArea(self.composer.draft_text, id="composer-text")

    def on_mount(self) -> None:
        """Focus the editor immediately."""
        self.query_one("#composer-text", TextArea).focus()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self.composer.edit(event.text_area.text)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "cancel-btn":
            self.action_cancel()
        elif event.button.id == "save-btn":
            self.action_save()

    def action_cancel(self) -> None:
        """Close and drop the draft."""
        self.composer.cancel()
        self.dismiss("cancel")

    def action_save(self) -> None:
        """Close and drop the draft; there is no note store."""
        self.composer.save()
        self.dismiss("save")
