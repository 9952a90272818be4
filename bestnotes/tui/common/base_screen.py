"""Shared base screen classes for the Notes TUI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from textual.screen import ModalScreen, Screen

from bestnotes.tui.common.keybindings import with_global_bindings, with_modal_bindings

if TYPE_CHECKING:
    from bestnotes.tui.app import NotesApp

_T = TypeVar("_T")


class NotesScreen(Screen):
    """Base class for full-page screens with unified global bindings."""

    BINDINGS = with_global_bindings()

    HELP_TEXT = "No additional help for this screen."

    @property
    def notes_app(self) -> "NotesApp":
        return self.app  # type: ignore[return-value]

    def action_quit(self) -> None:
        """Quit the app from any screen."""
        self.app.exit()

    def action_go_back(self) -> None:
        """Pop to the previous screen, discarding unsubmitted edits."""
        self.notes_app.go_back()

    def action_show_help(self) -> None:
        self.notify(self.HELP_TEXT, timeout=3)


class NotesModalScreen(ModalScreen[_T], Generic[_T]):
    """Base class for modal overlays with unified modal bindings."""

    BINDINGS = with_modal_bindings()
