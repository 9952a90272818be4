"""Onboarding screen: paged carousel ending in the login screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Static

from bestnotes.core.navigation import Action
from bestnotes.core.pager import Pager
from bestnotes.tui.common.base_screen import NotesScreen
from bestnotes.tui.common.keybindings import (
    NEXT_PAGE_L_BINDING,
    NEXT_PAGE_RIGHT_BINDING,
    PREVIOUS_PAGE_H_BINDING,
    PREVIOUS_PAGE_LEFT_BINDING,
    PRIMARY_ENTER_BINDING,
    with_global_bindings,
)
from bestnotes.tui.common.widgets import SpriteButton


def page_dots(index: int, count: int) -> str:
    """Render the page indicator, e.g. '○ ● ○ ○'."""
    return " ".join("●" if i == index else "○" for i in range(count))


class OnboardingScreen(NotesScreen):
    """Four-card carousel driven by the frame's Pager.

    Layout:
    - Card: emoji, title, subtitle
    - Indicator: one dot per page
    - Actions: Back (hidden on first page), Next or Get Started (last page)
    """

    CSS_PATH = "onboarding.tcss"

    BINDINGS = with_global_bindings(
        PREVIOUS_PAGE_LEFT_BINDING,
        PREVIOUS_PAGE_H_BINDING,
        NEXT_PAGE_RIGHT_BINDING,
        NEXT_PAGE_L_BINDING,
        PRIMARY_ENTER_BINDING,
    )

    HELP_TEXT = "[←/H] Back  |  [→/L] Next  |  [Enter] Continue  |  [Esc] Leave"

    def __init__(self, pager: Pager | None = None) -> None:
        super().__init__()
        self.pager = pager or Pager()

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="onboarding-body", classes="screen-body"):
            yield Static("", id="card-emoji", classes="hero-icon")
            yield Static("", id="card-title", classes="screen-title")
            yield Static("", id="card-subtitle", classes="screen-subtitle")
            yield Static("", id="page-dots")
            with Horizontal(id="onboarding-actions", classes="actions"):
                yield SpriteButton("Back", "‹", id="back-btn")
                yield SpriteButton("Next", "›", id="next-btn")
                yield SpriteButton("Get Started", "✔", id="get-started-btn")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = "Onboarding"
        self._render_page()

    def _render_page(self) -> None:
        """Sync card content and button visibility with the pager."""
        page = self.pager.page()
        self.query_one("#card-emoji", Static).update(page.emoji)
        self.query_one("#card-title", Static).update(page.title)
        self.query_one("#card-subtitle", Static).update(page.subtitle)
        self.query_one("#page-dots", Static).update(
            page_dots(self.pager.index(), self.pager.page_count)
        )
        self.query_one("#back-btn", Button).display = not self.pager.is_first()
        self.query_one("#next-btn", Button).display = not self.pager.is_last()
        self.query_one("#get-started-btn", Button).display = self.pager.is_last()
        # Keep focus off buttons that were just hidden
        primary = "#get-started-btn" if self.pager.is_last() else "#next-btn"
        self.query_one(primary, Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "back-btn":
            self.action_previous_page()
        elif event.button.id == "next-btn":
            self.action_next_page()
        elif event.button.id == "get-started-btn":
            self.action_get_started()

    def action_previous_page(self) -> None:
        self.notes_app.navigate(Action.BACK)
        self._render_page()

    def action_next_page(self) -> None:
        self.notes_app.navigate(Action.NEXT)
        self._render_page()

    def action_primary(self) -> None:
        """Enter: next page, or leave for login on the last page."""
        if self.pager.is_last():
            self.action_get_started()
        else:
            self.action_next_page()

    def action_get_started(self) -> None:
        self.notes_app.navigate(Action.GET_STARTED)
