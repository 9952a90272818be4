"""Shared keybinding contract for TUI screens and modals."""

from __future__ import annotations

from typing import TypeAlias

Binding: TypeAlias = tuple[str, str, str]

QUIT_Q_BINDING: Binding = ("q", "quit", "Quit")
BACK_ESCAPE_BINDING: Binding = ("escape", "go_back", "Back")
HELP_BINDING: Binding = ("?", "show_help", "Help")

# Title
START_ONBOARDING_O_BINDING: Binding = ("o", "start_onboarding", "Onboarding")
LOG_IN_L_BINDING: Binding = ("l", "log_in", "Log In")

# Onboarding pager
PREVIOUS_PAGE_LEFT_BINDING: Binding = ("left", "previous_page", "Prev")
PREVIOUS_PAGE_H_BINDING: Binding = ("h", "previous_page", "Prev")
NEXT_PAGE_RIGHT_BINDING: Binding = ("right", "next_page", "Next")
NEXT_PAGE_L_BINDING: Binding = ("l", "next_page", "Next")
PRIMARY_ENTER_BINDING: Binding = ("enter", "primary", "Continue")

# Login
SUBMIT_ENTER_BINDING: Binding = ("enter", "submit", "Log In")

# Home
NEW_NOTE_N_BINDING: Binding = ("n", "new_note", "New Note")

MODAL_CANCEL_ESCAPE_BINDING: Binding = ("escape", "cancel", "Cancel")
MODAL_SAVE_CTRL_S_BINDING: Binding = ("ctrl+s", "save", "Save")


def compose_bindings(*bindings: Binding) -> list[Binding]:
    """Return keybinding tuples in order."""
    return list(bindings)


def with_global_bindings(*bindings: Binding) -> list[Binding]:
    """Prefix bindings with the global screen contract."""
    return compose_bindings(
        QUIT_Q_BINDING,
        BACK_ESCAPE_BINDING,
        HELP_BINDING,
        *bindings,
    )


def with_modal_bindings(*bindings: Binding) -> list[Binding]:
    """Prefix bindings with the global modal contract."""
    return compose_bindings(
        MODAL_CANCEL_ESCAPE_BINDING,
        *bindings,
    )
