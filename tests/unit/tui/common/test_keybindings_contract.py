"""Contract tests for shared TUI keybindings."""

from bestnotes.tui.common import keybindings


def test_global_keybinding_contract_exports_expected_bindings() -> None:
    """Shared keybinding module should export stable global bindings."""
    assert keybindings.QUIT_Q_BINDING == ("q", "quit", "Quit")
    assert keybindings.BACK_ESCAPE_BINDING == ("escape", "go_back", "Back")
    assert keybindings.HELP_BINDING == ("?", "show_help", "Help")
    assert keybindings.MODAL_CANCEL_ESCAPE_BINDING == ("escape", "cancel", "Cancel")


def test_with_global_bindings_prefixes_global_contract() -> None:
    """Composed global bindings should include defaults and custom bindings."""
    custom = ("n", "new_note", "New Note")
    composed = keybindings.with_global_bindings(custom)
    assert composed[0] == keybindings.QUIT_Q_BINDING
    assert keybindings.BACK_ESCAPE_BINDING in composed
    assert composed[-1] == custom


def test_with_modal_bindings_starts_with_escape_cancel() -> None:
    composed = keybindings.with_modal_bindings(keybindings.MODAL_SAVE_CTRL_S_BINDING)
    assert composed == [
        keybindings.MODAL_CANCEL_ESCAPE_BINDING,
        keybindings.MODAL_SAVE_CTRL_S_BINDING,
    ]
