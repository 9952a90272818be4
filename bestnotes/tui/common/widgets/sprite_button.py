"""Icon-plus-label call-to-action button used across screens."""

from __future__ import annotations

from textual.widgets import Button


class SpriteButton(Button):
    """Bold primary button with a leading glyph."""

    DEFAULT_CSS = """
    SpriteButton {
        margin: 0 1;
        min-width: 18;
        text-style: bold;
    }
    """

    def __init__(self, text: str, icon: str, *, id: str | None = None) -> None:
        super().__init__(f"{icon} {text}", id=id, variant="primary", classes="sprite")
