"""Note composer modal lifecycle."""

from __future__ import annotations

import logging

from bestnotes.models import ComposerState

logger = logging.getLogger(__name__)


class Composer:
    """Open/close lifecycle for the New Note modal over Home.

    Neither dismiss action stores the draft anywhere; there is no note store.
    """

    def __init__(self) -> None:
        self.state = ComposerState()

    def is_visible(self) -> bool:
        return self.state.visible

    @property
    def draft_text(self) -> str:
        return self.state.draft_text

    def open(self) -> None:
        self.state = ComposerState(visible=True, draft_text="")

    def edit(self, text: str) -> None:
        """Replace the draft. Ignored while the composer is closed."""
        if self.state.visible:
            self.state.draft_text = text

    def cancel(self) -> None:
        self._dismiss("cancel")

    def save(self) -> None:
        self._dismiss("save")

    def _dismiss(self, reason: str) -> None:
        logger.debug(
            "Composer dismissed via %s, discarding %d chars",
            reason,
            len(self.state.draft_text),
        )
        self.state = ComposerState()
