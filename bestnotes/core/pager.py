"""Onboarding carousel page index."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from bestnotes.models import ONBOARDING_PAGES, OnboardingPage

logger = logging.getLogger(__name__)


class Pager:
    """Index into a fixed page sequence, clamped to its bounds.

    Moving past either edge is silently ignored.
    """

    def __init__(self, pages: Optional[Sequence[OnboardingPage]] = None) -> None:
        self._pages: tuple[OnboardingPage, ...] = tuple(
            ONBOARDING_PAGES if pages is None else pages
        )
        if not self._pages:
            raise ValueError("Pager needs at least one page")
        self._index = 0

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def pages(self) -> tuple[OnboardingPage, ...]:
        return self._pages

    def index(self) -> int:
        return self._index

    def page(self) -> OnboardingPage:
        """Return the page at the current index."""
        return self._pages[self._index]

    current_page = page

    def is_first(self) -> bool:
        return self._index == 0

    def is_last(self) -> bool:
        return self._index == self.page_count - 1

    def next(self) -> bool:
        """Advance one page. Returns False (and does nothing) on the last page."""
        if self.is_last():
            logger.debug("Pager next ignored at last page %d", self._index)
            return False
        self._index += 1
        return True

    def back(self) -> bool:
        """Go back one page. Returns False (and does nothing) on the first page."""
        if self.is_first():
            logger.debug("Pager back ignored at first page")
            return False
        self._index -= 1
        return True
