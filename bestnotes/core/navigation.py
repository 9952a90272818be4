"""Screen flow: navigation stack and the legal transitions between screens.

The stack is an arena of frames keyed by position. Each frame owns the local
state of its screen (pager index, typed credentials, composer), so popping back
to a frame restores that state verbatim and popping a frame discards it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from bestnotes.core.composer import Composer
from bestnotes.core.login import LoginForm
from bestnotes.core.pager import Pager
from bestnotes.models import ScreenKind

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """User actions the screen flow reacts to."""

    START_ONBOARDING = "start_onboarding"
    LOG_IN = "log_in"
    NEXT = "next"
    BACK = "back"
    GET_STARTED = "get_started"
    SUBMIT = "submit"
    OPEN_COMPOSER = "open_composer"
    CLOSE_COMPOSER = "close_composer"


@dataclass
class Frame:
    """One stack entry: a screen kind and the state it owns."""

    kind: ScreenKind
    position: int
    state: Any = None


# Fresh local state for each screen kind, built on every push
STATE_FACTORIES: dict[ScreenKind, Callable[[], Any]] = {
    ScreenKind.TITLE: lambda: None,
    ScreenKind.ONBOARDING: Pager,
    ScreenKind.LOGIN: LoginForm,
    ScreenKind.HOME: Composer,
}


class NavigationStack:
    """Forward/back stack of screen frames. Never empty."""

    def __init__(self, root: ScreenKind = ScreenKind.TITLE) -> None:
        self._frames: list[Frame] = []
        self.push(root)

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def frames(self) -> tuple[Frame, ...]:
        return tuple(self._frames)

    @property
    def top(self) -> Frame:
        return self._frames[-1]

    def current(self) -> ScreenKind:
        return self._frames[-1].kind

    def push(self, kind: ScreenKind, state: Any = None) -> Frame:
        """Push a new frame, building fresh local state when none is given."""
        if state is None:
            state = STATE_FACTORIES[kind]()
        frame = Frame(kind=kind, position=len(self._frames), state=state)
        self._frames.append(frame)
        logger.debug("Pushed %s at position %d", kind.value, frame.position)
        return frame

    def pop(self) -> Optional[ScreenKind]:
        """Drop the top frame and return its kind.

        The root frame is never popped; returns None there.
        """
        if len(self._frames) <= 1:
            logger.debug("Pop ignored at root %s", self.current().value)
            return None
        frame = self._frames.pop()
        logger.debug("Popped %s from position %d", frame.kind.value, frame.position)
        return frame.kind


class ScreenFlow:
    """Directed graph of screens with guarded transitions.

    Title -> Onboarding | Login
    Onboarding[last] -> Login
    Login -> Home (only with valid credentials)
    Home keeps the composer as a sub-state, not a frame.
    """

    def __init__(self, stack: Optional[NavigationStack] = None) -> None:
        self.stack = stack or NavigationStack()

    def current(self) -> ScreenKind:
        return self.stack.current()

    @property
    def state(self) -> Any:
        """Local state of the current screen."""
        return self.stack.top.state

    def dispatch(self, action: Action) -> Optional[ScreenKind]:
        """Apply an action to the current screen.

        Returns the newly pushed screen kind, or None when the action did not
        move to another screen (guard not met, not an edge from here, or an
        in-screen action such as paging).
        """
        current = self.current()
        state = self.state

        if current is ScreenKind.TITLE:
            if action is Action.START_ONBOARDING:
                return self._go(ScreenKind.ONBOARDING)
            if action is Action.LOG_IN:
                return self._go(ScreenKind.LOGIN)

        elif current is ScreenKind.ONBOARDING:
            if action is Action.NEXT:
                state.next()
                return None
            if action is Action.BACK:
                state.back()
                return None
            if action is Action.GET_STARTED and state.is_last():
                return self._go(ScreenKind.LOGIN)

        elif current is ScreenKind.LOGIN:
            if action is Action.SUBMIT:
                if state.submit():
                    return self._go(ScreenKind.HOME)
                return None

        elif current is ScreenKind.HOME:
            if action is Action.OPEN_COMPOSER:
                state.open()
                return None
            if action is Action.CLOSE_COMPOSER:
                state.save()
                return None

        logger.debug("Action %s has no effect on %s", action.value, current.value)
        return None

    def back(self) -> Optional[ScreenKind]:
        """Implicit back gesture: pop to the previous screen.

        Unsubmitted edits on the popped screen are discarded without asking.
        """
        return self.stack.pop()

    def _go(self, kind: ScreenKind) -> ScreenKind:
        logger.debug("Transition %s -> %s", self.current().value, kind.value)
        self.stack.push(kind)
        return kind
