"""Main TUI app and lifecycle."""

import logging
from typing import Optional

from textual.app import App
from textual.screen import Screen

from bestnotes.core.navigation import Action, Frame, ScreenFlow
from bestnotes.models import ScreenKind
from bestnotes.tui.screens.home.home import HomeScreen
from bestnotes.tui.screens.login.login import LoginScreen
from bestnotes.tui.screens.onboarding.onboarding import OnboardingScreen
from bestnotes.tui.screens.title.title import TitleScreen

logger = logging.getLogger(__name__)

# Action that reaches each launchable screen from Title
_LAUNCH_ACTIONS: dict[ScreenKind, Action] = {
    ScreenKind.ONBOARDING: Action.START_ONBOARDING,
    ScreenKind.LOGIN: Action.LOG_IN,
}


def build_screen(frame: Frame) -> Screen:
    """Create the Textual screen for a navigation frame, bound to its state."""
    if frame.kind is ScreenKind.ONBOARDING:
        return OnboardingScreen(frame.state)
    if frame.kind is ScreenKind.LOGIN:
        return LoginScreen(frame.state)
    if frame.kind is ScreenKind.HOME:
        return HomeScreen(frame.state)
    return TitleScreen()


class NotesApp(App):
    """The Best Notes App. Root screen: Title.

    Every push and pop goes through the screen flow first, so the Textual
    screen stack and the navigation stack always hold the same frames.
    """

    CSS_PATH = "common/theme.tcss"
    TITLE = "The Best Notes App"
    SUB_TITLE = "Capture ideas. Grow streaks."

    BINDINGS = []

    def __init__(
        self,
        initial_screen: Optional[ScreenKind] = None,
        **kwargs,
    ):  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self.flow = ScreenFlow()
        self._initial_screen = initial_screen

    def on_mount(self) -> None:
        """Push the root Title screen, then the requested start screen."""
        self.push_screen(build_screen(self.flow.stack.top))
        launch_action = _LAUNCH_ACTIONS.get(self._initial_screen)  # type: ignore[arg-type]
        if launch_action is not None:
            self.navigate(launch_action)

    def navigate(self, action: Action) -> Optional[ScreenKind]:
        """Dispatch an action and push a screen when it transitions."""
        kind = self.flow.dispatch(action)
        if kind is not None:
            self.push_screen(build_screen(self.flow.stack.top))
        return kind

    def go_back(self) -> None:
        """Pop one screen; leaving the root Title quits."""
        if self.flow.back() is None:
            logger.debug("Back from root screen, exiting")
            self.exit()
            return
        self.pop_screen()
