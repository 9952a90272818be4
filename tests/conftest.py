"""Global fixtures: fresh core state objects and a fake app."""

from __future__ import annotations

import pytest

from bestnotes.core.composer import Composer
from bestnotes.core.login import LoginForm
from bestnotes.core.navigation import Action, ScreenFlow
from bestnotes.core.pager import Pager
from bestnotes.models import ScreenKind


@pytest.fixture
def pager() -> Pager:
    """Pager over the default four onboarding pages."""
    return Pager()


@pytest.fixture
def login_form() -> LoginForm:
    return LoginForm()


@pytest.fixture
def composer() -> Composer:
    return Composer()


@pytest.fixture
def flow() -> ScreenFlow:
    """Flow sitting on the root Title screen."""
    return ScreenFlow()


@pytest.fixture
def home_flow(flow: ScreenFlow) -> ScreenFlow:
    """Flow that has logged in and reached Home."""
    flow.dispatch(Action.LOG_IN)
    flow.state.set_email("a@b.com")
    flow.state.set_password("123456")
    assert flow.dispatch(Action.SUBMIT) is ScreenKind.HOME
    return flow


class FakeNotesApp:
    """Stands in for NotesApp on screens exercised without a running app."""

    def __init__(self, flow: ScreenFlow | None = None) -> None:
        self.flow = flow or ScreenFlow()
        self.navigate_calls: list[Action] = []
        self.push_calls: list[tuple[object, object]] = []
        self.back_calls = 0
        self.exit_calls: list[object] = []

    def navigate(self, action: Action) -> ScreenKind | None:
        self.navigate_calls.append(action)
        return self.flow.dispatch(action)

    def go_back(self) -> None:
        self.back_calls += 1
        self.flow.back()

    def push_screen(self, screen: object, callback: object | None = None) -> None:
        self.push_calls.append((screen, callback))

    def exit(self, result: object | None = None) -> None:
        self.exit_calls.append(result)


@pytest.fixture
def fake_app_factory():
    """Build a FakeNotesApp, optionally around an existing flow."""
    return FakeNotesApp
