"""Navigable screen kinds."""

from enum import Enum


class ScreenKind(str, Enum):
    """One full-page UI state that can occupy a navigation stack frame."""

    TITLE = "title"
    ONBOARDING = "onboarding"
    LOGIN = "login"
    HOME = "home"
