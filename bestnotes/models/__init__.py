"""Domain models."""

from .onboarding import ONBOARDING_PAGES, OnboardingPage
from .screen import ScreenKind
from .session import ComposerState, Credentials

__all__ = [
    "ComposerState",
    "Credentials",
    "ONBOARDING_PAGES",
    "OnboardingPage",
    "ScreenKind",
]
