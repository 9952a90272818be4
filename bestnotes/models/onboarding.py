"""Onboarding carousel content."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OnboardingPage:
    """A single card in the onboarding carousel."""

    title: str
    subtitle: str
    emoji: str


# Fixed page order shown by the onboarding pager
ONBOARDING_PAGES: tuple[OnboardingPage, ...] = (
    OnboardingPage(
        "Welcome to The Best Notes App",
        "A simple, friendly space to capture ideas.",
        "✨",
    ),
    OnboardingPage("Stay Organized", "Tag and color-code your notes.", "🗂️"),
    OnboardingPage("Sync Everywhere", "Your ideas on all devices.", "☁️"),
    OnboardingPage("Build a Streak", "Write a little every day.", "🔥"),
)
