"""Full-page screens.

Import screens from their modules:
    from bestnotes.tui.screens.title.title import TitleScreen
    from bestnotes.tui.screens.onboarding.onboarding import OnboardingScreen
    from bestnotes.tui.screens.login.login import LoginScreen
    from bestnotes.tui.screens.home.home import HomeScreen
"""
