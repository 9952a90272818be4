"""[Layer: Presentation] Typer CLI Commands."""

from importlib.metadata import PackageNotFoundError, version as get_package_version
from typing import Optional

import typer

from bestnotes.config import get_settings
from bestnotes.models import ScreenKind
from bestnotes.tui.app import NotesApp

# Screens reachable in one step from Title
LAUNCHABLE_SCREENS: tuple[ScreenKind, ...] = (
    ScreenKind.TITLE,
    ScreenKind.ONBOARDING,
    ScreenKind.LOGIN,
)


def _get_version() -> str:
    """Get version from package metadata (single source of truth: pyproject.toml)."""
    try:
        return get_package_version("best-notes")
    except PackageNotFoundError:
        return "0.0.0-dev"


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"best-notes {_get_version()}")
        raise typer.Exit()


def _parse_start_screen(value: str) -> ScreenKind:
    """Map a --start value onto a launchable screen kind."""
    try:
        kind = ScreenKind(value.strip().lower())
    except ValueError:
        raise typer.BadParameter(
            f"Unknown screen '{value}'. Choose from: "
            + ", ".join(k.value for k in LAUNCHABLE_SCREENS)
        ) from None
    if kind not in LAUNCHABLE_SCREENS:
        raise typer.BadParameter(
            f"'{kind.value}' cannot be opened directly; log in from the login screen."
        )
    return kind


app = typer.Typer(
    name="bestnotes",
    help="The Best Notes App: capture ideas, grow streaks.",
)


def _launch_tui(start: Optional[ScreenKind] = None) -> None:
    """Launch the TUI with Title as root and an optional screen on top."""
    initial = None if start in (None, ScreenKind.TITLE) else start
    NotesApp(initial_screen=initial).run()


@app.command()
def main(
    start: Optional[str] = typer.Option(
        None,
        "--start",
        "-s",
        help="Screen to open over Title: title, onboarding or login.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Launch The Best Notes App."""
    raw = start if start is not None else get_settings().start_screen
    _launch_tui(_parse_start_screen(raw))
