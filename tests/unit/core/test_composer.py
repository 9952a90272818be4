"""Unit tests for the note composer lifecycle."""

from bestnotes.core.composer import Composer


def test_composer_starts_hidden(composer: Composer) -> None:
    assert composer.is_visible() is False
    assert composer.draft_text == ""


def test_open_shows_empty_draft(composer: Composer) -> None:
    composer.open()
    assert composer.is_visible() is True
    assert composer.draft_text == ""


def test_save_dismisses_and_discards_draft(composer: Composer) -> None:
    composer.open()
    composer.edit("Buy oat milk")

    composer.save()

    assert composer.is_visible() is False
    assert composer.draft_text == ""


def test_cancel_dismisses_and_discards_draft(composer: Composer) -> None:
    composer.open()
    composer.edit("Half a thought")

    composer.cancel()

    assert composer.is_visible() is False
    assert composer.draft_text == ""


def test_reopen_starts_from_empty_draft(composer: Composer) -> None:
    composer.open()
    composer.edit("first draft")
    composer.save()

    composer.open()

    assert composer.draft_text == ""


def test_edit_while_closed_is_ignored(composer: Composer) -> None:
    composer.edit("typed into nothing")
    assert composer.draft_text == ""


def test_dismiss_when_closed_is_harmless(composer: Composer) -> None:
    composer.cancel()
    composer.save()
    assert composer.is_visible() is False
