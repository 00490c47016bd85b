"""Tests for MainWindow - validates state rendering and emitted intents."""

from unittest.mock import MagicMock

from PySide6.QtWidgets import QApplication

from book_oracle.core import LanguageMode, OracleViewState
from book_oracle.ui import MainWindow
from book_oracle.ui.localization import DISCLAIMER, SAMPLE_QUESTIONS, copy_for


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


def test_entry_state_shows_form_and_samples():
    ensure_qt_app()

    window = MainWindow()
    window.render(OracleViewState())

    assert not window.entry_widget.isHidden()
    assert window.book_display.isHidden()
    assert window.reset_button.isHidden()
    assert not window.submit_button.isEnabled()
    assert [b.text() for b in window.sample_buttons] == list(SAMPLE_QUESTIONS[LanguageMode.EN])
    assert window.disclaimer_label.text() == DISCLAIMER


def test_submit_enabled_only_for_non_blank_text():
    ensure_qt_app()

    window = MainWindow()
    window.render(OracleViewState().with_query_text("   "))
    assert not window.submit_button.isEnabled()

    window.render(OracleViewState().with_query_text("I feel stuck."))
    assert window.submit_button.isEnabled()


def test_loading_hides_form():
    ensure_qt_app()

    window = MainWindow()
    window.render(OracleViewState().with_query_text("I feel stuck.").begin_loading())

    assert window.entry_widget.isHidden()
    assert not window.book_display.isHidden()
    assert window.reset_button.isHidden()


def test_result_shows_reset(oracle_response):
    ensure_qt_app()

    window = MainWindow()
    state = OracleViewState().with_query_text("I feel stuck.").begin_loading().succeed(oracle_response)
    window.render(state)

    assert window.entry_widget.isHidden()
    assert not window.reset_button.isHidden()
    assert window.book_display.title_label.text() == "T"
    assert window.book_display.quote_label.text() == "Q"


def test_error_is_shown_with_query_kept():
    ensure_qt_app()

    window = MainWindow()
    message = copy_for(LanguageMode.EN).library_silent
    state = OracleViewState().with_query_text("I feel stuck.").begin_loading().fail(message)
    window.render(state)

    assert not window.error_label.isHidden()
    assert window.error_label.text() == message
    assert window.query_edit.toPlainText() == "I feel stuck."


def test_chinese_copy_and_samples():
    ensure_qt_app()

    window = MainWindow()
    window.render(OracleViewState(language=LanguageMode.ZH))

    assert window.submit_button.text() == copy_for(LanguageMode.ZH).submit
    assert [b.text() for b in window.sample_buttons] == list(SAMPLE_QUESTIONS[LanguageMode.ZH])
    assert window.language_buttons[LanguageMode.ZH].isChecked()


def test_render_does_not_echo_text_edits():
    ensure_qt_app()

    window = MainWindow()
    spy = MagicMock()
    window.query_edited.connect(spy)

    window.render(OracleViewState().with_query_text("filled by sample"))

    spy.assert_not_called()
    assert window.query_edit.toPlainText() == "filled by sample"


def test_user_intents_are_emitted():
    ensure_qt_app()

    window = MainWindow()
    window.render(OracleViewState())
    sample_spy = MagicMock()
    language_spy = MagicMock()
    reset_spy = MagicMock()
    edited_spy = MagicMock()
    window.sample_chosen.connect(sample_spy)
    window.language_selected.connect(language_spy)
    window.reset_requested.connect(reset_spy)
    window.query_edited.connect(edited_spy)

    window.sample_buttons[2].click()
    window.language_buttons[LanguageMode.ZH].click()
    window.brand_button.click()
    window.query_edit.setPlainText("typed")

    sample_spy.assert_called_once_with(SAMPLE_QUESTIONS[LanguageMode.EN][2])
    language_spy.assert_called_once_with(LanguageMode.ZH)
    reset_spy.assert_called_once()
    edited_spy.assert_called_with("typed")
