"""Unit tests for OracleViewState transitions."""

import pytest

from book_oracle.core import LanguageMode, OracleViewState, ViewPhase


@pytest.fixture
def entry_state():
    return OracleViewState().with_query_text("I'm afraid to make the wrong choice.")


class TestEntry:
    def test_initial_state_is_blank_entry(self):
        state = OracleViewState()
        assert state.phase is ViewPhase.ENTRY
        assert state.language is LanguageMode.EN
        assert state.query_text == ""
        assert state.response is None
        assert state.error is None
        assert not state.can_submit

    def test_whitespace_only_text_cannot_submit(self):
        state = OracleViewState().with_query_text("   \n")
        assert not state.can_submit
        with pytest.raises(ValueError):
            state.begin_loading()

    def test_begin_loading_clears_previous_error(self, entry_state):
        loading = entry_state.begin_loading()
        failed = loading.fail("silent")
        assert failed.error == "silent"

        reloading = failed.begin_loading()
        assert reloading.phase is ViewPhase.LOADING
        assert reloading.error is None


class TestLoading:
    def test_loading_ignores_text_edits(self, entry_state):
        loading = entry_state.begin_loading()
        assert loading.with_query_text("other").query_text == entry_state.query_text

    def test_loading_cannot_submit_again(self, entry_state):
        loading = entry_state.begin_loading()
        assert not loading.can_submit
        with pytest.raises(ValueError):
            loading.begin_loading()

    def test_succeed_moves_to_result(self, entry_state, oracle_response):
        result = entry_state.begin_loading().succeed(oracle_response)
        assert result.phase is ViewPhase.RESULT
        assert result.response == oracle_response

    def test_fail_returns_to_entry_keeping_text(self, entry_state):
        failed = entry_state.begin_loading().fail("silent")
        assert failed.phase is ViewPhase.ENTRY
        assert failed.query_text == entry_state.query_text
        assert failed.response is None

    def test_succeed_outside_loading_is_rejected(self, entry_state, oracle_response):
        with pytest.raises(ValueError):
            entry_state.succeed(oracle_response)


class TestReset:
    def test_reset_clears_response_and_text(self, entry_state, oracle_response):
        result = entry_state.begin_loading().succeed(oracle_response)
        reset = result.reset()
        assert reset.phase is ViewPhase.ENTRY
        assert reset.response is None
        assert reset.query_text == ""

    def test_reset_keeps_language(self, entry_state):
        state = entry_state.with_language(LanguageMode.ZH).reset()
        assert state.language is LanguageMode.ZH


def test_language_change_does_not_touch_result(entry_state, oracle_response):
    result = entry_state.begin_loading().succeed(oracle_response)
    switched = result.with_language(LanguageMode.ZH)
    assert switched.phase is ViewPhase.RESULT
    assert switched.response == oracle_response
    assert switched.language is LanguageMode.ZH
