"""Oracle Controller - Owns the Entry / Loading / Result lifecycle of the window."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from book_oracle.core import SCROLL_BOOK, SCROLL_TOP, LanguageMode, OracleViewState, Query, ViewPhase
from book_oracle.services import OracleService, OracleWorker, SettingsManager
from book_oracle.ui.localization import copy_for

logger = logging.getLogger(__name__)


class _OracleRequest(QObject):
    """Helper class to hold request context and hand results back safely."""

    def __init__(self, request_id: int, parent: "OracleController"):
        super().__init__()
        self.request_id = request_id
        self.parent_ref = parent

    @Slot(object)
    def on_oracle_result(self, result):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_result(result, self.request_id)
            except RuntimeError:
                # Coordinator might be destroyed, ignore
                pass

    @Slot(str)
    def on_oracle_error(self, error: str):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_error(error, self.request_id)
            except RuntimeError:
                pass


class OracleController(QObject):
    """
    Orchestrates the consultation workflow.

    Responsibilities:
    - Hold the current OracleViewState and replace it on every transition.
    - Dispatch submissions to the oracle service on the thread pool.
    - Drop completions from requests that were reset or superseded.
    - Ask the window to scroll when the book opens or the form returns.
    """

    state_changed = Signal(object)  # OracleViewState
    scroll_requested = Signal(str)  # SCROLL_TOP or SCROLL_BOOK

    def __init__(
        self,
        oracle_service: OracleService,
        settings_manager: SettingsManager,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.oracle_service = oracle_service
        self.settings_manager = settings_manager
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self._state = OracleViewState()

        # Each submission gets a new id; only the active one may update state
        self._request_counter = 0
        self._active_request_id: Optional[int] = None

        # Keep a reference so the helper survives while the worker runs
        self._request_helper: Optional[_OracleRequest] = None

    @property
    def state(self) -> OracleViewState:
        return self._state

    @property
    def active_request_id(self) -> Optional[int]:
        return self._active_request_id

    def set_language(self, language: LanguageMode) -> None:
        """Switch UI language. Affects the next query only."""
        if language == self._state.language:
            return
        self._apply(self._state.with_language(language))

    def set_query_text(self, text: str) -> None:
        """Mirror the entry form's text into state."""
        if text == self._state.query_text:
            return
        self._apply(self._state.with_query_text(text))

    def choose_sample(self, text: str) -> None:
        """Fill the entry form with a sample question (no auto-submit)."""
        self.set_query_text(text)

    def submit(self, text: Optional[str] = None) -> None:
        """Submit the entry form. Blank text and submissions while loading are ignored."""
        if self._state.phase is not ViewPhase.ENTRY:
            logger.debug("Ignoring submit while %s", self._state.phase.value)
            return

        if text is not None:
            self.set_query_text(text)

        if not self._state.can_submit:
            return

        query = Query(text=self._state.query_text.strip(), language=self._state.language)
        api_key = self.settings_manager.get_gemini_api_key()

        self._request_counter += 1
        request_id = self._request_counter
        self._active_request_id = request_id

        self._apply(self._state.begin_loading())
        self.scroll_requested.emit(SCROLL_BOOK)

        worker = OracleWorker(
            oracle_service=self.oracle_service,
            query=query,
            api_key=api_key,
        )

        request_helper = _OracleRequest(request_id, self)
        self._request_helper = request_helper

        worker.signals.oracle_result.connect(request_helper.on_oracle_result)
        worker.signals.error.connect(request_helper.on_oracle_error)

        logger.debug("Starting oracle request %d (%s)", request_id, query.language.value)
        self.thread_pool.start(worker)

    def reset(self) -> None:
        """Return to a blank entry form, discarding any result or pending request."""
        self._active_request_id = None
        self._apply(self._state.reset())
        self.scroll_requested.emit(SCROLL_TOP)

    def _handle_result(self, result, request_id: int) -> None:
        """Handle an OracleResult from the worker (runs in main thread)."""
        if request_id != self._active_request_id:
            logger.debug(
                "Ignoring stale oracle result (request %s, current %s)",
                request_id,
                self._active_request_id,
            )
            return

        self._active_request_id = None

        if result.is_error:
            logger.info("Oracle request %d failed: %s", request_id, result.cause)
            self._fail()
            return

        self._apply(self._state.succeed(result.response))
        self.scroll_requested.emit(SCROLL_BOOK)

    def _handle_error(self, error: str, request_id: int) -> None:
        """Handle an unexpected worker error."""
        if request_id != self._active_request_id:
            logger.debug(
                "Ignoring stale oracle error (request %s, current %s)",
                request_id,
                self._active_request_id,
            )
            return

        self._active_request_id = None
        logger.warning("Oracle request %d raised: %s", request_id, error)
        self._fail()

    def _fail(self) -> None:
        # Every cause collapses to the same calm message
        message = copy_for(self._state.language).library_silent
        self._apply(self._state.fail(message))

    def _apply(self, state: OracleViewState) -> None:
        self._state = state
        self.state_changed.emit(state)
