"""Async workers for non-blocking oracle calls using Qt threading."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from book_oracle.core import Query
from book_oracle.services.oracle import OracleService

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    oracle_result = Signal(object)  # OracleResult


class OracleWorker(QRunnable):
    """
    Worker that runs one oracle consultation in a background thread.

    Emits oracle_result on completion, or error if the service raised
    something it should have returned as a failure.
    """

    def __init__(
        self,
        oracle_service: OracleService,
        query: Query,
        api_key: Optional[str],
    ):
        super().__init__()
        self.oracle_service = oracle_service
        self.query = query
        self.api_key = api_key
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the oracle API call in background thread."""
        try:
            result = self.oracle_service.consult(
                query=self.query,
                api_key=self.api_key,
            )
            self.signals.oracle_result.emit(result)
        except Exception as e:
            logger.exception("Unexpected error while consulting the oracle")
            self.signals.error.emit(f"Unexpected oracle error: {e}")
        finally:
            self.signals.finished.emit()
