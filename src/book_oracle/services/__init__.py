"""Services layer - configuration and external integrations."""

from book_oracle.services.settings_manager import SettingsManager

# Oracle services
from book_oracle.services.oracle import OracleService, GeminiOracleService

# Background workers
from book_oracle.services.api_workers import OracleWorker, WorkerSignals

__all__ = [
    "SettingsManager",
    "OracleService",
    "GeminiOracleService",
    "OracleWorker",
    "WorkerSignals",
]
