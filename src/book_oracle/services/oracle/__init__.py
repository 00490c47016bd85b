"""Oracle services - abstract interface and Gemini implementation."""

from book_oracle.services.oracle.oracle_service import OracleService
from book_oracle.services.oracle.gemini_oracle_service import GeminiOracleService

__all__ = [
    "OracleService",
    "GeminiOracleService",
]
