"""Oracle Service - Abstract interface for consulting the book oracle."""

from abc import ABC, abstractmethod
from typing import Optional

from book_oracle.core import OracleResult, Query


class OracleService(ABC):
    """
    Abstract service that answers a life question through a book.

    Implementations (e.g., GeminiOracleService) handle API calls.
    """

    @abstractmethod
    def consult(self, query: Query, api_key: Optional[str]) -> OracleResult:
        """
        Ask the oracle a single question.

        Args:
            query: The user's question and language mode.
            api_key: Provider API key. A missing key must fail before any network call.

        Returns:
            OracleResult holding either a validated response or a failure reason.
            Implementations return failures instead of raising.
        """
        pass
