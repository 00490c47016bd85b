"""Domain layer - Pure values describing questions, answers and screen state."""

from .oracle_response import BookContext, OracleResponse, Reflection
from .oracle_result import FailureCause, OracleResult
from .query import LanguageMode, Query
from .view_state import SCROLL_BOOK, SCROLL_TOP, OracleViewState, ViewPhase

__all__ = [
    "BookContext",
    "FailureCause",
    "LanguageMode",
    "OracleResponse",
    "OracleResult",
    "OracleViewState",
    "Query",
    "Reflection",
    "SCROLL_BOOK",
    "SCROLL_TOP",
    "ViewPhase",
]
