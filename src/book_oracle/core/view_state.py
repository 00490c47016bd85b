"""View state - the immutable value behind the Entry / Loading / Result screens."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .oracle_response import OracleResponse
from .query import LanguageMode


class ViewPhase(str, Enum):
    ENTRY = "entry"
    LOADING = "loading"
    RESULT = "result"


@dataclass(frozen=True)
class OracleViewState:
    """Snapshot of everything the window shows.

    Instances are never mutated; each transition returns a new state. A
    response is present only in the RESULT phase.
    """

    phase: ViewPhase = ViewPhase.ENTRY
    language: LanguageMode = LanguageMode.EN
    query_text: str = ""
    response: Optional[OracleResponse] = None
    error: Optional[str] = None

    @property
    def can_submit(self) -> bool:
        """True when the entry form holds non-blank text."""
        return self.phase is ViewPhase.ENTRY and bool(self.query_text.strip())

    @property
    def is_loading(self) -> bool:
        return self.phase is ViewPhase.LOADING

    def with_language(self, language: LanguageMode) -> "OracleViewState":
        return replace(self, language=language)

    def with_query_text(self, text: str) -> "OracleViewState":
        """Update the entry form text. Ignored outside the entry phase."""
        if self.phase is not ViewPhase.ENTRY:
            return self
        return replace(self, query_text=text)

    def begin_loading(self) -> "OracleViewState":
        """Entry -> Loading, dropping any previous error or result.

        Raises:
            ValueError: If not in the entry phase or the text is blank.
        """
        if not self.can_submit:
            raise ValueError(f"Cannot submit a blank query or from the {self.phase.value} phase")
        return replace(self, phase=ViewPhase.LOADING, response=None, error=None)

    def succeed(self, response: OracleResponse) -> "OracleViewState":
        """Loading -> Result."""
        self._require(ViewPhase.LOADING)
        return replace(self, phase=ViewPhase.RESULT, response=response, error=None)

    def fail(self, message: str) -> "OracleViewState":
        """Loading -> Entry with an error. The typed query text is kept."""
        self._require(ViewPhase.LOADING)
        return replace(self, phase=ViewPhase.ENTRY, response=None, error=message)

    def reset(self) -> "OracleViewState":
        """Any phase -> a blank Entry form. Language is preserved."""
        return OracleViewState(language=self.language)

    def _require(self, phase: ViewPhase) -> None:
        if self.phase is not phase:
            raise ValueError(f"Expected phase {phase.value}, got {self.phase.value}")


# Scroll targets the window understands
SCROLL_TOP = "top"
SCROLL_BOOK = "book"
