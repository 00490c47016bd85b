"""Query entity - a single free-text life question plus its language mode."""

from dataclasses import dataclass
from enum import Enum


class LanguageMode(str, Enum):
    """Language the oracle answers in (title, author and quote stay English)."""

    EN = "en"
    ZH = "zh"

    @classmethod
    def from_code(cls, code: str) -> "LanguageMode":
        """Resolve a language code such as "en" or "ZH".

        Raises:
            ValueError: If the code is not a supported language.
        """
        try:
            return cls((code or "").strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported language mode: {code!r}") from None


@dataclass(frozen=True)
class Query:
    """A submitted question. Created per submission and discarded once answered."""

    text: str
    language: LanguageMode = LanguageMode.EN

    def __post_init__(self):
        if not self.text or not self.text.strip():
            raise ValueError("Query text must not be blank")
        if not isinstance(self.language, LanguageMode):
            object.__setattr__(self, "language", LanguageMode.from_code(self.language))
