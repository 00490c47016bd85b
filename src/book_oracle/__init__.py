"""
Book Oracle - Life questions answered through books.

This package provides a desktop application that:
- Sends a free-text question to Google Gemini
- Receives one book, a scene, a quote and a parting thought
- Renders the answer as a two-page spread, in English or Chinese
"""

__version__ = "0.1.0"

# Make key components available at package level
from book_oracle.core import LanguageMode, OracleResponse, OracleResult, Query

__all__ = [
    "LanguageMode",
    "OracleResponse",
    "OracleResult",
    "Query",
]
