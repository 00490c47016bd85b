"""UI layer - PySide6 presentation components."""

from .book_display import BookDisplay
from .main_window import MainWindow

__all__ = ["BookDisplay", "MainWindow"]
