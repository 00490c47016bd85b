"""Book Display - Two-page spread showing the oracle's answer."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from book_oracle.core import OracleResponse, OracleViewState, ViewPhase
from book_oracle.ui.localization import UiCopy, copy_for

PAGE_STYLE = "background-color: #fdfbf7; border: 1px solid #e8e0d0;"
HEADING_STYLE = "color: #8c7b65; font-size: 10px; letter-spacing: 2px;"
BODY_STYLE = "color: #2c2a26; font-family: Georgia, serif; font-size: 15px;"


def _wrapped_label(style: str = BODY_STYLE) -> QLabel:
    label = QLabel()
    label.setWordWrap(True)
    label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
    label.setStyleSheet(style)
    return label


class BookDisplay(QWidget):
    """Open book: loading placeholder while consulting, then two pages of content."""

    def __init__(self):
        super().__init__()

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)

        # Loading placeholder
        self.loading_frame = QFrame()
        self.loading_frame.setStyleSheet(PAGE_STYLE)
        self.loading_frame.setMinimumHeight(400)
        loading_layout = QVBoxLayout(self.loading_frame)
        self.consulting_label = QLabel()
        self.consulting_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.consulting_label.setStyleSheet("color: #8c7b65; font-family: Georgia, serif; font-style: italic; font-size: 20px;")
        loading_layout.addWidget(self.consulting_label)
        main_layout.addWidget(self.loading_frame)

        # Spread
        self.pages_frame = QFrame()
        spread = QHBoxLayout(self.pages_frame)
        spread.setContentsMargins(0, 0, 0, 0)
        spread.setSpacing(0)

        self.page1 = QFrame()
        self.page1.setStyleSheet(PAGE_STYLE)
        page1_layout = QVBoxLayout(self.page1)
        page1_layout.setContentsMargins(32, 32, 32, 32)
        page1_layout.setSpacing(12)
        self.page1_heading = _wrapped_label(HEADING_STYLE)
        self.empathy_label = _wrapped_label("color: #2c2a26; font-family: Georgia, serif; font-style: italic; font-size: 17px;")
        self.title_label = _wrapped_label("color: #2c2a26; font-family: Georgia, serif; font-size: 22px; font-weight: bold;")
        self.author_label = _wrapped_label("color: #8c7b65; font-size: 13px;")
        self.summary_label = _wrapped_label()
        for widget in (
            self.page1_heading,
            self.empathy_label,
            self.title_label,
            self.author_label,
            self.summary_label,
        ):
            page1_layout.addWidget(widget)
        page1_layout.addStretch()

        self.page2 = QFrame()
        self.page2.setStyleSheet(PAGE_STYLE)
        page2_layout = QVBoxLayout(self.page2)
        page2_layout.setContentsMargins(32, 32, 32, 32)
        page2_layout.setSpacing(12)
        self.page2_heading = _wrapped_label(HEADING_STYLE)
        self.quote_label = _wrapped_label("color: #2c2a26; font-family: Georgia, serif; font-style: italic; font-size: 19px;")
        self.analysis_label = _wrapped_label()
        self.gift_heading = _wrapped_label(HEADING_STYLE)
        self.tiny_step_label = _wrapped_label("color: #2c2a26; font-family: Georgia, serif; font-size: 16px;")
        self.perspective_label = _wrapped_label("color: #b3a58f; font-size: 11px;")
        for widget in (
            self.page2_heading,
            self.quote_label,
            self.analysis_label,
            self.gift_heading,
            self.tiny_step_label,
        ):
            page2_layout.addWidget(widget)
        page2_layout.addStretch()
        page2_layout.addWidget(self.perspective_label)

        spread.addWidget(self.page1, 1)
        spread.addWidget(self.page2, 1)
        main_layout.addWidget(self.pages_frame)

        self.clear()

    def render(self, state: OracleViewState) -> None:
        """Show whatever the current phase calls for."""
        copy = copy_for(state.language)
        if state.phase is ViewPhase.LOADING:
            self.show_loading(copy)
        elif state.phase is ViewPhase.RESULT and state.response is not None:
            self.show_response(state.response, copy)
        else:
            self.clear()

    def show_loading(self, copy: UiCopy) -> None:
        self.consulting_label.setText(copy.consulting)
        self.loading_frame.show()
        self.pages_frame.hide()
        self.show()

    def show_response(self, response: OracleResponse, copy: UiCopy) -> None:
        self.page1_heading.setText(copy.page1)
        self.empathy_label.setText(response.empathy)
        self.title_label.setText(response.book_context.title)
        self.author_label.setText(response.book_context.author)
        self.summary_label.setText(response.book_context.summary)

        self.page2_heading.setText(copy.page2)
        self.quote_label.setText(response.reflection.quote)
        self.analysis_label.setText(response.reflection.analysis)
        self.gift_heading.setText(copy.gift)
        self.tiny_step_label.setText(response.tiny_step)
        self.perspective_label.setText(copy.perspective_note)

        self.loading_frame.hide()
        self.pages_frame.show()
        self.show()

    def clear(self) -> None:
        for label in (
            self.empathy_label,
            self.title_label,
            self.author_label,
            self.summary_label,
            self.quote_label,
            self.analysis_label,
            self.tiny_step_label,
        ):
            label.clear()
        self.loading_frame.hide()
        self.pages_frame.hide()
        self.hide()
