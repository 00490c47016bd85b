"""Main Window - Application shell with header, entry form, book and disclaimer."""

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from book_oracle.core import SCROLL_BOOK, SCROLL_TOP, LanguageMode, OracleViewState, ViewPhase
from book_oracle.ui.book_display import BookDisplay
from book_oracle.ui.localization import DISCLAIMER, copy_for, samples_for

SAMPLE_BUTTON_STYLE = (
    "QPushButton { background: white; border: 1px solid #e8e0d0; border-radius: 14px; "
    "padding: 6px 14px; color: #5c5246; }"
    "QPushButton:hover { border-color: #b3a58f; color: #2c2a26; }"
)


class MainWindow(QMainWindow):
    """Renders an OracleViewState and reports user intent through signals.

    The window keeps no state of its own beyond widget contents; the
    controller decides every transition.
    """

    submitted = Signal()
    query_edited = Signal(str)
    sample_chosen = Signal(str)
    language_selected = Signal(object)  # LanguageMode
    reset_requested = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Book Oracle")
        self.setGeometry(100, 100, 1100, 850)
        self.setStyleSheet("QMainWindow { background-color: #f5f1e8; }")

        self._setup_ui()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)

        self.main_layout.addLayout(self._create_header())

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QScrollArea.Shape.NoFrame)
        content = QWidget()
        self.content_layout = QVBoxLayout(content)
        self.content_layout.setContentsMargins(48, 24, 48, 24)
        self.content_layout.setSpacing(16)

        self._create_intro()
        self._create_entry_form()

        self.book_display = BookDisplay()
        self.content_layout.addWidget(self.book_display)

        self.reset_button = QPushButton()
        self.reset_button.clicked.connect(self.reset_requested.emit)
        self.content_layout.addWidget(self.reset_button, 0, Qt.AlignmentFlag.AlignHCenter)
        self.content_layout.addStretch()

        self.scroll_area.setWidget(content)
        self.main_layout.addWidget(self.scroll_area, 1)

        self.disclaimer_label = QLabel(DISCLAIMER)
        self.disclaimer_label.setWordWrap(True)
        self.disclaimer_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.disclaimer_label.setStyleSheet("color: #b3a58f; font-size: 10px; padding: 12px;")
        self.main_layout.addWidget(self.disclaimer_label)

    def _create_header(self) -> QHBoxLayout:
        header = QHBoxLayout()
        header.setContentsMargins(24, 16, 24, 8)

        # Clicking the brand behaves like "ask another question"
        self.brand_button = QPushButton("Book Oracle")
        self.brand_button.setFlat(True)
        self.brand_button.setStyleSheet("font-family: Georgia, serif; font-size: 18px; font-weight: 600;")
        self.brand_button.clicked.connect(self.reset_requested.emit)
        header.addWidget(self.brand_button)
        header.addStretch()

        self.language_group = QButtonGroup(self)
        self.language_group.setExclusive(True)
        self.language_buttons = {}
        for language, label in ((LanguageMode.EN, "English"), (LanguageMode.ZH, "中文")):
            button = QPushButton(label)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, lang=language: self.language_selected.emit(lang))
            self.language_group.addButton(button)
            self.language_buttons[language] = button
            header.addWidget(button)
        self.language_buttons[LanguageMode.EN].setChecked(True)
        return header

    def _create_intro(self) -> None:
        self.intro_widget = QWidget()
        intro_layout = QVBoxLayout(self.intro_widget)
        self.headline_label = QLabel()
        self.headline_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.headline_label.setStyleSheet("font-family: Georgia, serif; font-size: 34px; color: #2c2a26;")
        self.headline_accent_label = QLabel()
        self.headline_accent_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.headline_accent_label.setStyleSheet(
            "font-family: Georgia, serif; font-size: 34px; font-style: italic; color: #8c7b65;"
        )
        intro_layout.addWidget(self.headline_label)
        intro_layout.addWidget(self.headline_accent_label)
        self.content_layout.addWidget(self.intro_widget)

    def _create_entry_form(self) -> None:
        self.entry_widget = QWidget()
        entry_layout = QVBoxLayout(self.entry_widget)
        entry_layout.setSpacing(12)

        self.query_edit = QPlainTextEdit()
        self.query_edit.setFixedHeight(140)
        self.query_edit.setStyleSheet(
            "background: white; border: 1px solid #e8e0d0; border-radius: 12px; "
            "padding: 12px; font-family: Georgia, serif; font-size: 16px;"
        )
        self.query_edit.textChanged.connect(self._on_text_changed)
        entry_layout.addWidget(self.query_edit)

        actions_layout = QHBoxLayout()
        self.privacy_label = QLabel()
        self.privacy_label.setStyleSheet("color: #b3a58f; font-size: 11px;")
        actions_layout.addWidget(self.privacy_label)
        actions_layout.addStretch()
        self.submit_button = QPushButton()
        self.submit_button.clicked.connect(self.submitted.emit)
        actions_layout.addWidget(self.submit_button)
        entry_layout.addLayout(actions_layout)

        self.samples_label = QLabel()
        self.samples_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.samples_label.setStyleSheet("color: #b3a58f; font-size: 11px; letter-spacing: 2px;")
        entry_layout.addWidget(self.samples_label)

        samples_layout = QHBoxLayout()
        samples_layout.addStretch()
        self.sample_buttons = []
        for _ in samples_for(LanguageMode.EN):
            button = QPushButton()
            button.setStyleSheet(SAMPLE_BUTTON_STYLE)
            button.clicked.connect(lambda _checked=False, b=button: self.sample_chosen.emit(b.text()))
            self.sample_buttons.append(button)
            samples_layout.addWidget(button)
        samples_layout.addStretch()
        entry_layout.addLayout(samples_layout)

        self.error_label = QLabel()
        self.error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(
            "color: #7f1d1d; background: #fef2f2; border: 1px solid #fee2e2; border-radius: 8px; padding: 8px;"
        )
        self.error_label.hide()
        entry_layout.addWidget(self.error_label)

        self.content_layout.addWidget(self.entry_widget)

    def _on_text_changed(self) -> None:
        self.query_edited.emit(self.query_edit.toPlainText())

    def render(self, state: OracleViewState) -> None:
        """Bring every widget in line with the given state."""
        copy = copy_for(state.language)
        in_entry = state.phase is ViewPhase.ENTRY

        self.language_buttons[state.language].setChecked(True)

        self.headline_label.setText(copy.headline)
        self.headline_accent_label.setText(copy.headline_accent)
        self.intro_widget.setVisible(in_entry)

        self.entry_widget.setVisible(in_entry)
        self.query_edit.setReadOnly(not in_entry)
        self.query_edit.setPlaceholderText(copy.placeholder)
        if self.query_edit.toPlainText() != state.query_text:
            self.query_edit.blockSignals(True)
            self.query_edit.setPlainText(state.query_text)
            self.query_edit.blockSignals(False)
        self.privacy_label.setText(copy.privacy_note)
        self.submit_button.setText(copy.submit)
        self.submit_button.setEnabled(state.can_submit)

        self.samples_label.setText(copy.samples_heading)
        for button, sample in zip(self.sample_buttons, samples_for(state.language)):
            button.setText(sample)

        if state.error:
            self.error_label.setText(state.error)
            self.error_label.show()
        else:
            self.error_label.clear()
            self.error_label.hide()

        self.book_display.render(state)

        self.reset_button.setText(copy.ask_another)
        self.reset_button.setVisible(state.phase is ViewPhase.RESULT)

    def scroll_to(self, target: str) -> None:
        """Scroll to the top of the page or bring the book into view."""
        if target == SCROLL_TOP:
            self.scroll_area.verticalScrollBar().setValue(0)
        elif target == SCROLL_BOOK:
            # Let the layout settle before measuring the book's position
            QTimer.singleShot(100, lambda: self.scroll_area.ensureWidgetVisible(self.book_display))
