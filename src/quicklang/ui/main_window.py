"""Main Window - Text input, language pickers, translate button and result view."""

from typing import Callable, Iterable

from PySide6.QtCore import QTimer, Signal
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QSizePolicy,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from quicklang.core import CoordinatorState, LanguageTag, Phase


STATUS_TEXT = {
    Phase.IDLE: "",
    Phase.CHECKING_AVAILABILITY: "Checking language model...",
    Phase.AWAITING_DOWNLOAD_CONSENT: "Waiting for download confirmation...",
    Phase.DOWNLOADING: "Downloading language model...",
    Phase.TRANSLATING: "Translating...",
    Phase.COMPLETED: "Ready",
    Phase.FAILED: "Failed",
}

RESULT_PLACEHOLDER = "The translation will appear here"


class MainWindow(QMainWindow):
    """Single-screen translator window."""

    translate_clicked = Signal()
    cancel_clicked = Signal()
    copy_clicked = Signal()
    language_settings_clicked = Signal()

    COPY_FEEDBACK_MS = 2000

    def __init__(self):
        super().__init__()
        self.setWindowTitle("QuickLang")
        self.resize(640, 560)

        self._busy = False
        self._setup_ui()

    def _setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(12)

        # Toolbar
        toolbar_layout = QHBoxLayout()
        toolbar_layout.addStretch()
        self.settings_button = QPushButton("Language Settings")
        self.settings_button.clicked.connect(self.language_settings_clicked.emit)
        toolbar_layout.addWidget(self.settings_button)
        main_layout.addLayout(toolbar_layout)

        # Input
        source_label = QLabel("Text to translate")
        source_label.setStyleSheet("font-weight: bold;")
        main_layout.addWidget(source_label)

        self.source_text = QPlainTextEdit()
        self.source_text.setMinimumHeight(120)
        self.source_text.textChanged.connect(self._update_translate_button)
        main_layout.addWidget(self.source_text)

        # Language pickers and translate button
        picker_layout = QHBoxLayout()
        picker_layout.setSpacing(12)

        self.source_combo = QComboBox()
        self.source_combo.setMinimumWidth(150)
        self.target_combo = QComboBox()
        self.target_combo.setMinimumWidth(150)

        picker_layout.addWidget(self._labelled("Source language", self.source_combo))
        arrow = QLabel("→")
        arrow.setStyleSheet("color: gray;")
        picker_layout.addWidget(arrow)
        picker_layout.addWidget(self._labelled("Target language", self.target_combo))
        picker_layout.addStretch()

        self.translate_button = QPushButton("Translate")
        self.translate_button.setEnabled(False)
        self.translate_button.clicked.connect(self._on_translate_button)
        picker_layout.addWidget(self.translate_button)
        main_layout.addLayout(picker_layout)

        shortcut = QShortcut(QKeySequence("Ctrl+Return"), self)
        shortcut.activated.connect(self._on_translate_button)

        # Result
        result_header = QHBoxLayout()
        result_label = QLabel("Translation")
        result_label.setStyleSheet("font-weight: bold;")
        result_header.addWidget(result_label)
        result_header.addStretch()
        self.copy_button = QPushButton("Copy")
        self.copy_button.setVisible(False)
        self.copy_button.clicked.connect(self.copy_clicked.emit)
        result_header.addWidget(self.copy_button)
        main_layout.addLayout(result_header)

        self.result_text = QTextEdit()
        self.result_text.setReadOnly(True)
        self.result_text.setPlaceholderText(RESULT_PLACEHOLDER)
        self.result_text.setMinimumHeight(120)
        self.result_text.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        main_layout.addWidget(self.result_text, 1)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: gray;")
        main_layout.addWidget(self.status_label)

    @staticmethod
    def _labelled(title: str, widget: QWidget) -> QWidget:
        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        label = QLabel(title)
        label.setStyleSheet("font-weight: bold;")
        layout.addWidget(label)
        layout.addWidget(widget)
        return container

    def populate_languages(
        self,
        sources: Iterable[LanguageTag],
        targets: Iterable[LanguageTag],
        display_name: Callable[[LanguageTag], str],
    ) -> None:
        """Fill both pickers; the item data is the LanguageTag itself."""
        self.source_combo.clear()
        for tag in sources:
            self.source_combo.addItem(display_name(tag), tag)
        self.target_combo.clear()
        for tag in targets:
            self.target_combo.addItem(display_name(tag), tag)

    def select_languages(self, source: LanguageTag, target: LanguageTag) -> None:
        for combo, tag in ((self.source_combo, source), (self.target_combo, target)):
            index = combo.findData(tag)
            if index >= 0:
                combo.setCurrentIndex(index)

    def selected_source_language(self) -> LanguageTag:
        return self.source_combo.currentData()

    def selected_target_language(self) -> LanguageTag:
        return self.target_combo.currentData()

    def source_text_value(self) -> str:
        return self.source_text.toPlainText()

    def render_state(self, state: CoordinatorState) -> None:
        """Update widgets to reflect the coordinator state."""
        self._busy = state.is_in_flight
        self.translate_button.setText("Cancel" if self._busy else "Translate")
        self._update_translate_button()
        self.status_label.setText(STATUS_TEXT[state.phase])

        if state.phase is Phase.COMPLETED:
            self.result_text.setPlainText(state.text)
            self.status_label.setStyleSheet("color: gray;")
            self.copy_button.setVisible(True)
        elif state.phase is Phase.FAILED:
            self.result_text.setPlainText(state.message)
            self.status_label.setStyleSheet("color: red;")
            self.copy_button.setVisible(False)
        else:
            if self._busy:
                self.result_text.clear()
            self.status_label.setStyleSheet("color: gray;")
            self.copy_button.setVisible(False)

    def ask_download_consent(self, source_name: str, target_name: str) -> bool:
        """Ask whether to download the model for a pair. Blocks until answered."""
        answer = QMessageBox.question(
            self,
            "Download Language Model",
            f"The {source_name} → {target_name} model is not installed.\n"
            "Download it now?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.Yes,
        )
        return answer == QMessageBox.StandardButton.Yes

    def show_copied_feedback(self) -> None:
        self.copy_button.setText("Copied")
        QTimer.singleShot(self.COPY_FEEDBACK_MS, lambda: self.copy_button.setText("Copy"))

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def _on_translate_button(self):
        if self._busy:
            self.cancel_clicked.emit()
        elif self.source_text_value().strip():
            self.translate_clicked.emit()

    def _update_translate_button(self):
        has_text = bool(self.source_text_value().strip())
        self.translate_button.setEnabled(self._busy or has_text)
