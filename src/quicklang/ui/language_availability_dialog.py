"""Language Availability Dialog - Shows model status for a pair and offers a download."""

from typing import TYPE_CHECKING

from typing_extensions import override

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QKeySequence
from PySide6.QtWidgets import (
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
)

from quicklang.core import LanguageTag
from quicklang.services import AvailabilityStatus

if TYPE_CHECKING:
    from quicklang.coordinators.language_availability_coordinator import (
        LanguageAvailabilityCoordinator,
    )


class LanguageAvailabilityDialog(QDialog):
    """Modal dialog bound to a LanguageAvailabilityCoordinator."""

    def __init__(
        self,
        coordinator: "LanguageAvailabilityCoordinator",
        source: LanguageTag,
        target: LanguageTag,
        source_name: str,
        target_name: str,
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle("Translation Model")
        self.setFixedSize(400, 260)

        self.coordinator = coordinator
        self.source = source
        self.target = target

        layout = QVBoxLayout(self)

        title = QLabel("Translation model status")
        title.setStyleSheet("font-weight: bold;")
        layout.addWidget(title)

        form = QFormLayout()
        form.addRow("Source language:", QLabel(source_name))
        form.addRow("Target language:", QLabel(target_name))
        self.status_label = QLabel("Checking language model...")
        self.status_label.setWordWrap(True)
        form.addRow("Status:", self.status_label)
        layout.addLayout(form)
        layout.addStretch()

        buttons = QHBoxLayout()
        self.download_button = QPushButton("Download Model")
        self.download_button.setEnabled(False)
        self.download_button.clicked.connect(self._on_download)
        buttons.addWidget(self.download_button)
        buttons.addStretch()
        close_button = QPushButton("Close")
        close_button.setShortcut(QKeySequence(Qt.Key.Key_Escape))
        close_button.clicked.connect(self.reject)
        buttons.addWidget(close_button)
        layout.addLayout(buttons)

        coordinator.availability_checked.connect(self.show_status)
        coordinator.download_finished.connect(self.show_download_result)
        coordinator.busy_changed.connect(self._on_busy_changed)
        self._bound = True

    @override
    def showEvent(self, event):
        super().showEvent(event)
        self.coordinator.check(self.source, self.target)

    @override
    def done(self, result):
        if self._bound:
            self._bound = False
            self.coordinator.availability_checked.disconnect(self.show_status)
            self.coordinator.download_finished.disconnect(self.show_download_result)
            self.coordinator.busy_changed.disconnect(self._on_busy_changed)
        super().done(result)

    @Slot(object, str)
    def show_status(self, status, message: str) -> None:
        self.status_label.setText(message)
        color = "red" if status in (None, AvailabilityStatus.UNSUPPORTED) else "green"
        self.status_label.setStyleSheet(f"color: {color};")
        self.download_button.setEnabled(self.coordinator.can_download())

    @Slot(bool, str)
    def show_download_result(self, success: bool, message: str) -> None:
        self.status_label.setText(message)
        self.status_label.setStyleSheet(f"color: {'green' if success else 'red'};")
        self.download_button.setEnabled(self.coordinator.can_download())

    @Slot(bool)
    def _on_busy_changed(self, busy: bool) -> None:
        if busy:
            self.download_button.setEnabled(False)
            if self.coordinator.status is AvailabilityStatus.DOWNLOAD_REQUIRED:
                self.status_label.setText("Downloading language model...")
                self.status_label.setStyleSheet("color: gray;")

    def _on_download(self) -> None:
        if self.coordinator.can_download():
            self.coordinator.download()
