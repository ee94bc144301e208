"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow
from .language_availability_dialog import LanguageAvailabilityDialog

__all__ = ["MainWindow", "LanguageAvailabilityDialog"]
