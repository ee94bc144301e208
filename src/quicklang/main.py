"""Main entry point for the QuickLang application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from quicklang.coordinators import (
    LanguageAvailabilityCoordinator,
    TranslationRequestCoordinator,
    TranslatorController,
)
from quicklang.logger import setup_logging
from quicklang.services import (
    ArgosTranslationProvider,
    LanguageCatalog,
    QtTaskRunner,
    SettingsManager,
)
from quicklang.ui import MainWindow


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("QuickLang")
    app.setOrganizationName("QuickLang")

    # 2. Configuration and logging
    catalog = LanguageCatalog()
    settings = SettingsManager(catalog=catalog)
    logger = setup_logging(settings.get_log_level())
    probe_language = settings.get_probe_language()

    # 3. Initialize Infrastructure
    provider = ArgosTranslationProvider(fallback_source=probe_language)
    task_runner = QtTaskRunner()

    # 4. Construct UI
    main_window = MainWindow()
    main_window.populate_languages(
        catalog.list_source_languages(),
        catalog.list_target_languages(),
        catalog.display_name,
    )
    main_window.select_languages(settings.get_source_language(), settings.get_target_language())

    # 5. Instantiate Coordinators (Dependency Injection)
    coordinator = TranslationRequestCoordinator(
        provider=provider,
        task_runner=task_runner,
        probe_language=probe_language,
    )
    availability_coordinator = LanguageAvailabilityCoordinator(
        provider=provider,
        task_runner=task_runner,
        probe_language=probe_language,
    )
    controller = TranslatorController(
        main_window=main_window,
        coordinator=coordinator,
        availability_coordinator=availability_coordinator,
        catalog=catalog,
    )

    # 6. Signal Wiring
    controller.bind()

    # 7. Show UI and start event loop
    main_window.show()
    logger.info("QuickLang started")

    exit_code = app.exec()
    coordinator.cancel()
    logging.shutdown()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
