"""Main entry point for the Book Oracle application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from book_oracle.coordinators import OracleController
from book_oracle.services import GeminiOracleService, SettingsManager
from book_oracle.ui import MainWindow


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings_manager = SettingsManager()
    logging.basicConfig(
        level=settings_manager.get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)
    if settings_manager.get_gemini_api_key() is None:
        logger.warning("GEMINI_API_KEY is not set; every question will fail until it is configured")

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Book Oracle")
    app.setOrganizationName("BookOracle")

    # 3. Initialize Services
    oracle_service = GeminiOracleService(
        model_name=settings_manager.get_model_name(),
        timeout_seconds=settings_manager.get_request_timeout_seconds(),
    )

    # 4. Construct UI
    main_window = MainWindow()

    # 5. Instantiate Coordinator (Dependency Injection)
    controller = OracleController(
        oracle_service=oracle_service,
        settings_manager=settings_manager,
    )

    # 6. Signal Wiring (UI intent -> controller, state -> UI)
    main_window.query_edited.connect(controller.set_query_text)
    main_window.sample_chosen.connect(controller.choose_sample)
    main_window.submitted.connect(controller.submit)
    main_window.language_selected.connect(controller.set_language)
    main_window.reset_requested.connect(controller.reset)
    controller.state_changed.connect(main_window.render)
    controller.scroll_requested.connect(main_window.scroll_to)

    # 7. Show UI and start event loop
    main_window.render(controller.state)
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
