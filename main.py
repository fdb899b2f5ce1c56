"""
Main entry point for Pulse Wellness Application
"""
import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication, QSystemTrayIcon
from loguru import logger

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent))

from src.core.config import config, ensure_directories
from src.core.record_store import RecordStore, StorageCorruptError
from src.Modules.wellness_module import (
    HabitRepository,
    MoodRepository,
    SettingsRepository,
    WaterRepository,
    WellnessAnalytics,
)


def setup_logging() -> None:
    """Configure application logging"""
    # Remove default logger
    logger.remove()

    # Add console logger
    logger.add(
        sys.stderr,
        format=config.LOG_FORMAT,
        level=config.LOG_LEVEL,
        colorize=True,
    )

    # Add file logger
    log_file = config.LOGS_DIR / "pulse_wellness.log"
    logger.add(
        log_file,
        format=config.LOG_FORMAT,
        level=config.LOG_LEVEL,
        rotation=config.LOG_ROTATION,
        retention=config.LOG_RETENTION,
        encoding="utf-8",
    )

    logger.info(f"Starting {config.APP_NAME} v{config.APP_VERSION}")


def main() -> int:
    """Main application entry point"""
    try:
        # Setup
        ensure_directories()
        setup_logging()

        # One store per process, shared by the UI and the reminder thread
        store = RecordStore(config.DATA_DIR, encoding=config.STORE_FILE_ENCODING)
        water = WaterRepository(store)
        settings = SettingsRepository(store)
        analytics = WellnessAnalytics(
            HabitRepository(store),
            MoodRepository(store),
            water,
            settings,
            streak_max_days=config.WATER_STREAK_MAX_DAYS,
        )

        try:
            if settings.is_first_launch():
                logger.info("First launch - marking setup as completed")
                settings.set_first_launch_completed(True)
        except StorageCorruptError as e:
            logger.error(f"Settings file is corrupted, keeping it untouched: {e}")

        # Create application
        app = QApplication(sys.argv)
        app.setApplicationName(config.APP_NAME)
        app.setApplicationVersion(config.APP_VERSION)
        app.setOrganizationName(config.APP_AUTHOR)
        app.setQuitOnLastWindowClosed(False)

        if not QSystemTrayIcon.isSystemTrayAvailable():
            logger.error("System tray is not available on this desktop")
            return 1

        from src.ui.tray_app import WellnessTrayApp

        tray = WellnessTrayApp(app, store, water, settings, analytics, export_dir=config.EXPORT_DIR)
        tray.start()

        logger.info("Application initialized successfully")

        # Run application
        return app.exec()

    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
