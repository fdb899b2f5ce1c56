"""
Tray App - ikona w zasobniku systemowym z przypomnieniami o wodzie
"""
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtGui import QAction, QIcon
from PyQt6.QtWidgets import QApplication, QInputDialog, QMenu, QStyle, QSystemTrayIcon
from loguru import logger

from src.core.config import config
from src.core.record_store import RecordStore, StorageError
from src.Modules.wellness_module import (
    ReminderMessage,
    SettingsRepository,
    WaterReminderScheduler,
    WaterRepository,
    WellnessAnalytics,
    export_to_json,
)
from src.Modules.wellness_module.wellness_utils import today_str


class ReminderBridge(QObject):
    """Przenosi przypomnienia z wątku workera do wątku Qt"""

    reminder_received = pyqtSignal(str, str)  # title, content

    def emit_reminder(self, message: ReminderMessage):
        self.reminder_received.emit(message.title, message.content)


class WellnessTrayApp(QSystemTrayIcon):
    """
    Ikona w zasobniku systemowym.

    Menu actions call the repositories synchronously; reminders arrive from
    the scheduler thread through ReminderBridge.
    """

    def __init__(
        self,
        app: QApplication,
        store: RecordStore,
        water: WaterRepository,
        settings: SettingsRepository,
        analytics: WellnessAnalytics,
        export_dir: Path,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self.app = app
        self.store = store
        self.water = water
        self.settings = settings
        self.analytics = analytics
        self.export_dir = export_dir

        self.bridge = ReminderBridge()
        self.bridge.reminder_received.connect(self._show_reminder)
        self.scheduler = WaterReminderScheduler(water, settings, on_reminder=self.bridge.emit_reminder)

        style = app.style()
        self.setIcon(style.standardIcon(QStyle.StandardPixmap.SP_MessageBoxInformation) if style else QIcon())
        self.setToolTip(config.APP_NAME)
        self._init_menu()

    def _init_menu(self):
        menu = QMenu()

        add_glass_action = QAction("Add glass", menu)
        add_glass_action.triggered.connect(self._on_add_glass)
        menu.addAction(add_glass_action)

        remove_glass_action = QAction("Remove glass", menu)
        remove_glass_action.triggered.connect(self._on_remove_glass)
        menu.addAction(remove_glass_action)

        summary_action = QAction("Today's summary", menu)
        summary_action.triggered.connect(self._on_summary)
        menu.addAction(summary_action)

        menu.addSeparator()

        self.reminders_action = QAction("Water reminders", menu)
        self.reminders_action.setCheckable(True)
        self.reminders_action.toggled.connect(self._on_reminders_toggled)
        menu.addAction(self.reminders_action)

        goal_action = QAction("Daily goal...", menu)
        goal_action.triggered.connect(self._on_set_goal)
        menu.addAction(goal_action)

        interval_action = QAction("Reminder interval...", menu)
        interval_action.triggered.connect(self._on_set_interval)
        menu.addAction(interval_action)

        export_action = QAction("Export data", menu)
        export_action.triggered.connect(self._on_export)
        menu.addAction(export_action)

        menu.addSeparator()

        quit_action = QAction("Quit", menu)
        quit_action.triggered.connect(self._on_quit)
        menu.addAction(quit_action)

        self._menu = menu
        self.setContextMenu(menu)

    def start(self):
        """Pokaż ikonę i uruchom przypomnienia jeśli są włączone"""
        self.show()
        try:
            enabled = self.settings.are_reminders_enabled()
        except StorageError as e:
            logger.error(f"[TRAY] Cannot read reminder settings: {e}")
            return

        # Setting the check state fires toggled, which starts the scheduler
        self.reminders_action.setChecked(enabled)
        if not enabled:
            logger.info("[TRAY] Water reminders disabled in settings")

    def _notify_error(self, text: str, error: Exception):
        logger.error(f"[TRAY] {text}: {error}")
        self.showMessage(config.APP_NAME, f"{text}: {error}", QSystemTrayIcon.MessageIcon.Critical)

    # =========================================================================
    # HANDLERS
    # =========================================================================

    def _show_reminder(self, title: str, content: str):
        self.showMessage(title, content, QSystemTrayIcon.MessageIcon.Information)

    def _on_add_glass(self):
        try:
            entry = self.water.add_glass()
            goal = self.settings.get_daily_water_goal()
        except StorageError as e:
            self._notify_error("Could not save", e)
            return
        self.showMessage("💧 Glass added", f"{entry.glasses}/{goal} glasses today")

    def _on_remove_glass(self):
        try:
            entry = self.water.remove_glass()
            goal = self.settings.get_daily_water_goal()
        except StorageError as e:
            self._notify_error("Could not save", e)
            return
        if entry is None:
            self.showMessage(config.APP_NAME, "No glasses logged today")
            return
        self.showMessage("💧 Glass removed", f"{entry.glasses}/{goal} glasses today")

    def _on_summary(self):
        try:
            glasses = self.analytics.today_water_consumption()
            goal = self.settings.get_daily_water_goal()
            streak = self.analytics.water_consumption_streak()
            score = self.analytics.today_wellness_score()
            habits = self.analytics.daily_habit_completion_percent(self.analytics.today())
        except StorageError as e:
            self._notify_error("Cannot compute summary", e)
            return

        self.showMessage(
            f"Wellness score: {score}",
            f"Water {glasses}/{goal} · habits {habits}% · streak {streak} days",
        )

    def _on_reminders_toggled(self, enabled: bool):
        try:
            self.settings.set_reminders_enabled(enabled)
        except StorageError as e:
            self._notify_error("Could not save", e)
            self._set_reminders_checked(not enabled)
            return

        if not enabled:
            self.scheduler.stop(wait=False)
            return
        try:
            self.scheduler.start()
        except StorageError as e:
            self._notify_error("Cannot start reminders", e)

    def _set_reminders_checked(self, checked: bool):
        """Zmień stan akcji bez ponownego wywołania toggled"""
        self.reminders_action.blockSignals(True)
        self.reminders_action.setChecked(checked)
        self.reminders_action.blockSignals(False)

    def _on_set_goal(self):
        try:
            current = self.settings.get_daily_water_goal()
        except StorageError as e:
            self._notify_error("Cannot read settings", e)
            return

        goal, ok = QInputDialog.getInt(
            None, config.APP_NAME, "Daily goal (glasses):",
            current, config.WATER_GOAL_MIN, config.WATER_GOAL_MAX
        )
        if not ok:
            return
        try:
            self.settings.set_daily_water_goal(goal)
        except StorageError as e:
            self._notify_error("Could not save", e)

    def _on_set_interval(self):
        try:
            current = self.settings.get_reminder_interval()
        except StorageError as e:
            self._notify_error("Cannot read settings", e)
            return

        minutes, ok = QInputDialog.getInt(
            None, config.APP_NAME, "Remind me every (minutes):",
            current, config.REMINDER_INTERVAL_MIN, config.REMINDER_INTERVAL_MAX, 15
        )
        if not ok:
            return
        try:
            self.settings.set_reminder_interval(minutes)
        except StorageError as e:
            self._notify_error("Could not save", e)
            return

        if self.scheduler.is_running():
            self.scheduler.reschedule(minutes)

    def _on_export(self):
        target = self.export_dir / f"pulse_export_{today_str()}.json"
        try:
            export_to_json(self.store, target)
        except (StorageError, OSError) as e:
            self._notify_error("Export failed", e)
            return
        self.showMessage(config.APP_NAME, f"Data exported to {target}")

    def _on_quit(self):
        self.scheduler.stop()
        self.hide()
        self.app.quit()
