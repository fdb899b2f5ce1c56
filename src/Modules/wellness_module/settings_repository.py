"""
Settings Repository - typowane ustawienia aplikacji

Values are persisted as-is: range checks (goal 1-20 glasses, reminder
interval 15-480 minutes) belong to the UI layer.
"""
from typing import Any

from loguru import logger

from src.core.config import config
from src.core.record_store import RecordStore

from .wellness_models import WellnessSettings

KEY_DAILY_WATER_GOAL = "daily_water_goal"
KEY_REMINDER_INTERVAL = "reminder_interval_minutes"
KEY_REMINDERS_ENABLED = "reminders_enabled"
KEY_APP_THEME = "app_theme"
KEY_NOTIFICATIONS_ENABLED = "notifications_enabled"
KEY_FIRST_LAUNCH_COMPLETED = "first_launch_completed"

_DEFAULTS = WellnessSettings(
    daily_water_goal=config.DEFAULT_DAILY_WATER_GOAL,
    reminder_interval_minutes=config.DEFAULT_REMINDER_INTERVAL_MINUTES,
    reminders_enabled=config.DEFAULT_REMINDERS_ENABLED,
    app_theme=config.DEFAULT_APP_THEME,
    notifications_enabled=config.DEFAULT_NOTIFICATIONS_ENABLED,
)


class SettingsRepository:
    """Dostęp do ustawień z wartościami domyślnymi"""

    def __init__(self, store: RecordStore):
        self.store = store

    def _get(self, key: str, default: Any) -> Any:
        return self.store.get_setting(key, default).unwrap()

    def _set(self, key: str, value: Any) -> None:
        self.store.set_setting(key, value).unwrap()
        logger.info(f"[SETTINGS] {key} set to {value!r}")

    # Water
    def get_daily_water_goal(self) -> int:
        return self._get(KEY_DAILY_WATER_GOAL, _DEFAULTS.daily_water_goal)

    def set_daily_water_goal(self, goal: int) -> None:
        self._set(KEY_DAILY_WATER_GOAL, goal)

    def get_reminder_interval(self) -> int:
        return self._get(KEY_REMINDER_INTERVAL, _DEFAULTS.reminder_interval_minutes)

    def set_reminder_interval(self, interval_minutes: int) -> None:
        self._set(KEY_REMINDER_INTERVAL, interval_minutes)

    def are_reminders_enabled(self) -> bool:
        return self._get(KEY_REMINDERS_ENABLED, _DEFAULTS.reminders_enabled)

    def set_reminders_enabled(self, enabled: bool) -> None:
        self._set(KEY_REMINDERS_ENABLED, enabled)

    # App
    def get_app_theme(self) -> str:
        return self._get(KEY_APP_THEME, _DEFAULTS.app_theme)

    def set_app_theme(self, theme: str) -> None:
        self._set(KEY_APP_THEME, theme)

    def are_notifications_enabled(self) -> bool:
        return self._get(KEY_NOTIFICATIONS_ENABLED, _DEFAULTS.notifications_enabled)

    def set_notifications_enabled(self, enabled: bool) -> None:
        self._set(KEY_NOTIFICATIONS_ENABLED, enabled)

    def set_first_launch_completed(self, completed: bool) -> None:
        self._set(KEY_FIRST_LAUNCH_COMPLETED, completed)

    def is_first_launch(self) -> bool:
        return not self._get(KEY_FIRST_LAUNCH_COMPLETED, _DEFAULTS.first_launch_completed)

    def load(self) -> WellnessSettings:
        """Wszystkie ustawienia naraz (jeden odczyt pliku)"""
        saved = self.store.load_settings().unwrap()
        defaults = _DEFAULTS.to_dict()
        merged = {key: saved.get(key, default) for key, default in defaults.items()}
        return WellnessSettings(**merged)
