"""
Moduł Wellness - nawyki, nastrój i nawodnienie
==============================================
"""

from .wellness_models import (
    HabitEntry,
    MoodEntry,
    WaterEntry,
    MoodLabel,
    WellnessSettings,
)

from .habit_repository import HabitRepository
from .mood_repository import MoodRepository
from .water_repository import WaterRepository
from .settings_repository import SettingsRepository

from .wellness_analytics import WellnessAnalytics
from .water_insights import WaterInsights

from .water_reminder import (
    WaterReminderScheduler,
    ReminderMessage,
    build_reminder_message,
)

from .data_export import export_all_data, export_to_json

__all__ = [
    # Models
    'HabitEntry',
    'MoodEntry',
    'WaterEntry',
    'MoodLabel',
    'WellnessSettings',

    # Repositories
    'HabitRepository',
    'MoodRepository',
    'WaterRepository',
    'SettingsRepository',

    # Analytics
    'WellnessAnalytics',
    'WaterInsights',

    # Reminders
    'WaterReminderScheduler',
    'ReminderMessage',
    'build_reminder_message',

    # Export
    'export_all_data',
    'export_to_json',
]
