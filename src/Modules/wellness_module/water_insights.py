"""
Water Insights - podpowiedzi i podsumowania nawodnienia
"""
from typing import List

from .settings_repository import SettingsRepository
from .water_repository import WaterRepository
from .wellness_analytics import WellnessAnalytics


class WaterInsights:
    """Wskazówki dla przypomnień na podstawie historii picia wody"""

    def __init__(self, water: WaterRepository, settings: SettingsRepository, analytics: WellnessAnalytics):
        self.water = water
        self.settings = settings
        self.analytics = analytics

    def average_daily_consumption(self) -> int:
        """Suma wszystkich wpisów / liczba różnych dni (dzielenie całkowite)"""
        entries = self.water.all()
        if not entries:
            return 0
        days = {entry.date for entry in entries}
        return sum(entry.glasses for entry in entries) // len(days)

    def total_water_consumed(self) -> int:
        return sum(entry.glasses for entry in self.water.all())

    def goals_achieved(self) -> int:
        """Liczba dni, w których osiągnięto dzienny cel"""
        goal = self.settings.get_daily_water_goal()
        return sum(
            1 for date in self.water.dates()
            if self.analytics.daily_water_total(date) >= goal
        )

    def smart_reminder_suggestions(self) -> List[str]:
        average = self.average_daily_consumption()
        goal = self.settings.get_daily_water_goal()

        if average < goal * 0.5:
            return [
                "Start your day with a glass of water",
                "Set reminders every 2 hours",
                "Keep a water bottle nearby",
            ]
        if average < goal * 0.75:
            return [
                "You're making good progress!",
                "Try drinking water before meals",
                "Set reminders every 3 hours",
            ]
        if average >= goal:
            return [
                "Excellent hydration habits!",
                "Consider reducing reminder frequency",
                "You might only need morning reminders",
            ]
        return [
            "You're almost at your goal!",
            "Try drinking water with snacks",
            "Set reminders every 4 hours",
        ]

    def optimal_reminder_interval(self) -> int:
        """Sugerowany interwał przypomnień w minutach"""
        average = self.average_daily_consumption()
        goal = self.settings.get_daily_water_goal()

        if average < goal * 0.5:
            return 90
        if average < goal * 0.75:
            return 120
        if average >= goal:
            return 240
        return 150

    def needs_more_frequent_reminders(self) -> bool:
        return self.average_daily_consumption() < self.settings.get_daily_water_goal() * 0.6
