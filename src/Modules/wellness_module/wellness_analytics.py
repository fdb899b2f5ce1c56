"""
Wellness Analytics - statystyki pochodne z repozytoriów

Ten moduł oblicza:
- Procent ukończenia nawyków (dzień / tydzień)
- Ostatni nastrój dnia i tygodniowe podsumowanie nastrojów
- Tygodniowe spożycie wody i serię dni z osiągniętym celem
- Wskaźnik samopoczucia (wellness score) dla dnia i tygodnia

Nothing here is persisted; every value is recomputed from repository reads.
"""
import math
from collections import OrderedDict
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from loguru import logger

from .habit_repository import HabitRepository
from .mood_repository import MoodRepository
from .settings_repository import SettingsRepository
from .water_repository import WaterRepository
from .wellness_models import MoodEntry, MoodLabel
from .wellness_utils import Clock, format_date, percent, trailing_days

WEEK_DAYS = 7
DEFAULT_STREAK_MAX_DAYS = 3650
NO_MOOD = "No mood"

HABIT_WEIGHT = 0.4
WATER_POINTS = 30
MOOD_POINTS_POSITIVE = 30
MOOD_POINTS_NEUTRAL = 20
MOOD_POINTS_OTHER = 10

POSITIVE_MOODS = {
    MoodLabel.HAPPY.value,
    MoodLabel.EXCITED.value,
    MoodLabel.GRATEFUL.value,
    MoodLabel.PEACEFUL.value,
}


def round_half_up(value: float) -> int:
    """
    Zaokrąglenie połówek w górę (round() w Pythonie zaokrągla do parzystej).

    Example:
        >>> round_half_up(62.5)
        63
    """
    return int(math.floor(value + 0.5))


def mood_component(mood: Optional[str]) -> int:
    """Punkty nastroju: 30 pozytywny, 20 neutralny, 10 pozostałe (także brak wpisu)"""
    if mood in POSITIVE_MOODS:
        return MOOD_POINTS_POSITIVE
    if mood == MoodLabel.NEUTRAL.value:
        return MOOD_POINTS_NEUTRAL
    return MOOD_POINTS_OTHER


def water_component(glasses: int, goal: int) -> int:
    """Punkty nawodnienia: 30 po osiągnięciu celu, inaczej proporcjonalnie (floor)"""
    if goal <= 0:
        return 0
    if glasses >= goal:
        return WATER_POINTS
    return math.floor(glasses / goal * WATER_POINTS)


class WellnessAnalytics:
    """
    Silnik agregacji nad repozytoriami nawyków, nastroju i wody.

    Dates are "YYYY-MM-DD" strings; weekly results are ordered dicts covering
    the seven days ending today, oldest first.
    """

    def __init__(
        self,
        habits: HabitRepository,
        moods: MoodRepository,
        water: WaterRepository,
        settings: SettingsRepository,
        clock: Optional[Clock] = None,
        streak_max_days: int = DEFAULT_STREAK_MAX_DAYS,
    ):
        self.habits = habits
        self.moods = moods
        self.water = water
        self.settings = settings
        self.clock = clock or datetime.now
        self.streak_max_days = streak_max_days

    def today(self) -> str:
        return format_date(self.clock().date())

    def _week(self) -> List[str]:
        return trailing_days(self.clock().date(), WEEK_DAYS)

    # =========================================================================
    # HABITS
    # =========================================================================

    def _habit_completion_ratio(self, date: str) -> float:
        day_habits = self.habits.for_date(date)
        completed = sum(1 for habit in day_habits if habit.is_completed)
        return percent(completed, len(day_habits))

    def daily_habit_completion_percent(self, date: str) -> int:
        """ukończone / wszystkie * 100, połówki w górę; 0 gdy brak nawyków"""
        return round_half_up(self._habit_completion_ratio(date))

    def weekly_habit_completion(self) -> Dict[str, int]:
        return OrderedDict(
            (date, self.daily_habit_completion_percent(date)) for date in self._week()
        )

    # =========================================================================
    # MOOD
    # =========================================================================

    def today_latest_mood(self) -> Optional[MoodEntry]:
        return self.moods.latest_for_date(self.today())

    def weekly_mood_stats(self) -> Dict[str, str]:
        """Dzień -> etykieta ostatniego nastroju albo "No mood" """
        stats = OrderedDict()
        for date in self._week():
            latest = self.moods.latest_for_date(date)
            stats[date] = latest.mood if latest else NO_MOOD
        return stats

    # =========================================================================
    # WATER
    # =========================================================================

    def daily_water_total(self, date: str) -> int:
        """
        Spożycie wody w danym dniu.

        Today is read from the latest snapshot row; earlier days are the sum
        of their rows. Existing histories depend on this split, so the two
        readings are not unified.
        """
        if date == self.today():
            return self.water.today_consumption()
        return self.water.total_for_date(date)

    def today_water_consumption(self) -> int:
        return self.water.today_consumption()

    def weekly_water_consumption(self) -> Dict[str, int]:
        return OrderedDict(
            (date, self.daily_water_total(date)) for date in self._week()
        )

    def water_consumption_streak(self) -> int:
        """
        Liczba kolejnych dni (od dziś wstecz) z osiągniętym celem.

        Stops at the first day below goal, today included, and never walks
        more than ``streak_max_days`` days.
        """
        goal = self.settings.get_daily_water_goal()
        day = self.clock().date()
        streak = 0

        while streak < self.streak_max_days:
            if self.daily_water_total(format_date(day)) >= goal:
                streak += 1
                day -= timedelta(days=1)
            else:
                break

        if streak >= self.streak_max_days:
            logger.warning(f"[ANALYTICS] Water streak hit the {self.streak_max_days} day cap")
        return streak

    # =========================================================================
    # WELLNESS SCORE
    # =========================================================================

    def wellness_score_for_date(self, date: str) -> int:
        """
        floor(nawyki% * 0.4) + punkty wody + punkty nastroju.

        The habit term uses the unrounded completion percentage.

        Typically at most 100 (40 + 30 + 30).
        """
        goal = self.settings.get_daily_water_goal()
        habit_score = math.floor(self._habit_completion_ratio(date) * HABIT_WEIGHT)
        water_score = water_component(self.daily_water_total(date), goal)

        latest = self.moods.latest_for_date(date)
        mood_score = mood_component(latest.mood if latest else None)

        return habit_score + water_score + mood_score

    def today_wellness_score(self) -> int:
        return self.wellness_score_for_date(self.today())

    def weekly_wellness_trends(self) -> Dict[str, int]:
        return OrderedDict(
            (date, self.wellness_score_for_date(date)) for date in self._week()
        )
