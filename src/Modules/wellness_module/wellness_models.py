"""
Wellness Models - Modele danych dla nawyków, nastroju i nawodnienia
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


class MoodLabel(Enum):
    """Słownik nastrojów"""
    HAPPY = "Happy"
    EXCITED = "Excited"
    NEUTRAL = "Neutral"
    SAD = "Sad"
    STRESSED = "Stressed"
    GRATEFUL = "Grateful"
    TIRED = "Tired"
    ANGRY = "Angry"
    ANXIOUS = "Anxious"
    PEACEFUL = "Peaceful"

    @property
    def emoji(self) -> str:
        return MOOD_EMOJIS[self]

    @staticmethod
    def from_label(label: str) -> Optional['MoodLabel']:
        """Znajdź etykietę po nazwie (None dla spoza słownika)"""
        for mood in MoodLabel:
            if mood.value == label:
                return mood
        return None


MOOD_EMOJIS = {
    MoodLabel.HAPPY: "😊",
    MoodLabel.EXCITED: "🤩",
    MoodLabel.NEUTRAL: "😐",
    MoodLabel.SAD: "😢",
    MoodLabel.STRESSED: "😰",
    MoodLabel.GRATEFUL: "🙏",
    MoodLabel.TIRED: "😴",
    MoodLabel.ANGRY: "😠",
    MoodLabel.ANXIOUS: "😟",
    MoodLabel.PEACEFUL: "😌",
}


def _require_str(data: dict, key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _str_or_default(data: dict, key: str, default: str) -> str:
    """Missing or empty keys take the default; other types are rejected"""
    value = data.get(key)
    if value is None or value == "":
        return default
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _optional_str(data: dict, key: str) -> Optional[str]:
    """Empty strings on disk mean 'not set'"""
    return _str_or_default(data, key, "") or None


@dataclass
class HabitEntry:
    """Model nawyku"""
    id: str
    text: str
    is_completed: bool = False
    created_at: str = ""  # YYYY-MM-DD, doubles as the day the habit belongs to
    completed_at: Optional[str] = None  # YYYY-MM-DD HH:MM

    def to_dict(self) -> dict:
        """Konwertuj na słownik"""
        return {
            'id': self.id,
            'text': self.text,
            'isCompleted': self.is_completed,
            'createdAt': self.created_at,
            'completedAt': self.completed_at or "",
        }

    @staticmethod
    def from_dict(data: dict) -> 'HabitEntry':
        """Utwórz ze słownika"""
        is_completed = data.get('isCompleted', False)
        if not isinstance(is_completed, bool):
            raise TypeError(f"'isCompleted' must be a boolean, got {type(is_completed).__name__}")

        return HabitEntry(
            id=_require_str(data, 'id'),
            text=_str_or_default(data, 'text', ""),
            is_completed=is_completed,
            created_at=_require_str(data, 'createdAt'),
            completed_at=_optional_str(data, 'completedAt'),
        )


@dataclass
class MoodEntry:
    """Model wpisu nastroju"""
    id: str
    emoji: str
    mood: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM (24h)
    notes: Optional[str] = None

    @property
    def sort_key(self) -> str:
        return f"{self.date} {self.time}"

    def to_dict(self) -> dict:
        """Konwertuj na słownik"""
        return {
            'id': self.id,
            'emoji': self.emoji,
            'mood': self.mood,
            'date': self.date,
            'time': self.time,
            'notes': self.notes or "",
        }

    @staticmethod
    def from_dict(data: dict) -> 'MoodEntry':
        """Utwórz ze słownika"""
        return MoodEntry(
            id=_require_str(data, 'id'),
            emoji=_str_or_default(data, 'emoji', ""),
            mood=_require_str(data, 'mood'),
            date=_require_str(data, 'date'),
            time=_str_or_default(data, 'time', "00:00"),
            notes=_optional_str(data, 'notes'),
        )


@dataclass
class WaterEntry:
    """
    Model wpisu nawodnienia.

    ``glasses`` is the running total for the day at the moment of saving,
    not the number of glasses added by this entry.
    """
    id: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM (24h)
    glasses: int = 0
    notes: Optional[str] = None

    @property
    def sort_key(self) -> str:
        return f"{self.date} {self.time}"

    def to_dict(self) -> dict:
        """Konwertuj na słownik"""
        return {
            'id': self.id,
            'date': self.date,
            'time': self.time,
            'glasses': self.glasses,
            'notes': self.notes or "",
        }

    @staticmethod
    def from_dict(data: dict) -> 'WaterEntry':
        """Utwórz ze słownika"""
        glasses = data.get('glasses', 0)
        if isinstance(glasses, bool) or not isinstance(glasses, int):
            raise TypeError(f"'glasses' must be an integer, got {type(glasses).__name__}")

        return WaterEntry(
            id=_require_str(data, 'id'),
            date=_require_str(data, 'date'),
            time=_str_or_default(data, 'time', "00:00"),
            glasses=glasses,
            notes=_optional_str(data, 'notes'),
        )


@dataclass
class WellnessSettings:
    """Ustawienia aplikacji (singletony klucz-wartość)"""
    daily_water_goal: int = 8
    reminder_interval_minutes: int = 60
    reminders_enabled: bool = False
    app_theme: str = "dark"
    notifications_enabled: bool = True
    first_launch_completed: bool = False

    def to_dict(self) -> dict:
        """Konwertuj na słownik (klucze jak w pliku settings.json)"""
        return {
            'daily_water_goal': self.daily_water_goal,
            'reminder_interval_minutes': self.reminder_interval_minutes,
            'reminders_enabled': self.reminders_enabled,
            'app_theme': self.app_theme,
            'notifications_enabled': self.notifications_enabled,
            'first_launch_completed': self.first_launch_completed,
        }
