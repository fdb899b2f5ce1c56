"""
Wellness Utility Functions
==========================
Helper functions dla modułu Wellness.

FORMATY:
- data: "YYYY-MM-DD" (sortowalna leksykograficznie)
- godzina: "HH:MM" (24h, z zerami wiodącymi)
- znacznik ukończenia nawyku: "YYYY-MM-DD HH:MM"
"""

from datetime import date, datetime, timedelta
from typing import Callable, List, Optional

from .wellness_models import DATE_FORMAT, TIME_FORMAT, TIMESTAMP_FORMAT

Clock = Callable[[], datetime]


def format_date(value: date) -> str:
    """
    Formatuj datę do "YYYY-MM-DD".

    Example:
        >>> format_date(date(2024, 3, 7))
        '2024-03-07'
    """
    return value.strftime(DATE_FORMAT)


def format_time(value: datetime) -> str:
    """
    Formatuj godzinę do "HH:MM".

    Example:
        >>> format_time(datetime(2024, 3, 7, 8, 5))
        '08:05'
    """
    return value.strftime(TIME_FORMAT)


def format_timestamp(value: datetime) -> str:
    """
    Formatuj znacznik czasu do "YYYY-MM-DD HH:MM".

    Example:
        >>> format_timestamp(datetime(2024, 3, 7, 21, 30))
        '2024-03-07 21:30'
    """
    return value.strftime(TIMESTAMP_FORMAT)


def parse_date(value: str) -> date:
    """
    Parsuj "YYYY-MM-DD" do obiektu date.

    Raises:
        ValueError: Jeśli format jest nieprawidłowy
    """
    return datetime.strptime(value, DATE_FORMAT).date()


def today_str(clock: Optional[Clock] = None) -> str:
    """Dzisiejsza data lokalna jako "YYYY-MM-DD" """
    now = (clock or datetime.now)()
    return format_date(now.date())


def trailing_days(today: date, days: int = 7) -> List[str]:
    """
    Ostatnie ``days`` dni kończące się dziś (włącznie), od najstarszego.

    Example:
        >>> trailing_days(date(2024, 3, 7), 3)
        ['2024-03-05', '2024-03-06', '2024-03-07']
    """
    return [format_date(today - timedelta(days=offset)) for offset in range(days - 1, -1, -1)]


def percent(part: float, whole: float) -> float:
    """
    Procent ``part`` z ``whole``; 0.0 gdy ``whole`` nie jest dodatnie.

    Example:
        >>> percent(3, 4)
        75.0
        >>> percent(1, 0)
        0.0
    """
    if whole <= 0:
        return 0.0
    return part / whole * 100
