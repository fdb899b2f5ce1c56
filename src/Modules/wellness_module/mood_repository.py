"""
Mood Repository - dziennik nastroju
"""
import uuid
from typing import List, Optional

from loguru import logger

from src.core.record_store import NAMESPACE_MOODS

from .base_repository import CollectionRepository
from .wellness_models import MoodEntry, MoodLabel
from .wellness_utils import format_date, format_time


class MoodRepository(CollectionRepository[MoodEntry]):
    """Repozytorium wpisów nastroju (tylko dodawanie i usuwanie)"""

    namespace = NAMESPACE_MOODS
    record_type = MoodEntry
    log_prefix = "[MOOD]"

    def add(self, mood: str, emoji: Optional[str] = None, notes: Optional[str] = None) -> MoodEntry:
        """
        Zapisz nastrój z bieżącą datą i godziną (czas lokalny).

        Args:
            mood: Etykieta nastroju (np. "Happy")
            emoji: Emoji; domyślnie emoji przypisane do etykiety
            notes: Opcjonalna notatka

        Returns:
            Utworzony MoodEntry
        """
        if emoji is None:
            label = MoodLabel.from_label(mood)
            emoji = label.emoji if label else ""

        now = self.now()
        entry = MoodEntry(
            id=str(uuid.uuid4()),
            emoji=emoji,
            mood=mood,
            date=format_date(now.date()),
            time=format_time(now),
            notes=notes or None,
        )
        self._append(entry)
        logger.info(f"{self.log_prefix} Saved mood {entry.mood} at {entry.date} {entry.time}")
        return entry

    def save(self, entry: MoodEntry) -> MoodEntry:
        """Dopisz gotowy wpis (np. przy imporcie)"""
        return self._append(entry)

    def all(self) -> List[MoodEntry]:
        """Wszystkie wpisy, najnowsze pierwsze"""
        return sorted(self._load(), key=lambda entry: entry.sort_key, reverse=True)

    def for_date(self, date: str) -> List[MoodEntry]:
        """Wpisy z danego dnia (dokładne dopasowanie daty)"""
        return [entry for entry in self.all() if entry.date == date]

    def latest_for_date(self, date: str) -> Optional[MoodEntry]:
        """Wpis z najpóźniejszą godziną danego dnia"""
        entries = self.for_date(date)
        if not entries:
            return None
        return max(entries, key=lambda entry: entry.time)
