"""
Habit Repository - zarządzanie listą nawyków dnia
"""
import uuid
from dataclasses import replace
from typing import List

from loguru import logger

from src.core.record_store import NAMESPACE_HABITS

from .base_repository import CollectionRepository
from .wellness_models import HabitEntry
from .wellness_utils import format_date, format_timestamp


class HabitRepository(CollectionRepository[HabitEntry]):
    """Repozytorium nawyków (jedyny typ rekordu edytowalny w miejscu)"""

    namespace = NAMESPACE_HABITS
    record_type = HabitEntry
    log_prefix = "[HABITS]"

    def add(self, text: str) -> HabitEntry:
        """
        Dodaj nowy nawyk na dziś.

        Args:
            text: Nazwa nawyku wpisana przez użytkownika

        Returns:
            Utworzony HabitEntry
        """
        habit = HabitEntry(
            id=str(uuid.uuid4()),
            text=text,
            is_completed=False,
            created_at=format_date(self.now().date()),
        )
        self._append(habit)
        logger.info(f"{self.log_prefix} Added habit {habit.id}: {text}")
        return habit

    def update(self, habit: HabitEntry) -> bool:
        """
        Zastąp pierwszy rekord o tym samym ID.

        Unknown ids are a silent no-op, so a toggle that races a delete
        does not fail.

        Returns:
            True jeśli rekord został zastąpiony
        """
        with self.store.lock:
            habits = self._load()
            for index, existing in enumerate(habits):
                if existing.id == habit.id:
                    habits[index] = habit
                    self._save(habits)
                    logger.debug(f"{self.log_prefix} Updated habit {habit.id}")
                    return True

        logger.debug(f"{self.log_prefix} Update skipped, id not found: {habit.id}")
        return False

    def set_completed(self, habit_id: str, completed: bool) -> bool:
        """
        Przełącz stan ukończenia nawyku.

        Sets ``completed_at`` to now when completing and clears it otherwise.
        """
        with self.store.lock:
            habit = self.get(habit_id)
            if habit is None:
                logger.debug(f"{self.log_prefix} Toggle skipped, id not found: {habit_id}")
                return False

            updated = replace(
                habit,
                is_completed=completed,
                completed_at=format_timestamp(self.now()) if completed else None,
            )
            return self.update(updated)

    def rename(self, habit_id: str, text: str) -> bool:
        """Zmień tekst nawyku"""
        with self.store.lock:
            habit = self.get(habit_id)
            if habit is None:
                return False
            return self.update(replace(habit, text=text))

    def all(self) -> List[HabitEntry]:
        """Wszystkie nawyki, najnowsze pierwsze"""
        return sorted(self._load(), key=lambda habit: habit.created_at, reverse=True)

    def for_date(self, date: str) -> List[HabitEntry]:
        """Nawyki utworzone w danym dniu (dopasowanie prefiksu)"""
        return [habit for habit in self.all() if habit.created_at.startswith(date)]
