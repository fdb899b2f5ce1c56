"""
Water Repository - dziennik nawodnienia

Each save appends a new WaterEntry whose ``glasses`` is the running total
for the day at that moment. Today's consumption is therefore read from the
last row inserted today, while totals for any date are the sum over that
day's rows. Both readings are exposed; the analytics layer decides which one
applies to which day.
"""
import uuid
from typing import List, Optional

from loguru import logger

from src.core.record_store import NAMESPACE_WATER

from .base_repository import CollectionRepository
from .wellness_models import WaterEntry
from .wellness_utils import format_date, format_time


class WaterRepository(CollectionRepository[WaterEntry]):
    """Repozytorium wpisów nawodnienia"""

    namespace = NAMESPACE_WATER
    record_type = WaterEntry
    log_prefix = "[WATER]"

    # =========================================================================
    # WRITES
    # =========================================================================

    def log(self, glasses: int, notes: Optional[str] = None) -> WaterEntry:
        """
        Zapisz nowy wpis-migawkę z bieżącą sumą szklanek.

        Args:
            glasses: Suma szklanek wypitych dziś do tej chwili
            notes: Opcjonalna notatka

        Returns:
            Utworzony WaterEntry
        """
        now = self.now()
        entry = WaterEntry(
            id=str(uuid.uuid4()),
            date=format_date(now.date()),
            time=format_time(now),
            glasses=glasses,
            notes=notes or None,
        )
        self._append(entry)
        logger.info(f"{self.log_prefix} Logged {glasses} glasses at {entry.date} {entry.time}")
        return entry

    def add_glass(self) -> WaterEntry:
        """Dodaj szklankę: nowy wpis z dzisiejszą sumą + 1"""
        with self.store.lock:
            return self.log(self.today_consumption() + 1)

    def remove_glass(self) -> Optional[WaterEntry]:
        """
        Usuń szklankę: nowy wpis z dzisiejszą sumą - 1.

        Returns:
            Nowy wpis albo None gdy dziś nie ma czego odejmować
        """
        with self.store.lock:
            current = self.today_consumption()
            if current <= 0:
                logger.debug(f"{self.log_prefix} No glasses to remove")
                return None
            return self.log(current - 1)

    def save(self, entry: WaterEntry) -> WaterEntry:
        """Dopisz gotowy wpis (np. przy imporcie)"""
        return self._append(entry)

    # =========================================================================
    # QUERIES
    # =========================================================================

    def all(self) -> List[WaterEntry]:
        """Wszystkie wpisy, najnowsze pierwsze"""
        return sorted(self._load(), key=lambda entry: entry.sort_key, reverse=True)

    def for_date(self, date: str) -> List[WaterEntry]:
        """Wpisy z danego dnia w kolejności zapisu"""
        return [entry for entry in self._load() if entry.date == date]

    def latest_snapshot(self, date: str) -> int:
        """Wartość ``glasses`` ostatnio dopisanego wpisu z danego dnia (0 gdy brak)"""
        entries = self.for_date(date)
        return entries[-1].glasses if entries else 0

    def today_consumption(self) -> int:
        """Dzisiejsza suma = migawka z ostatniego dzisiejszego wpisu"""
        return self.latest_snapshot(format_date(self.now().date()))

    def total_for_date(self, date: str) -> int:
        """Suma ``glasses`` po wszystkich wpisach danego dnia"""
        return sum(entry.glasses for entry in self.for_date(date))

    def dates(self) -> List[str]:
        """Daty, dla których istnieją wpisy (bez powtórzeń, rosnąco)"""
        return sorted({entry.date for entry in self._load()})
