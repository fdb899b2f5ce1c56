"""
Base Repository - wspólna logika widoków typowanych nad RecordStore
"""
from datetime import datetime
from typing import Callable, Generic, List, Optional, Type, TypeVar

from loguru import logger

from src.core.record_store import RecordStore, StorageCorruptError

from .wellness_utils import Clock

T = TypeVar('T')


class CollectionRepository(Generic[T]):
    """
    Typowany widok jednej kolekcji magazynu.

    Every operation is a full read-modify-write of the collection: load the
    raw records, decode them, change the list, encode and save it back.
    Store failures are raised as StorageError subclasses.
    """

    namespace: str = ""
    record_type: Type = dict
    log_prefix: str = "[REPO]"

    def __init__(self, store: RecordStore, clock: Optional[Clock] = None):
        """
        Args:
            store: Wspólny magazyn rekordów
            clock: Źródło bieżącego czasu lokalnego (domyślnie datetime.now)
        """
        self.store = store
        self.clock: Callable[[], datetime] = clock or datetime.now

    def now(self) -> datetime:
        return self.clock()

    # =========================================================================
    # LOAD / SAVE
    # =========================================================================

    def _load(self) -> List[T]:
        """Wczytaj kolekcję w kolejności zapisu"""
        raw_records = self.store.load_collection(self.namespace).unwrap()

        records = []
        for index, raw in enumerate(raw_records):
            try:
                records.append(self.record_type.from_dict(raw))
            except (KeyError, TypeError, ValueError) as e:
                logger.error(f"{self.log_prefix} Corrupt record {index} in {self.namespace}: {e}")
                raise StorageCorruptError(
                    f"Record {index} in {self.namespace} is malformed: {e}",
                    self.namespace
                ) from e
        return records

    def _save(self, records: List[T]) -> None:
        self.store.save_collection(
            self.namespace,
            [record.to_dict() for record in records]
        ).unwrap()

    def _append(self, record: T) -> T:
        with self.store.lock:
            records = self._load()
            records.append(record)
            self._save(records)
        return record

    # =========================================================================
    # COMMON OPERATIONS
    # =========================================================================

    def delete(self, record_id: str) -> bool:
        """
        Usuń rekord po ID.

        Returns:
            True jeśli rekord istniał; brak rekordu to no-op (False)
        """
        with self.store.lock:
            records = self._load()
            remaining = [record for record in records if record.id != record_id]
            if len(remaining) == len(records):
                logger.debug(f"{self.log_prefix} Delete skipped, id not found: {record_id}")
                return False
            self._save(remaining)

        logger.info(f"{self.log_prefix} Deleted {record_id}")
        return True

    def get(self, record_id: str) -> Optional[T]:
        """Pierwszy rekord o danym ID (skan liniowy)"""
        for record in self._load():
            if record.id == record_id:
                return record
        return None

    def count(self) -> int:
        return len(self._load())
