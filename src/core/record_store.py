"""
Record Store - trwałe przechowywanie kolekcji rekordów JSON

Each namespace (habits, mood entries, water entries, settings) lives in its
own JSON file inside the data directory. Collections are always read and
written as a whole.

Obsługuje:
- Atomic replace of a collection (temp file + fsync + os.replace)
- Scalar settings bag
- Explicit reset of a corrupt collection
- Single lock shared by the UI thread and the reminder thread
"""
import json
import os
from enum import Enum
from pathlib import Path
from threading import RLock
from typing import Any, Dict, List, Optional

from loguru import logger


NAMESPACE_HABITS = "habits"
NAMESPACE_MOODS = "mood_entries"
NAMESPACE_WATER = "water_entries"
NAMESPACE_SETTINGS = "settings"

COLLECTION_NAMESPACES = (NAMESPACE_HABITS, NAMESPACE_MOODS, NAMESPACE_WATER)
ALL_NAMESPACES = COLLECTION_NAMESPACES + (NAMESPACE_SETTINGS,)


class StoreErrorKind(Enum):
    """Rodzaj błędu magazynu"""
    CORRUPT = "storage_corrupt"
    UNAVAILABLE = "storage_unavailable"


class StorageError(Exception):
    """Base class for record store failures"""

    def __init__(self, message: str, namespace: Optional[str] = None):
        super().__init__(message)
        self.namespace = namespace


class StorageCorruptError(StorageError):
    """Stored blob could not be parsed into the expected record shape"""
    pass


class StorageUnavailableError(StorageError):
    """Underlying storage could not be read or written"""
    pass


class StoreResult:
    """Wrapper dla wyniku operacji magazynu"""

    def __init__(
        self,
        success: bool,
        data: Any = None,
        error: Optional[str] = None,
        error_kind: Optional[StoreErrorKind] = None,
        namespace: Optional[str] = None,
    ):
        self.success = success
        self.data = data
        self.error = error
        self.error_kind = error_kind
        self.namespace = namespace

    @classmethod
    def ok(cls, data: Any = None, namespace: Optional[str] = None) -> 'StoreResult':
        return cls(True, data=data, namespace=namespace)

    @classmethod
    def corrupt(cls, error: str, namespace: Optional[str] = None) -> 'StoreResult':
        return cls(False, error=error, error_kind=StoreErrorKind.CORRUPT, namespace=namespace)

    @classmethod
    def unavailable(cls, error: str, namespace: Optional[str] = None) -> 'StoreResult':
        return cls(False, error=error, error_kind=StoreErrorKind.UNAVAILABLE, namespace=namespace)

    @property
    def is_corrupt(self) -> bool:
        return self.error_kind is StoreErrorKind.CORRUPT

    def unwrap(self) -> Any:
        """
        Zwróć dane albo podnieś wyjątek odpowiadający rodzajowi błędu.

        Raises:
            StorageCorruptError: stored data failed to parse
            StorageUnavailableError: storage could not be accessed
        """
        if self.success:
            return self.data
        if self.error_kind is StoreErrorKind.CORRUPT:
            raise StorageCorruptError(self.error or "Storage corrupt", self.namespace)
        raise StorageUnavailableError(self.error or "Storage unavailable", self.namespace)

    def __repr__(self) -> str:
        if self.success:
            return f"<StoreResult success=True namespace={self.namespace}>"
        return f"<StoreResult success=False kind={self.error_kind.value if self.error_kind else None} error='{self.error}'>"


class RecordStore:
    """
    Magazyn kolekcji rekordów oparty o pliki JSON.

    One instance is created at process start and handed to every repository.
    All file access goes through a single re-entrant lock, and every write
    replaces the target file atomically, so a concurrent reader sees either
    the old or the new collection, never a partial one.
    """

    def __init__(self, data_dir: Path, encoding: str = "utf-8"):
        """
        Inicjalizacja magazynu

        Args:
            data_dir: Katalog z plikami danych
            encoding: Kodowanie plików JSON
        """
        self.data_dir = Path(data_dir)
        self.encoding = encoding
        self._lock = RLock()
        logger.info(f"[STORE] Initialized at {self.data_dir}")

    # =========================================================================
    # PATHS
    # =========================================================================

    def path_for(self, namespace: str) -> Path:
        """Ścieżka pliku dla przestrzeni nazw"""
        if namespace not in ALL_NAMESPACES:
            raise ValueError(f"Unknown namespace: {namespace}")
        return self.data_dir / f"{namespace}.json"

    # =========================================================================
    # LOW LEVEL IO
    # =========================================================================

    def _read_json(self, namespace: str, empty: Any) -> StoreResult:
        path = self.path_for(namespace)
        with self._lock:
            if not path.exists():
                return StoreResult.ok(empty, namespace)
            try:
                with open(path, 'r', encoding=self.encoding) as f:
                    raw = f.read()
            except UnicodeDecodeError as e:
                logger.error(f"[STORE] {namespace} is not valid {self.encoding}: {e}")
                return StoreResult.corrupt(f"Invalid encoding in {namespace}: {e}", namespace)
            except OSError as e:
                logger.error(f"[STORE] Cannot read {path}: {e}")
                return StoreResult.unavailable(f"Cannot read {namespace}: {e}", namespace)

        if not raw.strip():
            return StoreResult.ok(empty, namespace)

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"[STORE] {namespace} is corrupted: {e}")
            return StoreResult.corrupt(f"Invalid JSON in {namespace}: {e}", namespace)

        if not isinstance(data, type(empty)):
            logger.error(
                f"[STORE] {namespace} has unexpected shape: "
                f"expected {type(empty).__name__}, got {type(data).__name__}"
            )
            return StoreResult.corrupt(
                f"{namespace} must be a {type(empty).__name__}, got {type(data).__name__}",
                namespace
            )
        return StoreResult.ok(data, namespace)

    def _write_json(self, namespace: str, data: Any) -> StoreResult:
        path = self.path_for(namespace)
        temp_file = path.with_suffix('.tmp')

        with self._lock:
            try:
                self.data_dir.mkdir(parents=True, exist_ok=True)
                with open(temp_file, 'w', encoding=self.encoding) as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(temp_file, path)
            except (OSError, TypeError, ValueError) as e:
                if temp_file.exists():
                    try:
                        temp_file.unlink()
                    except OSError:
                        logger.warning(f"[STORE] Could not remove temp file {temp_file}")
                logger.error(f"[STORE] Failed to write {namespace}: {e}")
                return StoreResult.unavailable(f"Cannot write {namespace}: {e}", namespace)

        return StoreResult.ok(data, namespace)

    # =========================================================================
    # COLLECTIONS
    # =========================================================================

    def load_collection(self, namespace: str) -> StoreResult:
        """
        Wczytaj całą kolekcję rekordów.

        Args:
            namespace: habits / mood_entries / water_entries

        Returns:
            StoreResult z listą słowników (pusta lista gdy kolekcja nie istnieje)
        """
        if namespace not in COLLECTION_NAMESPACES:
            raise ValueError(f"Not a collection namespace: {namespace}")

        result = self._read_json(namespace, [])
        if not result.success:
            return result

        for index, record in enumerate(result.data):
            if not isinstance(record, dict):
                logger.error(f"[STORE] {namespace}[{index}] is not an object")
                return StoreResult.corrupt(
                    f"{namespace}[{index}] must be an object, got {type(record).__name__}",
                    namespace
                )
        return result

    def save_collection(self, namespace: str, records: List[Dict[str, Any]]) -> StoreResult:
        """
        Zastąp całą kolekcję (zapis synchroniczny i atomowy).

        Args:
            namespace: habits / mood_entries / water_entries
            records: Lista rekordów do zapisania

        Returns:
            StoreResult z zapisaną listą
        """
        if namespace not in COLLECTION_NAMESPACES:
            raise ValueError(f"Not a collection namespace: {namespace}")

        result = self._write_json(namespace, list(records))
        if result.success:
            logger.debug(f"[STORE] Saved {len(records)} records to {namespace}")
        return result

    def reset_collection(self, namespace: str) -> StoreResult:
        """
        Wyczyść kolekcję po zgłoszeniu uszkodzenia.

        The previous file is kept next to the new one as ``<namespace>.corrupt``
        so the data can still be inspected by hand.
        """
        path = self.path_for(namespace)
        empty: Any = {} if namespace == NAMESPACE_SETTINGS else []

        with self._lock:
            if path.exists():
                try:
                    os.replace(path, path.with_suffix('.corrupt'))
                except OSError as e:
                    logger.error(f"[STORE] Cannot move aside {path}: {e}")
                    return StoreResult.unavailable(f"Cannot reset {namespace}: {e}", namespace)
            result = self._write_json(namespace, empty)

        if result.success:
            logger.warning(f"[STORE] {namespace} was reset to an empty collection")
        return result

    # =========================================================================
    # SETTINGS
    # =========================================================================

    def load_settings(self) -> StoreResult:
        """Wczytaj cały worek ustawień (dict)"""
        return self._read_json(NAMESPACE_SETTINGS, {})

    def get_setting(self, key: str, default: Any = None) -> StoreResult:
        """
        Pobierz pojedyncze ustawienie.

        Args:
            key: Klucz ustawienia
            default: Wartość zwracana gdy klucz nie istnieje

        Returns:
            StoreResult z wartością
        """
        result = self.load_settings()
        if not result.success:
            return result
        return StoreResult.ok(result.data.get(key, default), NAMESPACE_SETTINGS)

    def set_setting(self, key: str, value: Any) -> StoreResult:
        """
        Zapisz pojedyncze ustawienie (read-modify-write pod blokadą).

        Returns:
            StoreResult z zapisaną wartością
        """
        with self._lock:
            result = self.load_settings()
            if not result.success:
                return result

            settings = dict(result.data)
            settings[key] = value
            written = self._write_json(NAMESPACE_SETTINGS, settings)

        if not written.success:
            return written
        logger.debug(f"[STORE] Setting {key} = {value!r}")
        return StoreResult.ok(value, NAMESPACE_SETTINGS)

    # =========================================================================
    # LOCKING
    # =========================================================================

    @property
    def lock(self) -> RLock:
        """
        Blokada magazynu.

        Repositories hold it across a load-modify-save cycle so two writers
        cannot interleave.
        """
        return self._lock
