"""Snapshot export of every namespace into one JSON document."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from src.core.record_store import COLLECTION_NAMESPACES, RecordStore

from .settings_repository import SettingsRepository
from .wellness_utils import Clock, format_date


def export_all_data(store: RecordStore, clock: Optional[Clock] = None) -> Dict[str, Any]:
    """
    Eksportuje wszystkie dane do słownika.

    Read-only snapshot: ``habits``, ``mood_entries``, ``water_entries``,
    ``settings`` (defaults filled in) and ``export_date``.

    Raises:
        StorageError: when any namespace cannot be read
    """
    now = (clock or datetime.now)()
    data: Dict[str, Any] = {}

    for namespace in COLLECTION_NAMESPACES:
        data[namespace] = store.load_collection(namespace).unwrap()

    data['settings'] = SettingsRepository(store).load().to_dict()
    data['export_date'] = format_date(now.date())

    logger.info(
        f"[EXPORT] Exported {len(data['habits'])} habits, "
        f"{len(data['mood_entries'])} mood entries, {len(data['water_entries'])} water entries"
    )
    return data


def export_to_json(store: RecordStore, target_path: Path, clock: Optional[Clock] = None) -> Path:
    """Zapisz eksport do pliku JSON i zwróć jego ścieżkę"""
    data = export_all_data(store, clock)
    target_path = Path(target_path)
    target_path.parent.mkdir(parents=True, exist_ok=True)

    with open(target_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    logger.info(f"[EXPORT] Written to {target_path}")
    return target_path
