"""
Unit tests for data export
"""
import json

import pytest

from src.core.record_store import NAMESPACE_MOODS, StorageCorruptError
from src.Modules.wellness_module import export_all_data, export_to_json


class TestExportAllData:

    def test_empty_store(self, store, clock):
        data = export_all_data(store, clock)

        assert data["habits"] == []
        assert data["mood_entries"] == []
        assert data["water_entries"] == []
        assert data["settings"]["daily_water_goal"] == 8
        assert data["export_date"] == "2024-03-10"

    def test_snapshot_contents(self, store, clock, habits, moods, water, settings):
        habits.add("Floss")
        moods.add("Happy")
        water.add_glass()
        water.add_glass()
        settings.set_app_theme("light")

        data = export_all_data(store, clock)

        assert data["habits"][0]["text"] == "Floss"
        assert data["mood_entries"][0]["emoji"] == "😊"
        assert [row["glasses"] for row in data["water_entries"]] == [1, 2]
        assert data["settings"]["app_theme"] == "light"
        assert data["settings"]["reminders_enabled"] is False

    def test_corrupt_namespace_fails_export(self, store, clock, moods):
        moods.add("Sad")
        store.path_for(NAMESPACE_MOODS).write_text("{", encoding="utf-8")

        with pytest.raises(StorageCorruptError):
            export_all_data(store, clock)


class TestExportToJson:

    def test_writes_file(self, store, clock, habits, tmp_path):
        habits.add("Sleep by 23:00")
        target = tmp_path / "exports" / "wellness.json"

        written = export_to_json(store, target, clock)

        assert written == target
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["habits"][0]["text"] == "Sleep by 23:00"
        assert set(data) == {"habits", "mood_entries", "water_entries", "settings", "export_date"}
