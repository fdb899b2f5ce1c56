"""
Unit tests for water reminders
Tests: message tiers, enable flags, worker lifecycle
"""
import threading

import pytest

from src.core.config import config
from src.core.record_store import NAMESPACE_SETTINGS, NAMESPACE_WATER
from src.Modules.wellness_module import WaterReminderScheduler, build_reminder_message


class FastScheduler(WaterReminderScheduler):
    """Scheduler ticking every 10 ms"""

    @property
    def interval_seconds(self) -> float:
        return 0.01


class TestReminderMessage:

    @pytest.mark.parametrize("current, title", [
        (8, "🎉 Goal Achieved!"),
        (6, "💪 Almost There!"),
        (4, "🚀 Halfway There!"),
        (2, "💧 Keep Going!"),
        (1, "🌱 Every Drop Counts!"),
        (0, "💧 Let's Start!"),
    ])
    def test_tiers(self, current, title):
        assert build_reminder_message(current, 8).title == title

    def test_almost_there_content(self):
        message = build_reminder_message(6, 8)

        assert message.content == "You're at 75%! Just 2 more glasses!"
        assert (message.current_glasses, message.daily_goal) == (6, 8)

    def test_zero_goal(self):
        assert build_reminder_message(3, 0).title == "🌱 Every Drop Counts!"


class TestFireNow:

    def test_disabled_reminders_send_nothing(self, water, settings):
        sent = []
        scheduler = WaterReminderScheduler(water, settings, sent.append)

        assert scheduler.fire_now() is None
        assert sent == []

    def test_disabled_notifications_send_nothing(self, water, settings):
        settings.set_reminders_enabled(True)
        settings.set_notifications_enabled(False)
        sent = []
        scheduler = WaterReminderScheduler(water, settings, sent.append)

        assert scheduler.fire_now() is None
        assert sent == []

    def test_reads_today_progress(self, water, settings):
        settings.set_reminders_enabled(True)
        water.add_glass()
        water.add_glass()
        sent = []
        scheduler = WaterReminderScheduler(water, settings, sent.append)

        message = scheduler.fire_now()

        assert sent == [message]
        assert message.current_glasses == 2
        assert scheduler.fired_count == 1
        assert scheduler.last_fired_at is not None


class TestWorker:

    def test_interval_from_settings(self, water, settings):
        settings.set_reminder_interval(90)
        scheduler = WaterReminderScheduler(water, settings, lambda message: None)

        assert scheduler.interval_seconds == 90 * 60

    def test_start_and_stop(self, water, settings):
        settings.set_reminders_enabled(True)
        fired = threading.Event()
        scheduler = FastScheduler(water, settings, lambda message: fired.set())

        scheduler.start()
        try:
            assert scheduler.is_running()
            assert fired.wait(timeout=5)
        finally:
            scheduler.stop()

        assert not scheduler.is_running()
        assert scheduler.fired_count >= 1

    def test_reschedule_replaces_interval(self, water, settings):
        scheduler = WaterReminderScheduler(water, settings, lambda message: None, interval_minutes=60)
        scheduler.start()
        try:
            scheduler.reschedule(120)
            assert scheduler.is_running()
            assert scheduler.interval_seconds == 120 * 60
        finally:
            scheduler.stop()

    def test_storage_errors_keep_worker_alive(self, water, settings, store):
        settings.set_reminders_enabled(True)
        store.path_for(NAMESPACE_WATER).write_text("not json", encoding="utf-8")
        scheduler = FastScheduler(water, settings, lambda message: None)

        scheduler.start()
        try:
            for _ in range(500):
                if scheduler.error_count >= 2:
                    break
                threading.Event().wait(0.01)
            assert scheduler.is_running()
        finally:
            scheduler.stop()

        assert scheduler.error_count >= 2
        assert scheduler.fired_count == 0


class TestUnreadableSettings:
    """A corrupt settings file never stops the worker"""

    def _corrupt_settings(self, store):
        store.data_dir.mkdir(parents=True, exist_ok=True)
        store.path_for(NAMESPACE_SETTINGS).write_text("[]", encoding="utf-8")

    def test_interval_falls_back_to_default(self, water, settings, store):
        self._corrupt_settings(store)
        scheduler = WaterReminderScheduler(water, settings, lambda message: None)

        assert scheduler.interval_seconds == config.DEFAULT_REMINDER_INTERVAL_MINUTES * 60

    def test_start_with_corrupt_settings(self, water, settings, store):
        self._corrupt_settings(store)
        scheduler = WaterReminderScheduler(water, settings, lambda message: None)

        scheduler.start()
        worker = scheduler._worker_thread
        try:
            assert scheduler.is_running()
            assert worker.is_alive()
        finally:
            scheduler.stop()

        assert not worker.is_alive()
        assert not scheduler.is_running()
