"""
Water Reminder - przypomnienia o piciu wody w tle.

Ten moduł obsługuje:
- Background worker odpalany co ``reminder_interval_minutes``
- Treść powiadomienia zależną od postępu dnia
- Zmianę interwału (cancel + start)

The worker only reads from the store. It pulls today's consumption and the
daily goal on every tick; nothing is pushed to it.
"""
from dataclasses import dataclass
from datetime import datetime
from threading import Event, Lock, Thread
from typing import Callable, Optional

from loguru import logger

from src.core.config import config
from src.core.record_store import StorageError

from .settings_repository import SettingsRepository
from .water_repository import WaterRepository
from .wellness_utils import percent


@dataclass(frozen=True)
class ReminderMessage:
    """Treść powiadomienia"""
    title: str
    content: str
    current_glasses: int
    daily_goal: int


def build_reminder_message(current_glasses: int, daily_goal: int) -> ReminderMessage:
    """
    Dobierz tytuł i treść powiadomienia do postępu dnia.

    Args:
        current_glasses: Dzisiejsza suma szklanek
        daily_goal: Dzienny cel (<= 0 traktowany jak 0% postępu)

    Returns:
        ReminderMessage
    """
    progress = percent(current_glasses, daily_goal)

    if progress >= 100:
        title, content = "🎉 Goal Achieved!", "Amazing! You've reached your daily hydration goal!"
    elif progress >= 75:
        title = "💪 Almost There!"
        content = f"You're at {int(progress)}%! Just {daily_goal - current_glasses} more glasses!"
    elif progress >= 50:
        title = "🚀 Halfway There!"
        content = f"Great progress! {current_glasses}/{daily_goal} glasses completed"
    elif progress >= 25:
        title, content = "💧 Keep Going!", "Good start! Time for another glass of water"
    elif current_glasses > 0:
        title = "🌱 Every Drop Counts!"
        content = f"You've had {current_glasses} glasses. Let's add one more!"
    else:
        title, content = "💧 Let's Start!", "Time to begin your hydration journey with a glass of water"

    return ReminderMessage(title, content, current_glasses, daily_goal)


class WaterReminderScheduler:
    """
    Menedżer przypomnień o wodzie.

    Uruchamia background worker, który co interwał:
    - Sprawdza czy przypomnienia i powiadomienia są włączone
    - Odczytuje dzisiejsze spożycie i cel
    - Przekazuje ReminderMessage do callbacku ``on_reminder``
    """

    def __init__(
        self,
        water: WaterRepository,
        settings: SettingsRepository,
        on_reminder: Callable[[ReminderMessage], None],
        interval_minutes: Optional[int] = None,
    ):
        """
        Inicjalizacja schedulera.

        Args:
            water: Repozytorium wody (tylko odczyt)
            settings: Repozytorium ustawień (tylko odczyt)
            on_reminder: Callback wywoływany w wątku workera
            interval_minutes: Interwał; domyślnie z ustawień
        """
        self.water = water
        self.settings = settings
        self.on_reminder = on_reminder
        self.interval_minutes = interval_minutes

        # Threading
        self._worker_thread: Optional[Thread] = None
        self._stop_event = Event()
        self._lock = Lock()
        self._is_running = False

        # Stats
        self.last_fired_at: Optional[datetime] = None
        self.fired_count = 0
        self.error_count = 0

    # =========================================================================
    # WORKER CONTROL
    # =========================================================================

    @property
    def interval_seconds(self) -> float:
        """
        Interwał w sekundach.

        Falls back to the configured default when the settings cannot be read.
        """
        minutes = self.interval_minutes
        if minutes is None:
            try:
                minutes = self.settings.get_reminder_interval()
            except StorageError as e:
                logger.error(f"[REMINDER] Cannot read reminder interval, using default: {e}")
                minutes = config.DEFAULT_REMINDER_INTERVAL_MINUTES
        return max(minutes, 1) * 60

    def start(self):
        """Uruchom background worker"""
        if self._is_running:
            logger.warning("[REMINDER] Reminder worker is already running")
            return

        # One event per run; a worker stopped with wait=False keeps its own
        self._stop_event = Event()
        self._worker_thread = Thread(
            target=self._worker_loop, args=(self._stop_event,), daemon=True, name="WaterReminderWorker"
        )
        self._worker_thread.start()
        self._is_running = True
        logger.info(f"[REMINDER] Reminder worker started (interval={self.interval_seconds / 60:.0f} min)")

    def stop(self, wait: bool = True, timeout: float = 5.0):
        """
        Zatrzymaj background worker.

        Args:
            wait: Czy czekać na zakończenie wątku
            timeout: Timeout w sekundach dla join()
        """
        if not self._is_running:
            logger.debug("[REMINDER] Reminder worker is not running")
            return

        self._stop_event.set()
        self._is_running = False

        if wait and self._worker_thread:
            self._worker_thread.join(timeout=timeout)
            if self._worker_thread.is_alive():
                logger.warning("[REMINDER] Reminder worker did not stop within timeout")
            else:
                logger.info("[REMINDER] Reminder worker stopped")

    def is_running(self) -> bool:
        return self._is_running

    def reschedule(self, interval_minutes: int):
        """Zastąp harmonogram nowym interwałem"""
        self.stop()
        self.interval_minutes = interval_minutes
        self.start()

    # =========================================================================
    # WORKER LOOP
    # =========================================================================

    def _worker_loop(self, stop_event: Event):
        logger.debug("[REMINDER] Worker loop started")

        while not stop_event.wait(timeout=self.interval_seconds):
            try:
                self.fire_now()
            except StorageError as e:
                logger.error(f"[REMINDER] Cannot read hydration progress: {e}")
                self.error_count += 1

        logger.debug("[REMINDER] Worker loop exited")

    def fire_now(self) -> Optional[ReminderMessage]:
        """
        Jedno przypomnienie, synchronicznie.

        Returns:
            Wysłana wiadomość albo None gdy przypomnienia są wyłączone
        """
        with self._lock:
            if not self.settings.are_reminders_enabled():
                logger.debug("[REMINDER] Reminders disabled, skipping")
                return None
            if not self.settings.are_notifications_enabled():
                logger.debug("[REMINDER] Notifications disabled, skipping")
                return None

            message = build_reminder_message(
                self.water.today_consumption(),
                self.settings.get_daily_water_goal(),
            )
            self.on_reminder(message)
            self.last_fired_at = datetime.now()
            self.fired_count += 1

        logger.info(f"[REMINDER] Sent reminder: {message.title}")
        return message
