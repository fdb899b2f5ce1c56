"""
Unit tests for WellnessAnalytics
Tests: habit completion, mood rollups, water totals and streak, wellness score
"""
from src.Modules.wellness_module import MoodEntry, WaterEntry, WellnessAnalytics
from src.Modules.wellness_module.wellness_analytics import mood_component, water_component

WEEK = [
    "2024-03-04", "2024-03-05", "2024-03-06", "2024-03-07",
    "2024-03-08", "2024-03-09", "2024-03-10",
]


def seed_water(water, date, *snapshots, time="10:00"):
    for index, glasses in enumerate(snapshots):
        water.save(WaterEntry(id=f"{date}-{index}", date=date, time=time, glasses=glasses))


def seed_mood(moods, date, time, mood):
    moods.save(MoodEntry(id=f"{date}-{time}", emoji="", mood=mood, date=date, time=time))


class TestHabitCompletion:

    def test_no_habits_is_zero(self, analytics):
        assert analytics.daily_habit_completion_percent("2024-03-10") == 0

    def test_rounded_percent(self, analytics, habits):
        first = habits.add("A")
        second = habits.add("B")
        habits.add("C")

        habits.set_completed(first.id, True)
        assert analytics.daily_habit_completion_percent("2024-03-10") == 33

        habits.set_completed(second.id, True)
        assert analytics.daily_habit_completion_percent("2024-03-10") == 67

    def test_halves_round_up(self, analytics, habits):
        eight = [habits.add(f"Habit {i}") for i in range(8)]

        habits.set_completed(eight[0].id, True)
        assert analytics.daily_habit_completion_percent("2024-03-10") == 13

        for habit in eight[1:5]:
            habits.set_completed(habit.id, True)
        assert analytics.daily_habit_completion_percent("2024-03-10") == 63

    def test_weekly_covers_trailing_seven_days(self, analytics, habits, clock):
        clock.set(2024, 3, 4)
        done = habits.add("Monday habit")
        habits.set_completed(done.id, True)
        clock.set(2024, 3, 10)

        weekly = analytics.weekly_habit_completion()

        assert list(weekly) == WEEK
        assert weekly["2024-03-04"] == 100
        assert weekly["2024-03-10"] == 0


class TestMood:

    def test_today_latest_mood(self, analytics, moods):
        seed_mood(moods, "2024-03-10", "08:00", "Tired")
        seed_mood(moods, "2024-03-10", "13:30", "Happy")
        seed_mood(moods, "2024-03-10", "09:15", "Neutral")

        latest = analytics.today_latest_mood()
        assert (latest.time, latest.mood) == ("13:30", "Happy")

    def test_weekly_mood_stats(self, analytics, moods):
        seed_mood(moods, "2024-03-08", "09:00", "Sad")
        seed_mood(moods, "2024-03-08", "20:00", "Peaceful")

        stats = analytics.weekly_mood_stats()

        assert list(stats) == WEEK
        assert stats["2024-03-08"] == "Peaceful"
        assert stats["2024-03-10"] == "No mood"

    def test_mood_component(self):
        assert mood_component("Grateful") == 30
        assert mood_component("Neutral") == 20
        assert mood_component("Anxious") == 10
        assert mood_component(None) == 10


class TestWater:

    def test_today_uses_last_row_past_days_use_sum(self, analytics, water):
        seed_water(water, "2024-03-09", 1, 2, 3)
        for _ in range(3):
            water.add_glass()

        weekly = analytics.weekly_water_consumption()

        assert list(weekly) == WEEK
        assert weekly["2024-03-10"] == 3
        assert weekly["2024-03-09"] == 6
        assert weekly["2024-03-04"] == 0
        assert analytics.today_water_consumption() == 3

    def test_streak_stops_at_first_missed_day(self, analytics, water, settings):
        settings.set_daily_water_goal(8)
        seed_water(water, "2024-03-07", 8)
        seed_water(water, "2024-03-08", 9)
        seed_water(water, "2024-03-09", 5)
        seed_water(water, "2024-03-10", 8)

        # Yesterday missed the goal, so earlier days never count.
        assert analytics.water_consumption_streak() == 1

    def test_streak_counts_consecutive_days(self, analytics, water, settings):
        settings.set_daily_water_goal(8)
        seed_water(water, "2024-03-08", 5)
        seed_water(water, "2024-03-09", 9)
        seed_water(water, "2024-03-10", 8)

        assert analytics.water_consumption_streak() == 2

    def test_streak_zero_when_today_below_goal(self, analytics, water):
        seed_water(water, "2024-03-09", 10)
        seed_water(water, "2024-03-10", 3)

        assert analytics.water_consumption_streak() == 0

    def test_streak_is_capped(self, habits, moods, water, settings, clock):
        # A goal of zero makes every day succeed.
        settings.set_daily_water_goal(0)
        capped = WellnessAnalytics(habits, moods, water, settings, clock=clock, streak_max_days=5)

        assert capped.water_consumption_streak() == 5

    def test_water_component(self):
        assert water_component(4, 8) == 15
        assert water_component(12, 8) == 30
        assert water_component(1, 3) == 10
        assert water_component(5, 0) == 0


class TestWellnessScore:

    def test_score_scenario(self, analytics, habits, water, moods):
        done = habits.add("Walk")
        habits.add("Read")
        habits.set_completed(done.id, True)
        water.log(4)
        seed_mood(moods, "2024-03-10", "09:00", "Neutral")

        # 50% habits -> 20, 4/8 glasses -> 15, Neutral -> 20
        assert analytics.today_wellness_score() == 55

    def test_habit_term_uses_unrounded_percent(self, analytics, habits):
        eight = [habits.add(f"Habit {i}") for i in range(8)]
        for habit in eight[:5]:
            habits.set_completed(habit.id, True)

        # 62.5% -> 25 habit points, no water, no mood -> 10
        assert analytics.today_wellness_score() == 35

    def test_empty_day(self, analytics):
        assert analytics.wellness_score_for_date("2024-03-10") == 10

    def test_perfect_day(self, analytics, habits, water, moods):
        habit = habits.add("Yoga")
        habits.set_completed(habit.id, True)
        water.log(8)
        seed_mood(moods, "2024-03-10", "21:00", "Happy")

        assert analytics.today_wellness_score() == 100

    def test_weekly_trends(self, analytics, water, moods):
        seed_water(water, "2024-03-05", 8)
        seed_mood(moods, "2024-03-05", "10:00", "Excited")

        trends = analytics.weekly_wellness_trends()

        assert list(trends) == WEEK
        assert trends["2024-03-05"] == 60
        assert trends["2024-03-06"] == 10
