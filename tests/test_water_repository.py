"""
Unit tests for WaterRepository
Tests: snapshot-style logging, today's total vs. per-day sum, deletes
"""
from src.Modules.wellness_module import WaterEntry, WaterRepository


class TestSnapshotLogging:
    """Every save appends a row carrying the running total for the day"""

    def test_three_added_glasses_store_three_snapshots(self, water):
        water.add_glass()
        water.add_glass()
        water.add_glass()

        rows = water.for_date("2024-03-10")
        assert [row.glasses for row in rows] == [1, 2, 3]

    def test_today_reads_last_row_not_sum(self, water):
        for _ in range(3):
            water.add_glass()

        # Last-row semantics for today; the naive sum over the same rows is 6.
        assert water.today_consumption() == 3
        assert water.total_for_date("2024-03-10") == 6

    def test_last_inserted_row_wins_even_if_smaller(self, water):
        water.log(5)
        water.log(2)

        assert water.today_consumption() == 2

    def test_remove_glass_writes_decremented_snapshot(self, water):
        water.add_glass()
        water.add_glass()

        entry = water.remove_glass()

        assert entry.glasses == 1
        assert water.today_consumption() == 1
        assert len(water.for_date("2024-03-10")) == 3

    def test_remove_glass_on_empty_day(self, water):
        assert water.remove_glass() is None
        assert water.all() == []

    def test_new_day_starts_from_zero(self, water, clock):
        water.add_glass()
        water.add_glass()

        clock.advance(days=1)
        entry = water.add_glass()

        assert entry.date == "2024-03-11"
        assert entry.glasses == 1


class TestWaterQueries:
    """Test ordering, filtering and round-trips"""

    def test_round_trip(self, water, store, clock):
        entry = water.log(4, notes="After gym")

        assert WaterRepository(store, clock=clock).all() == [entry]

    def test_all_sorted_desc(self, water):
        water.save(WaterEntry(id="a", date="2024-03-09", time="20:00", glasses=7))
        water.save(WaterEntry(id="b", date="2024-03-10", time="09:00", glasses=1))
        water.save(WaterEntry(id="c", date="2024-03-10", time="07:30", glasses=1))

        assert [e.id for e in water.all()] == ["b", "c", "a"]

    def test_dates(self, water):
        water.save(WaterEntry(id="a", date="2024-03-09", time="20:00", glasses=7))
        water.save(WaterEntry(id="b", date="2024-03-07", time="09:00", glasses=1))
        water.save(WaterEntry(id="c", date="2024-03-09", time="21:00", glasses=8))

        assert water.dates() == ["2024-03-07", "2024-03-09"]

    def test_delete_is_idempotent(self, water):
        entry = water.add_glass()

        assert water.delete(entry.id) is True
        assert water.delete(entry.id) is False
        assert water.today_consumption() == 0
