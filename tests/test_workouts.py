"""Tests for split selection."""

import pytest

from exceptions import UnsupportedAvailability
from workouts import EXERCISES, SPLITS, select_split, weekly_sets


class TestSelectSplit:
    """Tests for select_split."""

    def test_three_days_is_push_pull_legs(self):
        plan = select_split(3)
        assert plan.split == ("Push", "Pull", "Legs")
        assert set(plan.exercises) == {"Push", "Pull", "Legs"}
        for day in plan.split:
            assert len(plan.exercises[day]) == 5

    def test_push_day_table(self):
        push = select_split(3).exercises["Push"]
        assert [e.name for e in push] == [
            "Bench Press", "Overhead Press", "Incline Dumbbell Press",
            "Lateral Raises", "Tricep Pushdowns",
        ]
        assert (push[0].sets, push[0].reps, push[0].rir) == (4, "6-8", 1)
        assert push[0].notes == "Control the eccentric phase"
        assert push[1].notes is None

    @pytest.mark.parametrize("days,expected", [
        (2, ("Upper Body", "Lower Body")),
        (4, ("Upper Body", "Lower Body", "Upper Body", "Lower Body")),
        (5, ("Push", "Pull", "Legs", "Upper Body", "Lower Body")),
        (6, ("Push", "Pull", "Legs", "Push", "Pull", "Legs")),
    ])
    def test_split_per_day_count(self, days, expected):
        plan = select_split(days)
        assert plan.split == expected
        assert len(plan.split) == days

    @pytest.mark.parametrize("days", [0, 1, 7, -3, "3", 3.0, None, True])
    def test_unsupported_availability(self, days):
        with pytest.raises(UnsupportedAvailability):
            select_split(days)

    def test_is_deterministic(self):
        assert select_split(3) == select_split(3)
        assert select_split(3).to_dict() == select_split(3).to_dict()

    def test_day_tables_shared_across_day_counts(self):
        assert select_split(3).exercises["Push"] == select_split(6).exercises["Push"]
        assert select_split(2).exercises["Lower Body"] == select_split(5).exercises["Lower Body"]

    def test_every_split_day_has_a_table(self):
        for split in SPLITS.values():
            for day in split:
                assert EXERCISES[day]


class TestWeeklySets:
    """Tests for weekly set totals."""

    def test_three_day_totals(self):
        totals = weekly_sets(select_split(3))
        assert totals["Bench Press"] == 4
        assert totals["Squats"] == 4

    def test_repeated_days_are_counted_twice(self):
        totals = weekly_sets(select_split(6))
        assert totals["Bench Press"] == 8
        assert totals["Hammer Curls"] == 4

    def test_upper_lower_four_days(self):
        totals = weekly_sets(select_split(4))
        assert totals["Bench Press"] == 8
        assert totals["Leg Curls"] == 6
