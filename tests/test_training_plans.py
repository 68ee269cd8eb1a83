"""Tests for the predefined training plan catalog."""

from datetime import date

import pytest

from exceptions import PlanNotFound, UnknownPlanDay, UnsupportedAvailability
from sessions import LoggedExercise, ProgressEntry, SetData
from training_plans import (
    DAYS_TO_PLAN_ID,
    TRAINING_PLANS,
    exercises_from_history,
    find_plan_day,
    new_session_exercises,
    plan_for_availability,
    plans_from_rows,
    plans_to_rows,
)


class TestCatalog:
    """Tests for catalog contents."""

    def test_five_plans(self):
        assert [p.id for p in TRAINING_PLANS] == [
            "upperLower", "pushPullLegs", "upperLower4Days", "fiveDaySplit", "sixDaySplit",
        ]

    def test_day_counts_match_plan(self):
        for days, plan_id in DAYS_TO_PLAN_ID.items():
            plan = plan_for_availability(days)
            assert plan.id == plan_id
            assert len(plan.days) == days

    def test_push_day(self):
        day = find_plan_day("pushPullLegs", "push")
        assert day.name == "Dia de Empurrar (Push)"
        assert day.exercises[0] == LoggedExercise("Supino com Barra", 3, 8)


class TestLookups:
    """Tests for explicit lookup failures."""

    def test_unsupported_availability(self):
        with pytest.raises(UnsupportedAvailability):
            plan_for_availability(7)

    def test_mapped_plan_missing_is_an_error(self):
        others = [p for p in TRAINING_PLANS if p.id != "pushPullLegs"]
        with pytest.raises(PlanNotFound):
            plan_for_availability(3, others)

    def test_unknown_plan(self):
        with pytest.raises(PlanNotFound):
            find_plan_day("nope", "push")

    def test_unknown_day(self):
        with pytest.raises(UnknownPlanDay):
            find_plan_day("pushPullLegs", "upperA")


class TestSessionForms:
    """Tests for building the session log form."""

    def test_new_session_has_zeroed_planned_sets(self):
        day = find_plan_day("sixDaySplit", "legs2")
        exercises = new_session_exercises(day)
        assert [e.name for e in exercises] == ["Levantamento Terra", "Cadeira Extensora", "Mesa Flexora"]
        assert len(exercises[0].logged_sets) == 2
        assert all(s == SetData(0, 0, 0) for e in exercises for s in e.logged_sets)

    def test_history_prefill_copies_sets(self):
        entry = ProgressEntry(
            date(2024, 1, 2), 81.5, "pushPullLegs", "push",
            (LoggedExercise("Supino com Barra", 3, 8, (SetData(80, 8, 1), SetData(85, 6, 0), SetData(85, 5, 0))),),
        )
        prefilled = exercises_from_history(entry)
        assert prefilled == list(entry.logged_exercises)


def test_rows_convert_back_to_catalog():
    assert plans_from_rows(plans_to_rows(TRAINING_PLANS)) == TRAINING_PLANS
