"""Tests for the progress scorer."""

from dataclasses import replace
from datetime import date

import pytest

from exceptions import InvalidSet, PlanNotFound, UnknownPlanDay
from progress import (
    PersonalBests,
    UserStats,
    achievements,
    apply_session_log,
    best_set,
    calculate_level,
    classify_lift,
    experience_for_level,
    experience_gained,
    level_progress,
    new_personal_bests,
    session_best_lifts,
)
from sessions import LoggedExercise, ProgressEntry, SetData


def single_exercise_session(name, *sets, plan_id="upperLower4Days", plan_day_id="upperA"):
    return ProgressEntry(date(2024, 5, 1), 80.0, plan_id, plan_day_id,
                         (LoggedExercise(name, len(sets), 8, tuple(sets)),))


class TestLevels:
    """Tests for level derivation."""

    @pytest.mark.parametrize("experience,level", [
        (0, 1), (99, 1), (100, 2), (399, 2), (400, 3), (900, 4), (10000, 11),
    ])
    def test_calculate_level(self, experience, level):
        assert calculate_level(experience) == level

    def test_experience_for_level_is_inverse(self):
        for level in range(1, 12):
            assert calculate_level(experience_for_level(level)) == level

    def test_level_is_derived_from_experience(self):
        stats = UserStats(experience=900)
        assert stats.level == 4
        assert replace(stats, experience=400).level == 3

    def test_level_progress(self):
        assert level_progress(UserStats(experience=0)) == 0
        assert level_progress(UserStats(experience=250)) == pytest.approx(0.5)


class TestBestSet:
    """Tests for best set selection."""

    def test_heaviest_set(self):
        assert best_set([SetData(60, 10, 2), SetData(80, 5, 1), SetData(70, 8, 1)]) == SetData(80, 5, 1)

    def test_ties_keep_first(self):
        assert best_set([SetData(80, 5, 1), SetData(80, 6, 0)]) == SetData(80, 5, 1)

    def test_zero_weight_yields_sentinel(self):
        assert best_set([SetData(0, 12, 2)]) == SetData(0, 0, 0)

    def test_empty(self):
        assert best_set([]).weight == 0


class TestClassifyLift:
    """Tests for lift category matching."""

    @pytest.mark.parametrize("name,category", [
        ("Supino Reto", "bench_press"),
        ("SUPINO INCLINADO", "bench_press"),
        ("Agachamento Frontal", "squat"),
        ("Levantamento Terra Romeno", "deadlift"),
        ("Supino e Agachamento", "bench_press"),
        ("Agachamento com Levantamento Terra", "squat"),
        ("Leg Press", None),
        ("Bench Press", None),
    ])
    def test_category(self, name, category):
        assert classify_lift(name) == category


class TestApplySessionLog:
    """Tests for apply_session_log."""

    def test_bench_press_record(self):
        """Bench 90 -> 95 awards 100 base + 50 record XP."""
        prior = UserStats(experience=300, workouts_completed=3,
                          personal_bests=PersonalBests(bench_press=90))
        session = single_exercise_session("Supino Reto", SetData(90, 5, 1), SetData(95, 3, 0))
        updated = apply_session_log(prior, session)
        assert updated.personal_bests.bench_press == 95
        assert updated.experience - prior.experience == 150
        assert updated.workouts_completed == 4
        assert new_personal_bests(prior, updated) == ["bench_press"]
        assert experience_gained(prior, updated) == 150

    def test_no_record_awards_base_only(self, session_factory):
        prior = UserStats(personal_bests=PersonalBests(120, 150, 200))
        updated = apply_session_log(prior, session_factory(bench=100, squat=140, deadlift=180))
        assert updated.experience == 100
        assert updated.personal_bests == prior.personal_bests

    def test_three_records(self, session_factory):
        updated = apply_session_log(UserStats(), session_factory(bench=60, squat=80, deadlift=100))
        assert updated.experience == 250
        assert updated.personal_bests == PersonalBests(60, 80, 100)
        assert updated.level == 2

    def test_equal_weight_is_not_a_record(self):
        prior = UserStats(personal_bests=PersonalBests(bench_press=95))
        updated = apply_session_log(prior, single_exercise_session("Supino Reto", SetData(95, 5, 1)))
        assert updated.experience == 100

    def test_romanian_deadlift_counts_as_deadlift(self):
        session = single_exercise_session("Levantamento Terra Romeno", SetData(110, 8, 2),
                                          plan_id="upperLower", plan_day_id="lower1")
        assert apply_session_log(UserStats(), session).personal_bests.deadlift == 110

    def test_exercise_counts_for_one_category_only(self):
        """A name matching two lifts only updates the first category."""
        session = single_exercise_session("Supino e Agachamento", SetData(100, 5, 1))
        updated = apply_session_log(UserStats(), session)
        assert updated.personal_bests == PersonalBests(bench_press=100)
        assert updated.experience == 150

    def test_zero_weight_sets_score_nothing(self, session_factory):
        updated = apply_session_log(UserStats(), session_factory())
        assert updated.personal_bests == PersonalBests()
        assert updated.experience == 100

    def test_empty_session_still_counts(self):
        session = ProgressEntry(date(2024, 5, 1), 80.0, "pushPullLegs", "legs", ())
        updated = apply_session_log(UserStats(workouts_completed=9), session)
        assert updated.workouts_completed == 10
        assert updated.experience == 100

    def test_monotonic(self, session_factory):
        prior = UserStats(experience=1234, personal_bests=PersonalBests(100, 140, 180))
        for bench, squat, deadlift in [(0, 0, 0), (90, 150, 170), (110, 130, 200)]:
            updated = apply_session_log(prior, session_factory(bench=bench, squat=squat, deadlift=deadlift))
            assert updated.personal_bests.bench_press >= prior.personal_bests.bench_press
            assert updated.personal_bests.squat >= prior.personal_bests.squat
            assert updated.personal_bests.deadlift >= prior.personal_bests.deadlift
            assert updated.experience >= prior.experience + 100

    def test_streak_is_carried_over(self, session_factory):
        updated = apply_session_log(UserStats(streak_days=5), session_factory(bench=50))
        assert updated.streak_days == 5

    def test_prior_is_not_mutated(self, session_factory):
        prior = UserStats()
        apply_session_log(prior, session_factory(bench=50))
        assert prior == UserStats()

    def test_session_best_lifts(self, session_factory):
        bests = session_best_lifts(session_factory(bench=100, squat=0, deadlift=150))
        assert bests == {"bench_press": 100, "squat": 0.0, "deadlift": 150}


class TestSessionValidation:
    """Tests for rejected sessions."""

    def test_unknown_plan(self, session_factory):
        with pytest.raises(PlanNotFound):
            apply_session_log(UserStats(), session_factory(plan_id="missing"))

    def test_unknown_day(self, session_factory):
        with pytest.raises(UnknownPlanDay):
            apply_session_log(UserStats(), session_factory(plan_day_id="push"))

    @pytest.mark.parametrize("bad", [SetData(-1, 5, 1), SetData(50, -2, 1), SetData(50, 5, -1),
                                     SetData(50, 5.5, 1), SetData(50, 5, 0.5)])
    def test_invalid_sets(self, bad):
        with pytest.raises(InvalidSet):
            apply_session_log(UserStats(), single_exercise_session("Supino Reto", bad))


class TestAchievements:
    """Tests for achievement progress."""

    def test_locked_by_default(self):
        assert not any(a.completed for a in achievements(UserStats()))

    def test_completed(self):
        stats = UserStats(workouts_completed=50, streak_days=7,
                          personal_bests=PersonalBests(bench_press=100))
        result = {a.id: a for a in achievements(stats)}
        assert all(a.completed for a in result.values())
        assert result["bench-press"].percent == 100

    def test_partial_progress(self):
        result = {a.id: a for a in achievements(UserStats(workouts_completed=25))}
        assert result["workouts-completed"].percent == 50
        assert not result["workouts-completed"].completed
