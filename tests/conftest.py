"""Shared fixtures. The database URL must be set before `db` is imported."""

import os
import tempfile
from datetime import date

import pytest

_tmpdir = tempfile.mkdtemp(prefix="fitness-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmpdir, 'test.db')}"

from sessions import LoggedExercise, ProgressEntry, SetData  # noqa: E402


@pytest.fixture
def session():
    """A session on a freshly created schema."""
    from db import Base, SessionLocal, engine, init_db

    init_db()
    s = SessionLocal()
    yield s
    s.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seeded_session(session):
    """Schema with the predefined training plans seeded."""
    import tracker

    tracker.seed_training_plans(session)
    return session


@pytest.fixture
def profile(seeded_session):
    """A 4-day-a-week cutting profile for user 'u1'."""
    import tracker

    return tracker.save_profile(seeded_session, "u1", "cutting", 4, 80, 180)


def make_session(day=date(2024, 5, 1), bench=0.0, squat=0.0, deadlift=0.0,
                 plan_id="upperLower4Days", plan_day_id="upperA", body_weight=80.0):
    """A session logging one top set per lift category."""
    return ProgressEntry(
        date=day,
        body_weight=body_weight,
        plan_id=plan_id,
        plan_day_id=plan_day_id,
        logged_exercises=(
            LoggedExercise("Supino Reto", 4, 6, (SetData(bench * 0.9, 6, 2), SetData(bench, 5, 1))),
            LoggedExercise("Agachamento Frontal", 4, 6, (SetData(squat, 6, 1),)),
            LoggedExercise("Levantamento Terra", 3, 5, (SetData(deadlift, 5, 1),)),
            LoggedExercise("Remada Curvada", 4, 6, (SetData(60, 8, 2),)),
        ),
    )


@pytest.fixture
def session_factory():
    return make_session
