"""
Read-compute-write operations for one user.

Every function takes the SQLAlchemy session from `get_db()` and an explicit
user id. Writes commit once per call and roll back on failure, so a rejected
call leaves the stored profile, progress and stats untouched.
"""

import logging
import random
from datetime import date

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from db import lock_for_write
from exceptions import ConcurrentUpdate, DuplicateSession, ProfileNotFound
from foods import validate_food_names
from meals import NutritionPlan, compute_nutrition_plan, validate_biometrics, validate_goal
from models import User, ProgressEntry as ProgressEntryModel, UserStats as UserStatsModel, TrainingPlan
from progress import UserStats, apply_session_log, experience_gained, stats_from_row
from sessions import LoggedExercise, ProgressEntry
from training_plans import (
    TRAINING_PLANS,
    PredefinedTrainingPlan,
    plan_for_availability,
    plans_from_rows,
    plans_to_rows,
)
from workouts import WorkoutPlan, select_split, validate_availability

logger = logging.getLogger(__name__)

SUBMIT_ATTEMPTS = 3


# ─── Profile & preferences ───────────────────────────────────────────

def save_profile(db: Session, user_id: str, goal: str, weekly_availability: int,
                 weight_kg: float, height_cm: float) -> User:
    validate_goal(goal)
    validate_biometrics(weight_kg, height_cm)
    validate_availability(weekly_availability)

    user = db.get(User, user_id)
    if not user:
        user = User(id=user_id, preferred_foods=[])
        db.add(user)
    user.goal                = goal
    user.weekly_availability = weekly_availability
    user.weight_kg           = float(weight_kg)
    user.height_cm           = float(height_cm)
    db.commit()
    logger.info("Profile saved for %s (%s, %d days/week)", user_id, goal, weekly_availability)
    return user


def get_profile(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if not user:
        raise ProfileNotFound(f"No profile for user '{user_id}'. Complete onboarding first.",
                              {"user_id": user_id})
    return user


def save_food_preferences(db: Session, user_id: str, names) -> tuple[str, ...]:
    selected = validate_food_names(names)
    user = get_profile(db, user_id)
    user.preferred_foods = list(selected)
    db.commit()
    logger.info("Food preferences for %s: %s", user_id, ", ".join(selected) or "any")
    return selected


def toggle_food_preference(db: Session, user_id: str, name: str) -> tuple[str, ...]:
    validate_food_names([name])
    current = list(get_profile(db, user_id).preferred_foods or [])
    if name in current:
        current.remove(name)
    else:
        current.append(name)
    return save_food_preferences(db, user_id, current)


# ─── Plans ───────────────────────────────────────────────────────────

def nutrition_plan_for(db: Session, user_id: str, rng: random.Random | None = None) -> NutritionPlan:
    user = get_profile(db, user_id)
    return compute_nutrition_plan(user.weight_kg, user.height_cm, user.goal,
                                  user.preferred_foods or (), rng)


def workout_plan_for(db: Session, user_id: str) -> WorkoutPlan:
    return select_split(get_profile(db, user_id).weekly_availability)


def seed_training_plans(db: Session) -> int:
    """Insert the predefined plans in one batch when the table is empty."""
    if db.query(TrainingPlan).first():
        return 0
    rows = plans_to_rows(TRAINING_PLANS)
    db.add_all([TrainingPlan(**row) for row in rows])
    db.commit()
    logger.info("Seeded %d predefined training plans.", len(rows))
    return len(rows)


def load_training_plans(db: Session) -> tuple[PredefinedTrainingPlan, ...]:
    rows = db.query(TrainingPlan).order_by(TrainingPlan.id).all()
    return plans_from_rows(
        {'id': r.id, 'name': r.name, 'description': r.description, 'days': r.days} for r in rows
    )


def training_plan_for(db: Session, user_id: str) -> PredefinedTrainingPlan:
    user = get_profile(db, user_id)
    return plan_for_availability(user.weekly_availability, load_training_plans(db))


# ─── Progress ────────────────────────────────────────────────────────

def get_stats(db: Session, user_id: str) -> UserStats:
    return stats_from_row(db.get(UserStatsModel, user_id))


def entry_from_row(row: ProgressEntryModel) -> ProgressEntry:
    return ProgressEntry(
        date=row.date,
        body_weight=row.body_weight,
        plan_id=row.plan_id,
        plan_day_id=row.plan_day_id,
        logged_exercises=tuple(LoggedExercise.from_dict(e) for e in row.logged_exercises or []),
    )


def list_progress(db: Session, user_id: str) -> list[ProgressEntry]:
    rows = (
        db.query(ProgressEntryModel)
          .filter(ProgressEntryModel.user_id == user_id)
          .order_by(ProgressEntryModel.date.desc())
          .all()
    )
    return [entry_from_row(r) for r in rows]


def get_progress(db: Session, user_id: str, day: date) -> ProgressEntry | None:
    row = (
        db.query(ProgressEntryModel)
          .filter(ProgressEntryModel.user_id == user_id, ProgressEntryModel.date == day)
          .first()
    )
    return entry_from_row(row) if row else None


def _store_and_score(db: Session, user_id: str, entry: ProgressEntry, replace: bool):
    lock_for_write(db)
    get_profile(db, user_id)
    stats_row = (
        db.query(UserStatsModel)
          .filter(UserStatsModel.user_id == user_id)
          .with_for_update()
          .first()
    )
    existing = (
        db.query(ProgressEntryModel)
          .filter(ProgressEntryModel.user_id == user_id, ProgressEntryModel.date == entry.date)
          .first()
    )
    if existing and not replace:
        logger.warning("Session for %s on %s already logged", user_id, entry.date)
        raise DuplicateSession(f"A session is already logged for {entry.date.isoformat()}.",
                               {"user_id": user_id, "date": entry.date.isoformat()})

    prior = stats_from_row(stats_row)
    updated = apply_session_log(prior, entry, load_training_plans(db))

    if existing:
        row = existing
    else:
        row = ProgressEntryModel(user_id=user_id, date=entry.date)
        db.add(row)
    row.body_weight      = float(entry.body_weight)
    row.plan_id          = entry.plan_id
    row.plan_day_id      = entry.plan_day_id
    row.logged_exercises = entry.exercises_to_json()

    if not stats_row:
        stats_row = UserStatsModel(user_id=user_id)
        db.add(stats_row)
    stats_row.experience         = updated.experience
    stats_row.level              = updated.level
    stats_row.workouts_completed = updated.workouts_completed
    stats_row.streak_days        = updated.streak_days
    stats_row.bench_press        = updated.personal_bests.bench_press
    stats_row.squat              = updated.personal_bests.squat
    stats_row.deadlift           = updated.personal_bests.deadlift

    db.commit()
    return prior, updated


def submit_session(db: Session, user_id: str, entry: ProgressEntry, replace: bool = False) -> UserStats:
    """
    Store a session and score it in a single transaction.

    A date that already has an entry is rejected unless `replace` is set, in
    which case the stored entry is overwritten and the session is scored again.
    A write that loses a race on the user's stats is retried from a fresh read,
    so the retry also sees an entry a concurrent call stored for the same date.
    """
    for attempt in range(1, SUBMIT_ATTEMPTS + 1):
        try:
            prior, updated = _store_and_score(db, user_id, entry, replace)
        except (IntegrityError, StaleDataError) as e:
            db.rollback()
            if attempt == SUBMIT_ATTEMPTS:
                logger.error("Giving up on session for %s on %s after %d attempts",
                             user_id, entry.date, attempt)
                raise ConcurrentUpdate(f"Could not save the session for {entry.date.isoformat()}, "
                                       "please try again.",
                                       {"user_id": user_id, "date": entry.date.isoformat()}) from e
            logger.warning("Concurrent write for %s on %s, retrying (%d/%d)",
                           user_id, entry.date, attempt, SUBMIT_ATTEMPTS)
            continue
        except Exception:
            db.rollback()
            raise

        logger.info("Session %s stored for %s: +%d XP (level %d)",
                    entry.date, user_id, experience_gained(prior, updated), updated.level)
        return updated
