"""
Experience, levels and personal bests from logged sessions.

`apply_session_log` is pure: it takes the stored stats and a new session
and returns the stats to store. Reading and writing them is the tracker's job.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional

from exceptions import InvalidSet
from sessions import ProgressEntry, SetData
from training_plans import TRAINING_PLANS, PredefinedTrainingPlan, find_plan_day

logger = logging.getLogger(__name__)

BASE_SESSION_XP = 100
PERSONAL_BEST_XP = 50

# Checked in order as lowercase substrings of the exercise name, first match
# wins. Tied to the Portuguese names of the plan catalog.
LIFT_CATEGORIES = (
    ('bench_press', 'supino'),
    ('squat', 'agachamento'),
    ('deadlift', 'levantamento terra'),
)


@dataclass(frozen=True)
class PersonalBests:
    bench_press: float = 0.0
    squat: float = 0.0
    deadlift: float = 0.0

    def to_dict(self) -> dict:
        return {'bench_press': self.bench_press, 'squat': self.squat, 'deadlift': self.deadlift}


@dataclass(frozen=True)
class UserStats:
    experience: int = 0
    workouts_completed: int = 0
    streak_days: int = 0
    personal_bests: PersonalBests = field(default_factory=PersonalBests)

    @property
    def level(self) -> int:
        return calculate_level(self.experience)

    def to_dict(self) -> dict:
        return {
            'level': self.level,
            'experience': self.experience,
            'workouts_completed': self.workouts_completed,
            'streak_days': self.streak_days,
            'personal_bests': self.personal_bests.to_dict(),
        }


@dataclass(frozen=True)
class Achievement:
    id: str
    title: str
    description: str
    progress: float
    target: float

    @property
    def completed(self) -> bool:
        return self.progress >= self.target

    @property
    def percent(self) -> int:
        return min(100, round(self.progress / self.target * 100))


def calculate_level(experience: int) -> int:
    return math.floor(math.sqrt(experience / 100)) + 1


def experience_for_level(level: int) -> int:
    return (level - 1) ** 2 * 100


def level_progress(stats: UserStats) -> float:
    """Fraction of the way from the current level to the next one."""
    floor_xp = experience_for_level(stats.level)
    next_xp = experience_for_level(stats.level + 1)
    return (stats.experience - floor_xp) / (next_xp - floor_xp)


def validate_set(exercise: str, s: SetData):
    def integral(v):
        return isinstance(v, (int, float)) and not isinstance(v, bool) and float(v).is_integer()

    if not isinstance(s.weight, (int, float)) or isinstance(s.weight, bool) or s.weight < 0:
        raise InvalidSet(f"{exercise}: weight must be a number >= 0.", {"exercise": exercise, "set": s.to_dict()})
    if not integral(s.reps) or s.reps < 0:
        raise InvalidSet(f"{exercise}: reps must be a whole number >= 0.", {"exercise": exercise, "set": s.to_dict()})
    if not integral(s.rir) or s.rir < 0:
        raise InvalidSet(f"{exercise}: RIR must be a whole number >= 0.", {"exercise": exercise, "set": s.to_dict()})


def best_set(sets: Iterable[SetData]) -> SetData:
    """Heaviest set, first one wins ties. Zero-weight sets never beat the sentinel."""
    best = SetData(0, 0, 0)
    for s in sets:
        if s.weight > best.weight:
            best = s
    return best


def classify_lift(exercise_name: str) -> Optional[str]:
    name = exercise_name.lower()
    for category, needle in LIFT_CATEGORIES:
        if needle in name:
            return category
    return None


def session_best_lifts(session: ProgressEntry) -> Dict[str, float]:
    bests = {category: 0.0 for category, _ in LIFT_CATEGORIES}
    for exercise in session.logged_exercises:
        category = classify_lift(exercise.name)
        top = best_set(exercise.logged_sets)
        if category is None or top.weight <= 0:
            continue
        bests[category] = max(bests[category], top.weight)
    return bests


def validate_session(session: ProgressEntry, plans: Iterable[PredefinedTrainingPlan] = TRAINING_PLANS):
    find_plan_day(session.plan_id, session.plan_day_id, plans)
    for exercise in session.logged_exercises:
        for s in exercise.logged_sets:
            validate_set(exercise.name, s)


def apply_session_log(prior: UserStats, session: ProgressEntry,
                      plans: Iterable[PredefinedTrainingPlan] = TRAINING_PLANS) -> UserStats:
    validate_session(session, plans)

    session_bests = session_best_lifts(session)
    prior_bests = prior.personal_bests.to_dict()
    new_bests = {}
    gained = BASE_SESSION_XP
    for category, prior_best in prior_bests.items():
        new_bests[category] = max(prior_best, session_bests[category])
        if new_bests[category] > prior_best:
            gained += PERSONAL_BEST_XP

    updated = replace(
        prior,
        experience=prior.experience + gained,
        workouts_completed=prior.workouts_completed + 1,
        personal_bests=PersonalBests(**new_bests),
    )
    logger.debug("session %s: +%d XP, level %d -> %d",
                 session.date, gained, prior.level, updated.level)
    return updated


def experience_gained(prior: UserStats, updated: UserStats) -> int:
    return updated.experience - prior.experience


def new_personal_bests(prior: UserStats, updated: UserStats) -> List[str]:
    before = prior.personal_bests.to_dict()
    return [c for c, v in updated.personal_bests.to_dict().items() if v > before[c]]


def achievements(stats: UserStats) -> List[Achievement]:
    return [
        Achievement('workout-streak', 'Consistency King',
                    'Train 7 days in a row', stats.streak_days, 7),
        Achievement('bench-press', 'Bench Press Master',
                    'Reach 100kg on the bench press', stats.personal_bests.bench_press, 100),
        Achievement('workouts-completed', 'Dedicated Athlete',
                    'Complete 50 workouts', stats.workouts_completed, 50),
    ]


def stats_from_row(row: Optional[object]) -> UserStats:
    if row is None:
        return UserStats()
    return UserStats(
        experience=row.experience,
        workouts_completed=row.workouts_completed,
        streak_days=row.streak_days,
        personal_bests=PersonalBests(row.bench_press, row.squat, row.deadlift),
    )
