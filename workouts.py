"""
Weekly split selection.

Each supported day count maps to a hand-authored list of split days. The
exercise table is keyed by day name and shared between day counts, so "Push"
is the same session in a 3-day and a 6-day week. Programming follows
5-12 reps per set, 0-2 RIR and at most ~18 weekly sets per muscle group.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from exceptions import UnsupportedAvailability

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExercisePrescription:
    name: str
    sets: int
    reps: str
    rir: int
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        d = {'name': self.name, 'sets': self.sets, 'reps': self.reps, 'rir': self.rir}
        if self.notes:
            d['notes'] = self.notes
        return d


@dataclass(frozen=True)
class WorkoutPlan:
    split: Tuple[str, ...]
    exercises: Dict[str, Tuple[ExercisePrescription, ...]]

    def to_dict(self) -> dict:
        return {
            'split': list(self.split),
            'exercises': {day: [e.to_dict() for e in exs] for day, exs in self.exercises.items()},
        }


SPLITS: Dict[int, Tuple[str, ...]] = {
    2: ('Upper Body', 'Lower Body'),
    3: ('Push', 'Pull', 'Legs'),
    4: ('Upper Body', 'Lower Body', 'Upper Body', 'Lower Body'),
    5: ('Push', 'Pull', 'Legs', 'Upper Body', 'Lower Body'),
    6: ('Push', 'Pull', 'Legs', 'Push', 'Pull', 'Legs'),
}

P = ExercisePrescription

EXERCISES: Dict[str, Tuple[ExercisePrescription, ...]] = {
    'Push': (
        P('Bench Press', 4, '6-8', 1, 'Control the eccentric phase'),
        P('Overhead Press', 3, '8-10', 2),
        P('Incline Dumbbell Press', 3, '8-10', 1),
        P('Lateral Raises', 3, '10-12', 1),
        P('Tricep Pushdowns', 3, '8-10', 1),
    ),
    'Pull': (
        P('Barbell Rows', 4, '6-8', 1, 'Focus on scapular retraction'),
        P('Pull-ups/Lat Pulldowns', 3, '8-10', 2),
        P('Face Pulls', 3, '10-12', 1),
        P('Bicep Curls', 3, '8-10', 1),
        P('Hammer Curls', 2, '8-10', 1),
    ),
    'Legs': (
        P('Squats', 4, '6-8', 1, 'Break parallel for full ROM'),
        P('Romanian Deadlifts', 3, '8-10', 2),
        P('Leg Press', 3, '8-10', 1),
        P('Leg Extensions', 3, '10-12', 1),
        P('Standing Calf Raises', 4, '8-10', 1),
    ),
    'Upper Body': (
        P('Bench Press', 4, '6-8', 1),
        P('Barbell Rows', 4, '6-8', 1),
        P('Overhead Press', 3, '8-10', 2),
        P('Pull-ups/Lat Pulldowns', 3, '8-10', 2),
        P('Lateral Raises', 3, '10-12', 1),
        P('Face Pulls', 3, '10-12', 1),
    ),
    'Lower Body': (
        P('Squats', 4, '6-8', 1),
        P('Romanian Deadlifts', 3, '8-10', 2),
        P('Leg Press', 3, '8-10', 1),
        P('Leg Extensions', 3, '10-12', 1),
        P('Leg Curls', 3, '10-12', 1),
        P('Standing Calf Raises', 4, '8-10', 1),
    ),
}

del P


def validate_availability(days_per_week) -> int:
    # bool is an int subclass; True would otherwise pass as 1
    if isinstance(days_per_week, bool) or not isinstance(days_per_week, int) or days_per_week not in SPLITS:
        raise UnsupportedAvailability(
            f"Weekly availability must be one of {sorted(SPLITS)} days, got {days_per_week!r}.",
            {"days_per_week": days_per_week},
        )
    return days_per_week


def select_split(days_per_week: int) -> WorkoutPlan:
    validate_availability(days_per_week)
    split = SPLITS[days_per_week]
    logger.debug("%d days/week -> %s", days_per_week, ", ".join(split))
    return WorkoutPlan(
        split=split,
        exercises={day: EXERCISES[day] for day in dict.fromkeys(split)},
    )


def weekly_sets(plan: WorkoutPlan) -> Dict[str, int]:
    """Planned sets per exercise summed over every day of the split."""
    totals = Counter()
    for day in plan.split:
        for e in plan.exercises[day]:
            totals[e.name] += e.sets
    return dict(totals)
