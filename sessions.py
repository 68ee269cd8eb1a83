from dataclasses import dataclass, field
from datetime import date
from typing import List


@dataclass(frozen=True)
class SetData:
    weight: float = 0.0
    reps: int = 0
    rir: int = 0

    def to_dict(self) -> dict:
        return {'weight': self.weight, 'reps': self.reps, 'rir': self.rir}

    @classmethod
    def from_dict(cls, d: dict) -> "SetData":
        return cls(weight=d.get('weight', 0), reps=d.get('reps', 0), rir=d.get('rir', 0))


@dataclass(frozen=True)
class LoggedExercise:
    """An exercise of a training day. `sets`/`reps` are the plan, `logged_sets` what was done."""
    name: str
    sets: int
    reps: int
    logged_sets: tuple = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'sets': self.sets,
            'reps': self.reps,
            'logged_sets': [s.to_dict() for s in self.logged_sets],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "LoggedExercise":
        return cls(
            name=d['name'],
            sets=d.get('sets', 0),
            reps=d.get('reps', 0),
            logged_sets=tuple(SetData.from_dict(s) for s in d.get('logged_sets') or []),
        )


@dataclass(frozen=True)
class ProgressEntry:
    """One logged session. At most one per user and date."""
    date: date
    body_weight: float
    plan_id: str
    plan_day_id: str
    logged_exercises: tuple = field(default_factory=tuple)

    def exercises_to_json(self) -> List[dict]:
        return [e.to_dict() for e in self.logged_exercises]
