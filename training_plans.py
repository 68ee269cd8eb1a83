"""
Predefined training plans used to log sessions.

The catalog is seeded into the `training_plans` table once and read back by
the tracker. Exercise names are Portuguese, which the lift classification in
`progress.LIFT_CATEGORIES` relies on.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from exceptions import PlanNotFound, UnknownPlanDay
from sessions import LoggedExercise, ProgressEntry, SetData
from workouts import validate_availability


@dataclass(frozen=True)
class PlanDay:
    id: str
    name: str
    exercises: Tuple[LoggedExercise, ...]


@dataclass(frozen=True)
class PredefinedTrainingPlan:
    id: str
    name: str
    description: str
    days: Tuple[PlanDay, ...]

    def day(self, day_id: str) -> PlanDay:
        for d in self.days:
            if d.id == day_id:
                return d
        raise UnknownPlanDay(f"Plan '{self.id}' has no day '{day_id}'.",
                             {"plan_id": self.id, "day_id": day_id})


def _day(day_id, name, exercises):
    return PlanDay(day_id, name, tuple(LoggedExercise(n, s, r) for n, s, r in exercises))


TRAINING_PLANS: Tuple[PredefinedTrainingPlan, ...] = (
    PredefinedTrainingPlan(
        'upperLower',
        'Upper/Lower (2 dias/semana)',
        'Foco em grupos musculares superiores e inferiores.',
        (
            _day('upper1', 'Dia de Superior A', [
                ('Supino com Barra', 3, 8),
                ('Remada Curvada', 3, 8),
                ('Desenvolvimento Halteres', 3, 10),
                ('Rosca Direta', 3, 12),
                ('Tríceps Testa', 3, 12),
            ]),
            _day('lower1', 'Dia de Inferior A', [
                ('Agachamento com Barra', 3, 8),
                ('Levantamento Terra Romeno', 3, 8),
                ('Leg Press', 3, 10),
                ('Extensão de Pernas', 3, 12),
                ('Flexão de Pernas', 3, 12),
            ]),
        ),
    ),
    PredefinedTrainingPlan(
        'pushPullLegs',
        'Push Pull Legs (3 dias/semana)',
        'Um split clássico para crescimento muscular e força.',
        (
            _day('push', 'Dia de Empurrar (Push)', [
                ('Supino com Barra', 3, 8),
                ('Supino Inclinado com Halteres', 3, 10),
                ('Desenvolvimento Militar', 3, 8),
                ('Elevação Lateral', 3, 12),
                ('Tríceps Pulley', 3, 10),
            ]),
            _day('pull', 'Dia de Puxar (Pull)', [
                ('Barra Fixa', 3, 8),
                ('Remada Curvada com Barra', 3, 8),
                ('Puxada Alta', 3, 10),
                ('Remada Alta', 3, 15),
                ('Rosca Direta', 3, 10),
            ]),
            _day('legs', 'Dia de Pernas (Legs)', [
                ('Agachamento com Barra', 3, 8),
                ('Stiff com Barra', 3, 8),
                ('Leg Press', 3, 10),
                ('Extensão de Pernas', 3, 12),
                ('Flexão de Pernas', 3, 12),
            ]),
        ),
    ),
    PredefinedTrainingPlan(
        'upperLower4Days',
        'Upper/Lower (4 dias/semana)',
        'Split de 4 dias com foco em superior e inferior.',
        (
            _day('upperA', 'Dia de Superior A', [
                ('Supino Reto', 4, 6),
                ('Remada Curvada', 4, 6),
                ('Desenvolvimento Barra', 3, 8),
                ('Rosca Martelo', 3, 10),
                ('Extensão Tríceps', 3, 10),
            ]),
            _day('lowerA', 'Dia de Inferior A', [
                ('Agachamento Frontal', 4, 6),
                ('Levantamento Terra', 3, 5),
                ('Cadeira Extensora', 3, 12),
                ('Mesa Flexora', 3, 12),
                ('Panturrilha em Pé', 4, 15),
            ]),
            _day('upperB', 'Dia de Superior B', [
                ('Supino Inclinado', 4, 8),
                ('Remada Unilateral', 4, 8),
                ('Elevação Lateral', 3, 12),
                ('Rosca Concentrada', 3, 10),
                ('Paralelas', 3, 10),
            ]),
            _day('lowerB', 'Dia de Inferior B', [
                ('Leg Press', 4, 10),
                ('Stiff', 3, 8),
                ('Afundo', 3, 10),
                ('Glúteo Máquina', 3, 12),
                ('Panturrilha Sentado', 4, 15),
            ]),
        ),
    ),
    PredefinedTrainingPlan(
        'fiveDaySplit',
        'Split de 5 dias (5 dias/semana)',
        'Foco em grupos musculares específicos por dia.',
        (
            _day('chestTriceps', 'Peito e Tríceps', [
                ('Supino Reto', 4, 8),
                ('Supino Inclinado Halteres', 3, 10),
                ('Crucifixo Máquina', 3, 12),
                ('Tríceps Pulley', 4, 10),
                ('Tríceps Francês', 3, 12),
            ]),
            _day('backBiceps', 'Costas e Bíceps', [
                ('Barra Fixa', 4, 8),
                ('Remada Curvada', 4, 8),
                ('Puxada Alta', 3, 10),
                ('Rosca Direta', 4, 10),
                ('Rosca Alternada', 3, 12),
            ]),
            _day('legsShoulders', 'Pernas e Ombros', [
                ('Agachamento Livre', 4, 8),
                ('Leg Press', 3, 10),
                ('Stiff', 3, 10),
                ('Desenvolvimento Militar', 4, 8),
                ('Elevação Lateral', 3, 12),
            ]),
            _day('upperBodyLight', 'Superior Leve', [
                ('Supino Máquina', 3, 12),
                ('Remada Baixa', 3, 12),
                ('Elevação Frontal', 3, 15),
                ('Tríceps Corda', 3, 15),
                ('Rosca Scott', 3, 15),
            ]),
            _day('lowerBodyLight', 'Inferior Leve', [
                ('Cadeira Adutora', 3, 15),
                ('Cadeira Abdutora', 3, 15),
                ('Panturrilha Sentado', 3, 20),
                ('Extensão de Pernas', 3, 15),
                ('Flexão de Pernas', 3, 15),
            ]),
        ),
    ),
    PredefinedTrainingPlan(
        'sixDaySplit',
        'Split de 6 dias (6 dias/semana)',
        'Alta frequência para maximizar o crescimento.',
        (
            _day('push1', 'Push Day 1', [
                ('Supino Reto', 3, 8),
                ('Desenvolvimento Halteres', 3, 10),
                ('Tríceps Pulley', 3, 12),
            ]),
            _day('pull1', 'Pull Day 1', [
                ('Remada Curvada', 3, 8),
                ('Puxada Alta', 3, 10),
                ('Rosca Direta', 3, 12),
            ]),
            _day('legs1', 'Legs Day 1', [
                ('Agachamento Livre', 3, 8),
                ('Stiff', 3, 10),
                ('Leg Press', 3, 12),
            ]),
            _day('push2', 'Push Day 2', [
                ('Supino Inclinado', 3, 8),
                ('Elevação Lateral', 3, 12),
                ('Tríceps Testa', 3, 12),
            ]),
            _day('pull2', 'Pull Day 2', [
                ('Barra Fixa', 3, 8),
                ('Remada Baixa', 3, 10),
                ('Rosca Concentrada', 3, 12),
            ]),
            _day('legs2', 'Legs Day 2', [
                ('Levantamento Terra', 2, 5),
                ('Cadeira Extensora', 3, 12),
                ('Mesa Flexora', 3, 12),
            ]),
        ),
    ),
)

DAYS_TO_PLAN_ID: Dict[int, str] = {
    2: 'upperLower',
    3: 'pushPullLegs',
    4: 'upperLower4Days',
    5: 'fiveDaySplit',
    6: 'sixDaySplit',
}


def get_plan(plan_id: str, plans: Iterable[PredefinedTrainingPlan] = TRAINING_PLANS) -> PredefinedTrainingPlan:
    for p in plans:
        if p.id == plan_id:
            return p
    raise PlanNotFound(f"Training plan '{plan_id}' not found.", {"plan_id": plan_id})


def plan_for_availability(days_per_week: int,
                          plans: Iterable[PredefinedTrainingPlan] = TRAINING_PLANS) -> PredefinedTrainingPlan:
    validate_availability(days_per_week)
    return get_plan(DAYS_TO_PLAN_ID[days_per_week], plans)


def find_plan_day(plan_id: str, day_id: str,
                  plans: Iterable[PredefinedTrainingPlan] = TRAINING_PLANS) -> PlanDay:
    return get_plan(plan_id, plans).day(day_id)


def new_session_exercises(day: PlanDay) -> List[LoggedExercise]:
    """Blank log form for a plan day: one zeroed set per planned set."""
    return [
        LoggedExercise(e.name, e.sets, e.reps, tuple(SetData() for _ in range(e.sets)))
        for e in day.exercises
    ]


def exercises_from_history(entry: ProgressEntry) -> List[LoggedExercise]:
    """Pre-fill a new session with the sets of a previous one."""
    return [LoggedExercise(e.name, e.sets, e.reps, tuple(e.logged_sets)) for e in entry.logged_exercises]


def plans_to_rows(plans: Iterable[PredefinedTrainingPlan] = TRAINING_PLANS) -> List[dict]:
    return [
        {
            'id': p.id,
            'name': p.name,
            'description': p.description,
            'days': [
                {
                    'id': d.id,
                    'name': d.name,
                    'exercises': [{'name': e.name, 'sets': e.sets, 'reps': e.reps} for e in d.exercises],
                }
                for d in p.days
            ],
        }
        for p in plans
    ]


def plans_from_rows(rows: Iterable[dict]) -> Tuple[PredefinedTrainingPlan, ...]:
    return tuple(
        PredefinedTrainingPlan(
            r['id'], r['name'], r['description'],
            tuple(_day(d['id'], d['name'], [(e['name'], e['sets'], e['reps']) for e in d['exercises']])
                  for d in r['days']),
        )
        for r in rows
    )
