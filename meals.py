"""
Daily calorie/macro targets and the 5-meal plan built from them.

Targets come from Mifflin-St Jeor at a fixed reference age with a moderate
activity multiplier, shifted by a fixed surplus or deficit for the goal.
Meals are filled with one protein, one carb and one fat source per meal,
each portion scaled towards the per-meal target and clamped to the food's
allowed range. Clamping means meal totals only approximate the targets.
"""

import logging
import math
import random
from dataclasses import dataclass, field

from config import ACTIVITY_MULTIPLIER, CALORIE_ADJUSTMENT, MEALS_PER_DAY, REFERENCE_AGE
from exceptions import InfeasibleTargets, InvalidBiometric, InvalidGoal
from foods import CARBS, FATS, FOOD_DATABASE, PROTEINS, FoodItem

logger = logging.getLogger(__name__)

BULKING = "bulking"
CUTTING = "cutting"
GOALS = (BULKING, CUTTING)

MEAL_NAMES = (
    'Breakfast',
    'Morning Snack',
    'Lunch',
    'Afternoon Snack',
    'Dinner',
)

PROTEIN_G_PER_KG = 2.2
FAT_CALORIE_SHARE = 0.25


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class MacroTargets:
    calories: float
    protein: float
    carbs: float
    fats: float

    def split(self, parts: int) -> "MacroTargets":
        return MacroTargets(self.calories / parts, self.protein / parts,
                            self.carbs / parts, self.fats / parts)


@dataclass(frozen=True)
class PortionedFood:
    food: FoodItem
    portion: int
    protein: int
    carbs: int
    fats: int
    calories: int

    @property
    def name(self) -> str:
        return self.food.name

    def to_dict(self) -> dict:
        return {
            'name': self.food.name,
            'category': self.food.category,
            'portion': f"{self.portion}g",
            'protein': self.protein,
            'carbs': self.carbs,
            'fats': self.fats,
            'calories': self.calories,
        }


@dataclass(frozen=True)
class Meal:
    name: str
    targets: MacroTargets
    foods: tuple[PortionedFood, ...]

    def totals(self) -> dict:
        totals = {'calories': 0, 'protein': 0, 'carbs': 0, 'fats': 0}
        for pf in self.foods:
            totals['calories'] += pf.calories
            totals['protein']  += pf.protein
            totals['carbs']    += pf.carbs
            totals['fats']     += pf.fats
        return totals


@dataclass(frozen=True)
class NutritionPlan:
    calories: int
    protein: int
    carbs: int
    fats: int
    targets: MacroTargets
    meals: tuple[Meal, ...]
    selected_foods: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            'calories': self.calories,
            'protein': self.protein,
            'carbs': self.carbs,
            'fats': self.fats,
            'meals': [
                {'name': m.name, 'foods': [pf.to_dict() for pf in m.foods]}
                for m in self.meals
            ],
            'selected_foods': list(self.selected_foods),
        }


def validate_goal(goal: str) -> str:
    if goal not in GOALS:
        raise InvalidGoal(f"Goal must be one of {', '.join(GOALS)}, got {goal!r}.", {"goal": goal})
    return goal


def _positive_number(value) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    return math.isfinite(value) and value > 0


def validate_biometrics(weight_kg: float, height_cm: float):
    if not _positive_number(weight_kg):
        raise InvalidBiometric("Weight must be a finite number greater than zero.", {"weight_kg": weight_kg})
    if not _positive_number(height_cm):
        raise InvalidBiometric("Height must be a finite number greater than zero.", {"height_cm": height_cm})


def calculate_targets(weight_kg: float, height_cm: float, goal: str) -> MacroTargets:
    """Unrounded daily targets. Raises if protein and fat leave no room for carbs."""
    validate_biometrics(weight_kg, height_cm)
    validate_goal(goal)

    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * REFERENCE_AGE + 5
    tdee = bmr * ACTIVITY_MULTIPLIER
    calories = tdee + CALORIE_ADJUSTMENT if goal == BULKING else tdee - CALORIE_ADJUSTMENT
    protein = PROTEIN_G_PER_KG * weight_kg
    fats = (calories * FAT_CALORIE_SHARE) / 9
    carbs = (calories - (protein * 4 + fats * 9)) / 4

    if calories <= 0 or carbs < 0:
        raise InfeasibleTargets(
            "Protein and fat targets exceed the calorie target for these measurements.",
            {"calories": calories, "protein": protein, "fats": fats, "carbs": carbs},
        )

    logger.debug("bmr=%.2f tdee=%.2f calories=%.2f protein=%.2f carbs=%.2f fats=%.2f",
                 bmr, tdee, calories, protein, carbs, fats)
    return MacroTargets(calories, protein, carbs, fats)


def adjust_portion(food: FoodItem, target_protein: float, target_carbs: float,
                   target_fats: float) -> PortionedFood:
    scaling_factor = 1
    if food.protein > 10:
        scaling_factor = target_protein / food.protein
    elif food.carbs > 15:
        scaling_factor = target_carbs / food.carbs
    elif food.fats > 10:
        scaling_factor = target_fats / food.fats

    portion = round_half_up(100 * scaling_factor)
    portion = max(food.min_portion, min(portion, food.max_portion))

    return PortionedFood(
        food=food,
        portion=portion,
        protein=round_half_up(food.protein * portion / 100),
        carbs=round_half_up(food.carbs * portion / 100),
        fats=round_half_up(food.fats * portion / 100),
        calories=round_half_up(food.calories * portion / 100),
    )


def pick_food(category: str, selected_foods, rng: random.Random) -> FoodItem:
    foods = FOOD_DATABASE[category]
    candidates = [f for f in foods if not selected_foods or f.name in selected_foods]
    if not candidates:
        return foods[0]
    return rng.choice(candidates)


def generate_meals(targets: MacroTargets, selected_foods=(), rng: random.Random | None = None) -> tuple[Meal, ...]:
    rng = rng or random.Random()
    per_meal = targets.split(MEALS_PER_DAY)
    meals = []
    for name in MEAL_NAMES:
        foods = tuple(
            adjust_portion(pick_food(category, selected_foods, rng),
                           per_meal.protein, per_meal.carbs, per_meal.fats)
            for category in (PROTEINS, CARBS, FATS)
        )
        meals.append(Meal(name=name, targets=per_meal, foods=foods))
    return tuple(meals)


def compute_nutrition_plan(weight_kg: float, height_cm: float, goal: str,
                           preferred_foods=None, rng: random.Random | None = None) -> NutritionPlan:
    targets = calculate_targets(weight_kg, height_cm, goal)
    selected = tuple(preferred_foods or ())
    return NutritionPlan(
        calories=round_half_up(targets.calories),
        protein=round_half_up(targets.protein),
        carbs=round_half_up(targets.carbs),
        fats=round_half_up(targets.fats),
        targets=targets,
        meals=generate_meals(targets, selected, rng),
        selected_foods=selected,
    )


def regenerate_meals(plan: NutritionPlan, preferred_foods, rng: random.Random | None = None) -> NutritionPlan:
    """Same daily targets, new meals for a changed preference set."""
    selected = tuple(preferred_foods or ())
    return NutritionPlan(
        calories=plan.calories,
        protein=plan.protein,
        carbs=plan.carbs,
        fats=plan.fats,
        targets=plan.targets,
        meals=generate_meals(plan.targets, selected, rng),
        selected_foods=selected,
    )


def daily_totals(meals) -> dict:
    totals = {'calories': 0, 'protein': 0, 'carbs': 0, 'fats': 0}
    for meal in meals:
        for key, value in meal.totals().items():
            totals[key] += value
    return totals
