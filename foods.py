from dataclasses import dataclass

from exceptions import UnknownFood

PROTEINS = "proteins"
CARBS = "carbs"
FATS = "fats"
CATEGORIES = (PROTEINS, CARBS, FATS)


@dataclass(frozen=True)
class FoodItem:
    """A catalog food. Macros are per 100g, portions are in grams."""
    name: str
    category: str
    protein: float
    carbs: float
    fats: float
    calories: float
    serving: str
    min_portion: int
    max_portion: int

    def __post_init__(self):
        if self.min_portion > self.max_portion:
            raise ValueError(f"{self.name}: min_portion {self.min_portion} > max_portion {self.max_portion}")
        if min(self.protein, self.carbs, self.fats, self.calories) < 0:
            raise ValueError(f"{self.name}: macro values must be non-negative")


def _food(category, name, protein, carbs, fats, calories, serving, min_portion, max_portion):
    return FoodItem(name, category, protein, carbs, fats, calories, serving, min_portion, max_portion)


FOOD_DATABASE: dict[str, tuple[FoodItem, ...]] = {
    PROTEINS: (
        _food(PROTEINS, 'Chicken Breast', 31,  0,   3.6, 165, '100g', 100, 250),
        _food(PROTEINS, 'Salmon',         25,  0,   13,  208, '100g', 100, 200),
        _food(PROTEINS, 'Egg Whites',     11,  0,   0,   52,  '100g', 100, 300),
        _food(PROTEINS, 'Lean Beef',      26,  0,   15,  250, '100g', 100, 200),
        _food(PROTEINS, 'Greek Yogurt',   10,  4,   0.4, 59,  '100g', 150, 300),
        _food(PROTEINS, 'Whey Protein',   24,  3,   1,   120, '30g',  25,  40),
        _food(PROTEINS, 'Tuna',           26,  0,   0.8, 116, '100g', 100, 200),
        _food(PROTEINS, 'Turkey Breast',  29,  0,   1,   135, '100g', 100, 250),
        _food(PROTEINS, 'Cottage Cheese', 11,  3,   4.3, 98,  '100g', 150, 300),
        _food(PROTEINS, 'Protein Bar',    20,  25,  8,   250, '60g',  40,  80),
    ),
    CARBS: (
        _food(CARBS, 'Brown Rice',   2.6, 23, 0.9, 111, '100g', 50,  150),
        _food(CARBS, 'Sweet Potato', 2,   20, 0.2, 86,  '100g', 150, 300),
        _food(CARBS, 'Oatmeal',      13,  68, 7,   389, '100g', 40,  80),
        _food(CARBS, 'Quinoa',       4.4, 21, 1.9, 120, '100g', 50,  150),
        _food(CARBS, 'Banana',       1.1, 23, 0.3, 89,  '100g', 100, 150),
        _food(CARBS, 'White Rice',   2.7, 28, 0.3, 130, '100g', 50,  150),
        _food(CARBS, 'Pasta',        5.8, 31, 0.9, 158, '100g', 50,  150),
        _food(CARBS, 'Bread',        9,   49, 3.2, 265, '100g', 30,  90),
        _food(CARBS, 'Granola',      8,   65, 12,  400, '100g', 30,  60),
        _food(CARBS, 'Rice Cakes',   2,   14, 0.3, 70,  '20g',  20,  40),
    ),
    FATS: (
        _food(FATS, 'Avocado',        2,   9,   15,  160, '100g', 50, 150),
        _food(FATS, 'Almonds',        21,  22,  49,  579, '100g', 15, 45),
        _food(FATS, 'Olive Oil',      0,   0,   100, 884, '100g', 5,  15),
        _food(FATS, 'Chia Seeds',     17,  42,  31,  486, '100g', 10, 30),
        _food(FATS, 'Peanut Butter',  25,  20,  50,  588, '100g', 15, 45),
        _food(FATS, 'Walnuts',        15,  14,  65,  654, '100g', 15, 45),
        _food(FATS, 'Dark Chocolate', 7.8, 46,  43,  546, '100g', 20, 50),
        _food(FATS, 'Coconut Oil',    0,   0,   100, 862, '100g', 5,  15),
        _food(FATS, 'Eggs',           13,  1.1, 11,  155, '100g', 50, 150),
        _food(FATS, 'MCT Oil',        0,   0,   100, 900, '100g', 5,  15),
    ),
}


def get_all_foods() -> list[FoodItem]:
    return [f for category in CATEGORIES for f in FOOD_DATABASE[category]]


def get_food(name: str) -> FoodItem:
    for f in get_all_foods():
        if f.name == name:
            return f
    raise UnknownFood(f"Food '{name}' is not in the catalog.", {"name": name})


def validate_food_names(names) -> tuple[str, ...]:
    """Check every name against the catalog, keeping order and dropping repeats."""
    known = {f.name for f in get_all_foods()}
    unknown = [n for n in names if n not in known]
    if unknown:
        raise UnknownFood(f"Unknown food(s): {', '.join(unknown)}", {"names": unknown})
    return tuple(dict.fromkeys(names))
