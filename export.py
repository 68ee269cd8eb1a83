import pandas as pd

from meals import NutritionPlan
from training_plans import TRAINING_PLANS, find_plan_day
from exceptions import FitnessError


def _day_name(plan_id: str, day_id: str, plans) -> str:
    try:
        return find_plan_day(plan_id, day_id, plans).name
    except FitnessError:
        # history can outlive a plan day; keep the raw id in exports
        return day_id


def progress_dataframe(entries, plans=TRAINING_PLANS) -> pd.DataFrame:
    # One row per logged set, oldest session first
    rows = []
    for e in sorted(entries, key=lambda e: e.date):
        for ex in e.logged_exercises:
            for i, s in enumerate(ex.logged_sets, start=1):
                rows.append({
                    'Date':        e.date,
                    'Body_Weight': e.body_weight,
                    'Plan':        e.plan_id,
                    'Day':         _day_name(e.plan_id, e.plan_day_id, plans),
                    'Exercise':    ex.name,
                    'Set':         i,
                    'Weight':      s.weight,
                    'Reps':        s.reps,
                    'RIR':         s.rir,
                })
    columns = ['Date', 'Body_Weight', 'Plan', 'Day', 'Exercise', 'Set', 'Weight', 'Reps', 'RIR']
    return pd.DataFrame(rows, columns=columns)


def body_weight_series(entries) -> pd.Series:
    ordered = sorted(entries, key=lambda e: e.date)
    return pd.Series(
        [e.body_weight for e in ordered],
        index=pd.to_datetime([e.date for e in ordered]),
        name='Body_Weight',
        dtype=float,
    )


def meal_plan_dataframe(plan: NutritionPlan) -> pd.DataFrame:
    # Each meal → one row per food + Total row
    rows = []
    for m in plan.meals:
        for pf in m.foods:
            rows.append({
                'Meal_Name': m.name,
                'Food_Name': pf.name,
                'Portion':   f"{pf.portion}g",
                'Calories':  pf.calories,
                'Protein':   pf.protein,
                'Carbs':     pf.carbs,
                'Fats':      pf.fats,
            })
        total = m.totals()
        rows.append({
            'Meal_Name': m.name,
            'Food_Name': 'Total',
            'Portion':   '',
            'Calories':  total['calories'],
            'Protein':   total['protein'],
            'Carbs':     total['carbs'],
            'Fats':      total['fats'],
        })
    return pd.DataFrame(rows)


def export_progress_to_excel(entries, path='progress_log.xlsx', plans=TRAINING_PLANS):
    progress_dataframe(entries, plans).to_excel(path, index=False, engine='openpyxl')


def export_meal_plan_to_excel(plan: NutritionPlan, path='meal_plan.xlsx'):
    meal_plan_dataframe(plan).to_excel(path, index=False, engine='openpyxl')


def body_weight_figure(entries):
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt

    series = body_weight_series(entries)
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.plot(series.index, series.values, marker='o', linewidth=2, markersize=4)
    ax.set_title('Body Weight', fontsize=12, fontweight='bold')
    ax.set_ylabel('kg', fontsize=10)
    ax.grid(True, alpha=0.3)
    plt.xticks(rotation=45, fontsize=8)
    plt.tight_layout()
    return fig
