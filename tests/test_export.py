"""Tests for DataFrame building and Excel export."""

import random
from datetime import date
from io import BytesIO

import pandas as pd

from export import (
    body_weight_figure,
    body_weight_series,
    export_progress_to_excel,
    meal_plan_dataframe,
    progress_dataframe,
)
from meals import compute_nutrition_plan


def test_progress_dataframe_one_row_per_set(session_factory):
    entries = [session_factory(day=date(2024, 5, 3), bench=100), session_factory(day=date(2024, 5, 1))]
    df = progress_dataframe(entries)
    assert len(df) == 2 * 5
    assert list(df.columns) == ['Date', 'Body_Weight', 'Plan', 'Day', 'Exercise', 'Set', 'Weight', 'Reps', 'RIR']
    assert df.iloc[0]['Date'] == date(2024, 5, 1)
    assert set(df['Day']) == {'Dia de Superior A'}
    bench = df[(df['Date'] == date(2024, 5, 3)) & (df['Exercise'] == 'Supino Reto')]
    assert list(bench['Set']) == [1, 2]
    assert bench['Weight'].max() == 100


def test_progress_dataframe_unknown_day_keeps_id(session_factory):
    df = progress_dataframe([session_factory()], plans=())
    assert set(df['Day']) == {'upperA'}


def test_progress_dataframe_empty():
    df = progress_dataframe([])
    assert df.empty
    assert 'Exercise' in df.columns


def test_body_weight_series_ascending(session_factory):
    entries = [session_factory(day=date(2024, 5, 3), body_weight=79.5),
               session_factory(day=date(2024, 5, 1), body_weight=80.2)]
    series = body_weight_series(entries)
    assert list(series.values) == [80.2, 79.5]
    assert series.index.is_monotonic_increasing


def test_meal_plan_dataframe_has_totals():
    plan = compute_nutrition_plan(80, 180, "bulking", rng=random.Random(2))
    df = meal_plan_dataframe(plan)
    assert len(df) == 5 * 4
    totals = df[df['Food_Name'] == 'Total']
    assert list(totals['Meal_Name']) == [m.name for m in plan.meals]
    breakfast = df[(df['Meal_Name'] == 'Breakfast') & (df['Food_Name'] != 'Total')]
    assert totals.iloc[0]['Protein'] == breakfast['Protein'].sum()


def test_export_progress_to_excel(session_factory):
    buffer = BytesIO()
    export_progress_to_excel([session_factory(bench=60)], buffer)
    buffer.seek(0)
    df = pd.read_excel(buffer, engine='openpyxl')
    assert len(df) == 5
    assert df['Weight'].max() == 60


def test_body_weight_figure(session_factory):
    import matplotlib.pyplot as plt

    entries = [session_factory(day=date(2024, 5, d), body_weight=80 - d / 10) for d in (1, 3, 5)]
    fig = body_weight_figure(entries)
    assert len(fig.axes[0].lines) == 1
    plt.close(fig)
