import streamlit as st
import pandas as pd
from datetime import date
from io import BytesIO

from config import DEFAULT_WEEKLY_AVAILABILITY, setup_logging
from db import init_db, get_db
from exceptions import FitnessError, ProfileNotFound
from foods import FOOD_DATABASE, PROTEINS, CARBS, FATS
from meals import GOALS, regenerate_meals
from progress import achievements, experience_for_level, experience_gained, level_progress, new_personal_bests
from sessions import LoggedExercise, ProgressEntry, SetData
from training_plans import exercises_from_history, new_session_exercises
from workouts import weekly_sets
import export
import tracker


st.set_page_config(layout='wide')


def plan_cache_key(user_id, profile, preferred_foods):
    return (user_id, profile.goal, profile.weight_kg, profile.height_cm, tuple(preferred_foods or ()))


def cached_nutrition_plan(user_id, profile):
    # reruns must not reshuffle the foods on screen
    key = plan_cache_key(user_id, profile, profile.preferred_foods)
    cached = st.session_state.get("nutrition_plan")
    if cached and cached[0] == key:
        return cached[1]
    with get_db() as db:
        plan = tracker.nutrition_plan_for(db, user_id)
    st.session_state["nutrition_plan"] = (key, plan)
    return plan


def main():
    # ─── Initialize DB ───────────────────────────────────────────────
    setup_logging()
    init_db()
    with get_db() as db:
        tracker.seed_training_plans(db)

    st.title("🏋️ Fitness Tracker & Planner")

    user_id = st.sidebar.text_input("User ID", value=st.session_state.get("user_id", ""))
    st.session_state["user_id"] = user_id.strip()
    if not st.session_state["user_id"]:
        st.info("Enter your user ID in the sidebar to get started.")
        return
    user_id = st.session_state["user_id"]

    # ─── Tabs ────────────────────────────────────────────────────────
    tabs = st.tabs([
        "Profile",
        "Dashboard",
        "Nutrition",
        "Workout",
        "Log Session",
        "History",
        "Achievements",
    ])
    (tab_profile, tab_dashboard, tab_nutrition, tab_workout,
     tab_log, tab_history, tab_achievements) = tabs

    with get_db() as db:
        try:
            profile = tracker.get_profile(db, user_id)
        except ProfileNotFound:
            profile = None

    # ─── Tab 1: Profile ──────────────────────────────────────────────
    with tab_profile:
        st.header("👤 Complete Your Profile")
        with st.form(key="profile_form"):
            goal = st.radio("What's your goal?", GOALS,
                            index=GOALS.index(profile.goal) if profile else 0,
                            format_func=str.capitalize, horizontal=True)
            availability = st.number_input(
                "How many days per week can you train?", min_value=2, max_value=6, step=1,
                value=profile.weekly_availability if profile else DEFAULT_WEEKLY_AVAILABILITY)
            weight = st.number_input("Weight (kg)", min_value=0.0, step=0.1,
                                     value=float(profile.weight_kg) if profile else 0.0)
            height = st.number_input("Height (cm)", min_value=0.0, step=0.1,
                                     value=float(profile.height_cm) if profile else 0.0)
            submitted = st.form_submit_button("Save Profile", type="primary")

        if submitted:
            try:
                with get_db() as db:
                    tracker.save_profile(db, user_id, goal, int(availability), weight, height)
                st.success("Profile saved. Your personalized plan is ready.")
                st.rerun()
            except FitnessError as e:
                st.error(e.message)

    if profile is None:
        for tab in (tab_dashboard, tab_nutrition, tab_workout, tab_log, tab_history, tab_achievements):
            with tab:
                st.info("Complete your profile first.")
        return

    with get_db() as db:
        stats = tracker.get_stats(db, user_id)
        history = tracker.list_progress(db, user_id)

    # ─── Tab 2: Dashboard ────────────────────────────────────────────
    with tab_dashboard:
        st.header("📊 Dashboard")
        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Goal", profile.goal.capitalize())
        col2.metric("Training days", f"{profile.weekly_availability}/week")
        col3.metric("Weight", f"{profile.weight_kg:.1f} kg")
        col4.metric("Height", f"{profile.height_cm:.0f} cm")

        st.subheader(f"⭐ Level {stats.level}")
        st.write(f"**{stats.experience} XP** · next level at {experience_for_level(stats.level + 1)} XP")
        st.progress(level_progress(stats))

        col1, col2, col3 = st.columns(3)
        col1.metric("Workouts completed", stats.workouts_completed)
        col2.metric("Streak", f"{stats.streak_days} days")
        unlocked = [a for a in achievements(stats) if a.completed]
        col3.metric("Achievements", f"{len(unlocked)}/{len(achievements(stats))}")

        pb = stats.personal_bests
        st.subheader("🏆 Personal Bests")
        st.table(pd.DataFrame([{
            'Bench Press (kg)': pb.bench_press,
            'Squat (kg)':       pb.squat,
            'Deadlift (kg)':    pb.deadlift,
        }]))

    # ─── Tab 3: Nutrition ────────────────────────────────────────────
    with tab_nutrition:
        st.header("🍽️ Your Nutrition Plan")
        try:
            plan = cached_nutrition_plan(user_id, profile)
        except FitnessError as e:
            st.error(e.message)
            plan = None

        if plan:
            col1, col2, col3, col4 = st.columns(4)
            col1.metric("Calories", f"{plan.calories} kcal")
            col2.metric("Protein", f"{plan.protein}g")
            col3.metric("Carbs", f"{plan.carbs}g")
            col4.metric("Fats", f"{plan.fats}g")

            sub_meals, sub_prefs = st.tabs(["Meal Plan", "Food Preferences"])

            with sub_prefs:
                current = set(profile.preferred_foods or [])
                chosen = []
                for title, category in (("Protein Sources", PROTEINS),
                                        ("Carb Sources", CARBS),
                                        ("Fat Sources", FATS)):
                    st.subheader(title)
                    cols = st.columns(2)
                    for i, food in enumerate(FOOD_DATABASE[category]):
                        if cols[i % 2].checkbox(food.name, value=food.name in current, key=f"pref_{food.name}"):
                            chosen.append(food.name)
                if st.button("Save Preferences", key="btn_save_prefs"):
                    try:
                        with get_db() as db:
                            selected = tracker.save_food_preferences(db, user_id, chosen)
                        plan = regenerate_meals(plan, selected)
                        st.session_state["nutrition_plan"] = (plan_cache_key(user_id, profile, selected), plan)
                        st.success("Your meal plan has been updated with your food preferences.")
                    except FitnessError as e:
                        st.error(e.message)

            with sub_meals:
                for meal in plan.meals:
                    st.subheader(meal.name)
                    st.table(pd.DataFrame([pf.to_dict() for pf in meal.foods])
                               [['name', 'portion', 'protein', 'carbs', 'fats', 'calories']])

                towrite = BytesIO()
                export.export_meal_plan_to_excel(plan, towrite)
                towrite.seek(0)
                st.download_button(
                    "📥 Download Meal Plan",
                    data=towrite,
                    file_name=f"meal_plan_{user_id}.xlsx",
                    mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
                )

    # ─── Tab 4: Workout ──────────────────────────────────────────────
    with tab_workout:
        st.header("💪 Your Workout Plan")
        st.markdown("""
        • Perform exercises with proper form
        • RIR (Reps in Reserve) is how many reps you should have left in the tank
        • Progressive overload: increase weight when you complete all sets with good form
        """)
        try:
            with get_db() as db:
                workout = tracker.workout_plan_for(db, user_id)
        except FitnessError as e:
            st.error(e.message)
            workout = None

        if workout:
            day_tabs = st.tabs([f"Day {i + 1}: {day}" for i, day in enumerate(workout.split)])
            for day, day_tab in zip(workout.split, day_tabs):
                with day_tab:
                    for ex in workout.exercises[day]:
                        st.markdown(f"**{ex.name}** · {ex.sets} sets · {ex.reps} reps · RIR {ex.rir}")
                        if ex.notes:
                            st.caption(f"Note: {ex.notes}")
            with st.expander("Weekly sets per exercise"):
                st.table(pd.Series(weekly_sets(workout), name="Sets"))

    # ─── Tab 5: Log Session ──────────────────────────────────────────
    with tab_log:
        st.header("📝 Log Training Session")
        try:
            with get_db() as db:
                training_plan = tracker.training_plan_for(db, user_id)
        except FitnessError as e:
            st.error(e.message)
            training_plan = None

        if training_plan:
            st.caption(f"{training_plan.name}: {training_plan.description}")
            day_ids = [d.id for d in training_plan.days]
            names = {d.id: d.name for d in training_plan.days}
            template = st.session_state.get("log_template")
            default_day = day_ids.index(template.plan_day_id) if template and template.plan_day_id in day_ids else 0
            day_id = st.selectbox("Training day", day_ids, index=default_day, format_func=names.get)
            day = training_plan.day(day_id)

            if template and template.plan_id == training_plan.id and template.plan_day_id == day_id:
                exercises = exercises_from_history(template)
                form_id = f"tpl{template.date.isoformat()}_{day_id}"
            else:
                exercises = new_session_exercises(day)
                form_id = f"new_{day_id}"

            with st.form(key="log_form"):
                session_date = st.date_input("Date", value=date.today())
                body_weight = st.number_input("Body weight (kg)", min_value=0.0, step=0.1,
                                              value=float(template.body_weight) if template else float(profile.weight_kg),
                                              key=f"{form_id}_bw")
                logged = []
                for ex in exercises:
                    st.markdown(f"**{ex.name}** · {ex.sets}×{ex.reps}")
                    sets = []
                    for i, s in enumerate(ex.logged_sets):
                        c1, c2, c3 = st.columns(3)
                        w = c1.number_input(f"Set {i + 1} weight (kg)", min_value=0.0, step=0.5,
                                            value=float(s.weight), key=f"{form_id}_{ex.name}_{i}_w")
                        r = c2.number_input("Reps", min_value=0, step=1, value=int(s.reps),
                                            key=f"{form_id}_{ex.name}_{i}_r")
                        rir = c3.number_input("RIR", min_value=0, step=1, value=int(s.rir),
                                              key=f"{form_id}_{ex.name}_{i}_rir")
                        sets.append(SetData(w, int(r), int(rir)))
                    logged.append(LoggedExercise(ex.name, ex.sets, ex.reps, tuple(sets)))
                replace = st.checkbox("Overwrite an existing session on this date")
                save = st.form_submit_button("Save Session", type="primary")

            if save:
                entry = ProgressEntry(session_date, body_weight, training_plan.id, day_id, tuple(logged))
                try:
                    with get_db() as db:
                        updated = tracker.submit_session(db, user_id, entry, replace=replace)
                    msg = f"Gained {experience_gained(stats, updated)} XP!"
                    if new_personal_bests(stats, updated):
                        msg += " New personal best!"
                    st.session_state.pop("log_template", None)
                    st.success(msg)
                except FitnessError as e:
                    st.error(e.message)

    # ─── Tab 6: History ──────────────────────────────────────────────
    with tab_history:
        st.header("📅 Training History")
        if not history:
            st.info("No sessions logged yet.")
        else:
            if len(history) > 1:
                st.pyplot(export.body_weight_figure(history))
            for i, entry in enumerate(history):
                with st.expander(f"{entry.date.isoformat()} · {entry.plan_day_id} · {entry.body_weight} kg"):
                    for ex in entry.logged_exercises:
                        st.markdown(f"**{ex.name}**")
                        st.table(pd.DataFrame([s.to_dict() for s in ex.logged_sets]))
                    if st.button("Use as template", key=f"tpl_{i}"):
                        st.session_state["log_template"] = entry
                        st.info("Open the Log Session tab to log a new session based on this one.")

            towrite = BytesIO()
            export.export_progress_to_excel(history, towrite)
            towrite.seek(0)
            st.download_button(
                "📥 Download History",
                data=towrite,
                file_name=f"progress_{user_id}.xlsx",
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
            )

    # ─── Tab 7: Achievements ─────────────────────────────────────────
    with tab_achievements:
        st.header("🏅 Achievements")
        for a in achievements(stats):
            st.subheader(("✅ " if a.completed else "") + a.title)
            st.write(a.description)
            st.write(f"Progress: {a.progress:g}/{a.target:g} ({a.percent}%)")
            st.progress(a.percent / 100)

if __name__ == "__main__":
    main()
