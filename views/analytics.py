import pandas as pd
import streamlit as st

from domain.constants import STATUS_LABELS
from services import analyzer, rituals, projects as project_svc, ideas as idea_svc, dashboard as dash_svc

TREND_ICONS = {"improving": "📈", "declining": "📉", "stable": "➡️"}


def _render_patterns(check_ins, reflections):
    pattern = analyzer.analyze_patterns(check_ins, reflections)
    if len(check_ins) < analyzer.MIN_CHECK_INS:
        st.info(f"Log at least {analyzer.MIN_CHECK_INS} check-ins to see your personal patterns. "
                "Showing defaults for now.")

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Best mood for output", pattern.best_mood_for_productivity.capitalize())
    c2.metric("Best energy for focus", pattern.best_energy_for_focus.capitalize())
    c3.metric("Mood ↔ focus correlation", f"{pattern.focus_correlation:.2f}")
    c4.metric("Trend", f"{TREND_ICONS[pattern.productivity_trend]} {pattern.productivity_trend}")

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Tasks on high-mood days", f"{pattern.average_tasks_on_high_mood:.1f}")
    c2.metric("Tasks on low-mood days", f"{pattern.average_tasks_on_low_mood:.1f}")
    c3.metric("High-energy days", pattern.high_energy_days)
    c4.metric("Best mood day", pattern.best_mood_day)

    today = rituals.todays_check_in()
    if today:
        st.subheader("For today")
        for line in analyzer.get_productivity_recommendations(today['mood'], today['energy'], pattern):
            st.markdown(f"- {line}")


def _render_charts(check_ins, reflections):
    frame = analyzer.chart_frame(check_ins, reflections)
    st.subheader("Last 7 reflections")
    if frame.empty:
        st.caption("No evening reflections yet.")
    else:
        st.line_chart(frame[['satisfaction', 'focus_achieved', 'tasks_completed']])
        st.bar_chart(frame[['mood', 'energy']])

    st.subheader("Mood distribution")
    distribution = analyzer.mood_distribution(check_ins)
    if sum(distribution.values()):
        st.bar_chart(pd.Series(distribution, name="days"))
    else:
        st.caption("No check-ins yet.")


def _render_portfolio():
    projects = project_svc.list_projects()
    ideas = idea_svc.list_ideas()
    stats = dash_svc.summary(projects, ideas)
    st.subheader("Portfolio")
    c1, c2, c3 = st.columns(3)
    c1.metric("Average idea score", f"{stats['average_idea_score']:.1f}")
    c2.metric("Validated ideas", stats['validated_ideas'])
    c3.metric("Killed ideas", stats['killed_ideas'])
    if projects:
        df = pd.DataFrame([{
            'project': p.get('title'),
            'status': STATUS_LABELS.get(p.get('status'), p.get('status')),
            'progress': p.get('progress', 0),
        } for p in projects])
        st.dataframe(df, hide_index=True, use_container_width=True,
                     column_config={'progress': st.column_config.ProgressColumn('progress', min_value=0,
                                                                                max_value=100)})


def view():
    st.header("📊 Analytics")
    check_ins = rituals.list_check_ins()
    reflections = rituals.list_reflections()
    _render_patterns(check_ins, reflections)
    _render_charts(check_ins, reflections)
    _render_portfolio()
