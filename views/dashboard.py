import streamlit as st

from services import projects as project_svc, ideas as idea_svc, rituals, profile as profile_svc
from services import dashboard as dash_svc, analyzer
from services.assistant import UserContext, generate_daily_recommendations
from services.errors import ValidationError
from ui.components import (stat_card, project_card, recommendation_card, check_in_form, reflection_form,
                           show_error, flash, navigate)


def _greeting(profile) -> str:
    name = profile.get('name')
    return f"Welcome back, {name}!" if name else "Welcome to your founder OS"


def _render_stats(projects, ideas):
    stats = dash_svc.summary(projects, ideas)
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        stat_card("Projects", stats["total_projects"], f"{stats['in_progress_projects']} in progress")
    with c2:
        stat_card("Launched", stats["launched_projects"], f"{stats['ready_to_launch_projects']} ready to launch")
    with c3:
        stat_card("Avg. progress", f"{round(stats['average_progress'])}%")
    with c4:
        stat_card("Ideas", stats["total_ideas"], f"{stats['high_priority_ideas']} high priority")


def _render_check_in(today):
    st.subheader("☀️ Daily check-in")
    if today:
        st.markdown(f"Mood **{today['mood']}** · Energy **{today['energy']}** · Focus: *{today['focus']}*")
        with st.expander("Update today's check-in"):
            values = check_in_form(today, key_prefix="checkin_edit")
    else:
        st.caption("Start the day by noting how you feel and what matters most.")
        values = check_in_form(key_prefix="checkin_new")
    if values:
        try:
            rituals.submit_check_in(**values)
        except ValidationError as e:
            show_error(e)
        else:
            flash("Check-in saved. Have a focused day!", "☀️")
            st.rerun()


def _render_assistant(projects, ideas, today, profile):
    st.subheader("🤖 AI assistant")
    if not today:
        st.info("Complete your check-in to unlock today's recommendations.")
        return
    context = UserContext(
        mood=today['mood'],
        energy=today['energy'],
        focus=today.get('focus', ''),
        experience=profile.get('experience'),
        goals=profile.get('goals', []),
        interests=profile.get('interests', []),
    )
    suggestions = generate_daily_recommendations(projects, ideas, context)
    recommendation_card(suggestions.primary_focus, emphasize=True)
    for rec in suggestions.secondary_actions:
        recommendation_card(rec)
    for rec in suggestions.insights + suggestions.tips:
        recommendation_card(rec)

    pattern = analyzer.analyze_patterns(rituals.list_check_ins(), rituals.list_reflections())
    for line in analyzer.get_productivity_recommendations(today['mood'], today['energy'], pattern):
        st.markdown(f"- {line}")


def _render_reflection(today):
    st.subheader("🌙 Evening reflection")
    if not today:
        st.caption("Available after today's check-in.")
        return
    done = rituals.todays_reflection()
    if done:
        st.success(f"Reflection saved: {done['tasks_completed']} tasks, satisfaction {done['satisfaction_level']}/10")
        return
    with st.expander("Reflect on your day", expanded=False):
        values = reflection_form(key_prefix="reflection_today")
    if values:
        try:
            rituals.submit_reflection(**values)
        except ValidationError as e:
            show_error(e)
        else:
            flash("Reflection saved. Rest well!", "🌙")
            st.rerun()


def view():
    profile = profile_svc.get_profile()
    projects = project_svc.list_projects()
    ideas = idea_svc.list_ideas()
    today = rituals.todays_check_in()

    st.markdown(f"<div class='hero'><div style='font-size:1.2rem;font-weight:600'>{_greeting(profile)}</div>"
                "<div style='opacity:.85;font-size:.85rem'>Ideas in, launches out.</div></div>",
                unsafe_allow_html=True)
    if not profile.get('onboarded'):
        st.info("Finish onboarding in **Founder Profile** so recommendations fit your goals.")

    _render_stats(projects, ideas)

    left, right = st.columns([3, 2])
    with left:
        _render_assistant(projects, ideas, today, profile)
        st.subheader("🚀 Active projects")
        active = [p for p in projects if p.get('status') != 'launched'][:3]
        if not active:
            st.caption("No active projects yet. Create one from the Projects page.")
        for p in active:
            action = project_card(p, key_prefix="dash", compact=True)
            if action == "open":
                navigate("project_workspace", selected_project_id=p['id'])
            elif action == "clone":
                project_svc.clone_project(p['id'])
                flash(f"Cloned \"{p['title']}\"")
                st.rerun()
            elif action == "delete":
                project_svc.delete_project(p['id'])
                flash(f"Deleted \"{p['title']}\"", "🗑️")
                st.rerun()
    with right:
        _render_check_in(today)
        _render_reflection(today)
