"""Distraction-free view: one project, its current phase and today's focus."""
import streamlit as st

from services import projects as project_svc, rituals
from services.assistant import get_project_next_action
from domain.phases import AUTOMATION_MESSAGES
from ui.components import flash


def exit_focus_mode():
    st.session_state.focus_mode = False


def view():
    projects = project_svc.list_projects()
    today = rituals.todays_check_in()

    st.markdown("<div class='hero'><div style='font-size:1.3rem;font-weight:700'>🎯 Focus Mode</div></div>",
                unsafe_allow_html=True)
    if today:
        st.markdown(f"### Today: {today['focus']}")

    selected = st.session_state.get('selected_project_id')
    project = next((p for p in projects if p['id'] == selected), None) or project_svc.pick_focus_project(projects)
    if project is None:
        st.info("No projects to focus on yet.")
        st.button("Exit focus mode", on_click=exit_focus_mode)
        return

    phase = project_svc.current_phase(project)
    st.subheader(project.get('title'))
    st.progress((project.get('progress') or 0) / 100, text=f"{project.get('progress', 0)}% complete")

    if phase and not phase.get('completed'):
        with st.container(border=True):
            st.markdown(f"## {phase.get('name')}")
            if phase.get('description'):
                st.caption(phase['description'])
            for task in (phase.get('tasks') or []) + (phase.get('subtasks') or []):
                st.markdown(f"- [ ] {task}")
            energy = today['energy'] if today else "medium"
            st.info(get_project_next_action(project, energy))
            if st.button("✅ Complete phase", type="primary"):
                index = project['phases'].index(phase)
                _, trigger = project_svc.toggle_phase(project['id'], index)
                if trigger:
                    title, desc = AUTOMATION_MESSAGES.get(trigger, (trigger, ""))
                    flash(f"{title} {desc}", "⚙️")
                else:
                    flash(f"{phase.get('name')} done")
                st.rerun()
    else:
        st.success("Every phase is complete. Time to launch or iterate!")

    upcoming = project_svc.upcoming_phases(project)
    if upcoming:
        st.markdown("**Up next:** " + " → ".join(p.get('name') for p in upcoming))

    st.button("Exit focus mode", on_click=exit_focus_mode)
