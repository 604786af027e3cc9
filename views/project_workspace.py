from dataclasses import fields

import pandas as pd
import streamlit as st

from domain.constants import STRATEGY_FRAMEWORKS, EXPERIMENT_STATUSES, SENTIMENTS, LEVELS
from domain.models import LeanCanvas, Swot, BusinessModelCanvas
from domain.phases import AUTOMATION_MESSAGES
from services import projects as project_svc, rituals
from services.assistant import get_project_next_action
from services.errors import ValidationError, NotFoundError
from ui.components import status_badge, tag_chips, type_icon, show_error, flash

# fields rendered as a single text input instead of one-item-per-line
_SCALAR_FIELDS = {'value_proposition', 'unfair_advantage'}


def _lines(text: str):
    return [line.strip() for line in (text or '').splitlines() if line.strip()]


def _label(field_name: str) -> str:
    return field_name.replace('_', ' ').capitalize()


def _save(project_id, framework, data):
    try:
        project_svc.save_strategy(project_id, framework, data)
    except (ValidationError, NotFoundError) as e:
        show_error(e)
    else:
        flash(f"{STRATEGY_FRAMEWORKS[framework][0]} saved")
        st.rerun()


def _render_overview(project):
    pid = project['id']
    c1, c2, c3 = st.columns(3)
    c1.metric("Progress", f"{project.get('progress', 0)}%")
    c2.metric("Phases done", f"{project_svc.completed_phase_count(project)}/{len(project.get('phases') or [])}")
    c3.metric("Timeline", project.get('timeline') or "—")
    if project.get('purpose'):
        st.markdown(f"**Purpose:** {project['purpose']}")
    if project.get('key_tasks'):
        st.markdown("**Key tasks:** " + "; ".join(project['key_tasks']))

    today = rituals.todays_check_in()
    energy = today['energy'] if today else "medium"
    st.info(f"Next action ({energy} energy): {get_project_next_action(project, energy)}")

    st.subheader("Launch checklist")
    for index, phase in enumerate(project.get('phases') or []):
        checked = st.checkbox(f"{index + 1}. {phase.get('name')}", value=bool(phase.get('completed')),
                              key=f"phase_{pid}_{index}")
        if checked != bool(phase.get('completed')):
            _, trigger = project_svc.toggle_phase(pid, index)
            if trigger:
                title, desc = AUTOMATION_MESSAGES.get(trigger, (trigger, ""))
                flash(f"{title} {desc}", "⚙️")
            st.rerun()
        with st.expander("Details", expanded=False):
            if phase.get('description'):
                st.caption(phase['description'])
            for task in phase.get('tasks') or []:
                st.markdown(f"- {task}")
            for sub in phase.get('subtasks') or []:
                st.markdown(f"  - {sub}")

    if project.get('voice_notes'):
        with st.expander("🎙️ Original voice notes"):
            st.write(project['voice_notes'])


def _dataclass_form(project_id, framework, model, current):
    with st.form(f"{framework}_form_{project_id}"):
        values = {}
        for f in fields(model):
            name = f.name
            existing = current.get(name)
            if name in _SCALAR_FIELDS:
                values[name] = st.text_input(_label(name), value=existing or '')
            else:
                values[name] = _lines(st.text_area(f"{_label(name)} (one per line)",
                                                   value="\n".join(existing or []), height=90))
        if st.form_submit_button("Save"):
            _save(project_id, framework, values)


def _render_personas(project_id, personas):
    for persona in personas:
        with st.container(border=True):
            st.markdown(f"**{persona.get('name')}**, {persona.get('age')} · {persona.get('occupation') or ''}")
            for key in ('goals', 'pain_points', 'motivations', 'jobs_to_be_done'):
                if persona.get(key):
                    st.caption(f"{_label(key)}: " + "; ".join(persona[key]))
    with st.form(f"persona_form_{project_id}", clear_on_submit=True):
        name = st.text_input("Persona name")
        age = st.number_input("Age", min_value=13, max_value=99, value=30)
        occupation = st.text_input("Occupation")
        goals = st.text_area("Goals (one per line)")
        pains = st.text_area("Pain points (one per line)")
        jobs = st.text_area("Jobs to be done (one per line)")
        if st.form_submit_button("Add persona"):
            if not name.strip():
                st.error("Give the persona a name.")
            else:
                persona = project_svc.make_persona(name.strip(), age=int(age), occupation=occupation,
                                                   goals=_lines(goals), pain_points=_lines(pains),
                                                   jobs_to_be_done=_lines(jobs))
                _save(project_id, 'personas', personas + [persona])


def _render_effort_grid(project_id, tasks):
    if tasks:
        df = pd.DataFrame(tasks)[['task', 'effort', 'impact', 'priority']]
        order = {lvl: i for i, lvl in enumerate(LEVELS)}
        df = df.sort_values(by='priority', key=lambda s: s.map(order))
        st.dataframe(df, hide_index=True, use_container_width=True)
        st.scatter_chart(df, x='effort', y='impact')
    with st.form(f"effort_form_{project_id}", clear_on_submit=True):
        task = st.text_input("Task or feature")
        c1, c2 = st.columns(2)
        effort = c1.slider("Effort", 1, 10, 5)
        impact = c2.slider("Impact", 1, 10, 5)
        if st.form_submit_button("Add to grid"):
            if not task.strip():
                st.error("Describe the task first.")
            else:
                _save(project_id, 'effort_impact_grid',
                      tasks + [project_svc.make_task_priority(task.strip(), effort, impact)])


def _render_strategy(project):
    pid = project['id']
    strategy = project.get('strategy') or {}
    models = {'lean_canvas': LeanCanvas, 'swot_analysis': Swot, 'business_model': BusinessModelCanvas}
    tabs = st.tabs([title for title, _ in STRATEGY_FRAMEWORKS.values()])
    for tab, (framework, (_, description)) in zip(tabs, STRATEGY_FRAMEWORKS.items()):
        with tab:
            st.caption(description)
            if framework in models:
                _dataclass_form(pid, framework, models[framework], strategy.get(framework) or {})
            elif framework == 'personas':
                _render_personas(pid, list(strategy.get('personas') or []))
            else:
                _render_effort_grid(pid, list(strategy.get('effort_impact_grid') or []))


def _render_validation(project):
    pid = project['id']
    validation = project.get('validation') or {}

    st.subheader("Assumptions")
    for a in validation.get('assumptions', []):
        st.markdown(f"- {a}")
    with st.form(f"assumption_form_{pid}", clear_on_submit=True):
        assumption = st.text_input("New assumption")
        if st.form_submit_button("Add assumption"):
            try:
                project_svc.add_assumption(pid, assumption)
            except ValidationError as e:
                show_error(e)
            else:
                st.rerun()

    st.subheader("Experiments")
    for exp in validation.get('experiments', []):
        with st.container(border=True):
            st.markdown(f"**{exp.get('hypothesis')}**")
            st.caption(f"Method: {exp.get('method') or '—'} · Success: {exp.get('success_criteria') or '—'}")
            status = st.selectbox("Status", EXPERIMENT_STATUSES,
                                  index=EXPERIMENT_STATUSES.index(exp.get('status', 'planned')),
                                  key=f"exp_status_{exp['id']}")
            results = st.text_input("Results", value=exp.get('results') or '', key=f"exp_results_{exp['id']}")
            if status != exp.get('status') or results != (exp.get('results') or ''):
                if st.button("Update", key=f"exp_update_{exp['id']}"):
                    project_svc.set_experiment_status(pid, exp['id'], status, results)
                    st.rerun()
    with st.form(f"experiment_form_{pid}", clear_on_submit=True):
        hypothesis = st.text_input("Hypothesis")
        method = st.text_input("Method", placeholder="Landing page, interviews, pre-sales...")
        criteria = st.text_input("Success criteria")
        if st.form_submit_button("Add experiment"):
            try:
                project_svc.add_experiment(pid, hypothesis, method, criteria)
            except ValidationError as e:
                show_error(e)
            else:
                st.rerun()

    st.subheader("Customer feedback")
    feedback = validation.get('feedback', [])
    if feedback:
        st.dataframe(pd.DataFrame(feedback)[['date', 'source', 'sentiment', 'feedback']],
                     hide_index=True, use_container_width=True)
    with st.form(f"feedback_form_{pid}", clear_on_submit=True):
        source = st.text_input("Source", placeholder="Interview, email, Reddit...")
        text = st.text_area("Feedback")
        sentiment = st.selectbox("Sentiment", SENTIMENTS, index=1)
        if st.form_submit_button("Add feedback"):
            try:
                project_svc.add_feedback(pid, source, text, sentiment)
            except ValidationError as e:
                show_error(e)
            else:
                st.rerun()


def _render_launch_plan(project):
    pid = project['id']
    plan = project.get('launch_plan') or {}
    with st.form(f"launch_plan_form_{pid}"):
        launch_date = st.text_input("Launch date (YYYY-MM-DD)", value=plan.get('launch_date') or '')
        lists = {}
        for key in ('prelaunch_tasks', 'launch_tasks', 'postlaunch_tasks', 'marketing_channels', 'success_metrics'):
            lists[key] = _lines(st.text_area(f"{_label(key)} (one per line)", value="\n".join(plan.get(key) or []),
                                             height=90))
        if st.form_submit_button("Save launch plan"):
            project_svc.save_launch_plan(pid, launch_date=launch_date or None, **lists)
            flash("Launch plan saved", "🚀")
            st.rerun()


def view():
    st.header("🛠️ Project Workspace")
    projects = project_svc.list_projects()
    if not projects:
        st.info("Create a project first.")
        return

    ids = [p['id'] for p in projects]
    selected = st.session_state.get('selected_project_id')
    index = ids.index(selected) if selected in ids else 0
    titles = {p['id']: p.get('title', p['id']) for p in projects}
    project_id = st.selectbox("Project", ids, index=index, format_func=titles.get)
    st.session_state.selected_project_id = project_id

    try:
        project = project_svc.get_project(project_id)
    except NotFoundError as e:
        show_error(e)
        return

    st.markdown(f"## {type_icon(project.get('type'))} {project.get('title')} " + status_badge(project.get('status')),
                unsafe_allow_html=True)
    if project.get('tags'):
        st.markdown(tag_chips(project['tags']), unsafe_allow_html=True)

    tabs = st.tabs(["Overview", "Strategy", "Validation", "Launch plan"])
    with tabs[0]:
        _render_overview(project)
    with tabs[1]:
        _render_strategy(project)
    with tabs[2]:
        _render_validation(project)
    with tabs[3]:
        _render_launch_plan(project)
