import streamlit as st

from domain.constants import PROJECT_TYPES, PROJECT_STATUSES, STATUS_LABELS
from services import projects as project_svc, dashboard as dash_svc
from services.errors import ValidationError, NotFoundError
from services.voice import ParsedProject, parse_voice_input
from ui.components import project_card, type_icon, show_error, flash, navigate


def _handle_card_action(project, action):
    if action == "open":
        navigate("project_workspace", selected_project_id=project['id'])
    elif action == "clone":
        clone = project_svc.clone_project(project['id'])
        flash(f"Created \"{clone.title}\"")
        st.rerun()
    elif action == "delete":
        project_svc.delete_project(project['id'])
        flash(f"Deleted \"{project['title']}\"", "🗑️")
        st.rerun()


def _render_grid(projects):
    if not projects:
        st.info("No projects yet. Start from scratch, a voice pitch, or a template.")
        return
    cols = st.columns(3)
    for i, p in enumerate(projects):
        with cols[i % 3]:
            _handle_card_action(p, project_card(p, key_prefix="grid"))


def _move(project_id, step):
    if project_svc.move_within_column(project_id, step):
        st.rerun()


def _render_kanban(projects):
    board = project_svc.projects_by_status(projects)
    cols = st.columns(len(PROJECT_STATUSES))
    for col, status in zip(cols, PROJECT_STATUSES):
        with col:
            st.markdown(f"**{STATUS_LABELS[status]}** ({len(board[status])})")
            for p in board[status]:
                pid = p['id']
                with st.container(border=True):
                    st.markdown(f"{type_icon(p.get('type'))} **{p.get('title')}**")
                    st.progress((p.get('progress') or 0) / 100)
                    target = st.selectbox("Move to", PROJECT_STATUSES, index=PROJECT_STATUSES.index(status),
                                          format_func=STATUS_LABELS.get, key=f"kanban_move_{pid}",
                                          label_visibility="collapsed")
                    if target != status:
                        project_svc.move_project(pid, target)
                        flash(f"Moved to {STATUS_LABELS[target]}")
                        st.rerun()
                    up, down = st.columns(2)
                    if up.button("↑", key=f"kanban_up_{pid}", use_container_width=True):
                        _move(pid, -1)
                    if down.button("↓", key=f"kanban_down_{pid}", use_container_width=True):
                        _move(pid, 1)


def _split(text: str):
    return [t.strip() for t in (text or '').split(',') if t.strip()]


def _render_new_project():
    with st.form("new_project_form", clear_on_submit=True):
        title = st.text_input("Project title", placeholder="New Project")
        project_type = st.selectbox("Type", PROJECT_TYPES, format_func=lambda t: f"{type_icon(t)} {t}")
        purpose = st.text_area("Purpose", placeholder="Who is it for and what problem does it solve?")
        timeline = st.text_input("Timeline", placeholder="in 6 weeks")
        tags = st.text_input("Tags (comma separated)")
        submitted = st.form_submit_button("Create project", type="primary")
    if submitted:
        try:
            project = project_svc.create_project(title=title, type=project_type, purpose=purpose or None,
                                                 timeline=timeline or None, tags=_split(tags))
        except ValidationError as e:
            show_error(e)
        else:
            flash(f"Created \"{project.title}\"")
            st.rerun()


def _render_voice():
    st.caption("Dictate or paste a rough pitch. We'll pull out the title, purpose, tasks and timeline.")
    transcript = st.text_area("Transcript", key="voice_transcript", height=150,
                              placeholder="I'm building a Chrome extension that blocks distracting sites...")
    if st.button("Parse transcript", disabled=not (transcript or '').strip()):
        st.session_state.voice_draft = parse_voice_input(transcript)

    draft = st.session_state.get('voice_draft')
    if not draft:
        return
    with st.form("voice_draft_form"):
        title = st.text_input("Title", value=draft.title)
        project_type = st.selectbox("Type", PROJECT_TYPES, index=PROJECT_TYPES.index(draft.type))
        purpose = st.text_area("Purpose", value=draft.purpose)
        tasks = st.text_area("Key tasks (one per line)", value="\n".join(draft.key_tasks))
        timeline = st.text_input("Timeline", value=draft.timeline or "")
        tags = st.text_input("Tags", value=", ".join(draft.tags))
        st.caption(f"Detected status: {STATUS_LABELS.get(draft.status, draft.status)}")
        submitted = st.form_submit_button("Create from voice", type="primary")
    if submitted:
        edited = ParsedProject(
            title=title, type=project_type, purpose=purpose,
            key_tasks=[t.strip() for t in tasks.splitlines() if t.strip()],
            timeline=timeline or None, tags=_split(tags), status=draft.status,
        )
        try:
            project = project_svc.create_project_from_transcript(transcript, parsed=edited)
        except ValidationError as e:
            show_error(e)
        else:
            del st.session_state['voice_draft']
            flash(f"Created \"{project.title}\" from your pitch", "🎙️")
            st.rerun()


def _render_templates():
    for tpl in dash_svc.TEMPLATES:
        with st.container(border=True):
            st.markdown(f"### {type_icon(tpl.type)} {tpl.name}")
            st.write(tpl.description)
            st.caption("Stack: " + ", ".join(tpl.tech_stack))
            with st.expander("SOP checklist & automations"):
                for item in tpl.sop_items:
                    st.markdown(f"- {item}")
                st.markdown("**Automations**")
                for item in tpl.automations:
                    st.markdown(f"- ⚙️ {item}")
            c1, c2 = st.columns(2)
            if c1.button("Use template", key=f"tpl_use_{tpl.id}", type="primary"):
                try:
                    project = project_svc.create_project_from_template(tpl.id)
                except NotFoundError as e:
                    show_error(e)
                else:
                    flash(f"Created \"{project.title}\" from template")
                    st.rerun()
            c2.download_button("Export JSON", dash_svc.template_export(tpl.id), f"{tpl.id}.json",
                               "application/json", key=f"tpl_export_{tpl.id}")


def view():
    st.header("🚀 Projects")
    projects = project_svc.list_projects()
    tabs = st.tabs(["Grid", "Kanban", "➕ New", "🎙️ Voice", "📦 Templates"])
    with tabs[0]:
        _render_grid(projects)
    with tabs[1]:
        _render_kanban(projects)
    with tabs[2]:
        _render_new_project()
    with tabs[3]:
        _render_voice()
    with tabs[4]:
        _render_templates()
