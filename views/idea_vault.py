import streamlit as st

from domain.constants import IDEA_CATEGORIES, IDEA_STATUSES
from services import ideas as idea_svc, projects as project_svc
from services.errors import ValidationError, NotFoundError
from ui.components import idea_card, show_error, flash

WIZARD_STEPS = ["Basics", "Market", "Problem", "Score"]
SORT_LABELS = {"priority": "AI priority", "recent": "Most recent", "pmf": "PMF score"}


def _draft():
    return st.session_state.setdefault('idea_draft', {
        'title': '', 'description': '', 'category': None, 'target_audience': '', 'problem_it_solves': '',
    })


def _reset_wizard():
    st.session_state.idea_wizard_step = 0
    st.session_state.pop('idea_draft', None)


def _render_wizard():
    step = st.session_state.setdefault('idea_wizard_step', 0)
    draft = _draft()
    st.progress((step + 1) / len(WIZARD_STEPS), text=f"Step {step + 1} of {len(WIZARD_STEPS)}: {WIZARD_STEPS[step]}")

    if step == 0:
        draft['title'] = st.text_input("Idea title", value=draft['title'])
        draft['description'] = st.text_area("Description", value=draft['description'],
                                            help="Mention what excites you about it.")
    elif step == 1:
        category = draft['category']
        draft['category'] = st.radio("Category", IDEA_CATEGORIES, horizontal=True,
                                     index=IDEA_CATEGORIES.index(category) if category in IDEA_CATEGORIES else 0,
                                     format_func=str.capitalize)
        draft['target_audience'] = st.text_input("Target audience", value=draft['target_audience'])
    elif step == 2:
        draft['problem_it_solves'] = st.text_area("What problem does it solve?", value=draft['problem_it_solves'])
    else:
        try:
            score = idea_svc.score_idea(**draft)
        except ValidationError as e:
            show_error(e)
            score = None
        if score:
            c1, c2, c3, c4 = st.columns(4)
            c1.metric("AI priority", f"{score.ai_priority_score:.1f}")
            c2.metric("PMF", score.pmf_score)
            c3.metric("Portfolio fit", score.portfolio_fit_score)
            c4.metric("Launch speed", score.launch_speed_score)
            st.caption(f"Energy: {score.energy_level}")
            st.info(f"Next step: {score.next_step}")
            if st.button("Save to vault", type="primary"):
                try:
                    idea = idea_svc.create_idea(score=score, **draft)
                except ValidationError as e:
                    show_error(e)
                else:
                    _reset_wizard()
                    flash(f"\"{idea.title}\" scored {idea.ai_priority_score:.1f}", "💡")
                    st.rerun()

    back, _, nxt = st.columns([1, 3, 1])
    if step > 0 and back.button("← Back"):
        st.session_state.idea_wizard_step = step - 1
        st.rerun()
    if step < len(WIZARD_STEPS) - 1 and nxt.button("Next →"):
        if step == 0 and not draft['title'].strip():
            st.error("Give your idea a title first.")
        else:
            st.session_state.idea_wizard_step = step + 1
            st.rerun()


def _handle_action(idea, action):
    try:
        if action == "validate":
            idea_svc.validate_idea(idea['id'])
            flash(f"\"{idea['title']}\" validated")
        elif action == "kill":
            idea_svc.kill_idea(idea['id'])
            flash(f"\"{idea['title']}\" killed", "🪦")
        elif action == "convert":
            project = project_svc.convert_idea_to_project(idea['id'])
            flash(f"\"{project.title}\" is now a project", "🚀")
        else:
            return
    except (ValidationError, NotFoundError) as e:
        show_error(e)
        return
    st.rerun()


def view():
    st.header("💡 Idea Vault")

    with st.expander("➕ Capture a new idea", expanded=not idea_svc.list_ideas()):
        _render_wizard()

    c1, c2 = st.columns(2)
    sort_by = c1.selectbox("Sort by", list(SORT_LABELS), format_func=SORT_LABELS.get)
    status_filter = c2.selectbox("Status", ["all"] + IDEA_STATUSES, format_func=str.capitalize)
    ideas = idea_svc.list_ideas(sort_by=sort_by, status_filter=status_filter)
    if not ideas:
        st.caption("No ideas match this filter.")
        return
    cols = st.columns(2)
    for i, idea in enumerate(ideas):
        with cols[i % 2]:
            _handle_action(idea, idea_card(idea, key_prefix="vault"))
