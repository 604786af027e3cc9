import streamlit as st
from typing import Dict, Any, Optional

from .base import status_badge, level_badge, tag_chips, type_icon, score_color
from services import projects as project_svc
from services.assistant import Recommendation

PRIORITY_ICONS = {"high": "🔥", "medium": "⭐", "low": "💡"}
RECOMMENDATION_ICONS = {"focus": "🎯", "idea": "💡", "project": "🚀", "tip": "🧠"}


def stat_card(label: str, value: Any, caption: str = ""):
    with st.container(border=True):
        st.metric(label, value)
        if caption:
            st.caption(caption)


def project_card(project: Dict[str, Any], key_prefix: str = "card", compact: bool = False) -> Optional[str]:
    """
    Displays a project card with progress, current phase and quick actions.

    Returns the action the user clicked ("open", "clone", "delete") or None.
    """
    pid = project.get('id')
    with st.container(border=True):
        top = st.columns([5, 2])
        with top[0]:
            st.markdown(f"**{type_icon(project.get('type', ''))} {project.get('title', 'Untitled Project')}**")
        with top[1]:
            st.markdown(status_badge(project.get('status', 'ideation')), unsafe_allow_html=True)

        progress = int(project.get('progress') or 0)
        st.progress(progress / 100, text=f"{progress}% complete")

        if not compact:
            if project.get('purpose'):
                st.caption(project['purpose'])
            phase = project_svc.current_phase(project)
            if phase and progress < 100:
                st.markdown(f"Current phase: *{phase.get('name')}*")
            if project.get('tags'):
                st.markdown(tag_chips(project['tags']), unsafe_allow_html=True)

        cols = st.columns(3)
        if cols[0].button("Open", key=f"{key_prefix}_open_{pid}", use_container_width=True):
            return "open"
        if cols[1].button("Clone", key=f"{key_prefix}_clone_{pid}", use_container_width=True):
            return "clone"
        if cols[2].button("Delete", key=f"{key_prefix}_delete_{pid}", use_container_width=True):
            return "delete"
    return None


def idea_card(idea: Dict[str, Any], key_prefix: str = "idea") -> Optional[str]:
    """Idea vault card; returns "validate", "kill", "convert" or None."""
    iid = idea.get('id')
    score = float(idea.get('ai_priority_score') or 0)
    status = idea.get('status', 'idea')
    with st.container(border=True):
        top = st.columns([5, 2])
        with top[0]:
            st.markdown(f"**{idea.get('title', 'Untitled')}**")
            st.caption(f"{idea.get('category', '?')} · {idea.get('target_audience') or 'no audience yet'}")
        with top[1]:
            st.markdown(
                f"<div style='font-size:1.6rem;font-weight:700;color:{score_color(score)};text-align:right'>"
                f"{score:.1f}</div>",
                unsafe_allow_html=True,
            )
        st.markdown(status_badge(status) + " " + level_badge(idea.get('energy_level', 'medium'), "energy: "),
                    unsafe_allow_html=True)
        if idea.get('description'):
            st.write(idea['description'])

        c1, c2, c3 = st.columns(3)
        c1.metric("PMF", idea.get('pmf_score', 0))
        c2.metric("Fit", idea.get('portfolio_fit_score', 0))
        c3.metric("Speed", idea.get('launch_speed_score', 0))
        if idea.get('next_step'):
            st.info(f"Next step: {idea['next_step']}")

        if status in ("converted", "killed"):
            return None
        actions = st.columns(3)
        if status == "idea" and actions[0].button("Validate", key=f"{key_prefix}_validate_{iid}"):
            return "validate"
        if actions[1].button("Kill", key=f"{key_prefix}_kill_{iid}"):
            return "kill"
        if actions[2].button("→ Project", key=f"{key_prefix}_convert_{iid}", type="primary"):
            return "convert"
    return None


def recommendation_card(rec: Recommendation, emphasize: bool = False):
    icon = RECOMMENDATION_ICONS.get(rec.type, "✨")
    with st.container(border=True):
        title = f"{icon} {rec.title}"
        st.markdown(f"### {title}" if emphasize else f"**{title}**")
        st.write(rec.description)
        meta = f"{PRIORITY_ICONS.get(rec.priority, '')} {rec.priority} priority · {rec.context}"
        st.caption(meta)
        if rec.actionable and rec.suggested_action:
            st.markdown(f"➡️ *{rec.suggested_action}*")
