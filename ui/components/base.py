import streamlit as st

from domain.constants import STATUS_LABELS, TYPE_ICONS
from services.errors import ValidationError

PRIMARY_ACCENT = "#2563EB"  # blue-600
GREEN = "#059669"  # emerald-600
YELLOW = "#D97706"  # amber-600
RED = "#DC2626"  # red-600
PURPLE = "#7C3AED"  # violet-600
CHIP_BG = "#374151"

STATUS_COLORS = {
    "ideation": CHIP_BG,
    "in-progress": PRIMARY_ACCENT,
    "ready-to-launch": YELLOW,
    "launched": GREEN,
    "idea": CHIP_BG,
    "validated": GREEN,
    "killed": RED,
    "converted": PURPLE,
}

LEVEL_CLASSES = {"high": "green", "medium": "yellow", "low": "red"}


def inject_base_css():
    """Badge and card styles; streamlit drops injected markup on rerun so call once per run."""
    st.markdown(
        f"""
        <style>
        .badge {{
            display:inline-block; padding:2px 8px; border-radius:12px;
            font-size:12px; line-height:16px; font-weight:600;
            background:{CHIP_BG}; color:#F9FAFB; margin-right:4px; margin-bottom:4px;
        }}
        .badge.green {{background:{GREEN};}}
        .badge.yellow {{background:{YELLOW};}}
        .badge.red {{background:{RED};}}
        .tag {{display:inline-block; padding:1px 8px; border-radius:10px; font-size:11px;
               border:1px solid #d2d5da; color:#374151; margin-right:4px;}}
        .phase-done {{color:{GREEN}; text-decoration:line-through;}}
        .hero {{padding:0.9rem 1.1rem; border-radius:10px; color:white; margin-bottom:1rem;
                background:linear-gradient(135deg,{PRIMARY_ACCENT},{PURPLE});}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def status_badge(status: str) -> str:
    color = STATUS_COLORS.get(status, CHIP_BG)
    label = STATUS_LABELS.get(status, status.replace('-', ' ').title())
    return f'<span class="badge" style="background:{color}">{label}</span>'


def level_badge(level: str, prefix: str = "") -> str:
    cls = LEVEL_CLASSES.get(level, "")
    return f'<span class="badge {cls}">{prefix}{level}</span>'


def tag_chips(tags) -> str:
    return " ".join(f'<span class="tag">{t}</span>' for t in tags or [])


def type_icon(project_type: str) -> str:
    return TYPE_ICONS.get(project_type, "📁")


def score_color(score: float) -> str:
    if score >= 8:
        return GREEN
    if score >= 6:
        return YELLOW
    return RED


def flash(message: str, icon: str = "✅"):
    """Queue a toast that survives the st.rerun() which usually follows a write."""
    st.session_state.setdefault('flash_messages', []).append((message, icon))


def render_flash():
    for message, icon in st.session_state.pop('flash_messages', []):
        st.toast(message, icon=icon)


def navigate(page_key: str, **state):
    """Switch pages on the next run; extra kwargs are stored in session state first."""
    for k, v in state.items():
        st.session_state[k] = v
    st.session_state.nav_target = page_key
    st.rerun()


def show_error(exc: Exception):
    """Render a service error: validation problems as a titled message, the rest verbatim."""
    if isinstance(exc, ValidationError):
        st.error(f"**{exc.title}**: {exc.message}")
    else:
        st.error(str(exc))
