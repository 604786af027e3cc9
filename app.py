import datetime as dt
import logging
from urllib.parse import unquote

import streamlit as st

from domain.constants import APP_TITLE, LOG_LEVEL
from services import persistence, profile as profile_svc
from ui.components import inject_base_css, render_flash

# Import the page rendering functions from the view modules
from views import dashboard, projects, project_workspace, idea_vault, analytics, focus_mode, profile, data_tools

logger = logging.getLogger(__name__)

# --- Page Registry ---
# Maps a page key to its label, rendering function and whether it shows up in the sidebar menu.
PAGE_REGISTRY = {
    "dashboard": {
        "label": "🏠 Dashboard",
        "render_func": dashboard.view,
        "menu": True,
    },
    "projects": {
        "label": "🚀 Projects",
        "render_func": projects.view,
        "menu": True,
    },
    "project_workspace": {
        "label": "🛠️ Project Workspace",
        "render_func": project_workspace.view,
        "menu": True,
    },
    "idea_vault": {
        "label": "💡 Idea Vault",
        "render_func": idea_vault.view,
        "menu": True,
    },
    "analytics": {
        "label": "📊 Analytics",
        "render_func": analytics.view,
        "menu": True,
    },
    "profile": {
        "label": "🙍 Founder Profile",
        "render_func": profile.view,
        "menu": True,
    },
    "data_tools": {
        "label": "💾 Data",
        "render_func": data_tools.view,
        "menu": True,
    },
    "focus_mode": {
        "label": "🎯 Focus Mode",
        "render_func": focus_mode.view,
        "menu": False,
    },
}


def configure_logging(level: str = LOG_LEVEL):
    """Configure root logging once; streamlit reruns the script on every interaction."""
    if getattr(configure_logging, "_configured", False):
        return
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    configure_logging._configured = True
    logger.info("Logging configured at %s; data dir %s", level, persistence.DATA_DIR)


def _enter_focus_mode():
    st.session_state.focus_mode = True


def _resolve_nav_target(labels):
    """Apply a pending navigation request (page key or label) to the sidebar radio."""
    target = st.session_state.pop('nav_target')
    if target in PAGE_REGISTRY:
        target = PAGE_REGISTRY[target]['label']
    if target in labels:
        st.session_state.navigation_radio = target
        st.query_params['page'] = target


def main():
    """
    Main application router.

    Controls the sidebar navigation and renders the selected page. When Focus
    Mode is on, only the focus view is rendered and the menu is hidden.
    """
    configure_logging()
    st.set_page_config(page_title=APP_TITLE, layout="wide")
    inject_base_css()
    render_flash()

    if 'focus_mode' not in st.session_state:
        st.session_state.focus_mode = False

    if st.session_state.focus_mode:
        focus_mode.view()
        return

    menu_pages = {k: v for k, v in PAGE_REGISTRY.items() if v["menu"]}
    page_keys = list(menu_pages.keys())
    page_labels = [v["label"] for v in menu_pages.values()]

    # --- Sidebar ---
    st.sidebar.title(APP_TITLE)
    profile = profile_svc.get_profile()
    if profile.get('name'):
        st.sidebar.caption(f"👋 {profile['name']}")

    # Query param persistence
    qs = st.query_params
    if 'nav_target' in st.session_state:
        _resolve_nav_target(page_labels)
    elif 'page' in qs and 'navigation_radio' not in st.session_state:
        raw_param = qs.get('page')
        raw = unquote(raw_param) if isinstance(raw_param, str) else ''
        if raw in page_labels:
            st.session_state.navigation_radio = raw

    # Page selection radio buttons (single source of truth via widget state)
    selected_page_label = st.sidebar.radio(
        "Navigate",
        page_labels,
        key="navigation_radio"
    )
    st.query_params['page'] = selected_page_label
    selected_page_key = page_keys[page_labels.index(selected_page_label)]

    st.sidebar.button("🎯 Enter Focus Mode", on_click=_enter_focus_mode, use_container_width=True)

    # --- Page Rendering ---
    menu_pages[selected_page_key]["render_func"]()

    # --- Footer ---
    st.sidebar.markdown("---")
    st.sidebar.caption(
        f"Data dir: {persistence.DATA_DIR} | {dt.datetime.now(dt.timezone.utc).strftime('%H:%M:%S')}Z"
    )


if __name__ == "__main__":
    main()
