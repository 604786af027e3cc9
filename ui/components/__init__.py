"""
This package provides a collection of reusable UI components for the Streamlit application.

It is organized into several modules, each containing a specific category of components:
- `base`: CSS injection, badges, chips and the shared error renderer.
- `cards`: Project, idea and recommendation cards.
- `forms`: Check-in, evening reflection and founder profile forms.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    status_badge,
    level_badge,
    tag_chips,
    type_icon,
    show_error,
    flash,
    render_flash,
    navigate,
)

from .cards import (
    stat_card,
    project_card,
    idea_card,
    recommendation_card,
)

from .forms import (
    check_in_form,
    reflection_form,
    profile_form,
)
