"""View modules for manual routing.

`app.py` routes between pages itself instead of using Streamlit's automatic
multi-page system, so there is no `pages/` directory. Every page lives under
`views/` and exposes a `view()` function.

Add a new page as a module with a `view()` callable and register it in
`PAGE_REGISTRY` inside `app.py`. Views read through `services` and catch the
service errors (`ValidationError`, `NotFoundError`) to render them inline.
"""
