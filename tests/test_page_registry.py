from unittest.mock import patch, MagicMock

# Mock streamlit before importing the app
st_mock = MagicMock()


def test_page_registry_structure():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from app import PAGE_REGISTRY
    """
    Tests that the PAGE_REGISTRY has the correct structure.
    """
    assert isinstance(PAGE_REGISTRY, dict)
    for key, value in PAGE_REGISTRY.items():
        assert "label" in value
        assert "render_func" in value
        assert "menu" in value
        assert callable(value["render_func"])
        assert isinstance(value["menu"], bool)


def test_menu_pages():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from app import PAGE_REGISTRY
    menu_pages = [key for key, value in PAGE_REGISTRY.items() if value["menu"]]
    expected = ["dashboard", "projects", "project_workspace", "idea_vault",
                "analytics", "profile", "data_tools"]
    assert sorted(menu_pages) == sorted(expected)


def test_focus_mode_is_hidden_from_menu():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from app import PAGE_REGISTRY
    assert PAGE_REGISTRY["focus_mode"]["menu"] is False


def test_labels_are_unique():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from app import PAGE_REGISTRY
    labels = [v["label"] for v in PAGE_REGISTRY.values()]
    assert len(labels) == len(set(labels))


def test_configure_logging_runs_once(monkeypatch):
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        import app
    calls = []
    monkeypatch.setattr(app.logging, "basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setattr(app.configure_logging, "_configured", False, raising=False)
    app.configure_logging("DEBUG")
    app.configure_logging("DEBUG")
    assert len(calls) == 1
    assert calls[0]["level"] == app.logging.DEBUG
