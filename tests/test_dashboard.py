import csv
import io
import json

import pytest

from services import dashboard as dash_svc, persistence, projects as project_svc, profile as profile_svc
from services.errors import NotFoundError


def test_summary_empty():
    stats = dash_svc.summary([], [])
    assert stats["total_projects"] == 0
    assert stats["average_progress"] == 0
    assert stats["average_idea_score"] == 0


def test_summary_counts():
    projects = [
        {"status": "launched", "progress": 100},
        {"status": "in-progress", "progress": 40},
        {"status": "in-progress", "progress": 10},
    ]
    ideas = [
        {"status": "validated", "ai_priority_score": 8.0},
        {"status": "idea", "ai_priority_score": 6.0},
    ]
    stats = dash_svc.summary(projects, ideas)
    assert stats["launched_projects"] == 1
    assert stats["in_progress_projects"] == 2
    assert stats["average_progress"] == 50
    assert stats["high_priority_ideas"] == 1
    assert stats["validated_ideas"] == 1
    assert stats["new_ideas"] == 1
    assert stats["average_idea_score"] == 7.0


def test_load_sample_data_is_idempotent():
    added = dash_svc.load_sample_data()
    assert added["projects"] == 3
    assert added["ideas"] == 3
    assert added["check_ins"] == 14
    assert added["reflections"] == 14

    again = dash_svc.load_sample_data()
    assert sum(again.values()) == 0

    projects = {p["id"]: p for p in project_svc.list_projects()}
    assert projects["sample-1"]["progress"] == 62  # 8 of 13 phases
    assert projects["sample-2"]["progress"] == 85
    assert projects["sample-3"]["progress"] == 23
    assert sum(p["completed"] for p in projects["sample-2"]["phases"]) == 11


def test_sample_rituals_are_deterministic():
    from demo import sample_data
    first = sample_data.make_rituals(seed=3)
    second = sample_data.make_rituals(seed=3)
    assert first == second


def test_export_to_csv_serializes_nested_values():
    project_svc.create_project("Exported", tags=["AI", "SaaS"])
    text = dash_svc.export_to_csv("projects")
    rows = list(csv.DictReader(io.StringIO(text)))
    assert len(rows) == 1
    assert rows[0]["title"] == "Exported"
    assert json.loads(rows[0]["tags"]) == ["AI", "SaaS"]
    assert len(json.loads(rows[0]["phases"])) == 13


def test_export_empty_collection():
    assert dash_svc.export_to_csv("ideas") == ""


def test_template_export():
    data = json.loads(dash_svc.template_export("web-app-saas"))
    assert data["id"] == "web-app-saas"
    assert "Stripe" in data["tech_stack"]
    with pytest.raises(NotFoundError):
        dash_svc.template_export("missing")


def test_reset_all_data():
    dash_svc.load_sample_data()
    profile_svc.complete_onboarding("Sam", "", [], "beginner", [])
    dash_svc.reset_all_data()
    for key in dash_svc.EXPORTABLE_KEYS:
        assert persistence.load_list(key) == []
    assert profile_svc.get_profile()["onboarded"] is False


def test_sample_projects_follow_existing_positions():
    first = project_svc.create_project("Mine").id
    dash_svc.load_sample_data(include_rituals=False)
    ids = [p["id"] for p in project_svc.list_projects()]
    assert ids == [first, "sample-1", "sample-2", "sample-3"]
    assert [p["position"] for p in project_svc.list_projects()] == [0, 1, 2, 3]
