from dataclasses import asdict

import pytest

from domain.phases import PHASES
from services import persistence, projects as project_svc, ideas as idea_svc
from services.errors import ValidationError, NotFoundError


def _toggle_range(project_id, start, stop):
    result = None
    for i in range(start, stop):
        result = project_svc.toggle_phase(project_id, i)
    return result


def test_create_project_defaults():
    project = project_svc.create_project()
    assert project.title == "New Project"
    assert project.status == "ideation"
    assert project.progress == 0
    assert len(project.phases) == 13
    assert not any(p['completed'] for p in project.phases)
    assert project.phases[0]['id'] == f"{project.id}-0"
    assert project.phases[0]['tasks'] == ["Complete ideation tasks"]


def test_create_project_rejects_unknown_type():
    with pytest.raises(ValidationError):
        project_svc.create_project(type="desktop")


def test_toggle_progress_and_status_thresholds():
    pid = project_svc.create_project("Tracker").id

    project, _ = project_svc.toggle_phase(pid, 0)
    assert (project['progress'], project['status']) == (8, "in-progress")

    project, _ = _toggle_range(pid, 1, 11)
    assert (project['progress'], project['status']) == (85, "ready-to-launch")

    project, _ = _toggle_range(pid, 11, 13)
    assert (project['progress'], project['status']) == (100, "launched")

    # un-completing drops it back
    project, trigger = project_svc.toggle_phase(pid, 12)
    assert trigger is None
    assert (project['progress'], project['status']) == (92, "ready-to-launch")


def test_toggle_back_to_zero_is_ideation():
    pid = project_svc.create_project().id
    project_svc.toggle_phase(pid, 3)
    project, _ = project_svc.toggle_phase(pid, 3)
    assert (project['progress'], project['status']) == (0, "ideation")


def test_automation_trigger_fires_only_on_completion():
    pid = project_svc.create_project().id
    launch_index = next(i for i, p in enumerate(PHASES) if p.automation_trigger == "launch-announcement")
    _, trigger = project_svc.toggle_phase(pid, launch_index)
    assert trigger == "launch-announcement"
    _, trigger = project_svc.toggle_phase(pid, launch_index)
    assert trigger is None


def test_toggle_unknown_phase():
    pid = project_svc.create_project().id
    with pytest.raises(NotFoundError):
        project_svc.toggle_phase(pid, 13)


def test_clone_resets_progress():
    pid = project_svc.create_project("Original", tags=["AI"]).id
    _toggle_range(pid, 0, 4)
    clone = project_svc.clone_project(pid)
    assert clone.id != pid
    assert clone.title == "Original (Copy)"
    assert clone.progress == 0
    assert clone.status == "ideation"
    assert clone.tags == ["AI"]
    assert not any(p['completed'] for p in clone.phases)
    assert all(p['id'].startswith(clone.id) for p in clone.phases)
    assert len(project_svc.list_projects()) == 2


def test_convert_idea_to_project():
    idea = idea_svc.create_idea("Meal planner", "", "saas", problem_it_solves="Nobody knows what to cook")
    project = project_svc.convert_idea_to_project(idea.id)
    assert project.title == "Meal planner"
    assert project.type == "web-app"
    assert project.status == "ideation"
    assert project.purpose == "Nobody knows what to cook"
    assert project.key_tasks == [idea.next_step]
    assert project.tags == ["saas"]
    assert idea_svc.get_idea(idea.id)['status'] == "converted"

    with pytest.raises(ValidationError):
        project_svc.convert_idea_to_project(idea.id)


def test_project_from_transcript_starts_at_fifteen_percent():
    project = project_svc.create_project_from_transcript(
        "I started working on a mobile app for plants. I need to finish the camera screen.")
    assert project.type == "mobile"
    assert project.status == "in-progress"
    assert project.progress == 15
    assert project.phases[0]['tasks'] == ["I need to finish the camera screen"]
    assert project.voice_notes.startswith("I started")


def test_project_from_empty_transcript():
    with pytest.raises(ValidationError):
        project_svc.create_project_from_transcript("  ")


def test_project_from_template():
    project = project_svc.create_project_from_template("extension-template")
    assert project.type == "extension"
    assert project.template == "extension-template"
    assert project.title.startswith("New ")
    assert len(project.key_tasks) == 3
    with pytest.raises(NotFoundError):
        project_svc.create_project_from_template("nope")


def test_kanban_move_and_reorder():
    a = project_svc.create_project("A").id
    b = project_svc.create_project("B").id
    c = project_svc.create_project("C").id

    project_svc.move_project(b, "launched")
    board = project_svc.projects_by_status()
    assert [p['id'] for p in board["ideation"]] == [a, c]
    assert [p['id'] for p in board["launched"]] == [b]

    project_svc.reorder_projects([c, a])
    assert [p['id'] for p in project_svc.list_projects()] == [c, a, b]

    with pytest.raises(ValidationError):
        project_svc.move_project(a, "archived")


def test_delete_project():
    pid = project_svc.create_project().id
    project_svc.delete_project(pid)
    assert project_svc.list_projects() == []
    with pytest.raises(NotFoundError):
        project_svc.get_project(pid)


def test_focus_helpers():
    project = asdict(project_svc.create_project())
    assert project_svc.current_phase(project)['name'] == PHASES[0].name
    assert [p['name'] for p in project_svc.upcoming_phases(project)] == [PHASES[1].name, PHASES[2].name]
    pid = project['id']
    project, _ = project_svc.toggle_phase(pid, 0)
    assert project_svc.current_phase(project)['name'] == PHASES[1].name
    assert project_svc.completed_phase_count(project) == 1
    assert project_svc.pick_focus_project([project]) is project


@pytest.mark.parametrize("effort,impact,expected", [
    (2, 9, "high"),
    (8, 3, "low"),
    (8, 9, "medium"),
    (2, 2, "medium"),
])
def test_prioritize_task(effort, impact, expected):
    assert project_svc.prioritize_task(effort, impact) == expected


def test_save_strategy_frameworks():
    pid = project_svc.create_project().id
    project_svc.save_strategy(pid, "swot_analysis", {"strengths": ["fast"], "bogus": 1})
    task = project_svc.make_task_priority("Onboarding", effort=12, impact=7)
    project = project_svc.save_strategy(pid, "effort_impact_grid", [task])
    assert project['strategy']['swot_analysis']['strengths'] == ["fast"]
    assert 'bogus' not in project['strategy']['swot_analysis']
    assert project['strategy']['effort_impact_grid'][0]['effort'] == 10
    assert project['strategy']['effort_impact_grid'][0]['priority'] == "medium"

    with pytest.raises(ValidationError):
        project_svc.save_strategy(pid, "personas", {"name": "not a list"})
    with pytest.raises(ValidationError):
        project_svc.save_strategy(pid, "porter", {})


def test_validation_log():
    pid = project_svc.create_project().id
    project_svc.add_assumption(pid, "People hate meal planning")
    project = project_svc.add_experiment(pid, "They will pay $5", method="Pre-sales")
    exp_id = project['validation']['experiments'][0]['id']
    project = project_svc.set_experiment_status(pid, exp_id, "completed", results="12 pre-orders")
    project = project_svc.add_feedback(pid, "Interview", "Love it", "positive")

    validation = project['validation']
    assert validation['assumptions'] == ["People hate meal planning"]
    assert validation['experiments'][0]['status'] == "completed"
    assert validation['experiments'][0]['results'] == "12 pre-orders"
    assert validation['feedback'][0]['sentiment'] == "positive"

    with pytest.raises(ValidationError):
        project_svc.add_feedback(pid, "x", "y", "angry")
    with pytest.raises(NotFoundError):
        project_svc.set_experiment_status(pid, "exp_missing", "running")


def test_launch_plan_merges():
    pid = project_svc.create_project().id
    project_svc.save_launch_plan(pid, launch_date="2025-03-01", launch_tasks=["Post on PH"])
    project = project_svc.save_launch_plan(pid, success_metrics=["100 signups"], unknown="x")
    plan = project['launch_plan']
    assert plan['launch_date'] == "2025-03-01"
    assert plan['launch_tasks'] == ["Post on PH"]
    assert plan['success_metrics'] == ["100 signups"]
    assert 'unknown' not in plan


def test_move_within_column_skips_other_columns():
    a = project_svc.create_project("A").id
    b = project_svc.create_project("B").id
    c = project_svc.create_project("C").id
    project_svc.move_project(b, "in-progress")

    assert project_svc.move_within_column(a, 1) is True
    board = project_svc.projects_by_status()
    assert [p['id'] for p in board["ideation"]] == [c, a]
    assert [p['id'] for p in board["in-progress"]] == [b]

    # already at the ends of their columns
    assert project_svc.move_within_column(a, 1) is False
    assert project_svc.move_within_column(b, -1) is False
    assert [p['id'] for p in project_svc.projects_by_status()["ideation"]] == [c, a]


def test_stored_project_with_legacy_keys_loads():
    persistence.replace_all('projects', [
        {"id": "proj_old", "title": "Old board", "status": "in-progress", "color": "#fff"},
        {"title": "no id, skipped"},
    ])
    projects = project_svc.list_projects()
    assert len(projects) == 1
    project = projects[0]
    assert "color" not in project
    assert project["tags"] == []
    assert project["strategy"] == {}
    assert project["position"] == 0

    clone = project_svc.clone_project("proj_old")
    assert clone.title == "Old board (Copy)"
    assert clone.status == "ideation"


def test_experiment_results_can_be_cleared():
    pid = project_svc.create_project().id
    project = project_svc.add_experiment(pid, "Landing page converts")
    exp_id = project['validation']['experiments'][0]['id']
    project_svc.set_experiment_status(pid, exp_id, "running", results="3 signups")
    project = project_svc.set_experiment_status(pid, exp_id, "running", results="")
    assert project['validation']['experiments'][0]['results'] == ""
