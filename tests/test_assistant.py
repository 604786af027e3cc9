from domain.phases import PHASES, build_phases, work_mode_for
from services import assistant
from services.assistant import UserContext


def _project(pid, completed, status="in-progress", progress=None):
    phases = build_phases(pid, completed_count=completed)
    return {
        "id": pid,
        "title": f"Project {pid}",
        "status": status,
        "progress": progress if progress is not None else round(completed / len(phases) * 100),
        "phases": phases,
    }


def _idea(i, score=5.0, category="saas", status="idea"):
    return {"id": f"i{i}", "title": f"Idea {i}", "category": category,
            "ai_priority_score": score, "status": status}


def _index_of_mode(mode):
    return next(i for i, p in enumerate(PHASES) if p.work_mode == mode)


def test_every_phase_has_a_known_work_mode():
    modes = assistant.PEAK_MODES | assistant.ORGANIZE_MODES | {"reflect"}
    assert all(work_mode_for(p.name) in modes for p in PHASES)


def test_peak_state_pushes_build_phase_project():
    build = _project("b", completed=_index_of_mode("build"))
    research = _project("r", completed=0)
    rec = assistant.get_primary_focus([research, build], [], UserContext(mood="high", energy="high"))
    assert rec.type == "project"
    assert rec.title == 'Push forward on "Project b"'
    assert rec.priority == "high"
    assert rec.suggested_action == f"Complete {PHASES[_index_of_mode('build')].name} tasks"


def test_medium_energy_pushes_planning_project():
    research = _project("r", completed=1)
    rec = assistant.get_primary_focus([research], [], UserContext(mood="low", energy="medium"))
    assert rec.title == 'Organize and plan "Project r"'


def test_low_energy_with_few_ideas_suggests_capture():
    rec = assistant.get_primary_focus([], [_idea(1)], UserContext(energy="low"))
    assert rec.type == "idea"
    assert rec.priority == "medium"


def test_fallback_is_daily_focus():
    ideas = [_idea(i) for i in range(3)]
    rec = assistant.get_primary_focus([], ideas, UserContext(mood="high", energy="high", focus="Write docs"))
    assert rec.type == "focus"
    assert rec.description == 'Stay on track with: "Write docs"'


def test_secondary_actions():
    ideas = [_idea(1, score=0), _idea(2, score=8.5), _idea(3, score=9, status="converted")]
    projects = [_project(str(i), completed=2) for i in range(4)]
    actions = assistant.get_secondary_actions(projects, ideas)
    assert [a.title for a in actions] == [
        "Score 1 unscored ideas",
        "Convert 1 high-scoring ideas to projects",
        "Consider focusing your project portfolio",
    ]


def test_insights():
    ideas = [_idea(i, category="content") for i in range(3)]
    projects = [_project(str(i), completed=1) for i in range(3)]
    titles = [r.title for r in assistant.generate_insights(projects, ideas)]
    assert "You're drawn to content ideas" in titles
    assert "Focus on fewer projects for better progress" in titles


def test_tips_capped_at_two():
    context = UserContext(mood="high", energy="low", experience="beginner")
    tips = assistant.get_contextual_tips(context, project_count=3, idea_count=11)
    assert len(tips) == 2
    assert tips[0].title == "Low energy, but good mood detected"
    assert tips[1].title == "Beginner polypreneur tip"


def test_daily_recommendations_only_consider_active_projects_for_focus():
    idle = _project("x", completed=_index_of_mode("build"), status="ideation")
    suggestions = assistant.generate_daily_recommendations([idle], [], UserContext(mood="high", energy="high",
                                                                                   focus="Rest"))
    assert suggestions.primary_focus.type == "focus"


def test_project_next_action():
    project = _project("p", completed=_index_of_mode("build"))
    assert assistant.get_project_next_action(project, "high") == "Tackle the hardest technical challenges"
    assert assistant.get_project_next_action(project, "low") == "Review code and plan next sprint"
    done = _project("d", completed=len(PHASES))
    assert assistant.get_project_next_action(done, "high") == "Project complete! Time to launch or iterate."
    reflect = _project("f", completed=len(PHASES) - 1)
    assert assistant.get_project_next_action(reflect, "medium") == \
        f"Continue with {PHASES[-1].name.lower()} tasks"
