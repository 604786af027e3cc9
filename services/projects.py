"""Project service: creation, the phase checklist, kanban moves and the
per-project workspace (strategy frameworks, validation log, launch plan).

Projects are stored as dicts in the `projects` collection. Every load goes
through `project_from_dict`, so legacy keys are dropped and missing optional
fields come back with their defaults.
"""
from __future__ import annotations
from dataclasses import asdict, fields, replace
from typing import List, Dict, Any, Optional, Tuple
import logging

from domain.constants import (PROJECT_TYPES, PROJECT_STATUSES, STRATEGY_FRAMEWORKS,
                              EXPERIMENT_STATUSES, SENTIMENTS)
from domain.models import (Project, project_from_dict, Persona, TaskPriority, ValidationExperiment,
                           CustomerFeedback, LaunchPlan, LeanCanvas, Swot, BusinessModelCanvas, _now_iso)
from domain.phases import build_phases, AUTOMATION_MESSAGES
from domain.templates import get_template
from services import persistence, ideas as idea_svc
from services.errors import ValidationError, NotFoundError
from services.voice import ParsedProject, parse_voice_input
from utils.ids import create_id_with_prefix

logger = logging.getLogger(__name__)

READY_TO_LAUNCH_AT = 85
VOICE_IN_PROGRESS_START = 15


def compute_progress(phases: List[Dict[str, Any]]) -> Tuple[int, str]:
    """Progress percentage and derived status for a checklist."""
    if not phases:
        return 0, "ideation"
    done = sum(1 for p in phases if p.get('completed'))
    progress = round(done / len(phases) * 100)
    if progress == 100:
        status = "launched"
    elif progress >= READY_TO_LAUNCH_AT:
        status = "ready-to-launch"
    elif progress > 0:
        status = "in-progress"
    else:
        status = "ideation"
    return progress, status


def next_position(projects: List[Dict[str, Any]]) -> int:
    return max((p.get('position', 0) for p in projects), default=-1) + 1


def _load_projects() -> List[Dict[str, Any]]:
    return [asdict(project_from_dict(p)) for p in persistence.load_list('projects') if p.get('id')]


def list_projects() -> List[Dict[str, Any]]:
    projects = _load_projects()
    projects.sort(key=lambda p: (p.get('position', 0), p.get('created_at') or ''))
    return projects


def get_project(project_id: str) -> Dict[str, Any]:
    project = next((p for p in _load_projects() if p.get('id') == project_id), None)
    if project is None:
        raise NotFoundError(f"Project {project_id} not found")
    return project


def _save_project(updated: Dict[str, Any]) -> Dict[str, Any]:
    projects = _load_projects()
    idx = next((i for i, p in enumerate(projects) if p.get('id') == updated.get('id')), None)
    if idx is None:
        raise NotFoundError(f"Project {updated.get('id')} not found")
    projects[idx] = updated
    persistence.replace_all('projects', projects)
    return updated


def create_project(title: str = "New Project", type: str = "web-app", template: Optional[str] = None,
                   purpose: Optional[str] = None, key_tasks: Optional[List[str]] = None,
                   timeline: Optional[str] = None, tags: Optional[List[str]] = None,
                   status: str = "ideation", progress: int = 0,
                   voice_notes: Optional[str] = None, phase_tasks: Optional[List[str]] = None) -> Project:
    if type not in PROJECT_TYPES:
        raise ValidationError("Invalid Type", f"Unknown project type: {type}")
    if status not in PROJECT_STATUSES:
        raise ValidationError("Invalid Status", f"Unknown project status: {status}")
    title = (title or '').strip() or "New Project"
    projects = _load_projects()
    project_id = create_id_with_prefix('proj')
    project = Project(
        id=project_id,
        title=title,
        type=type,
        status=status,
        progress=progress,
        phases=build_phases(project_id, key_tasks=phase_tasks),
        template=template,
        purpose=purpose,
        key_tasks=list(key_tasks or []),
        timeline=timeline,
        tags=list(tags or []),
        voice_notes=voice_notes,
        position=next_position(projects),
    )
    projects.append(asdict(project))
    persistence.replace_all('projects', projects)
    logger.info("Created project %s (%s)", project.id, project.title)
    return project


def create_project_from_template(template_id: str) -> Project:
    template = get_template(template_id)
    if template is None:
        raise NotFoundError(f"Template {template_id} not found")
    return create_project(
        title=f"New {template.name.replace(' Template', '')}",
        type=template.type,
        template=template.id,
        key_tasks=list(template.sop_items[:3]),
    )


def update_project(project_id: str, **updates) -> Dict[str, Any]:
    project = get_project(project_id)
    allowed = {f.name for f in fields(Project)} - {'id', 'phases', 'progress', 'created_at'}
    unknown = set(updates) - allowed
    if unknown:
        raise ValidationError("Invalid Field", f"Cannot update: {', '.join(sorted(unknown))}")
    if 'type' in updates and updates['type'] not in PROJECT_TYPES:
        raise ValidationError("Invalid Type", f"Unknown project type: {updates['type']}")
    if 'status' in updates and updates['status'] not in PROJECT_STATUSES:
        raise ValidationError("Invalid Status", f"Unknown project status: {updates['status']}")
    project.update(updates)
    return _save_project(project)


def delete_project(project_id: str):
    projects = _load_projects()
    remaining = [p for p in projects if p.get('id') != project_id]
    if len(remaining) == len(projects):
        raise NotFoundError(f"Project {project_id} not found")
    persistence.replace_all('projects', remaining)
    logger.info("Deleted project %s", project_id)


def toggle_phase(project_id: str, index: int) -> Tuple[Dict[str, Any], Optional[str]]:
    """Flip one checklist phase and recompute progress/status.

    Returns (updated project, automation trigger or None). A trigger is only
    reported when the phase went from open to completed.
    """
    project = get_project(project_id)
    phases = project.get('phases') or []
    if not 0 <= index < len(phases):
        raise NotFoundError(f"Phase {index} not found on project {project_id}")
    phase = phases[index]
    was_completed = bool(phase.get('completed'))
    phase['completed'] = not was_completed
    project['progress'], project['status'] = compute_progress(phases)

    trigger = None
    if not was_completed and phase.get('automation_trigger'):
        trigger = phase['automation_trigger']
        title, _ = AUTOMATION_MESSAGES.get(trigger, (trigger, ''))
        logger.info("Automation %s fired by phase '%s' on %s: %s",
                    trigger, phase.get('name'), project_id, title)
    _save_project(project)
    return project, trigger


def clone_project(project_id: str) -> Project:
    source = get_project(project_id)
    projects = _load_projects()
    new_id = create_id_with_prefix('proj')
    phases = []
    for i, phase in enumerate(source.get('phases') or []):
        copied = dict(phase)
        copied['id'] = f"{new_id}-{i}"
        copied['completed'] = False
        phases.append(copied)
    clone = replace(
        project_from_dict(source),
        id=new_id,
        title=f"{source.get('title', 'Project')} (Copy)",
        progress=0,
        status='ideation',
        phases=phases,
        created_at=_now_iso(),
        position=next_position(projects),
    )
    projects.append(asdict(clone))
    persistence.replace_all('projects', projects)
    logger.info("Cloned project %s into %s", project_id, new_id)
    return clone


def convert_idea_to_project(idea_id: str) -> Project:
    idea = idea_svc.get_idea(idea_id)
    if idea.get('status') == 'converted':
        raise ValidationError("Already Converted", f"\"{idea.get('title')}\" is already a project.")
    project = create_project(
        title=idea.get('title') or "New Project",
        type="web-app",
        purpose=idea.get('problem_it_solves'),
        key_tasks=[idea.get('next_step')] if idea.get('next_step') else [],
        tags=[idea.get('category')] if idea.get('category') else [],
    )
    idea_svc.update_idea(idea_id, status='converted')
    logger.info("Converted idea %s into project %s", idea_id, project.id)
    return project


def create_project_from_transcript(transcript: str, parsed: Optional[ParsedProject] = None) -> Project:
    """Create a project from a dictated pitch.

    `parsed` lets the caller pass an edited draft; otherwise the transcript
    is parsed here.
    """
    if not (transcript or '').strip() and parsed is None:
        raise ValidationError("Transcript Required", "Record or type a project description first.")
    parsed = parsed or parse_voice_input(transcript)
    return create_project(
        title=parsed.title,
        type=parsed.type,
        status=parsed.status,
        progress=VOICE_IN_PROGRESS_START if parsed.status == "in-progress" else 0,
        purpose=parsed.purpose,
        key_tasks=parsed.key_tasks,
        timeline=parsed.timeline,
        tags=parsed.tags,
        voice_notes=transcript,
        phase_tasks=parsed.key_tasks,
    )


# --- Kanban ---

def projects_by_status(projects: Optional[List[Dict[str, Any]]] = None) -> Dict[str, List[Dict[str, Any]]]:
    projects = list_projects() if projects is None else projects
    board: Dict[str, List[Dict[str, Any]]] = {s: [] for s in PROJECT_STATUSES}
    for p in projects:
        board.setdefault(p.get('status', 'ideation'), []).append(p)
    return board


def move_project(project_id: str, status: str) -> Dict[str, Any]:
    """Move a card to another kanban column. Checklist progress is left as is."""
    return update_project(project_id, status=status)


def reorder_projects(ordered_ids: List[str]) -> List[Dict[str, Any]]:
    """Persist a new board order. Ids not listed keep their relative order after the listed ones."""
    projects = list_projects()
    rank = {pid: i for i, pid in enumerate(ordered_ids)}
    projects.sort(key=lambda p: (rank.get(p['id'], len(rank)), p.get('position', 0)))
    for i, p in enumerate(projects):
        p['position'] = i
    persistence.replace_all('projects', projects)
    return projects


def move_within_column(project_id: str, step: int) -> bool:
    """Swap a card with its neighbour in the same kanban column.

    Returns False when the card is already at that end of its column.
    """
    project = get_project(project_id)
    column = [p['id'] for p in projects_by_status()[project.get('status', 'ideation')]]
    i = column.index(project_id)
    j = i + step
    if not 0 <= j < len(column):
        return False
    ordered = [p['id'] for p in list_projects()]
    a, b = ordered.index(column[i]), ordered.index(column[j])
    ordered[a], ordered[b] = ordered[b], ordered[a]
    reorder_projects(ordered)
    return True


# --- Focus mode helpers ---

def current_phase(project: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    phases = project.get('phases') or []
    return next((p for p in phases if not p.get('completed')), phases[0] if phases else None)


def upcoming_phases(project: Dict[str, Any], n: int = 2) -> List[Dict[str, Any]]:
    return [p for p in project.get('phases') or [] if not p.get('completed')][1:1 + n]


def completed_phase_count(project: Dict[str, Any]) -> int:
    return sum(1 for p in project.get('phases') or [] if p.get('completed'))


def pick_focus_project(projects: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    return next((p for p in projects if p.get('status') == 'in-progress' or (p.get('progress') or 0) > 0),
                projects[0] if projects else None)


# --- Strategy frameworks ---

_FRAMEWORK_MODELS = {
    'lean_canvas': LeanCanvas,
    'swot_analysis': Swot,
    'business_model': BusinessModelCanvas,
}


def prioritize_task(effort: int, impact: int) -> str:
    """Effort-impact quadrant: quick wins high, thankless tasks low."""
    if impact >= 6 and effort <= 5:
        return "high"
    if impact < 6 and effort > 5:
        return "low"
    return "medium"


def make_task_priority(task: str, effort: int, impact: int) -> Dict[str, Any]:
    effort = max(1, min(10, int(effort)))
    impact = max(1, min(10, int(impact)))
    return asdict(TaskPriority(id=create_id_with_prefix('task'), task=task, effort=effort,
                               impact=impact, priority=prioritize_task(effort, impact)))


def make_persona(name: str, **attrs) -> Dict[str, Any]:
    allowed = {f.name for f in fields(Persona)} - {'id', 'name'}
    return asdict(Persona(id=create_id_with_prefix('persona'), name=name,
                          **{k: v for k, v in attrs.items() if k in allowed}))


def save_strategy(project_id: str, framework: str, data: Any) -> Dict[str, Any]:
    if framework not in STRATEGY_FRAMEWORKS:
        raise ValidationError("Unknown Framework", f"Unknown strategy framework: {framework}")
    model = _FRAMEWORK_MODELS.get(framework)
    if model is not None:
        allowed = {f.name for f in fields(model)}
        data = asdict(model(**{k: v for k, v in (data or {}).items() if k in allowed}))
    elif not isinstance(data, list):
        raise ValidationError("Invalid Data", f"{framework} expects a list of entries")
    project = get_project(project_id)
    strategy = dict(project.get('strategy') or {})
    strategy[framework] = data
    project['strategy'] = strategy
    return _save_project(project)


# --- Validation tab ---

def _validation(project: Dict[str, Any]) -> Dict[str, Any]:
    validation = project.get('validation') or {}
    validation.setdefault('assumptions', [])
    validation.setdefault('experiments', [])
    validation.setdefault('feedback', [])
    project['validation'] = validation
    return validation


def add_assumption(project_id: str, assumption: str) -> Dict[str, Any]:
    if not (assumption or '').strip():
        raise ValidationError("Assumption Required", "Describe the assumption you want to test.")
    project = get_project(project_id)
    _validation(project)['assumptions'].append(assumption.strip())
    return _save_project(project)


def add_experiment(project_id: str, hypothesis: str, method: str = '', success_criteria: str = '') -> Dict[str, Any]:
    if not (hypothesis or '').strip():
        raise ValidationError("Hypothesis Required", "Every experiment needs a hypothesis.")
    project = get_project(project_id)
    experiment = ValidationExperiment(id=create_id_with_prefix('exp'), hypothesis=hypothesis.strip(),
                                      method=method, success_criteria=success_criteria)
    _validation(project)['experiments'].append(asdict(experiment))
    return _save_project(project)


def set_experiment_status(project_id: str, experiment_id: str, status: str,
                          results: Optional[str] = None) -> Dict[str, Any]:
    if status not in EXPERIMENT_STATUSES:
        raise ValidationError("Invalid Status", f"Unknown experiment status: {status}")
    project = get_project(project_id)
    experiment = next((e for e in _validation(project)['experiments'] if e.get('id') == experiment_id), None)
    if experiment is None:
        raise NotFoundError(f"Experiment {experiment_id} not found")
    experiment['status'] = status
    if results is not None:
        experiment['results'] = results
    return _save_project(project)


def add_feedback(project_id: str, source: str, feedback: str, sentiment: str = 'neutral') -> Dict[str, Any]:
    if sentiment not in SENTIMENTS:
        raise ValidationError("Invalid Sentiment", f"Unknown sentiment: {sentiment}")
    if not (feedback or '').strip():
        raise ValidationError("Feedback Required", "Paste what the customer said.")
    project = get_project(project_id)
    entry = CustomerFeedback(id=create_id_with_prefix('fb'), source=source or 'unknown',
                             feedback=feedback.strip(), sentiment=sentiment)
    _validation(project)['feedback'].append(asdict(entry))
    return _save_project(project)


# --- Launch plan tab ---

def save_launch_plan(project_id: str, **plan) -> Dict[str, Any]:
    allowed = {f.name for f in fields(LaunchPlan)}
    project = get_project(project_id)
    merged = {**(project.get('launch_plan') or {}), **{k: v for k, v in plan.items() if k in allowed}}
    project['launch_plan'] = asdict(LaunchPlan(**{k: v for k, v in merged.items() if k in allowed}))
    return _save_project(project)
