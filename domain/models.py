from dataclasses import dataclass, field, fields
from typing import List, Dict, Optional, Any
import datetime as _dt


def _now_iso():
    return _dt.datetime.now(_dt.timezone.utc).replace(microsecond=0).isoformat().replace('+00:00', 'Z')


def _today_iso():
    return _dt.date.today().isoformat()


def _filtered(cls, d: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only keys the dataclass declares (drops legacy/unknown keys)."""
    allowed = {f.name for f in fields(cls)}
    return {k: v for k, v in (d or {}).items() if k in allowed}


@dataclass
class Phase:
    id: str
    name: str
    completed: bool = False
    tasks: List[str] = field(default_factory=list)
    subtasks: List[str] = field(default_factory=list)
    description: Optional[str] = None
    automation_trigger: Optional[str] = None


@dataclass
class Project:
    id: str
    title: str
    type: str = 'web-app'  # web-app | extension | mobile
    status: str = 'ideation'  # ideation | in-progress | ready-to-launch | launched
    progress: int = 0
    phases: List[Dict[str, Any]] = field(default_factory=list)
    created_at: str = field(default_factory=_now_iso)
    template: Optional[str] = None
    purpose: Optional[str] = None
    key_tasks: List[str] = field(default_factory=list)
    timeline: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    voice_notes: Optional[str] = None
    strategy: Dict[str, Any] = field(default_factory=dict)
    validation: Dict[str, Any] = field(default_factory=dict)
    launch_plan: Dict[str, Any] = field(default_factory=dict)
    # kanban ordering within the board
    position: int = 0


def project_from_dict(d: Dict[str, Any]) -> Project:
    filtered = _filtered(Project, d)
    filtered.setdefault('title', 'Untitled Project')
    return Project(**filtered)


@dataclass
class Idea:
    id: str
    title: str
    description: str
    category: str  # saas | coaching | content | physical | service
    target_audience: str = ''
    problem_it_solves: str = ''
    pmf_score: int = 0
    portfolio_fit_score: int = 0
    launch_speed_score: int = 0
    energy_level: str = 'medium'
    ai_priority_score: float = 0.0
    status: str = 'idea'  # idea | validated | killed | converted
    next_step: str = ''
    created_at: str = field(default_factory=_now_iso)


def idea_from_dict(d: Dict[str, Any]) -> Idea:
    filtered = _filtered(Idea, d)
    for key in ('title', 'description', 'category'):
        filtered.setdefault(key, '')
    return Idea(**filtered)


@dataclass
class UserProfile:
    name: str = ''
    role: str = ''
    goals: List[str] = field(default_factory=list)
    experience: str = 'beginner'  # beginner | intermediate | advanced
    interests: List[str] = field(default_factory=list)
    mission: Optional[str] = None
    vision: Optional[str] = None
    anti_vision: Optional[str] = None
    alignment_scores: Dict[str, int] = field(
        default_factory=lambda: {'clarity': 5, 'energy': 5, 'confidence': 5})
    onboarded: bool = False


def profile_from_dict(d: Dict[str, Any]) -> UserProfile:
    return UserProfile(**_filtered(UserProfile, d))


@dataclass
class DailyCheckIn:
    mood: str  # high | medium | low
    energy: str  # high | medium | low
    focus: str
    reflection: str = ''
    date: str = field(default_factory=_today_iso)  # YYYY-MM-DD
    completed: bool = True


@dataclass
class EveningReflection:
    accomplishments: str
    tasks_completed: int = 0  # 0-20
    focus_achieved: int = 5  # 1-10
    energy_used: int = 5  # 1-10
    challenges: str = ''
    tomorrow_priority: str = ''
    satisfaction_level: int = 7  # 1-10
    date: str = field(default_factory=_today_iso)
    completed: bool = True


# --- Strategy frameworks (project workspace) ---

@dataclass
class LeanCanvas:
    problem: List[str] = field(default_factory=list)
    solution: List[str] = field(default_factory=list)
    key_metrics: List[str] = field(default_factory=list)
    value_proposition: str = ''
    unfair_advantage: str = ''
    channels: List[str] = field(default_factory=list)
    customer_segments: List[str] = field(default_factory=list)
    cost_structure: List[str] = field(default_factory=list)
    revenue_streams: List[str] = field(default_factory=list)


@dataclass
class Swot:
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)
    opportunities: List[str] = field(default_factory=list)
    threats: List[str] = field(default_factory=list)


@dataclass
class BusinessModelCanvas:
    key_partners: List[str] = field(default_factory=list)
    key_activities: List[str] = field(default_factory=list)
    value_propositions: List[str] = field(default_factory=list)
    customer_relationships: List[str] = field(default_factory=list)
    customer_segments: List[str] = field(default_factory=list)
    key_resources: List[str] = field(default_factory=list)
    channels: List[str] = field(default_factory=list)
    cost_structure: List[str] = field(default_factory=list)
    revenue_streams: List[str] = field(default_factory=list)


@dataclass
class Persona:
    id: str
    name: str
    age: int = 30
    occupation: str = ''
    demographics: str = ''
    goals: List[str] = field(default_factory=list)
    pain_points: List[str] = field(default_factory=list)
    motivations: List[str] = field(default_factory=list)
    behaviors: List[str] = field(default_factory=list)
    jobs_to_be_done: List[str] = field(default_factory=list)


@dataclass
class TaskPriority:
    id: str
    task: str
    effort: int = 5  # 1-10
    impact: int = 5  # 1-10
    priority: str = 'medium'


# --- Validation & launch plan ---

@dataclass
class ValidationExperiment:
    id: str
    hypothesis: str
    method: str = ''
    success_criteria: str = ''
    status: str = 'planned'  # planned | running | completed
    results: Optional[str] = None


@dataclass
class CustomerFeedback:
    id: str
    source: str
    feedback: str
    sentiment: str = 'neutral'  # positive | neutral | negative
    date: str = field(default_factory=_today_iso)


@dataclass
class LaunchPlan:
    launch_date: Optional[str] = None
    prelaunch_tasks: List[str] = field(default_factory=list)
    launch_tasks: List[str] = field(default_factory=list)
    postlaunch_tasks: List[str] = field(default_factory=list)
    marketing_channels: List[str] = field(default_factory=list)
    success_metrics: List[str] = field(default_factory=list)
