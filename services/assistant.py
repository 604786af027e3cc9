"""Heuristic daily assistant.

Looks at the current projects, the idea vault and today's check-in and
suggests what to work on. Rules are keyed on each checklist phase's work
mode (build, launch, validate, research, plan, design, reflect).
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

from domain.phases import work_mode_for

PEAK_MODES = {"build", "launch", "validate"}
ORGANIZE_MODES = {"research", "plan", "design"}

MAX_SECONDARY = 3
MAX_TIPS = 2

NEXT_ACTIONS = {
    "high": {
        "build": "Tackle the hardest technical challenges",
        "launch": "Push for launch - handle marketing and distribution",
        "validate": "Run user interviews and gather feedback",
        "research": "Deep dive into competitive analysis",
        "plan": "Finalize your roadmap and technical specs",
        "design": "Create the full design system",
    },
    "medium": {
        "build": "Work on smaller features and bug fixes",
        "launch": "Prepare launch materials and documentation",
        "validate": "Plan validation experiments",
        "research": "Organize research findings",
        "plan": "Refine your project scope",
        "design": "Create wireframes and user flows",
    },
    "low": {
        "build": "Review code and plan next sprint",
        "launch": "Write copy and prepare assets",
        "validate": "Design surveys and feedback forms",
        "research": "Collect and bookmark resources",
        "plan": "Brainstorm features and write ideas",
        "design": "Create mood boards and inspiration",
    },
}


@dataclass
class UserContext:
    mood: str = "medium"
    energy: str = "medium"
    focus: str = ""
    experience: Optional[str] = None
    goals: List[str] = field(default_factory=list)
    interests: List[str] = field(default_factory=list)


@dataclass
class Recommendation:
    type: str  # focus | idea | project | tip
    title: str
    description: str
    priority: str  # high | medium | low
    actionable: bool
    context: str
    suggested_action: Optional[str] = None


@dataclass
class SmartSuggestions:
    primary_focus: Recommendation
    secondary_actions: List[Recommendation] = field(default_factory=list)
    insights: List[Recommendation] = field(default_factory=list)
    tips: List[Recommendation] = field(default_factory=list)


def _next_phase(project: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return next((p for p in project.get('phases') or [] if not p.get('completed')), None)


def _project_in_modes(projects: List[Dict[str, Any]], modes) -> Optional[Dict[str, Any]]:
    for p in projects:
        phase = _next_phase(p)
        if phase and work_mode_for(phase.get('name', '')) in modes:
            return p
    return None


def get_primary_focus(active_projects: List[Dict[str, Any]], ideas: List[Dict[str, Any]],
                      context: UserContext) -> Recommendation:
    if context.energy == "high" and context.mood == "high":
        project = _project_in_modes(active_projects, PEAK_MODES)
        if project:
            phase = _next_phase(project)
            return Recommendation(
                type="project",
                title=f"Push forward on \"{project.get('title')}\"",
                description=(f"You're in peak state! Focus on {phase['name'].lower()} phase - "
                             "tackle the challenging technical work."),
                priority="high",
                actionable=True,
                context="High energy optimal for complex tasks",
                suggested_action=f"Complete {phase['name']} tasks",
            )

    if context.energy == "medium":
        project = _project_in_modes(active_projects, ORGANIZE_MODES)
        if project:
            return Recommendation(
                type="project",
                title=f"Organize and plan \"{project.get('title')}\"",
                description="Perfect energy level for strategic thinking and organizing your approach.",
                priority="high",
                actionable=True,
                context="Medium energy ideal for planning",
                suggested_action="Complete research and planning tasks",
            )

    if context.energy == "low" and len(ideas) < 3:
        return Recommendation(
            type="idea",
            title="Capture new ideas while reflecting",
            description="Low energy is perfect for brainstorming and capturing thoughts without pressure.",
            priority="medium",
            actionable=True,
            context="Low energy optimal for creative reflection",
            suggested_action="Add 2-3 new ideas to your vault",
        )

    return Recommendation(
        type="focus",
        title="Continue your daily focus",
        description=f"Stay on track with: \"{context.focus}\"",
        priority="high",
        actionable=True,
        context="Based on your daily intention",
        suggested_action="Work on your stated focus for 25 minutes",
    )


def get_secondary_actions(projects: List[Dict[str, Any]], ideas: List[Dict[str, Any]]) -> List[Recommendation]:
    actions: List[Recommendation] = []

    unscored = [i for i in ideas if not i.get('ai_priority_score')]
    if unscored:
        actions.append(Recommendation(
            type="idea",
            title=f"Score {len(unscored)} unscored ideas",
            description="Get AI analysis on your recent ideas to prioritize your next moves.",
            priority="medium",
            actionable=True,
            context="Unscored ideas found",
            suggested_action="Use the idea scoring wizard",
        ))

    ready = [i for i in ideas if (i.get('ai_priority_score') or 0) >= 8 and i.get('status') != 'converted']
    if ready:
        actions.append(Recommendation(
            type="idea",
            title=f"Convert {len(ready)} high-scoring ideas to projects",
            description="You have ideas with 8+ priority scores ready to become active projects.",
            priority="high",
            actionable=True,
            context="High-scoring ideas available",
            suggested_action="Convert ideas to projects",
        ))

    active = [p for p in projects if p.get('status') == 'in-progress']
    if len(active) > 3:
        actions.append(Recommendation(
            type="project",
            title="Consider focusing your project portfolio",
            description=f"You have {len(active)} active projects. Consider pausing some to increase focus.",
            priority="medium",
            actionable=True,
            context="Too many active projects",
            suggested_action="Review and pause low-priority projects",
        ))

    return actions[:MAX_SECONDARY]


def generate_insights(projects: List[Dict[str, Any]], ideas: List[Dict[str, Any]]) -> List[Recommendation]:
    insights: List[Recommendation] = []

    categories = Counter(i.get('category') for i in ideas if i.get('category'))
    if categories:
        top_category, count = categories.most_common(1)[0]
        if count > 2:
            insights.append(Recommendation(
                type="tip",
                title=f"You're drawn to {top_category} ideas",
                description=(f"{count} of your ideas are {top_category}-focused. "
                             "Consider specializing or diversifying based on your goals."),
                priority="low",
                actionable=False,
                context="Pattern recognition",
            ))

    with_progress = [p.get('progress') or 0 for p in projects if (p.get('progress') or 0) > 0]
    avg_progress = sum(with_progress) / len(with_progress) if with_progress else 0
    if avg_progress < 30 and len(projects) > 2:
        insights.append(Recommendation(
            type="tip",
            title="Focus on fewer projects for better progress",
            description=(f"Your average project progress is {round(avg_progress)}%. "
                         "Consider focusing on 1-2 key projects."),
            priority="medium",
            actionable=True,
            context="Progress analysis",
            suggested_action="Prioritize your top 2 projects",
        ))

    return insights


def get_contextual_tips(context: UserContext, project_count: int, idea_count: int) -> List[Recommendation]:
    tips: List[Recommendation] = []

    if context.energy == "low" and context.mood != "low":
        tips.append(Recommendation(
            type="tip",
            title="Low energy, but good mood detected",
            description="Perfect time for creative work, planning, or learning. Avoid heavy execution tasks.",
            priority="low",
            actionable=False,
            context="Energy optimization",
        ))

    if context.experience == "beginner" and project_count > 2:
        tips.append(Recommendation(
            type="tip",
            title="Beginner polypreneur tip",
            description=("Start with 1-2 projects max. Building completion habits is more valuable "
                         "than variety early on."),
            priority="medium",
            actionable=True,
            context="Experience level guidance",
            suggested_action="Focus on completing one project first",
        ))

    if idea_count > 10:
        tips.append(Recommendation(
            type="tip",
            title="Rich idea pipeline detected",
            description=("You're great at generating ideas! Consider setting up a weekly review "
                         "to keep them organized."),
            priority="low",
            actionable=True,
            context="Idea management",
            suggested_action="Schedule weekly idea review sessions",
        ))

    return tips[:MAX_TIPS]


def generate_daily_recommendations(projects: List[Dict[str, Any]], ideas: List[Dict[str, Any]],
                                   context: UserContext) -> SmartSuggestions:
    active = [p for p in projects if p.get('status') == 'in-progress']
    return SmartSuggestions(
        primary_focus=get_primary_focus(active, ideas, context),
        secondary_actions=get_secondary_actions(projects, ideas),
        insights=generate_insights(projects, ideas),
        tips=get_contextual_tips(context, len(projects), len(ideas)),
    )


def get_project_next_action(project: Dict[str, Any], energy: str) -> str:
    phase = _next_phase(project)
    if not phase:
        return "Project complete! Time to launch or iterate."
    mode = work_mode_for(phase.get('name', ''))
    action = NEXT_ACTIONS.get(energy, {}).get(mode)
    return action or f"Continue with {phase.get('name', '').lower()} tasks"
