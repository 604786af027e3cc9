"""The fixed 13-phase launch checklist every project moves through."""
from dataclasses import dataclass, asdict
from typing import List, Dict, Any, Optional, Tuple

from domain.models import Phase


@dataclass(frozen=True)
class PhaseTemplate:
    name: str
    description: str
    subtasks: Tuple[str, ...]
    # build | launch | validate | research | plan | design | reflect
    work_mode: str
    automation_trigger: Optional[str] = None


PHASES: List[PhaseTemplate] = [
    PhaseTemplate(
        "Ideation",
        "Generate and refine product concepts",
        ("Brainstorm product ideas based on personal pain points",
         "Research existing solutions and identify gaps",
         "Define core problem statement",
         "Validate idea with target audience feedback"),
        work_mode="research",
    ),
    PhaseTemplate(
        "Problem & User Discovery",
        "Deep dive into user problems and market research",
        ("Conduct user interviews (5-10 potential users)",
         "Create user personas and journey maps",
         "Analyze competitor landscape and positioning",
         "Document pain points and user stories"),
        work_mode="research",
    ),
    PhaseTemplate(
        "Validation & Positioning",
        "Validate market demand and positioning strategy",
        ("Create landing page or MVP concept",
         "Run validation experiments (surveys, pre-sales)",
         "Define unique value proposition",
         "Test messaging with target audience"),
        work_mode="validate",
    ),
    PhaseTemplate(
        "Product Strategy",
        "Define product roadmap and business model",
        ("Define MVP feature set and scope",
         "Create product roadmap for 6 months",
         "Determine pricing and business model",
         "Set success metrics and KPIs"),
        work_mode="plan",
    ),
    PhaseTemplate(
        "Design & UX",
        "Create user interface and experience design",
        ("Create wireframes and user flow diagrams",
         "Design UI mockups and prototypes",
         "Conduct usability testing sessions",
         "Finalize design system and components"),
        work_mode="design",
    ),
    PhaseTemplate(
        "Build & Integrate",
        "Develop the product and integrate systems",
        ("Set up development environment and tools",
         "Build core functionality and features",
         "Integrate third-party services and APIs",
         "Implement analytics and tracking"),
        work_mode="build",
    ),
    PhaseTemplate(
        "Final QA + Founder Review",
        "Quality assurance and final review process",
        ("Conduct comprehensive testing (functionality, UX, performance)",
         "Fix critical bugs and polish user experience",
         "Founder final review and approval",
         "Prepare launch assets and documentation"),
        work_mode="build",
    ),
    PhaseTemplate(
        "Launch Setup & Execution",
        "Execute product launch strategy",
        ("Set up analytics and monitoring tools",
         "Create launch announcement content",
         "Submit to relevant platforms (App Store, Chrome Web Store, etc.)",
         "Execute launch day communications"),
        work_mode="launch",
        automation_trigger="launch-announcement",
    ),
    PhaseTemplate(
        "Automated Marketing & Sales",
        "Implement marketing automation and sales processes",
        ("Set up email marketing sequences",
         "Create social media content calendar",
         "Implement conversion tracking and optimization",
         "Launch paid acquisition campaigns"),
        work_mode="launch",
        automation_trigger="content-automation",
    ),
    PhaseTemplate(
        "SOP Creation + Systemization",
        "Document processes and create standard operating procedures",
        ("Document all processes and workflows",
         "Create templates for future products",
         "Set up delegation frameworks",
         "Build knowledge base and documentation"),
        work_mode="plan",
    ),
    PhaseTemplate(
        "Post-Launch Feedback Loop",
        "Analyze usage, testimonials, and support tickets",
        ("Collect and analyze user feedback",
         "Monitor usage analytics and user behavior",
         "Review support tickets and common issues",
         "Plan improvements for version 2"),
        work_mode="validate",
    ),
    PhaseTemplate(
        "Growth Experiments",
        "Run weekly growth sprints (SEO, affiliates, collaborations)",
        ("Implement SEO optimization strategies",
         "Set up affiliate and referral programs",
         "Execute partnership and collaboration outreach",
         "Run conversion rate optimization experiments"),
        work_mode="validate",
    ),
    PhaseTemplate(
        "Founder Reflection & Energy Reset",
        "Track mood, burnout, energy. Celebrate wins.",
        ("Conduct founder energy and burnout assessment",
         "Celebrate wins and document lessons learned",
         "Plan next product or improvement cycle",
         "Reset and prepare for next iteration"),
        work_mode="reflect",
    ),
]

PHASE_NAMES = [p.name for p in PHASES]

WORK_MODES = {p.name: p.work_mode for p in PHASES}

AUTOMATION_MESSAGES = {
    "launch-announcement": (
        "🚀 Launch Automation Triggered!",
        "Sending announcements to X, email, and Notion...",
    ),
    "content-automation": (
        "📈 Marketing Automation Started!",
        "N8N flow triggered for content repurposing and email sequences...",
    ),
}


def work_mode_for(phase_name: str) -> str:
    return WORK_MODES.get(phase_name, "build")


def build_phases(project_id: str, completed_count: int = 0,
                 key_tasks: Optional[List[str]] = None) -> List[Dict[str, Any]]:
    """Instantiate the checklist for a project.

    The first `completed_count` phases start completed. When `key_tasks`
    is given, phase i takes key_tasks[i] as its task.
    """
    key_tasks = key_tasks or []
    phases = []
    for index, tpl in enumerate(PHASES):
        if index < len(key_tasks):
            tasks = [key_tasks[index]]
        else:
            tasks = [f"Complete {tpl.name.lower()} tasks"]
        phases.append(asdict(Phase(
            id=f"{project_id}-{index}",
            name=tpl.name,
            completed=index < completed_count,
            tasks=tasks,
            subtasks=list(tpl.subtasks),
            description=tpl.description,
            automation_trigger=tpl.automation_trigger,
        )))
    return phases
