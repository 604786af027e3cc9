from dataclasses import asdict
from typing import List, Dict, Any, Optional
import datetime as dt
import random

from domain.models import Project, Idea, DailyCheckIn, EveningReflection
from domain.phases import build_phases
from domain.constants import LEVELS


def _days_ago_iso(days: int) -> str:
    stamp = dt.datetime.now(dt.timezone.utc) - dt.timedelta(days=days)
    return stamp.replace(microsecond=0).isoformat().replace('+00:00', 'Z')


def _project(pid: str, title: str, type_: str, status: str, completed: int, age_days: int,
             template: str, purpose: str, key_tasks: List[str], tags: List[str], position: int) -> Dict[str, Any]:
    phases = build_phases(pid, completed_count=completed)
    progress = round(completed / len(phases) * 100)
    return asdict(Project(
        id=pid, title=title, type=type_, status=status, progress=progress, phases=phases,
        created_at=_days_ago_iso(age_days), template=template, purpose=purpose,
        key_tasks=key_tasks, tags=tags, position=position,
    ))


def make_projects() -> List[Dict[str, Any]]:
    return [
        _project("sample-1", "AI Email Assistant", "web-app", "in-progress", 8, 15, "web-app-saas",
                 "Help busy professionals manage their inbox with AI-powered email sorting and response suggestions",
                 ["Implement Gmail API integration", "Train AI model on user preferences", "Design dashboard UI"],
                 ["AI", "Productivity", "SaaS"], 0),
        _project("sample-2", "Habit Tracker Chrome Extension", "extension", "ready-to-launch", 11, 8,
                 "extension-template", "Simple habit tracking that lives in your new tab page",
                 ["Chrome Web Store submission", "Final testing", "Marketing assets"],
                 ["Chrome Extension", "Habits", "Productivity"], 1),
        _project("sample-3", "Local Food Finder App", "mobile", "in-progress", 3, 3, "mobile-app-template",
                 "Connect food lovers with local restaurants and hidden gems in their area",
                 ["Market research", "UI wireframes", "Location API integration"],
                 ["Mobile", "Food", "Local"], 2),
    ]


def make_ideas() -> List[Dict[str, Any]]:
    return [
        asdict(Idea(
            id="idea-1", title="Voice-to-Text Meeting Notes",
            description="AI-powered meeting transcription with action item extraction and automatic follow-up scheduling",
            category="saas", target_audience="Remote teams and consultants",
            problem_it_solves="Meeting fatigue and poor follow-through on action items",
            pmf_score=8, portfolio_fit_score=7, launch_speed_score=6, energy_level="high",
            ai_priority_score=8.5, next_step="Research existing solutions and interview potential users",
            created_at=_days_ago_iso(2),
        )),
        asdict(Idea(
            id="idea-2", title="Micro-Learning Platform for Developers",
            description="5-minute daily coding challenges with real-world scenarios",
            category="content", target_audience="Junior to mid-level developers",
            problem_it_solves="Keeping programming skills sharp in a busy schedule",
            pmf_score=7, portfolio_fit_score=9, launch_speed_score=8, energy_level="medium",
            ai_priority_score=7.8, next_step="Create MVP with 10 sample challenges",
            created_at=_days_ago_iso(5),
        )),
        asdict(Idea(
            id="idea-3", title="Plant Care Reminder System",
            description="Smart plant care assistant using image recognition to assess plant health",
            category="physical", target_audience="Urban plant enthusiasts and beginners",
            problem_it_solves="Plant neglect and lack of care knowledge",
            pmf_score=6, portfolio_fit_score=5, launch_speed_score=4, energy_level="low",
            ai_priority_score=6.2, next_step="Validate demand through plant community surveys",
            created_at=_days_ago_iso(7),
        )),
    ]


FOCUS_SAMPLES = [
    "Ship the onboarding flow",
    "Write launch announcement copy",
    "Interview two beta users",
    "Fix sync bugs in the extension",
    "Draft pricing page",
]


def make_rituals(days: int = 14, seed: Optional[int] = 7):
    """Deterministic check-ins and reflections for the last `days` days (today excluded)."""
    rng = random.Random(seed)
    check_ins, reflections = [], []
    today = dt.date.today()
    for offset in range(days, 0, -1):
        date = (today - dt.timedelta(days=offset)).isoformat()
        mood = rng.choice(LEVELS)
        energy = rng.choice(LEVELS)
        boost = {"high": 3, "medium": 1, "low": 0}
        check_ins.append(asdict(DailyCheckIn(mood=mood, energy=energy, focus=rng.choice(FOCUS_SAMPLES),
                                             date=date)))
        reflections.append(asdict(EveningReflection(
            accomplishments="Moved the main focus forward",
            tasks_completed=rng.randint(1, 4) + boost[mood],
            focus_achieved=min(10, rng.randint(3, 6) + boost[energy]),
            energy_used=rng.randint(3, 8),
            satisfaction_level=min(10, rng.randint(4, 7) + boost[mood]),
            date=date,
        )))
    return check_ins, reflections
