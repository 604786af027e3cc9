"""Idea vault: heuristic scoring plus CRUD over the `ideas` collection.

Scoring is a deterministic stand-in for an AI review. Each sub-score starts
at 5 and gains points from simple text signals, capped at 10; the priority
score is their mean rounded to one decimal.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import List, Dict, Any, Optional
import logging

from domain.constants import IDEA_CATEGORIES, IDEA_STATUSES
from domain.models import Idea, idea_from_dict
from services import persistence
from services.errors import ValidationError, NotFoundError
from utils.ids import create_id_with_prefix

logger = logging.getLogger(__name__)

ENTHUSIASM_WORDS = ["excited", "passionate", "love", "amazing", "awesome"]

SORT_KEYS = ["priority", "recent", "pmf"]


@dataclass
class IdeaScore:
    pmf_score: int
    portfolio_fit_score: int
    launch_speed_score: int
    energy_level: str
    ai_priority_score: float
    next_step: str


def score_idea(title: str = '', description: str = '', category: Optional[str] = None,
               target_audience: str = '', problem_it_solves: str = '') -> IdeaScore:
    if not category or category not in IDEA_CATEGORIES:
        raise ValidationError("Category Required",
                              "Please select a category before scoring your idea.")
    title = title or ''
    description = description or ''
    target_audience = target_audience or ''
    problem_it_solves = problem_it_solves or ''

    # PMF: problem clarity and audience specificity
    pmf = 5
    if len(problem_it_solves) > 50:
        pmf += 2
    if len(target_audience) > 20:
        pmf += 1
    if "pain" in description or "problem" in description:
        pmf += 1
    pmf = min(10, pmf)

    # Portfolio fit: category and title simplicity
    fit = 5
    if category == "saas":
        fit += 2
    if category == "content":
        fit += 3
    if 0 < len(title) < 30:
        fit += 1
    fit = min(10, fit)

    # Launch speed: category and description brevity
    speed = 5
    if category in ("content", "coaching"):
        speed += 3
    if category == "saas":
        speed += 1
    if 0 < len(description) < 100:
        speed += 2
    speed = min(10, speed)

    lowered = f"{title.lower()} {description.lower()}"
    if any(word in lowered for word in ENTHUSIASM_WORDS):
        energy = "high"
    elif pmf > 7:
        energy = "high"
    elif pmf < 4:
        energy = "low"
    else:
        energy = "medium"

    priority = round((pmf + fit + speed) / 3, 1)

    if priority >= 8:
        next_step = "Write your Manifesto and start building"
    elif priority >= 6:
        next_step = "Do market research and validate assumptions"
    elif priority < 4:
        next_step = "Pivot or kill this idea"
    else:
        next_step = "Validate with potential users"

    return IdeaScore(
        pmf_score=pmf,
        portfolio_fit_score=fit,
        launch_speed_score=speed,
        energy_level=energy,
        ai_priority_score=priority,
        next_step=next_step,
    )


def _load_ideas() -> List[Dict[str, Any]]:
    return [asdict(idea_from_dict(i)) for i in persistence.load_list('ideas') if i.get('id')]


def list_ideas(sort_by: str = "priority", status_filter: str = "all") -> List[Dict[str, Any]]:
    ideas = _load_ideas()
    if status_filter != "all":
        ideas = [i for i in ideas if i.get('status') == status_filter]
    if sort_by == "priority":
        ideas.sort(key=lambda i: i.get('ai_priority_score') or 0, reverse=True)
    elif sort_by == "recent":
        ideas.sort(key=lambda i: i.get('created_at') or '', reverse=True)
    elif sort_by == "pmf":
        ideas.sort(key=lambda i: i.get('pmf_score') or 0, reverse=True)
    return ideas


def get_idea(idea_id: str) -> Dict[str, Any]:
    idea = next((i for i in _load_ideas() if i.get('id') == idea_id), None)
    if idea is None:
        raise NotFoundError(f"Idea {idea_id} not found")
    return idea


def create_idea(title: str, description: str, category: str,
                target_audience: str = '', problem_it_solves: str = '',
                score: Optional[IdeaScore] = None) -> Idea:
    """Score (unless a preview score is passed in) and store a new idea."""
    if not (title or '').strip():
        raise ValidationError("Title Required", "Give your idea a name before saving it.")
    if score is None:
        score = score_idea(title, description, category, target_audience, problem_it_solves)
    idea = Idea(
        id=create_id_with_prefix('idea'),
        title=title.strip(),
        description=description,
        category=category,
        target_audience=target_audience,
        problem_it_solves=problem_it_solves,
        **asdict(score),
    )
    persistence.append_item('ideas', asdict(idea))
    logger.info("Saved idea %s (priority %.1f)", idea.id, idea.ai_priority_score)
    return idea


def update_idea(idea_id: str, **updates) -> Dict[str, Any]:
    ideas = _load_ideas()
    idea = next((i for i in ideas if i.get('id') == idea_id), None)
    if idea is None:
        raise NotFoundError(f"Idea {idea_id} not found")
    if 'status' in updates and updates['status'] not in IDEA_STATUSES:
        raise ValidationError("Invalid Status", f"Unknown idea status: {updates['status']}")
    idea.update(updates)
    persistence.replace_all('ideas', ideas)
    return idea


def rescore_idea(idea_id: str) -> Dict[str, Any]:
    idea = get_idea(idea_id)
    score = score_idea(idea.get('title', ''), idea.get('description', ''), idea.get('category'),
                       idea.get('target_audience', ''), idea.get('problem_it_solves', ''))
    return update_idea(idea_id, **asdict(score))


def validate_idea(idea_id: str) -> Dict[str, Any]:
    idea = get_idea(idea_id)
    if idea.get('status') != 'idea':
        raise ValidationError("Cannot Validate",
                              f"Only new ideas can be validated (current status: {idea.get('status')}).")
    return update_idea(idea_id, status='validated')


def kill_idea(idea_id: str) -> Dict[str, Any]:
    idea = get_idea(idea_id)
    if idea.get('status') == 'converted':
        raise ValidationError("Cannot Kill", "This idea is already a project.")
    return update_idea(idea_id, status='killed')


def delete_idea(idea_id: str):
    ideas = _load_ideas()
    remaining = [i for i in ideas if i.get('id') != idea_id]
    if len(remaining) == len(ideas):
        raise NotFoundError(f"Idea {idea_id} not found")
    persistence.replace_all('ideas', remaining)
