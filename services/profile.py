"""Founder profile: onboarding answers plus mission/vision and self-rated alignment.

Stored as a single object under the `profile` key. Reads always merge over
the defaults so older blobs missing newer fields still load.
"""
from dataclasses import asdict
from typing import Dict, Any, List
import logging

from domain.constants import EXPERIENCE_LEVELS
from domain.models import UserProfile, profile_from_dict
from services import persistence
from services.errors import ValidationError

logger = logging.getLogger(__name__)

ALLOWED_KEYS = {'name', 'role', 'goals', 'experience', 'interests', 'mission',
                'vision', 'anti_vision', 'alignment_scores', 'onboarded'}
ALIGNMENT_KEYS = ('clarity', 'energy', 'confidence')


def default_profile() -> Dict[str, Any]:
    return asdict(UserProfile())


def get_profile() -> Dict[str, Any]:
    stored = persistence.load_dict('profile')
    return asdict(profile_from_dict({**default_profile(), **stored}))


def save_profile(updates: Dict[str, Any]) -> Dict[str, Any]:
    """Persist allowed keys only; alignment scores are clamped to 1-10."""
    if 'experience' in updates and updates['experience'] not in EXPERIENCE_LEVELS:
        raise ValidationError("Invalid Experience", f"Unknown experience level: {updates['experience']}")
    current = get_profile()
    current.update({k: v for k, v in updates.items() if k in ALLOWED_KEYS})
    scores = current.get('alignment_scores') or {}
    current['alignment_scores'] = {k: max(1, min(10, int(scores.get(k, 5)))) for k in ALIGNMENT_KEYS}
    persistence.save_dict('profile', current)
    return current


def complete_onboarding(name: str, role: str, goals: List[str], experience: str,
                        interests: List[str]) -> Dict[str, Any]:
    if not (name or '').strip():
        raise ValidationError("Name Required", "Tell us what to call you.")
    profile = save_profile({
        'name': name.strip(),
        'role': (role or '').strip(),
        'goals': list(goals or []),
        'experience': experience,
        'interests': list(interests or []),
        'onboarded': True,
    })
    logger.info("Onboarding completed for %s", profile['name'])
    return profile


def skip_onboarding() -> Dict[str, Any]:
    return save_profile({'onboarded': True})


def reset_profile() -> Dict[str, Any]:
    persistence.clear('profile')
    return get_profile()


def alignment_average(profile: Dict[str, Any]) -> int:
    scores = profile.get('alignment_scores')
    if not scores:
        return 5
    return round(sum(scores.get(k, 5) for k in ALIGNMENT_KEYS) / len(ALIGNMENT_KEYS))
