"""Daily rituals: the morning check-in and the evening reflection.

One record per calendar date in each collection; submitting again on the
same date replaces the earlier entry.
"""
from dataclasses import asdict
from typing import List, Dict, Any, Optional
import datetime as dt
import logging

from domain.constants import LEVELS
from domain.models import DailyCheckIn, EveningReflection
from services import persistence
from services.errors import ValidationError

logger = logging.getLogger(__name__)


def _clamp(value, low: int, high: int) -> int:
    return max(low, min(high, int(value)))


def _upsert_by_date(key: str, record: Dict[str, Any]):
    items = [r for r in persistence.load_list(key) if r.get('date') != record['date']]
    items.append(record)
    items.sort(key=lambda r: r.get('date') or '')
    persistence.replace_all(key, items)


def submit_check_in(mood: str, energy: str, focus: str, reflection: str = '',
                    date: Optional[str] = None) -> DailyCheckIn:
    if not (focus or '').strip():
        raise ValidationError("Focus Required", "Please set your main focus for today.")
    if mood not in LEVELS or energy not in LEVELS:
        raise ValidationError("Invalid Check-in", "Mood and energy must be high, medium or low.")
    check_in = DailyCheckIn(mood=mood, energy=energy, focus=focus.strip(),
                            reflection=(reflection or '').strip(),
                            date=date or dt.date.today().isoformat())
    _upsert_by_date('check_ins', asdict(check_in))
    logger.info("Check-in logged for %s (mood=%s, energy=%s)", check_in.date, mood, energy)
    return check_in


def submit_reflection(accomplishments: str, tasks_completed: int = 0, focus_achieved: int = 5,
                      energy_used: int = 5, challenges: str = '', tomorrow_priority: str = '',
                      satisfaction_level: int = 7, date: Optional[str] = None) -> EveningReflection:
    if not (accomplishments or '').strip():
        raise ValidationError("Accomplishments Required", "Please note what you accomplished today.")
    reflection = EveningReflection(
        accomplishments=accomplishments.strip(),
        tasks_completed=_clamp(tasks_completed, 0, 20),
        focus_achieved=_clamp(focus_achieved, 1, 10),
        energy_used=_clamp(energy_used, 1, 10),
        challenges=(challenges or '').strip(),
        tomorrow_priority=(tomorrow_priority or '').strip(),
        satisfaction_level=_clamp(satisfaction_level, 1, 10),
        date=date or dt.date.today().isoformat(),
    )
    _upsert_by_date('reflections', asdict(reflection))
    logger.info("Evening reflection logged for %s", reflection.date)
    return reflection


def list_check_ins() -> List[Dict[str, Any]]:
    return sorted(persistence.load_list('check_ins'), key=lambda r: r.get('date') or '')


def list_reflections() -> List[Dict[str, Any]]:
    return sorted(persistence.load_list('reflections'), key=lambda r: r.get('date') or '')


def check_in_for(date: str) -> Optional[Dict[str, Any]]:
    return next((c for c in persistence.load_list('check_ins') if c.get('date') == date), None)


def todays_check_in() -> Optional[Dict[str, Any]]:
    return check_in_for(dt.date.today().isoformat())


def todays_reflection() -> Optional[Dict[str, Any]]:
    today = dt.date.today().isoformat()
    return next((r for r in persistence.load_list('reflections') if r.get('date') == today), None)
