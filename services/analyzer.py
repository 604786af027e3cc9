"""Mood / productivity pattern analysis over check-ins and evening reflections.

Works on the small in-memory lists loaded from storage (weeks of data at
most). Every average over an empty group is 0 and every undefined
correlation is 0, so the dashboard always has numbers to show.
"""
from dataclasses import dataclass
from typing import List, Dict, Any, Optional
import datetime as dt
import math

import pandas as pd

from domain.constants import LEVELS, LEVEL_SCORES

MIN_CHECK_INS = 3
TREND_WINDOW = 7
TREND_MIN_DAYS = 3
IMPROVING_RATIO = 1.2
DECLINING_RATIO = 0.8


@dataclass
class ProductivityPattern:
    best_mood_for_productivity: str = "high"
    best_energy_for_focus: str = "high"
    average_tasks_on_high_mood: float = 0
    average_tasks_on_low_mood: float = 0
    focus_correlation: float = 0
    productivity_trend: str = "stable"  # improving | declining | stable
    best_mood_day: str = "Monday"
    average_mood_score: float = 2
    high_energy_days: int = 0
    average_productivity: float = 5


def average(numbers: List[float]) -> float:
    if not numbers:
        return 0
    return sum(numbers) / len(numbers)


def level_score(level: Optional[str]) -> int:
    return LEVEL_SCORES.get(level or '', 1)


def pearson(xs: List[float], ys: List[float]) -> float:
    """Pearson coefficient; 0 when undefined (fewer than 2 points or zero variance)."""
    n = len(xs)
    if n < 2 or n != len(ys):
        return 0.0
    sum_x, sum_y = sum(xs), sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_x2 = sum(x * x for x in xs)
    sum_y2 = sum(y * y for y in ys)
    denom_sq = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    if denom_sq <= 0:
        return 0.0
    corr = (n * sum_xy - sum_x * sum_y) / math.sqrt(denom_sq)
    return 0.0 if math.isnan(corr) else corr


def combine_days(check_ins: List[Dict[str, Any]], reflections: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Join each check-in with the same-day reflection; keep days with completed tasks."""
    by_date = {r.get('date'): r for r in reflections}
    combined = []
    for c in sorted(check_ins, key=lambda r: r.get('date') or ''):
        r = by_date.get(c.get('date')) or {}
        day = dict(c)
        day['tasks_completed'] = r.get('tasks_completed') or 0
        day['focus_achieved'] = r.get('focus_achieved') or 5
        day['satisfaction_level'] = r.get('satisfaction_level') or 5
        if day['tasks_completed'] > 0:
            combined.append(day)
    return combined


def _best_level(groups: Dict[str, List[float]]) -> str:
    # max() keeps the first of equal values, so ties resolve high > medium > low
    return max(LEVELS, key=lambda lvl: average(groups[lvl]))


def _trend(combined: List[Dict[str, Any]]) -> str:
    recent = combined[-TREND_WINDOW:]
    older = combined[-2 * TREND_WINDOW:-TREND_WINDOW]
    if len(recent) < TREND_MIN_DAYS or len(older) < TREND_MIN_DAYS:
        return "stable"
    recent_avg = average([d['tasks_completed'] for d in recent])
    older_avg = average([d['tasks_completed'] for d in older])
    if recent_avg > older_avg * IMPROVING_RATIO:
        return "improving"
    if recent_avg < older_avg * DECLINING_RATIO:
        return "declining"
    return "stable"


def _weekday(date_str: str) -> Optional[str]:
    try:
        return dt.date.fromisoformat(date_str).strftime('%A')
    except (TypeError, ValueError):
        return None


def _best_mood_day(combined: List[Dict[str, Any]]) -> str:
    scores: Dict[str, List[int]] = {}
    for d in combined:
        day = _weekday(d.get('date'))
        if day:
            scores.setdefault(day, []).append(level_score(d.get('mood')))
    if not scores:
        return "Monday"
    return max(scores, key=lambda day: average(scores[day]))


def analyze_patterns(check_ins: List[Dict[str, Any]], reflections: List[Dict[str, Any]]) -> ProductivityPattern:
    if len(check_ins) < MIN_CHECK_INS:
        return ProductivityPattern()

    combined = combine_days(check_ins, reflections)
    if not combined:
        return ProductivityPattern()

    tasks_by_mood = {lvl: [d['tasks_completed'] for d in combined if d.get('mood') == lvl] for lvl in LEVELS}
    focus_by_energy = {lvl: [d['focus_achieved'] for d in combined if d.get('energy') == lvl] for lvl in LEVELS}

    mood_energy = [level_score(d.get('mood')) + level_score(d.get('energy')) for d in combined]
    focus = [d['focus_achieved'] for d in combined]

    return ProductivityPattern(
        best_mood_for_productivity=_best_level(tasks_by_mood),
        best_energy_for_focus=_best_level(focus_by_energy),
        average_tasks_on_high_mood=average(tasks_by_mood['high']),
        average_tasks_on_low_mood=average(tasks_by_mood['low']),
        focus_correlation=pearson(mood_energy, focus),
        productivity_trend=_trend(combined),
        best_mood_day=_best_mood_day(combined),
        average_mood_score=average([level_score(d.get('mood')) for d in combined]),
        high_energy_days=sum(1 for d in combined if d.get('energy') == 'high'),
        average_productivity=average([d['satisfaction_level'] for d in combined]),
    )


def get_productivity_recommendations(current_mood: str, current_energy: str,
                                     pattern: ProductivityPattern) -> List[str]:
    recs: List[str] = []

    if current_mood == pattern.best_mood_for_productivity:
        recs.append("You're in your most productive mood state - tackle challenging tasks!")
    elif current_mood == "low" and pattern.best_mood_for_productivity == "high":
        recs.append("Low mood detected. Consider lighter tasks or creative work instead of heavy execution.")

    if current_energy == pattern.best_energy_for_focus:
        recs.append("Your energy level is optimal for focused work - minimize distractions.")
    elif current_energy == "low":
        recs.append("Low energy - perfect time for planning, organizing, or idea capture.")

    if pattern.focus_correlation > 0.5:
        recs.append("Your mood and energy strongly predict focus - prioritize self-care for better outcomes.")

    if pattern.productivity_trend == "improving":
        recs.append("You're on an upward trend! Keep up the momentum.")
    elif pattern.productivity_trend == "declining":
        recs.append("Productivity has been declining. Consider adjusting your approach or taking a break.")

    return recs


def chart_frame(check_ins: List[Dict[str, Any]], reflections: List[Dict[str, Any]], days: int = 7) -> pd.DataFrame:
    """Last `days` reflections with the same-day mood/energy scores, indexed by a short date label."""
    by_date = {c.get('date'): c for c in check_ins}
    rows = []
    for r in sorted(reflections, key=lambda r: r.get('date') or '')[-days:]:
        c = by_date.get(r.get('date')) or {}
        try:
            label = dt.date.fromisoformat(r.get('date')).strftime('%b %d')
        except (TypeError, ValueError):
            label = str(r.get('date'))
        rows.append({
            'date': label,
            'satisfaction': r.get('satisfaction_level', 0),
            'tasks_completed': r.get('tasks_completed', 0),
            'focus_achieved': r.get('focus_achieved', 0),
            'mood': level_score(c.get('mood')),
            'energy': level_score(c.get('energy')),
        })
    columns = ['date', 'satisfaction', 'tasks_completed', 'focus_achieved', 'mood', 'energy']
    return pd.DataFrame(rows, columns=columns).set_index('date')


def mood_distribution(check_ins: List[Dict[str, Any]]) -> Dict[str, int]:
    counts = {lvl: 0 for lvl in LEVELS}
    for c in check_ins:
        if c.get('mood') in counts:
            counts[c['mood']] += 1
    return {lvl.capitalize(): n for lvl, n in counts.items()}
