"""
Dashboard-wide helpers: summary statistics for the home page, the template
library export, and the data tools (CSV export, sample data, reset).
"""
from dataclasses import asdict
from typing import List, Dict, Any
import csv
import io
import json
import logging

from demo import sample_data
from domain.templates import TEMPLATES, get_template  # noqa: F401  re-exported for the views
from services import persistence, projects as project_svc
from services.errors import NotFoundError

logger = logging.getLogger(__name__)

EXPORTABLE_KEYS = ['projects', 'ideas', 'check_ins', 'reflections']
HIGH_PRIORITY_SCORE = 8


def _avg(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0


def summary(projects: List[Dict[str, Any]], ideas: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Counters behind the stats cards and the pipeline overview."""
    def by_status(items, status):
        return sum(1 for i in items if i.get('status') == status)

    return {
        "total_projects": len(projects),
        "launched_projects": by_status(projects, "launched"),
        "in_progress_projects": by_status(projects, "in-progress"),
        "ideation_projects": by_status(projects, "ideation"),
        "ready_to_launch_projects": by_status(projects, "ready-to-launch"),
        "average_progress": _avg([p.get('progress') or 0 for p in projects]),
        "total_ideas": len(ideas),
        "high_priority_ideas": sum(1 for i in ideas if (i.get('ai_priority_score') or 0) >= HIGH_PRIORITY_SCORE),
        "validated_ideas": by_status(ideas, "validated"),
        "new_ideas": by_status(ideas, "idea"),
        "killed_ideas": by_status(ideas, "killed"),
        "average_idea_score": _avg([i.get('ai_priority_score') or 0 for i in ideas]),
    }


def template_export(template_id: str) -> str:
    template = get_template(template_id)
    if template is None:
        raise NotFoundError(f"Template {template_id} not found")
    return json.dumps(asdict(template), indent=2)


def export_to_csv(data_key: str) -> str:
    """Exports a collection to CSV; nested values are written as JSON text."""
    data = persistence.load_list(data_key)
    if not data:
        return ""

    output = io.StringIO()
    fieldnames = sorted({key for item in data for key in item.keys()})
    writer = csv.DictWriter(output, fieldnames=fieldnames)
    writer.writeheader()
    for item in data:
        writer.writerow({k: json.dumps(v, ensure_ascii=False) if isinstance(v, (list, dict)) else v
                         for k, v in item.items()})
    return output.getvalue()


def load_sample_data(include_rituals: bool = True) -> Dict[str, int]:
    """Adds sample projects/ideas (skipping ids already present) and, optionally, two weeks of rituals."""
    added = {}
    for key, records in (('projects', sample_data.make_projects()), ('ideas', sample_data.make_ideas())):
        existing = persistence.load_list(key)
        known = {r.get('id') for r in existing}
        fresh = [r for r in records if r['id'] not in known]
        if key == 'projects':
            start = project_svc.next_position(existing)
            for offset, record in enumerate(fresh):
                record['position'] = start + offset
        persistence.replace_all(key, existing + fresh)
        added[key] = len(fresh)
    if include_rituals:
        check_ins, reflections = sample_data.make_rituals()
        for key, records in (('check_ins', check_ins), ('reflections', reflections)):
            existing = persistence.load_list(key)
            taken = {r.get('date') for r in existing}
            fresh = [r for r in records if r['date'] not in taken]
            persistence.replace_all(key, sorted(existing + fresh, key=lambda r: r.get('date') or ''))
            added[key] = len(fresh)
    logger.info("Loaded sample data: %s", added)
    return added


def reset_all_data():
    """Deletes every collection, including the founder profile."""
    for key in EXPORTABLE_KEYS:
        persistence.replace_all(key, [])
    persistence.clear('profile')
    logger.info("All dashboard data reset")
