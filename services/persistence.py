"""JSON-file storage for the dashboard collections.

Each key maps to one JSON file under DATA_DIR. Lists hold records, the
profile is a single object. Unreadable or malformed files load as empty
so a corrupted blob never blocks the dashboard from starting.
"""
import json
import logging
import os
import tempfile
import shutil
from typing import List, Dict, Any

from utils.paths import resolve_data_dir

logger = logging.getLogger(__name__)

DATA_DIR = resolve_data_dir()

FILES = {
    'projects': 'projects.json',
    'ideas': 'ideas.json',
    'check_ins': 'check_ins.json',
    'reflections': 'reflections.json',
    'profile': 'profile.json',
}


def _path(key: str) -> str:
    return os.path.join(DATA_DIR, FILES[key])


def _read(key: str):
    file_path = _path(key)
    if not os.path.exists(file_path):
        return None
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Could not load %s from %s: %s", key, file_path, exc)
        return None


def load_list(key: str) -> List[Dict[str, Any]]:
    data = _read(key)
    if not isinstance(data, list):
        if data is not None:
            logger.warning("Expected a list in %s, got %s", FILES[key], type(data).__name__)
        return []
    return data


def load_dict(key: str) -> Dict[str, Any]:
    data = _read(key)
    if not isinstance(data, dict):
        if data is not None:
            logger.warning("Expected an object in %s, got %s", FILES[key], type(data).__name__)
        return {}
    return data


def atomic_write(key: str, data: Any):
    file_path = _path(key)
    os.makedirs(os.path.dirname(file_path), exist_ok=True)
    tmp_fd, tmp_path = tempfile.mkstemp(prefix='tmp_', suffix='.json', dir=os.path.dirname(file_path))
    with os.fdopen(tmp_fd, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    shutil.move(tmp_path, file_path)
    logger.debug("Wrote %s (%s)", file_path, key)


def append_item(key: str, item: Dict[str, Any]):
    data = load_list(key)
    data.append(item)
    atomic_write(key, data)


def replace_all(key: str, items: List[Dict[str, Any]]):
    atomic_write(key, items)


def save_dict(key: str, data: Dict[str, Any]):
    atomic_write(key, data)


def clear(key: str):
    file_path = _path(key)
    if os.path.exists(file_path):
        os.remove(file_path)
