import os
from typing import Optional

DATA_DIR_ENV = 'POLYPRENEUR_DATA_DIR'


def project_root() -> str:
    return os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


def resolve_data_dir(override: Optional[str] = None) -> str:
    """Resolve the directory holding the JSON collections.

    Order:
    1. Explicit override argument.
    2. POLYPRENEUR_DATA_DIR environment variable.
    3. <project root>/data.
    The directory is not created here; writers create it on demand.
    """
    if override:
        return os.path.normpath(os.path.abspath(override))
    env_dir = os.environ.get(DATA_DIR_ENV, '').strip()
    if env_dir:
        return os.path.normpath(os.path.abspath(env_dir))
    return os.path.join(project_root(), 'data')
