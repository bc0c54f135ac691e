from __future__ import annotations
import os
from pathlib import Path
from typing import List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return []
    return [Path(p.strip()) for p in raw.split(_sep()) if p.strip()]


def get_program_roots() -> List[Path]:
    return paths_from_env('EGG_PATH')


def get_log_level() -> str:
    return os.environ.get('EGG_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> int | None:
    raw = os.environ.get('EGG_RECURSION_LIMIT')
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"EGG_RECURSION_LIMIT must be an integer, got {raw!r}")
    return limit if limit > 0 else None


def resolve_program(name: str) -> Path:
    """Resolve a program path, falling back to the EGG_PATH directories."""
    path = Path(name)
    if path.exists() or path.is_absolute():
        return path
    for root in get_program_roots():
        candidate = root / name
        if candidate.exists():
            return candidate
    return path
