from __future__ import annotations

from pathlib import Path


def repo_root() -> Path:
    # recruit_form/core/paths.py -> core -> recruit_form -> repo
    return Path(__file__).resolve().parents[2]


def resolve_repo_path(path_value: str) -> Path:
    """
    Resolves a path that may be relative to the repo root.
    - If absolute: returns as-is.
    - Else tries CWD-relative.
    - Else tries repo-root-relative.
    - Else falls back to the CWD-relative path even if it does not exist yet.
    """
    p = Path(path_value)
    if p.is_absolute():
        return p
    if p.exists():
        return p.resolve()

    rr = repo_root() / path_value
    if rr.exists():
        return rr.resolve()

    return p.resolve()
