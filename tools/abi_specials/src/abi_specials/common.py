from __future__ import annotations

import difflib
import json
from pathlib import Path
from typing import Any

from .model import SpecialsError


def load_json_object(path: Path) -> dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SpecialsError(f"Unable to read JSON file '{path}': {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SpecialsError(f"Invalid JSON in '{path}': {exc}") from exc
    if not isinstance(payload, dict):
        raise SpecialsError(f"JSON root in '{path}' must be an object")
    return payload


def render_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=False) + "\n"


def describe_drift(path: Path, existing: str, content: str) -> str:
    return "\n".join(
        difflib.unified_diff(
            existing.splitlines(),
            content.splitlines(),
            fromfile=f"a/{path.name}",
            tofile=f"b/{path.name}",
            lineterm="",
        )
    )


def write_if_changed(path: Path, content: str, check: bool, dry_run: bool) -> int:
    """Keep a generated report in sync.

    Returns 1 only in check mode when ``path`` is stale, after printing the
    drift. ``dry_run`` computes everything but leaves the file untouched.
    """
    try:
        existing = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        existing = None
    if existing == content:
        return 0

    if check:
        print(describe_drift(path, existing or "", content))
        return 1
    if dry_run:
        return 0

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise SpecialsError(f"Unable to write '{path}': {exc}") from exc
    return 0
