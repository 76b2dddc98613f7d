"""JSON reporter for CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from hermes.gate.models import CheckResult


def to_dict(results: List[CheckResult]) -> Dict[str, Any]:
    """Convert check results to a JSON-serialisable dict."""
    repositories: List[Dict[str, Any]] = []
    for result in results:
        sides_list: List[Dict[str, Any]] = []
        for s in result.sides:
            sides_list.append({
                "file": s.path,
                "side": s.side.value,
                "status": s.status.value,
                "language": s.language,
                "verdict": s.verdict.value,
                "is_code": s.is_code,
                **({"line": s.line_no} if s.line_no else {}),
            })
        repositories.append({
            "path": str(result.repo_root),
            "base": result.base,
            "head": result.head,
            "changed": result.changed,
            "files": result.entries,
            "sides": sides_list,
            "duration_ms": result.duration_ms,
        })

    return {
        "version": "1.0",
        "changed": any(r.changed for r in results),
        "repositories": repositories,
    }


def render(results: List[CheckResult]) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(results), indent=2)
