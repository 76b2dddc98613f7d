"""Check result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from hermes.classifier.models import SideResult, Verdict


@dataclass
class CheckResult:
    """Complete result of checking one repository."""

    repo_root: Path
    base: str
    head: str
    sides: List[SideResult] = field(default_factory=list)
    entries: int = 0
    duration_ms: float = 0.0

    @property
    def changed(self) -> bool:
        return any(s.is_code for s in self.sides)

    @property
    def first_code_side(self) -> Optional[SideResult]:
        return next((s for s in self.sides if s.is_code), None)

    @property
    def filtered(self) -> List[SideResult]:
        return [s for s in self.sides if s.verdict is Verdict.FILTERED]

    def count(self, verdict: Verdict) -> int:
        return sum(1 for s in self.sides if s.verdict is verdict)
