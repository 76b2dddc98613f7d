"""Gate — check revision ranges for code changes."""

from hermes.gate.engine import check_entries, check_repository, collect_entries
from hermes.gate.models import CheckResult

__all__ = ["CheckResult", "check_entries", "check_repository", "collect_entries"]
