"""Rich terminal reporter — verdict line plus an optional per-side table."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from hermes.classifier.models import SideResult, Verdict
from hermes.gate.models import CheckResult

CHANGED_MESSAGE = "Code has changed."
UNCHANGED_MESSAGE = "No code has changed."

_VERDICT_STYLE = {
    Verdict.CODE: "bold white on red",
    Verdict.UNKNOWN_LANGUAGE: "bold black on yellow",
    Verdict.COMMENT: "bold black on green",
    Verdict.NO_LINES: "dim",
    Verdict.NO_PATH: "dim",
    Verdict.FILTERED: "dim",
}


def _verdict_pill(verdict: Verdict) -> Text:
    style = _VERDICT_STYLE.get(verdict, "")
    return Text(f" {verdict.value.replace('_', ' ').upper()} ", style=style)


def verdict_message(changed: bool) -> str:
    return CHANGED_MESSAGE if changed else UNCHANGED_MESSAGE


def render_details(
    results: List[CheckResult],
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print the per-side verdict table and summary to stderr."""
    console = console or Console(stderr=True)

    sides: List[SideResult] = [s for r in results for s in r.sides]
    if sides:
        console.print()
        table = Table(
            title="hermes verdicts",
            show_lines=False,
            title_style="bold",
            border_style="dim",
        )
        table.add_column("Verdict", justify="center", width=18)
        table.add_column("Side", style="cyan")
        table.add_column("File", style="magenta")
        table.add_column("Language")
        table.add_column("Line", justify="right", style="green")

        for side in sides:
            table.add_row(
                _verdict_pill(side.verdict),
                side.side.value,
                side.path or "-",
                side.language or "?",
                str(side.line_no) if side.line_no else "-",
            )
        console.print(table)

    if show_summary:
        _print_summary(console, results)


def _print_summary(console: Console, results: List[CheckResult]) -> None:
    console.print()
    for result in results:
        console.print(f"[dim]Repository:[/dim]    {result.repo_root}")
        console.print(f"[dim]Range:[/dim]         {result.base[:12]}..{result.head[:12]}")
        console.print(f"[dim]Files:[/dim]         {result.entries}")
        console.print(f"[dim]Sides checked:[/dim] {len(result.sides)}")
        console.print(f"[dim]Filtered:[/dim]      {result.count(Verdict.FILTERED)}")
        console.print(f"[dim]Duration:[/dim]      {result.duration_ms:.0f}ms")


def render(changed: bool) -> None:
    """Print the single verdict line to stdout."""
    print(verdict_message(changed))
