"""hermes CLI — Typer application with check, init, and languages commands."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from hermes import __version__

app = typer.Typer(
    name="hermes",
    help="Tell code changes apart from comment-only changes.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

EXIT_CHANGED = 0
EXIT_UNCHANGED = 1
EXIT_ERROR = 2


def _setup_logging(verbose: int, quiet: bool) -> None:
    """Route log records through Rich on stderr.

    ``-v`` shows unknown languages and skipped sides, ``-vv`` adds a
    per-line trace. HERMES_LOG_LEVEL overrides both flags.
    """
    env_level = os.environ.get("HERMES_LOG_LEVEL", "").upper()
    if env_level in ("DEBUG", "INFO", "WARNING", "ERROR"):
        level = getattr(logging, env_level)
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.root.handlers.clear()

    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    handler.setLevel(level)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
    )


def _fail(label: str, exc: Exception) -> typer.Exit:
    console.print(f"[bold red]{label}:[/bold red] {exc}")
    return typer.Exit(code=EXIT_ERROR)


def _resolve_repo_root(path: Optional[Path] = None) -> Path:
    """Find the git repo root, exit 2 on failure."""
    from hermes.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root(path)
    except GitError as exc:
        raise _fail("Error", exc) from exc


# ── check ─────────────────────────────────────────────────────────────────────


@app.command()
def check(
    paths: Optional[List[Path]] = typer.Argument(
        None, help="Git repositories to check. Defaults to the current directory."
    ),
    filter: Optional[str] = typer.Option(
        None, "--filter", "-f", help="Only count these languages, comma separated, e.g. -f Rust,C"
    ),
    command: Optional[str] = typer.Option(
        None, "--command", "-c", help="Command to run if code has changed; a failing command exits 2"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print the verdict to stdout"),
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True,
        help="Repeat for more detail: -v skipped files and unknown languages, -vv per-line trace",
    ),
    from_ref: Optional[str] = typer.Option(None, "--from", help="Base revision (default: first parent of --to)"),
    to_ref: str = typer.Option("HEAD", "--to", help="Head revision"),
    staged: bool = typer.Option(False, "--staged", help="Check staged changes against HEAD (pre-commit)"),
    format: Optional[str] = typer.Option(None, "--format", help="Output format: terminal | json"),
    match_mode: Optional[str] = typer.Option(None, "--match-mode", help="Comment matching: span | text"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to .hermes.toml"),
) -> None:
    """Check whether the latest commit changed code or only comments."""
    from hermes.classifier.errors import ClassifierError
    from hermes.config.loader import ConfigError, load_config, parse_language_list
    from hermes.config.schema import MATCH_MODES, OUTPUT_FORMATS
    from hermes.gate.engine import check_repository
    from hermes.gate.models import CheckResult
    from hermes.git.adapter import GitError
    from hermes.languages.registry import LanguageDefinitionError, build_registry
    from hermes.output import json_report, terminal

    if quiet and verbose:
        console.print("[bold red]Error:[/bold red] --quiet and --verbose cannot be combined")
        raise typer.Exit(code=EXIT_ERROR)
    if format and format not in OUTPUT_FORMATS:
        console.print(f"[bold red]Invalid format:[/bold red] {format}")
        raise typer.Exit(code=EXIT_ERROR)
    if match_mode and match_mode not in MATCH_MODES:
        console.print(f"[bold red]Invalid match mode:[/bold red] {match_mode}")
        raise typer.Exit(code=EXIT_ERROR)

    _setup_logging(verbose, quiet)
    log = logging.getLogger("hermes")

    results: List[CheckResult] = []
    output_format: Optional[str] = format
    show_summary = True

    for path in paths or [Path(".")]:
        repo_root = _resolve_repo_root(path)

        # --- Load config ---
        try:
            cfg = load_config(repo_root, config)
        except ConfigError as exc:
            raise _fail("Config error", exc) from exc

        # --- CLI overrides ---
        if filter is not None:
            cfg.filter.languages = parse_language_list(filter)
        if match_mode:
            cfg.check.match_mode = match_mode  # type: ignore[assignment]
        if output_format is None:
            output_format = cfg.output.format
            show_summary = cfg.output.show_summary

        try:
            registry = build_registry(repo_root)
        except LanguageDefinitionError as exc:
            raise _fail("Language definition error", exc) from exc

        if cfg.filter.languages:
            unknown = [name for name in cfg.filter.languages if registry.get(name) is None]
            for name in unknown:
                log.warning("Filter names an unknown language: %s", name)

        # --- Run check ---
        try:
            result = check_repository(
                repo_root, cfg, registry, base=from_ref, head=to_ref, staged=staged
            )
        except GitError as exc:
            raise _fail("Git error", exc) from exc
        except ClassifierError as exc:
            raise _fail("Classifier error", exc) from exc
        except OSError as exc:
            raise _fail("I/O error", exc) from exc

        results.append(result)
        if result.changed and cfg.check.short_circuit:
            break

    changed = any(r.changed for r in results)

    # --- Output ---
    if not quiet:
        if output_format == "json":
            print(json_report.render(results))
        else:
            terminal.render(changed)
    if verbose and output_format != "json":
        terminal.render_details(results, show_summary=show_summary, console=console)

    # --- Follow-up command ---
    if changed and command:
        log.info("Running: %s", command)
        completed = subprocess.run(command, shell=True)
        if completed.returncode != 0:
            console.print(
                f"[bold red]Command failed:[/bold red] {command} (exit {completed.returncode})"
            )
            raise typer.Exit(code=EXIT_ERROR)
        raise typer.Exit(code=EXIT_CHANGED)

    raise typer.Exit(code=EXIT_CHANGED if changed else EXIT_UNCHANGED)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .hermes.toml in the repo root."""
    from hermes.config.defaults import DEFAULT_TOML
    from hermes.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── languages ─────────────────────────────────────────────────────────────────


@app.command()
def languages(
    path: Optional[Path] = typer.Argument(
        None, help="Repository whose custom definitions should be included"
    ),
) -> None:
    """List the known languages and their comment syntax."""
    from rich.table import Table

    from hermes.languages.registry import LanguageDefinitionError, build_registry

    repo_root = _resolve_repo_root(path) if path is not None else None
    try:
        registry = build_registry(repo_root)
    except LanguageDefinitionError as exc:
        raise _fail("Language definition error", exc) from exc

    table = Table(title="Languages", title_style="bold", border_style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Extensions", style="magenta")
    table.add_column("Line")
    table.add_column("Block")
    table.add_column("Doc tests", justify="center")

    for lang in registry.all_languages:
        table.add_row(
            lang.name,
            " ".join(lang.extensions + lang.filenames),
            " ".join(lang.line_comments),
            " ".join(f"{s}…{e}" for s, e in lang.block_comments),
            lang.doc_marker or "",
        )

    Console().print(table)


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"hermes {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """hermes — did this commit change code, or only comments?"""
