"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

MatchMode = Literal["span", "text"]
OutputFormat = Literal["terminal", "json"]

MATCH_MODES = ("span", "text")
OUTPUT_FORMATS = ("terminal", "json")


@dataclass
class CheckConfig:
    match_mode: MatchMode = "span"  # span: comment spans containing the line; text: whole-file search
    short_circuit: bool = True  # stop at the first side that contains code


@dataclass
class FilterConfig:
    languages: List[str] = field(default_factory=list)  # empty = every language


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True


@dataclass
class HermesConfig:
    version: str = "1.0"
    check: CheckConfig = field(default_factory=CheckConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
