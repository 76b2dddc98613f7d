"""Load and merge configuration from .hermes.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from hermes.config.schema import (
    MATCH_MODES,
    OUTPUT_FORMATS,
    CheckConfig,
    FilterConfig,
    HermesConfig,
    OutputConfig,
)

CONFIG_FILENAME = ".hermes.toml"


class ConfigError(Exception):
    """Raised when .hermes.toml cannot be read or holds invalid values."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Return the config path to use: *override*, else .hermes.toml at the root."""
    if override:
        path = Path(override)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return path
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def parse_language_list(value: str) -> List[str]:
    """Split a comma-separated language list (``Rust,C``)."""
    return [name.strip() for name in value.split(",") if name.strip()]


def _merge_env_overrides(cfg: HermesConfig) -> None:
    """Apply HERMES_* environment variable overrides."""
    if val := os.environ.get("HERMES_FILTER"):
        cfg.filter.languages = parse_language_list(val)
    if val := os.environ.get("HERMES_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("HERMES_MATCH_MODE"):
        if val in MATCH_MODES:
            cfg.check.match_mode = val  # type: ignore[assignment]


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Instantiate *cls* from ``[section]``; keys it does not declare are dropped."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def validate_config(cfg: HermesConfig) -> None:
    """Reject values the checker cannot act on."""
    if cfg.check.match_mode not in MATCH_MODES:
        raise ConfigError(
            f"check.match_mode must be one of {', '.join(MATCH_MODES)}, "
            f"got {cfg.check.match_mode!r}"
        )
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, "
            f"got {cfg.output.format!r}"
        )
    if not isinstance(cfg.filter.languages, list) or not all(
        isinstance(name, str) for name in cfg.filter.languages
    ):
        raise ConfigError("filter.languages must be a list of language names")


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> HermesConfig:
    """Load, validate, and return a HermesConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = HermesConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = HermesConfig(
            version=raw.get("version", "1.0"),
            check=_build_section(raw, CheckConfig, "check"),
            filter=_build_section(raw, FilterConfig, "filter"),
            output=_build_section(raw, OutputConfig, "output"),
        )

    _merge_env_overrides(cfg)
    validate_config(cfg)
    return cfg
