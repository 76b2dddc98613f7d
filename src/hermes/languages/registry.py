"""Language registry — built-in and custom syntax definitions, path lookup."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional, Tuple

import yaml

from hermes.languages.models import CommentPair, LanguageSyntax

logger = logging.getLogger(__name__)

CUSTOM_LANGUAGES_DIR = ".hermes-languages"


class LanguageDefinitionError(Exception):
    """Raised when a language syntax definition is malformed."""


class LanguageRegistry:
    """Central store for language syntax definitions."""

    def __init__(self) -> None:
        self._languages: Dict[str, LanguageSyntax] = {}
        self._by_extension: Dict[str, LanguageSyntax] = {}
        self._by_filename: Dict[str, LanguageSyntax] = {}

    # ---- registration ----

    def register(self, language: LanguageSyntax) -> None:
        _validate(language)
        previous = self._languages.get(language.name.lower())
        if previous is not None:
            self._forget(previous)
        self._languages[language.name.lower()] = language
        for ext in language.extensions:
            self._by_extension[ext.lower().lstrip(".")] = language
        for filename in language.filenames:
            self._by_filename[filename] = language

    def register_many(self, languages: list[LanguageSyntax]) -> None:
        for language in languages:
            self.register(language)

    def _forget(self, language: LanguageSyntax) -> None:
        self._by_extension = {
            k: v for k, v in self._by_extension.items() if v is not language
        }
        self._by_filename = {
            k: v for k, v in self._by_filename.items() if v is not language
        }

    # ---- queries ----

    @property
    def all_languages(self) -> List[LanguageSyntax]:
        return sorted(self._languages.values(), key=lambda lang: lang.name.lower())

    def get(self, name: str) -> Optional[LanguageSyntax]:
        return self._languages.get(name.lower())

    def lookup(self, path: str) -> Optional[LanguageSyntax]:
        """Return the syntax for *path*, or None when the language is unknown."""
        p = PurePosixPath(path)
        if p.name in self._by_filename:
            return self._by_filename[p.name]
        suffix = p.suffix.lower().lstrip(".")
        if suffix:
            return self._by_extension.get(suffix)
        # Extension-less files such as "Makefile" fall back to the lowercase name
        return self._by_extension.get(p.name.lower())

    # ---- custom definitions ----

    def load_custom_languages(self, directory: Path) -> int:
        """Load YAML language definitions from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_languages(path)
        return count

    def _load_yaml_languages(self, path: Path) -> int:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise LanguageDefinitionError(f"Failed to parse {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            language = language_from_dict(entry, source=str(path))
            self.register(language)
            logger.debug("Loaded custom language %s from %s", language.name, path)
            count += 1
        return count


def _pairs(value: Any, field_name: str, source: str) -> Tuple[CommentPair, ...]:
    pairs: List[CommentPair] = []
    for item in value or []:
        if (
            not isinstance(item, (list, tuple))
            or len(item) != 2
            or not all(isinstance(s, str) for s in item)
        ):
            raise LanguageDefinitionError(
                f"{source}: '{field_name}' entries must be [start, end] pairs, got {item!r}"
            )
        pairs.append((item[0], item[1]))
    return tuple(pairs)


def _strings(value: Any, field_name: str, source: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not all(isinstance(s, str) for s in value):
        raise LanguageDefinitionError(f"{source}: '{field_name}' must be a list of strings")
    return tuple(value)


def language_from_dict(entry: Any, source: str = "<definition>") -> LanguageSyntax:
    """Build a LanguageSyntax from a YAML mapping."""
    if not isinstance(entry, dict) or not entry.get("name"):
        raise LanguageDefinitionError(f"{source}: every language needs a 'name'")
    doc_marker = entry.get("doc_marker")
    if doc_marker is not None and not isinstance(doc_marker, str):
        raise LanguageDefinitionError(f"{source}: 'doc_marker' must be a string")
    return LanguageSyntax(
        name=str(entry["name"]),
        line_comments=_strings(entry.get("line_comments"), "line_comments", source),
        multi_line_comments=_pairs(
            entry.get("multi_line_comments"), "multi_line_comments", source
        ),
        nested_comments=_pairs(entry.get("nested_comments"), "nested_comments", source),
        doc_marker=doc_marker,
        extensions=_strings(entry.get("extensions"), "extensions", source),
        filenames=_strings(entry.get("filenames"), "filenames", source),
    )


def _validate(language: LanguageSyntax) -> None:
    """Reject delimiters that cannot be turned into patterns."""
    delimiters = list(language.line_comments)
    for start, end in language.block_comments:
        delimiters.extend((start, end))
    if language.doc_marker is not None:
        delimiters.append(language.doc_marker)
    if any(not d for d in delimiters):
        raise LanguageDefinitionError(
            f"Language {language.name!r} has an empty comment delimiter"
        )


def build_registry(repo_root: Optional[Path] = None) -> LanguageRegistry:
    """Create a registry with built-in languages plus the repo's custom ones."""
    from hermes.languages.builtin import ALL_BUILTIN_LANGUAGES

    registry = LanguageRegistry()
    registry.register_many(ALL_BUILTIN_LANGUAGES)

    if repo_root is not None:
        loaded = registry.load_custom_languages(repo_root / CUSTOM_LANGUAGES_DIR)
        if loaded:
            logger.info("Loaded %d custom language definition(s)", loaded)

    return registry
