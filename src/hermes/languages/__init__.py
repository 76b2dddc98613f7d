"""Language syntax — models, built-in table, registry."""

from hermes.languages.models import LanguageSyntax
from hermes.languages.registry import (
    LanguageDefinitionError,
    LanguageRegistry,
    build_registry,
)

__all__ = [
    "LanguageDefinitionError",
    "LanguageRegistry",
    "LanguageSyntax",
    "build_registry",
]
