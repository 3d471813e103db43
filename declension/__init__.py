"""Rule-based case inflection for Russian and Kazakh words and names."""

__version__ = "0.1.0"

from declension.core.errors import (  # noqa: E402
    DeclensionError,
    InvalidInputError,
    InvalidPolicyError,
    UnknownCaseError,
    UnsupportedLanguageError,
)
from declension.facade import Declension  # noqa: E402
from declension.languages import LanguageEngine, LanguageRegistry, NameGroupPolicy, build_registry  # noqa: E402
from declension.languages.kazakh import KazakhCase, KazakhEngine  # noqa: E402
from declension.languages.russian import RussianCase, RussianEngine  # noqa: E402

__all__ = [
    "Declension",
    "LanguageEngine",
    "LanguageRegistry",
    "build_registry",
    "NameGroupPolicy",
    "RussianEngine",
    "RussianCase",
    "KazakhEngine",
    "KazakhCase",
    "DeclensionError",
    "InvalidInputError",
    "InvalidPolicyError",
    "UnknownCaseError",
    "UnsupportedLanguageError",
]
