"""Language engines and the registry that maps language codes to them."""
from .base import CaseConfig, GrammarConfig, LanguageEngine
from .registry import LanguageRegistry, build_registry
from .types import Gender, NameGroupPolicy

__all__ = [
    "LanguageRegistry",
    "build_registry",
    "LanguageEngine",
    "CaseConfig",
    "GrammarConfig",
    "Gender",
    "NameGroupPolicy",
]
