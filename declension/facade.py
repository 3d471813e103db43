"""Entry point that resolves a language code and runs its engine.

Usage:
    from declension import Declension, build_registry

    decl = Declension(build_registry())
    decl.inflect_word("Иван Иванович Петров", "ru", "genitive")
    # 'Ивана Ивановича Петрова'
"""
from __future__ import annotations

from enum import Enum

from declension.core.logging import engine_logger
from declension.languages.base import validate_word
from declension.languages.registry import LanguageRegistry
from declension.languages.types import NameGroupPolicy

log = engine_logger()


class Declension:
    """Language-agnostic inflection over a registry of engines."""

    __slots__ = ("_registry", "_default_policy")

    def __init__(
        self,
        registry: LanguageRegistry,
        default_policy: NameGroupPolicy | str | None = None,
    ):
        self._registry = registry
        self._default_policy = default_policy

    @property
    def registry(self) -> LanguageRegistry:
        return self._registry

    def inflect_word(
        self,
        word: str,
        language: str,
        case: Enum | str,
        policy: NameGroupPolicy | str | None = None,
    ) -> str:
        """Inflect a word or a multi-word name in the given language."""
        word = validate_word(word, origin="inflect_word")
        engine = self._registry.get(language)
        result = engine.inflect(word.strip(), case, policy or self._default_policy)
        log.debug("inflected", language=language, case=case, word=word, result=result)
        return result

    def inflect_text(
        self,
        text: str,
        language: str,
        case: Enum | str,
        first_word_only: bool = True,
    ) -> str:
        """Inflect the first word of a sentence, or every word.

        Empty or non-string text yields an empty string rather than an error.
        """
        if not isinstance(text, str) or not text.strip():
            return ""

        words = text.split()
        if first_word_only:
            words[0] = self.inflect_word(words[0], language, case)
            return " ".join(words)
        return " ".join(self.inflect_word(w, language, case) for w in words)
