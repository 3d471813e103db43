"""Kazakh language engine."""
from enum import Enum

from declension.core.errors import UnknownCaseError
from declension.core.logging import engine_logger
from declension.languages.base import GrammarConfig, LanguageEngine, validate_word
from declension.languages.types import NameGroupPolicy
from .declension import CASE_RULES
from .grammar import KAZAKH_GRAMMAR_CONFIG
from .lexicon import EXCEPTIONS
from .maps import KazakhCase

log = engine_logger()


class KazakhEngine(LanguageEngine):
    """Kazakh case suffixation by vowel harmony and final-sound class."""

    __slots__ = ()

    case_type = KazakhCase
    base_case = KazakhCase.ATAW
    exceptions = EXCEPTIONS

    @property
    def code(self) -> str:
        return "kz"

    @property
    def name(self) -> str:
        return "Kazakh"

    @property
    def native_name(self) -> str:
        return "Қазақша"

    def get_grammar_config(self) -> GrammarConfig:
        return KAZAKH_GRAMMAR_CONFIG

    def inflect_word(self, word: str, case: Enum | str) -> str:
        word = validate_word(word, origin="kz.inflect_word")
        resolved = self.parse_case(case)
        if resolved is None:
            raise UnknownCaseError(
                f"Unknown case for Kazakh: {case!r}",
                origin="kz.inflect_word",
                case=str(case),
                allowed=self.get_cases(),
            )

        if resolved is KazakhCase.ATAW:
            return word

        form = self.lookup_exception(word, resolved)
        if form is not None:
            return form

        log.debug("affix_rule", word=word, case=resolved)
        return CASE_RULES[resolved](word)

    def select_words(self, words: list[str], policy: NameGroupPolicy) -> list[bool]:
        # Phrases are head-final; in names the given name and patronymic stay in the nominative.
        last = len(words) - 1
        return [i == last for i in range(len(words))]
