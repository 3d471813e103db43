"""Russian language engine."""
from enum import Enum

from declension.core.errors import UnknownCaseError
from declension.core.logging import engine_logger
from declension.languages.base import GrammarConfig, LanguageEngine, validate_word
from declension.languages.types import NameGroupPolicy
from .declension import classify, get_ending, surname_instrumental
from .grammar import RUSSIAN_GRAMMAR_CONFIG
from .lexicon import EXCEPTIONS
from .maps import KAZAKH_PATRONYMIC_MARKERS, RussianCase

log = engine_logger()


class RussianEngine(LanguageEngine):
    """Russian declension by gender and stem class.

    An unrecognized case identifier yields the bare stem (empty ending)
    unless the engine was built with ``strict_cases=True``, in which case
    it raises UnknownCaseError like the Kazakh engine does.
    """

    __slots__ = ("_strict_cases",)

    case_type = RussianCase
    base_case = RussianCase.NOMINATIVE
    exceptions = EXCEPTIONS

    def __init__(self, strict_cases: bool = False):
        self._strict_cases = strict_cases

    @property
    def code(self) -> str:
        return "ru"

    @property
    def name(self) -> str:
        return "Russian"

    @property
    def native_name(self) -> str:
        return "Русский"

    @property
    def strict_cases(self) -> bool:
        return self._strict_cases

    def get_grammar_config(self) -> GrammarConfig:
        return RUSSIAN_GRAMMAR_CONFIG

    def inflect_word(self, word: str, case: Enum | str) -> str:
        word = validate_word(word, origin="ru.inflect_word")
        resolved = self.parse_case(case)

        if resolved is None:
            if self._strict_cases:
                raise UnknownCaseError(
                    f"Unknown case for Russian: {case!r}",
                    origin="ru.inflect_word",
                    case=str(case),
                    allowed=self.get_cases(),
                )
            log.warning("unknown_case", language=self.code, word=word, case=str(case))
            return classify(word).stem

        if resolved is RussianCase.NOMINATIVE:
            return word

        form = self.lookup_exception(word, resolved)
        if form is not None:
            return form

        if resolved is RussianCase.INSTRUMENTAL:
            form = surname_instrumental(word)
            if form is not None:
                log.debug("surname_instrumental", word=word, form=form)
                return form

        analysis = classify(word)
        log.debug("word_classified", word=word, morph_class=analysis.morph_class, stem=analysis.stem)
        return analysis.stem + get_ending(analysis.morph_class, resolved)

    def select_words(self, words: list[str], policy: NameGroupPolicy) -> list[bool]:
        if policy is NameGroupPolicy.PHRASE:
            # Titles and roles are headed by their first noun.
            return [i == 0 for i in range(len(words))]
        return [not w.lower().endswith(KAZAKH_PATRONYMIC_MARKERS) for w in words]
