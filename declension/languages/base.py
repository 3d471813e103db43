"""Abstract base class for language engines."""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from declension.core.errors import InvalidInputError, InvalidPolicyError
from declension.core.logging import engine_logger
from .types import NameGroupPolicy

log = engine_logger()

# Personal names have between two and four words: given name, patronymic, surname and an optional particle.
NAME_MIN_WORDS = 2
NAME_MAX_WORDS = 4


@dataclass(frozen=True, slots=True)
class CaseConfig:
    """Configuration for a grammatical case."""
    id: str
    label: str
    native_label: str
    hint: str


@dataclass(slots=True)
class GrammarConfig:
    """Language grammar configuration for clients."""
    cases: list[CaseConfig] = field(default_factory=list)
    base_case: str = ""
    policies: list[str] = field(default_factory=lambda: [p.value for p in NameGroupPolicy])

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "cases": [
                {"id": c.id, "label": c.label, "nativeLabel": c.native_label, "hint": c.hint}
                for c in self.cases
            ],
            "baseCase": self.base_case,
            "policies": list(self.policies),
        }


def validate_word(word: object, origin: str = "") -> str:
    """Return the word unchanged if it is a non-blank string, else raise InvalidInputError."""
    if not isinstance(word, str) or not word.strip():
        raise InvalidInputError(
            "Word must be a non-empty string",
            origin=origin,
            received_type=type(word).__name__,
        )
    return word


def transplant_case(source: str, form: str) -> str:
    """Give `form` an upper-case first letter when `source` starts with one."""
    if source[:1] == source[:1].upper():
        return form[:1].upper() + form[1:]
    return form


def resolve_policy(policy: NameGroupPolicy | str | None) -> NameGroupPolicy:
    if policy is None:
        return NameGroupPolicy.AUTO
    try:
        return NameGroupPolicy(policy)
    except ValueError:
        raise InvalidPolicyError(
            f"Unknown name group policy: {policy!r}",
            origin="policy",
            allowed=[p.value for p in NameGroupPolicy],
        ) from None


def looks_like_personal_name(words: list[str]) -> bool:
    """Every word capitalized and two to four words long."""
    if not NAME_MIN_WORDS <= len(words) <= NAME_MAX_WORDS:
        return False
    return all(w[0] == w[0].upper() for w in words)


class LanguageEngine(ABC):
    """Case inflection for one language.

    Subclasses provide the single-word rules (`inflect_word`) and the
    word-selection policy for multi-word input (`select_words`). The base
    class owns validation, whitespace dispatch and the `auto` policy.
    """

    __slots__ = ()

    case_type: ClassVar[type[Enum]]
    base_case: ClassVar[Enum]
    exceptions: ClassVar[Mapping[str, Mapping[Enum, str]]]

    @property
    @abstractmethod
    def code(self) -> str:
        """Language code used for registration (e.g., 'ru', 'kz')."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable language name."""
        ...

    @property
    @abstractmethod
    def native_name(self) -> str:
        """Language name in the language itself."""
        ...

    @abstractmethod
    def get_grammar_config(self) -> GrammarConfig:
        """Get case configuration for clients."""
        ...

    @abstractmethod
    def inflect_word(self, word: str, case: Enum | str) -> str:
        """Inflect a single word."""
        ...

    @abstractmethod
    def select_words(self, words: list[str], policy: NameGroupPolicy) -> list[bool]:
        """Return, per word, whether it is inflected under `policy` (never AUTO)."""
        ...

    def parse_case(self, case: Enum | str) -> Enum | None:
        """Resolve a case identifier to this language's enum, or None if unknown."""
        if isinstance(case, self.case_type):
            return case
        try:
            return self.case_type(case)
        except ValueError:
            return None

    def lookup_exception(self, word: str, case: Enum) -> str | None:
        """Exception-table form for `word` in `case` with the input's capitalization, if any."""
        entry = self.exceptions.get(word.lower())
        if entry is None or case not in entry:
            return None
        log.debug("exception_hit", language=self.code, word=word, case=case)
        return transplant_case(word, entry[case])

    def inflect_group(
        self,
        text: str,
        case: Enum | str,
        policy: NameGroupPolicy | str | None = NameGroupPolicy.AUTO,
    ) -> str:
        """Inflect a whitespace-separated name or phrase."""
        validate_word(text, origin=f"{self.code}.inflect_group")
        words = text.split()
        policy = resolve_policy(policy)

        if policy is NameGroupPolicy.AUTO:
            policy = NameGroupPolicy.NAME if looks_like_personal_name(words) else NameGroupPolicy.PHRASE
            log.debug("policy_resolved", language=self.code, text=text, policy=policy)

        selected = self.select_words(words, policy)
        return " ".join(
            self.inflect_word(w, case) if inflect else w
            for w, inflect in zip(words, selected)
        )

    def inflect(
        self,
        word: str,
        case: Enum | str,
        policy: NameGroupPolicy | str | None = None,
    ) -> str:
        """Inflect a word or a multi-word name, dispatching on whitespace."""
        word = validate_word(word, origin=f"{self.code}.inflect").strip()
        if any(ch.isspace() for ch in word):
            return self.inflect_group(word, case, policy)
        return self.inflect_word(word, case)

    def get_cases(self) -> list[str]:
        """Get ordered list of case identifiers."""
        return [c.value for c in self.case_type]
