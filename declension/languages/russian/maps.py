"""Russian case identifiers, morphological classes and ending tables."""
from enum import Enum
from types import MappingProxyType

from declension.languages.types import Gender


class RussianCase(str, Enum):
    NOMINATIVE = "nominative"
    GENITIVE = "genitive"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"
    INSTRUMENTAL = "instrumental"
    PREPOSITIONAL = "prepositional"


class MorphClass(str, Enum):
    MASCULINE_HARD = "masculine-hard"
    MASCULINE_SOFT = "masculine-soft"
    MASCULINE_SOFT_CONSONANT = "masculine-soft-consonant"
    FEMININE_HARD = "feminine-hard"
    FEMININE_SOFT = "feminine-soft"
    NEUTER_HARD = "neuter-hard"
    NEUTER_SOFT = "neuter-soft"
    UNKNOWN = "unknown"

    @property
    def gender(self) -> Gender | None:
        return MORPH_CLASS_GENDER.get(self)

    @property
    def keeps_final_letter(self) -> bool:
        """The stem is the whole word (consonant-final masculines and unclassified words)."""
        return self in (MorphClass.MASCULINE_HARD, MorphClass.MASCULINE_SOFT_CONSONANT, MorphClass.UNKNOWN)


MORPH_CLASS_GENDER = MappingProxyType({
    MorphClass.MASCULINE_HARD: Gender.MASCULINE,
    MorphClass.MASCULINE_SOFT: Gender.MASCULINE,
    MorphClass.MASCULINE_SOFT_CONSONANT: Gender.MASCULINE,
    MorphClass.FEMININE_HARD: Gender.FEMININE,
    MorphClass.FEMININE_SOFT: Gender.FEMININE,
    MorphClass.NEUTER_HARD: Gender.NEUTER,
    MorphClass.NEUTER_SOFT: Gender.NEUTER,
})

# Final letter -> class. Anything not listed is a hard masculine consonant.
FINAL_LETTER_CLASS = MappingProxyType({
    "а": MorphClass.FEMININE_HARD,
    "я": MorphClass.FEMININE_SOFT,
    "о": MorphClass.NEUTER_HARD,
    "е": MorphClass.NEUTER_SOFT,
    "ь": MorphClass.MASCULINE_SOFT,
    "й": MorphClass.MASCULINE_SOFT,
    "ж": MorphClass.MASCULINE_SOFT_CONSONANT,
    "ч": MorphClass.MASCULINE_SOFT_CONSONANT,
    "ш": MorphClass.MASCULINE_SOFT_CONSONANT,
    "щ": MorphClass.MASCULINE_SOFT_CONSONANT,
})

_MASCULINE_HARD = MappingProxyType({
    RussianCase.GENITIVE: "а",
    RussianCase.DATIVE: "у",
    RussianCase.ACCUSATIVE: "",  # same as nominative for inanimates
    RussianCase.INSTRUMENTAL: "ом",
    RussianCase.PREPOSITIONAL: "е",
})

_MASCULINE_SOFT = MappingProxyType({
    RussianCase.GENITIVE: "я",
    RussianCase.DATIVE: "ю",
    RussianCase.ACCUSATIVE: "",
    RussianCase.INSTRUMENTAL: "ем",
    RussianCase.PREPOSITIONAL: "е",
})

_FEMININE_HARD = MappingProxyType({
    RussianCase.GENITIVE: "ы",
    RussianCase.DATIVE: "е",
    RussianCase.ACCUSATIVE: "у",
    RussianCase.INSTRUMENTAL: "ой",
    RussianCase.PREPOSITIONAL: "е",
})

_FEMININE_SOFT = MappingProxyType({
    RussianCase.GENITIVE: "и",
    RussianCase.DATIVE: "е",
    RussianCase.ACCUSATIVE: "ю",
    RussianCase.INSTRUMENTAL: "ей",
    RussianCase.PREPOSITIONAL: "е",
})

# окно
_NEUTER_HARD = MappingProxyType({
    RussianCase.GENITIVE: "а",
    RussianCase.DATIVE: "у",
    RussianCase.ACCUSATIVE: "о",
    RussianCase.INSTRUMENTAL: "ом",
    RussianCase.PREPOSITIONAL: "е",
})

# море, поле
_NEUTER_SOFT = MappingProxyType({
    RussianCase.GENITIVE: "я",
    RussianCase.DATIVE: "ю",
    RussianCase.ACCUSATIVE: "е",
    RussianCase.INSTRUMENTAL: "ем",
    RussianCase.PREPOSITIONAL: "е",
})

ENDINGS = MappingProxyType({
    MorphClass.MASCULINE_HARD: _MASCULINE_HARD,
    MorphClass.MASCULINE_SOFT_CONSONANT: _MASCULINE_HARD,
    MorphClass.MASCULINE_SOFT: _MASCULINE_SOFT,
    MorphClass.FEMININE_HARD: _FEMININE_HARD,
    MorphClass.FEMININE_SOFT: _FEMININE_SOFT,
    MorphClass.NEUTER_HARD: _NEUTER_HARD,
    MorphClass.NEUTER_SOFT: _NEUTER_SOFT,
})

# Surname suffix -> instrumental ending appended to the whole word.
INSTRUMENTAL_SURNAME_ENDINGS = (
    ("ов", "ым"),
    ("ев", "ем"),
)

# Kazakh patronymic markers left untouched inside Russian personal names (Мұхтар Омарханұлы).
KAZAKH_PATRONYMIC_MARKERS = ("ұлы", "қызы", "улы", "кызы")
