"""Russian stem classification and ending selection."""
from dataclasses import dataclass

from declension.languages.types import Gender
from .maps import (
    ENDINGS,
    FINAL_LETTER_CLASS,
    INSTRUMENTAL_SURNAME_ENDINGS,
    MorphClass,
    RussianCase,
)


@dataclass(frozen=True, slots=True)
class StemAnalysis:
    """Word decomposed into stem and classifying final letter."""
    word: str
    stem: str
    final: str
    morph_class: MorphClass

    @property
    def gender(self) -> Gender | None:
        return self.morph_class.gender


def classify(word: str) -> StemAnalysis:
    """Classify a word by its final letter.

    Words shorter than two letters are left unclassified and take no ending.
    """
    if len(word) < 2:
        return StemAnalysis(word=word, stem=word, final="", morph_class=MorphClass.UNKNOWN)

    last = word[-1].lower()
    morph_class = FINAL_LETTER_CLASS.get(last, MorphClass.MASCULINE_HARD)
    if morph_class.keeps_final_letter:
        return StemAnalysis(word=word, stem=word, final="", morph_class=morph_class)
    return StemAnalysis(word=word, stem=word[:-1], final=last, morph_class=morph_class)


def get_ending(morph_class: MorphClass, case: RussianCase | None) -> str:
    """Ending for (class, case); empty when either has no table entry."""
    table = ENDINGS.get(morph_class)
    if table is None or case is None:
        return ""
    return table.get(case, "")


def surname_instrumental(word: str) -> str | None:
    """Instrumental of an -ов/-ев surname, or None if the word has neither suffix."""
    lower = word.lower()
    for suffix, ending in INSTRUMENTAL_SURNAME_ENDINGS:
        if lower.endswith(suffix):
            return word + ending
    return None
