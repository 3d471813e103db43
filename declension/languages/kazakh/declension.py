"""Kazakh case affixation, one rule function per oblique case.

Each function appends a single affix chosen by vowel harmony and by the
class of the final sound. Vowel-final words ending in a possessive ы/і lose
that vowel and take a longer affix harmonized with the remaining stem.
Consonant-final Russian surnames always take the voiceless affix.
"""
from collections.abc import Callable
from types import MappingProxyType

from .maps import (
    BARYS_AFTER_VOICED,
    BARYS_AFTER_VOICELESS,
    BARYS_AFTER_VOWEL,
    BARYS_POSSESSIVE,
    ILIK_AFTER_SONORANT,
    ILIK_AFTER_VOICED,
    ILIK_AFTER_VOICELESS,
    ILIK_AFTER_VOWEL,
    ILIK_POSSESSIVE,
    INSTRUMENTAL_SONORANTS,
    JATYS_AFTER_VOICED,
    JATYS_AFTER_VOICELESS,
    JATYS_AFTER_VOWEL,
    JATYS_POSSESSIVE,
    KOMEKTES_AFTER_SONORANT,
    KOMEKTES_AFTER_VOICED,
    KOMEKTES_AFTER_VOICELESS,
    SHYGYS_AFTER_SONORANT,
    SHYGYS_AFTER_VOICED,
    SHYGYS_AFTER_VOICELESS,
    SHYGYS_AFTER_VOWEL,
    SHYGYS_POSSESSIVE,
    TABYS_AFTER_VOICED,
    TABYS_AFTER_VOICELESS,
    TABYS_AFTER_VOWEL,
    TABYS_POSSESSIVE,
    KazakhCase,
)
from .phonology import (
    choose,
    ends_with_possessive,
    ends_with_sonorant,
    ends_with_voiced,
    ends_with_vowel,
    is_borrowed_surname,
)


def inflect_ilik(word: str) -> str:
    """Genitive: -ның/-нің, -дың/-дің, -тың/-тің."""
    if ends_with_vowel(word):
        if ends_with_possessive(word):
            stem = word[:-1]
            return stem + choose(stem, ILIK_POSSESSIVE)
        return word + choose(word, ILIK_AFTER_VOWEL)

    if is_borrowed_surname(word):
        return word + choose(word, ILIK_AFTER_VOICELESS)
    if ends_with_sonorant(word):
        return word + choose(word, ILIK_AFTER_SONORANT)
    if ends_with_voiced(word):
        return word + choose(word, ILIK_AFTER_VOICED)
    return word + choose(word, ILIK_AFTER_VOICELESS)


def inflect_barys(word: str) -> str:
    """Dative-directional: -ға/-ге, -қа/-ке."""
    if ends_with_vowel(word):
        if ends_with_possessive(word):
            stem = word[:-1]
            return stem + choose(stem, BARYS_POSSESSIVE)
        return word + choose(word, BARYS_AFTER_VOWEL)

    if is_borrowed_surname(word):
        return word + choose(word, BARYS_AFTER_VOICELESS)
    # sonorants behave like the other voiced consonants here
    if ends_with_voiced(word):
        return word + choose(word, BARYS_AFTER_VOICED)
    return word + choose(word, BARYS_AFTER_VOICELESS)


def inflect_tabys(word: str) -> str:
    """Accusative: -ны/-ні, -ды/-ді, -ты/-ті."""
    if ends_with_vowel(word):
        if ends_with_possessive(word):
            stem = word[:-1]
            return stem + choose(stem, TABYS_POSSESSIVE)
        return word + choose(word, TABYS_AFTER_VOWEL)

    if is_borrowed_surname(word):
        return word + choose(word, TABYS_AFTER_VOICELESS)
    if ends_with_voiced(word):
        return word + choose(word, TABYS_AFTER_VOICED)
    return word + choose(word, TABYS_AFTER_VOICELESS)


def inflect_jatys(word: str) -> str:
    """Locative: -да/-де, -та/-те."""
    if ends_with_vowel(word):
        if ends_with_possessive(word):
            stem = word[:-1]
            return stem + choose(stem, JATYS_POSSESSIVE)
        return word + choose(word, JATYS_AFTER_VOWEL)

    if is_borrowed_surname(word):
        return word + choose(word, JATYS_AFTER_VOICELESS)
    if ends_with_voiced(word):
        return word + choose(word, JATYS_AFTER_VOICED)
    return word + choose(word, JATYS_AFTER_VOICELESS)


def inflect_shygys(word: str) -> str:
    """Ablative: -дан/-ден, -нан/-нен, -тан/-тен."""
    if ends_with_vowel(word):
        if ends_with_possessive(word):
            stem = word[:-1]
            return stem + choose(stem, SHYGYS_POSSESSIVE)
        return word + choose(word, SHYGYS_AFTER_VOWEL)

    if is_borrowed_surname(word):
        return word + choose(word, SHYGYS_AFTER_VOICELESS)
    if ends_with_sonorant(word):
        return word + choose(word, SHYGYS_AFTER_SONORANT)
    if ends_with_voiced(word):
        return word + choose(word, SHYGYS_AFTER_VOICED)
    return word + choose(word, SHYGYS_AFTER_VOICELESS)


def inflect_komektes(word: str) -> str:
    """Instrumental: -мен, -бен, -пен (no harmony variants)."""
    if ends_with_vowel(word):
        return word + KOMEKTES_AFTER_SONORANT

    if is_borrowed_surname(word):
        return word + KOMEKTES_AFTER_VOICELESS
    if word[-1].lower() in INSTRUMENTAL_SONORANTS:
        return word + KOMEKTES_AFTER_SONORANT
    if ends_with_voiced(word):
        return word + KOMEKTES_AFTER_VOICED
    return word + KOMEKTES_AFTER_VOICELESS


CASE_RULES: MappingProxyType[KazakhCase, Callable[[str], str]] = MappingProxyType({
    KazakhCase.ILIK: inflect_ilik,
    KazakhCase.BARYS: inflect_barys,
    KazakhCase.TABYS: inflect_tabys,
    KazakhCase.JATYS: inflect_jatys,
    KazakhCase.SHYGYS: inflect_shygys,
    KazakhCase.KOMEKTES: inflect_komektes,
})
